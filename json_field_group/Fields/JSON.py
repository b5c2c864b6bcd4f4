"""
JSON Field Group

Groups several fields under one heading and stores their values in a single
JSON column of the model.

Each child's attribute is qualified with the group attribute
(``meta->title``) and its fill callback is replaced with one that writes
into the JSON structure at the matching path. The child's own callback is
kept in ``fill_callbacks`` and used to resolve the value to write; a
resolver returning ``NOT_PROVIDED`` skips the write.

Example:
    JSON('Meta', [
        Text('Title'),
        Textarea('Description'),
        JSON('SEO', [Text('Keywords')]),
    ]).nullable(False)
"""

import copy
from typing import Any, Callable, Dict, List, Optional, Union

import structlog
from django.db.models.fields import NOT_PROVIDED
from django.utils.html import format_html

from ..exceptions import AttributeCastError, UnsupportedConfigurationError
from ..config import get_setting
from ..utils import data_set, is_container_marker, qualify, snake_name, to_dotted
from .Field import Field, FillCallback
from .Heading import Heading
from .Hidden import Hidden

logger = structlog.get_logger(__name__)

FieldList = Union[List[Any], Callable[[], List[Any]]]
NullValues = Union[List[Any], Callable[[Any], bool]]
FillAtOnceCallback = Callable[[Any, Dict[str, Any], Any, str, str], Any]


class JSON:
    """
    A group of fields persisted into one JSON column.

    Args:
        name: Display name, also used for the heading.
        attribute: JSON column name, or the child fields (a list or a
            zero-argument callable). When not a string, the column name is
            inferred from ``name``.
        fields: Child fields when ``attribute`` is a string.
        show_heading: Prepend a bold heading with the group name.
    """

    def __init__(
        self,
        name: str,
        attribute: Union[str, FieldList, None] = None,
        fields: Optional[FieldList] = None,
        show_heading: Optional[bool] = None,
    ):
        self.name = name
        self.fill_callbacks: Dict[str, Optional[FillCallback]] = {}
        self.is_nullable: bool = get_setting('NULLABLE')
        self.null_values: NullValues = get_setting('NULL_VALUES')
        self.fills_at_once = False
        self.at_once_field: Optional[Hidden] = None
        self.heading: Optional[Heading] = None

        if isinstance(attribute, str):
            self.attribute = attribute
        else:
            self.attribute = snake_name(name)
            if attribute is not None:
                fields = attribute

        if show_heading is None:
            show_heading = get_setting('SHOW_HEADING')

        self.data: List[Field] = self.prepare_fields(fields if fields is not None else [], show_heading)

    def __repr__(self):
        return f"<JSON {self.attribute!r} fields={len(self.data)}>"

    # ------------------------------------------------------------------
    # Preparation
    # ------------------------------------------------------------------

    def prepare_fields(self, fields: FieldList, show_heading: bool = True) -> List[Field]:
        """Qualify every child, flatten nested groups and add the heading."""
        if callable(fields):
            fields = fields()

        prepared = []
        for field in fields:
            if isinstance(field, JSON):
                prepared.extend(self.prepare_nested_fields(field))
            elif isinstance(field, Heading):
                prepared.append(field)
            else:
                prepared.append(self.prepare_field(field))

        if show_heading:
            self.heading = Heading(format_html('<b>{}</b>', self.name)).as_html()
            prepared.insert(0, self.heading)
        return prepared

    def prepare_field(self, field: Field) -> Field:
        field.attribute = qualify(self.attribute, field.attribute)
        self.fill_callbacks[field.attribute] = field.fill_callback
        return field.fill_using(self.fill_into_json)

    def prepare_nested_fields(self, group: 'JSON') -> List[Field]:
        """
        Flatten a nested group into this one.

        The nested group's heading and fill-at-once field are dropped; each
        leaf gets back the callback it had before the nested group wrapped
        it, so this group qualifies and wraps it again.
        """
        fields = []
        for field in group.fields():
            if field is group.heading or field is group.at_once_field:
                continue
            if not isinstance(field, Heading):
                field.fill_using(group.fill_callbacks.get(field.attribute))
            fields.append(field)
        return self.prepare_fields(fields, show_heading=False)

    def fields(self) -> List[Field]:
        """All fields of this group, nested groups flattened."""
        flattened = []
        for field in self.data:
            flattened.extend(field.fields() if isinstance(field, JSON) else [field])
        return flattened

    # ------------------------------------------------------------------
    # Filling
    # ------------------------------------------------------------------

    def fill_into_json(self, request, container, attribute: str, request_attribute: str) -> None:
        """Fill callback installed on every child field."""
        if self.fills_at_once:
            return

        self.ensure_cast(container)

        if is_container_marker(request_attribute):
            return

        value = self.fetch_value_from_request(request, container, attribute, request_attribute)
        if value is NOT_PROVIDED:
            logger.debug("JSON value not submitted", column=self.attribute, attribute=attribute)
            return

        if not self.is_nullable and self.is_null_value(value):
            logger.debug("JSON null value skipped", column=self.attribute, attribute=attribute)
            return

        data = self.old_value(container)
        path = self.dotted_attribute_key(attribute)
        data_set(data, path, None if self.is_null_value(value) else value)
        container.set(self.attribute, data)
        logger.debug("JSON value filled", column=self.attribute, path=path)

    def ensure_cast(self, container) -> None:
        if not container.has_cast(self.attribute):
            logger.warning("JSON column has no cast", column=self.attribute)
            raise AttributeCastError(self.attribute)

    def fetch_value_from_request(self, request, container, attribute: str, request_attribute: str) -> Any:
        resolver = self.value_resolver(attribute)
        return resolver(request, container, attribute, request_attribute)

    def value_resolver(self, attribute: str) -> FillCallback:
        """The child's own fill callback, or a plain read of the request value."""
        callback = self.fill_callbacks.get(attribute)
        return callback if callback is not None else self._resolve_from_request

    @staticmethod
    def _resolve_from_request(request, container, attribute, request_attribute):
        if request.exists(request_attribute):
            return request.get(request_attribute)
        return NOT_PROVIDED

    def old_value(self, container) -> Dict[str, Any]:
        """
        Copy of the column's current structure to write into.

        A list keeps its items under their index (``'0'``, ``'1'``, ...);
        any other non-dict value is dropped.
        """
        current = container.get(self.attribute)
        if current is None:
            return {}
        if isinstance(current, dict):
            return copy.deepcopy(current)
        if isinstance(current, (list, tuple)):
            logger.warning("JSON column holds a list, items keyed by index", column=self.attribute)
            return {str(index): copy.deepcopy(item) for index, item in enumerate(current)}

        logger.warning("JSON column value discarded", column=self.attribute, type=type(current).__name__)
        return {}

    def dotted_attribute_key(self, attribute: str) -> str:
        return to_dotted(attribute, self.attribute)

    def is_null_value(self, value: Any) -> bool:
        if callable(self.null_values):
            return bool(self.null_values(value))
        return value is None or value in self.null_values

    # ------------------------------------------------------------------
    # Fill at once
    # ------------------------------------------------------------------

    def fill_at_once(self, callback: Optional[FillAtOnceCallback] = None) -> 'JSON':
        """
        Write all submitted values of this group in one assignment.

        A hidden field named after the group collects every request key
        under ``{attribute}->``, builds the nested structure and assigns
        it. ``callback(request, values, container, attribute,
        request_attribute)`` may transform the structure first.
        """
        self.fills_at_once = True

        def fill_all(request, container, attribute, request_attribute):
            self.ensure_cast(container)
            values = self.request_values(request, container)
            value = callback(request, values, container, attribute, request_attribute) if callback else values

            if not self.is_nullable and self.is_null_value(value):
                logger.debug("JSON null value skipped", column=self.attribute)
                return

            container.set(attribute, value)
            logger.debug("JSON values filled at once", column=self.attribute, keys=len(values))

        if self.at_once_field is None:
            self.at_once_field = Hidden(self.name, self.attribute)
            self.data.append(self.at_once_field)
        self.at_once_field.fill_using(fill_all)
        return self

    def request_values(self, request, container) -> Dict[str, Any]:
        """Submitted values of this group as one nested structure."""
        prefix = qualify(self.attribute, '')
        values: Dict[str, Any] = {}
        for key in request.keys():
            if not key.startswith(prefix) or is_container_marker(key):
                continue
            value = self.fetch_value_from_request(request, container, key, key)
            if value is NOT_PROVIDED:
                continue
            data_set(values, to_dotted(key, self.attribute), value)
        return values

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def nullable(self, nullable: bool = True, values: Optional[NullValues] = None) -> 'JSON':
        self.is_nullable = nullable
        if values is not None:
            self.set_null_values(values)
        return self

    def set_null_values(self, values: NullValues) -> 'JSON':
        """Values treated as null: a list of sentinels or a predicate."""
        self.null_values = values if callable(values) else list(values)
        return self

    def configure(self, method: str, *args, **kwargs) -> 'JSON':
        """Apply a field configuration method to every field of the group."""
        if method not in Field.configuration_methods:
            raise UnsupportedConfigurationError(method)

        for field in self.fields():
            getattr(field, method)(*args, **kwargs)
        return self

    def rules(self, *validators) -> 'JSON':
        return self.configure('rules', *validators)

    def help(self, text: str) -> 'JSON':
        return self.configure('help', text)

    def placeholder(self, text: str) -> 'JSON':
        return self.configure('placeholder', text)

    def readonly(self, value: bool = True) -> 'JSON':
        return self.configure('readonly', value)

    def required(self, value: bool = True) -> 'JSON':
        return self.configure('required', value)

    def default(self, value: Any) -> 'JSON':
        return self.configure('default', value)

    def with_meta(self, meta: Dict[str, Any]) -> 'JSON':
        return self.configure('with_meta', meta)

    def hide_from_index(self) -> 'JSON':
        return self.configure('hide_from_index')

    def hide_from_detail(self) -> 'JSON':
        return self.configure('hide_from_detail')

    def hide_when_creating(self) -> 'JSON':
        return self.configure('hide_when_creating')

    def hide_when_updating(self) -> 'JSON':
        return self.configure('hide_when_updating')
