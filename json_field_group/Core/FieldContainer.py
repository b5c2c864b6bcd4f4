"""
Field Container

Single Responsibility: Expose a model instance to fields as a set of
readable and writable attributes, and report which attributes carry a
JSON cast.
"""

import copy
from typing import Any, Iterable, Optional, Protocol, runtime_checkable

from django.core.exceptions import FieldDoesNotExist
from django.db import models

from ..utils import SEPARATOR, data_get, data_set


@runtime_checkable
class FieldContainerProtocol(Protocol):
    """What a fill callback may ask of the model being written."""

    def get(self, attribute: str) -> Any: ...

    def set(self, attribute: str, value: Any) -> None: ...

    def has_cast(self, attribute: str) -> bool: ...


class ModelContainer:
    """
    Field container for a Django model instance.

    An attribute has a JSON cast when it is listed in ``casts``, in the
    model's ``json_casts`` class attribute, or is backed by a model field
    whose internal type is ``JSONField``. Qualified attributes
    (``meta->seo->title``) read and write inside the JSON column.
    """

    def __init__(self, instance: models.Model, casts: Optional[Iterable[str]] = None):
        self.instance = instance
        self._casts = set(casts or ()) | set(getattr(instance, 'json_casts', ()))

    def has_cast(self, attribute: str) -> bool:
        if attribute in self._casts:
            return True
        try:
            field = self.instance._meta.get_field(attribute)
        except FieldDoesNotExist:
            return False
        return field.get_internal_type() == 'JSONField'

    def get(self, attribute: str) -> Any:
        column, _, path = attribute.partition(SEPARATOR)
        value = getattr(self.instance, column, None)
        if not path:
            return value
        return data_get(value, path.replace(SEPARATOR, '.'))

    def set(self, attribute: str, value: Any) -> None:
        column, _, path = attribute.partition(SEPARATOR)
        if not path:
            setattr(self.instance, column, value)
            return

        current = getattr(self.instance, column, None)
        data = copy.deepcopy(current) if isinstance(current, dict) else {}
        setattr(self.instance, column, data_set(data, path.replace(SEPARATOR, '.'), value))

    def __repr__(self):
        return f"<ModelContainer {self.instance.__class__.__name__} pk={self.instance.pk!r}>"
