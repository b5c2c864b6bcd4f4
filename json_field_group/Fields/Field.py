"""
Field Module

This module provides the base class for admin-panel fields. A field knows
the model attribute it reads and writes, how to fill that attribute from a
write request, how to present itself as a Django form field, and a set of
chainable configuration methods.

Architecture:
- Field: attribute, fill callback, presentation configuration
- Subclasses: choose the Django form field and widget
- JSON: groups fields under one JSON column (see JSON.py)
"""

from typing import Any, Callable, Dict, List, Optional

from django import forms

from ..utils import snake_name

FillCallback = Callable[[Any, Any, str, str], Any]


class Field:
    """
    Base admin-panel field.

    Every method named in ``configuration_methods`` returns the field so
    calls can be chained, and can be applied to all children of a JSON
    group at once through ``JSON.configure``.
    """

    component = 'text-field'
    form_field_class = forms.CharField

    configuration_methods = (
        'rules',
        'help',
        'placeholder',
        'readonly',
        'required',
        'default',
        'with_meta',
        'hide_from_index',
        'hide_from_detail',
        'hide_when_creating',
        'hide_when_updating',
    )

    def __init__(self, name: str, attribute: Optional[str] = None):
        self.name = name
        self.attribute = attribute if attribute is not None else snake_name(name)
        self.fill_callback: Optional[FillCallback] = None

        self.validators: List[Callable] = []
        self.help_text: Optional[str] = None
        self.read_only = False
        self.is_required = False
        self.default_value: Any = None
        self.meta: Dict[str, Any] = {}

        self.show_on_index = True
        self.show_on_detail = True
        self.show_on_creation = True
        self.show_on_update = True

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.attribute!r}>"

    # ------------------------------------------------------------------
    # Filling
    # ------------------------------------------------------------------

    def fill_using(self, callback: Optional[FillCallback]) -> 'Field':
        """
        Replace how this field writes its value.

        The callback receives ``(request, container, attribute,
        request_attribute)``. ``None`` restores the default behaviour.
        """
        self.fill_callback = callback
        return self

    def fill(self, request, container) -> Any:
        """Write this field's value from ``request`` onto ``container``."""
        if self.fill_callback is not None:
            return self.fill_callback(request, container, self.attribute, self.attribute)
        return self.fill_attribute_from_request(request, container, self.attribute, self.attribute)

    def fill_attribute_from_request(self, request, container, attribute: str, request_attribute: str):
        if request.exists(request_attribute):
            container.set(attribute, request.get(request_attribute))

    def resolve(self, container) -> Any:
        """Current value of this field on ``container``."""
        value = container.get(self.attribute)
        return self.default_value if value is None else value

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def rules(self, *validators: Callable) -> 'Field':
        self.validators.extend(validators)
        return self

    def help(self, text: str) -> 'Field':
        self.help_text = text
        return self

    def placeholder(self, text: str) -> 'Field':
        self.meta['placeholder'] = text
        return self

    def readonly(self, value: bool = True) -> 'Field':
        self.read_only = value
        return self

    def required(self, value: bool = True) -> 'Field':
        self.is_required = value
        return self

    def default(self, value: Any) -> 'Field':
        self.default_value = value
        return self

    def with_meta(self, meta: Dict[str, Any]) -> 'Field':
        self.meta.update(meta)
        return self

    def hide_from_index(self) -> 'Field':
        self.show_on_index = False
        return self

    def hide_from_detail(self) -> 'Field':
        self.show_on_detail = False
        return self

    def hide_when_creating(self) -> 'Field':
        self.show_on_creation = False
        return self

    def hide_when_updating(self) -> 'Field':
        self.show_on_update = False
        return self

    def is_shown_when(self, creating: bool) -> bool:
        return self.show_on_creation if creating else self.show_on_update

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def widget_attrs(self) -> Dict[str, Any]:
        attrs = {}
        if 'placeholder' in self.meta:
            attrs['placeholder'] = self.meta['placeholder']
        return attrs

    def form_field_kwargs(self) -> Dict[str, Any]:
        return {
            'label': self.name,
            'required': self.is_required,
            'help_text': self.help_text or '',
            'disabled': self.read_only,
            'validators': list(self.validators),
        }

    def form_field(self) -> Optional[forms.Field]:
        """Django form field used to render and validate this field."""
        field = self.form_field_class(**self.form_field_kwargs())
        field.widget.attrs.update(self.widget_attrs())
        return field

    def json_serialize(self) -> Dict[str, Any]:
        return {
            'component': self.component,
            'name': self.name,
            'attribute': self.attribute,
            'help_text': self.help_text,
            'required': self.is_required,
            'readonly': self.read_only,
            'show_on_index': self.show_on_index,
            'show_on_detail': self.show_on_detail,
            'show_on_creation': self.show_on_creation,
            'show_on_update': self.show_on_update,
            **self.meta,
        }
