from typing import Optional

from django import forms

from .Field import Field


class Number(Field):
    """Numeric input with optional bounds and step."""

    component = 'number-field'
    form_field_class = forms.FloatField

    def __init__(self, name, attribute=None):
        super().__init__(name, attribute)
        self.min_value: Optional[float] = None
        self.max_value: Optional[float] = None
        self.step_value: Optional[float] = None

    def min(self, value: float) -> 'Number':
        self.min_value = value
        return self

    def max(self, value: float) -> 'Number':
        self.max_value = value
        return self

    def step(self, value: float) -> 'Number':
        self.step_value = value
        return self

    def widget_attrs(self):
        attrs = super().widget_attrs()
        if self.step_value is not None:
            attrs['step'] = self.step_value
        return attrs

    def form_field_kwargs(self):
        kwargs = super().form_field_kwargs()
        kwargs['min_value'] = self.min_value
        kwargs['max_value'] = self.max_value
        return kwargs

    def json_serialize(self):
        return {
            **super().json_serialize(),
            'min': self.min_value,
            'max': self.max_value,
            'step': self.step_value,
        }
