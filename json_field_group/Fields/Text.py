from django import forms

from .Field import Field


class Text(Field):
    """Single-line text input."""

    component = 'text-field'
    form_field_class = forms.CharField

    def __init__(self, name, attribute=None):
        super().__init__(name, attribute)
        self.max_length = None

    def max(self, length: int) -> 'Text':
        self.max_length = length
        return self

    def form_field_kwargs(self):
        kwargs = super().form_field_kwargs()
        kwargs['max_length'] = self.max_length
        return kwargs
