from django import forms

from .Field import Field


class Textarea(Field):
    """Multi-line text input."""

    component = 'textarea-field'
    form_field_class = forms.CharField

    def __init__(self, name, attribute=None):
        super().__init__(name, attribute)
        self.row_count = 5

    def rows(self, count: int) -> 'Textarea':
        self.row_count = count
        return self

    def form_field_kwargs(self):
        kwargs = super().form_field_kwargs()
        kwargs['widget'] = forms.Textarea(attrs={'rows': self.row_count})
        return kwargs

    def json_serialize(self):
        return {**super().json_serialize(), 'rows': self.row_count}
