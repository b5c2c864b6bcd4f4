from django import forms

from .Field import Field


class Hidden(Field):
    """Hidden input; submitted with the form but never shown."""

    component = 'hidden-field'
    form_field_class = forms.CharField

    def form_field_kwargs(self):
        kwargs = super().form_field_kwargs()
        kwargs['widget'] = forms.HiddenInput
        return kwargs
