from django import forms

from .Field import Field


class Boolean(Field):
    """
    Checkbox input.

    Inside a JSON group the submitted value is stored as sent; front ends
    should submit ``true``/``false`` rather than relying on absent keys.
    """

    component = 'boolean-field'
    form_field_class = forms.BooleanField
