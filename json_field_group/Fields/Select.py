from typing import Any, Dict, Iterable, List, Tuple, Union

from django import forms

from .Field import Field

Options = Union[Dict[Any, str], Iterable[Tuple[Any, str]]]


class Select(Field):
    """Drop-down input over a fixed set of options."""

    component = 'select-field'
    form_field_class = forms.ChoiceField

    def __init__(self, name, attribute=None):
        super().__init__(name, attribute)
        self.choices: List[Tuple[Any, str]] = []

    def options(self, options: Options) -> 'Select':
        """Set options from a ``{value: label}`` dict or ``(value, label)`` pairs."""
        items = options.items() if isinstance(options, dict) else options
        self.choices = [(value, label) for value, label in items]
        return self

    def form_field_kwargs(self):
        kwargs = super().form_field_kwargs()
        kwargs['choices'] = list(self.choices)
        return kwargs

    def json_serialize(self):
        return {
            **super().json_serialize(),
            'options': [{'value': value, 'label': label} for value, label in self.choices],
        }
