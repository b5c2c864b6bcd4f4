"""
JSON Textarea Widget Module

Textarea used by ``Code(...).json()``. The ``data-json-mode`` attribute is
picked up by FormSerializer so the front end can render a JSON editor, and
the stored structure is shown indented instead of on one line.
"""

import json

from django import forms


class JSONTextareaWidget(forms.Textarea):
    """
    Textarea that flags JSON mode and pretty-prints its value.

    Text that does not parse (an invalid submission being re-rendered) is
    shown unchanged.
    """

    def __init__(self, attrs=None, indent: int = 2):
        self.indent = indent
        super().__init__(attrs={'data-json-mode': 'true', 'spellcheck': 'false', **(attrs or {})})

    def format_value(self, value):
        if not isinstance(value, str) or not value.strip():
            return super().format_value(value)
        try:
            decoded = json.loads(value)
        except ValueError:
            return super().format_value(value)
        return super().format_value(json.dumps(decoded, indent=self.indent, ensure_ascii=False))
