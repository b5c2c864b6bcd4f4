import json
from typing import Any

import structlog
from django import forms
from django.db.models.fields import NOT_PROVIDED

from .Field import Field
from .JSONTextareaWidget import JSONTextareaWidget

logger = structlog.get_logger(__name__)


class Code(Field):
    """
    Source code input.

    In JSON mode the widget is flagged for a JSON editor and submitted
    text is decoded before it is written, so a nested structure can live
    under a single key of a JSON group. The decoder only returns the
    value; the field writes it itself only when no group has taken over
    its fill callback.
    """

    component = 'code-field'
    form_field_class = forms.CharField

    def __init__(self, name, attribute=None):
        super().__init__(name, attribute)
        self.json_mode = False

    def json(self) -> 'Code':
        self.json_mode = True
        self.form_field_class = forms.JSONField
        return self.fill_using(self.decode_json)

    def decode_json(self, request, container, attribute, request_attribute) -> Any:
        """
        Submitted JSON text, decoded.

        Blank text is returned as submitted. An absent key gives
        ``NOT_PROVIDED``.

        Raises:
            ValidationError: If the text is not valid JSON.
        """
        if not request.exists(request_attribute):
            return NOT_PROVIDED

        value = request.get(request_attribute)
        if not isinstance(value, str) or not value.strip():
            return value

        try:
            return json.loads(value)
        except ValueError as exc:
            logger.warning("Invalid JSON submitted", attribute=attribute)
            raise forms.ValidationError(
                'Enter valid JSON.',
                code='invalid_json',
                params={'attribute': attribute},
            ) from exc

    def fill(self, request, container) -> Any:
        if self.fill_callback != self.decode_json:
            return super().fill(request, container)

        value = self.decode_json(request, container, self.attribute, self.attribute)
        if value is NOT_PROVIDED:
            return value
        if isinstance(value, str) and not value.strip():
            value = None
        container.set(self.attribute, value)
        return value

    def form_field_kwargs(self):
        kwargs = super().form_field_kwargs()
        kwargs['widget'] = JSONTextareaWidget if self.json_mode else forms.Textarea
        return kwargs

    def json_serialize(self):
        return {**super().json_serialize(), 'json_mode': self.json_mode}
