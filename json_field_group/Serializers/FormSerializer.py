"""
Form Serializer Module

Turns a panel's Django form into a JSON structure a front end can render.
Widgets are rendered by Django and parsed back with BeautifulSoup so the
output carries exactly the attributes the HTML would.
"""

from typing import Any, Dict, List, Optional

from bs4 import BeautifulSoup

from ..Fields import Field, Heading
from ..utils import SEPARATOR

BOOLEAN_ATTRIBUTES = frozenset({'required', 'disabled', 'readonly', 'checked', 'multiple', 'data-json-mode'})
NUMERIC_ATTRIBUTES = frozenset({'min', 'max', 'step', 'rows', 'cols', 'minlength', 'maxlength'})


def _to_number(value: str) -> Any:
    try:
        number = float(value)
    except ValueError:
        return value
    return int(number) if number.is_integer() else number


class FormSerializer:
    """
    Serializes a Django form, in the order of the given panel fields.

    Headings have no form field and are emitted as ``heading`` entries.
    """

    def __init__(self, form, fields: List[Field], title: Optional[str] = None):
        """
        Args:
            form: Django form built by Panel.form()
            fields: Panel fields in display order
            title: Panel title
        """
        self.form = form
        self.fields = fields
        self.title = title

    def _normalize_attribute(self, name: str, value: Any) -> Any:
        """
        Normalize a rendered HTML attribute by what it means.

        Class lists are joined, boolean attributes (``required``,
        ``data-json-mode``...) become ``True``/``False`` and numeric ones
        (``min``, ``rows``...) become numbers. ``step="any"`` and other
        non-numeric values are kept as text.
        """
        if isinstance(value, list):
            return ' '.join(value)
        if name in BOOLEAN_ATTRIBUTES:
            return value != 'false'
        if name in NUMERIC_ATTRIBUTES:
            return _to_number(value)
        return value

    def _extract_select_options(self, select_tag: Any) -> List[Dict[str, Any]]:
        return [
            {
                'value': option.get('value', ''),
                'text': option.get_text(strip=True),
                'selected': option.has_attr('selected'),
            }
            for option in select_tag.find_all('option')
        ]

    def _extract_tag_attributes(self, tag: Any) -> Dict[str, Any]:
        return {
            attr_name: self._normalize_attribute(attr_name, attr_value)
            for attr_name, attr_value in tag.attrs.items()
        }

    def _serialize_heading(self, heading: Heading) -> Dict[str, Any]:
        return {
            'tag': 'heading',
            'label': heading.label,
            'html': str(heading.name),
            'as_html': heading.html,
        }

    def _serialize_field(self, field: Field) -> Dict[str, Any]:
        """
        Serialize one bound field.

        Extracts the tag name, label, errors, normalized HTML attributes,
        current value and, for selects, the options. ``path`` lists the
        segments of the qualified attribute and the field metadata is added
        under ``field``.
        """
        bound_field = self.form[field.attribute]
        soup = BeautifulSoup(str(bound_field), 'html.parser')
        tag = soup.find()

        if not tag:
            return {}

        result = {
            'tag': tag.name,
            'label': str(bound_field.label) if bound_field.label else '',
            'errors': list(bound_field.errors) if bound_field.errors else []
        }
        result.update(self._extract_tag_attributes(tag))
        result['path'] = field.attribute.split(SEPARATOR)

        field_value = bound_field.value()
        if field_value is not None:
            result['value'] = field_value

        if tag.name == 'select':
            result['options'] = self._extract_select_options(tag)

        if tag.get('data-json-mode') is not None:
            result['json_mode'] = True

        result['field'] = field.json_serialize()
        return result

    def _get_non_field_errors(self) -> List[str]:
        non_field_errors = self.form.non_field_errors()
        return list(non_field_errors) if non_field_errors else []

    def to_json(self) -> Dict[str, Any]:
        """
        Returns:
            Dictionary containing:
            - 'title': Panel title
            - 'fields': Serialized headings and fields, in display order
            - 'non_field_errors': Global error messages (if any)
        """
        form_state = {
            'title': self.title,
            'fields': [],
        }

        for field in self.fields:
            if isinstance(field, Heading):
                form_state['fields'].append(self._serialize_heading(field))
            elif field.attribute in self.form.fields:
                form_state['fields'].append(self._serialize_field(field))

        non_field_errors = self._get_non_field_errors()
        if non_field_errors:
            form_state['non_field_errors'] = non_field_errors

        return form_state
