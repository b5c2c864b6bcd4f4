"""
Panel Module

A panel is the list of fields shown on one admin screen. JSON groups placed
in a panel are expanded into their child fields, so the rest of the host
only ever deals with plain fields.

Architecture:
- Panel: expansion, filling a model, building and validating a Django form
- FormSerializer: turns the built form into JSON for a front end
"""

from typing import Any, Dict, Iterable, List, Optional

import structlog
from django import forms

from ..Fields import JSON, Field
from ..Serializers import FormSerializer
from .RequestValues import RequestValues

logger = structlog.get_logger(__name__)


class Panel:
    """
    Ordered collection of fields and JSON groups for one screen.

    Args:
        name: Panel title
        fields: Fields and JSON groups, in display order
    """

    def __init__(self, name: str, fields: Iterable[Any]):
        self.name = name
        self.items = list(fields)

    def __repr__(self):
        return f"<Panel {self.name!r} items={len(self.items)}>"

    def expand(self) -> List[Field]:
        """Presentation fields in display order, JSON groups expanded."""
        expanded = []
        for item in self.items:
            if isinstance(item, JSON):
                expanded.extend(item.data)
            else:
                expanded.append(item)
        return expanded

    def _visible_fields(self, creating: bool) -> List[Field]:
        return [field for field in self.expand() if field.is_shown_when(creating)]

    def fill(self, request, container, creating: bool = False):
        """
        Run every writable field's fill against ``container``.

        Read-only fields and fields hidden for the current operation are
        skipped. The container is returned; saving the model is left to
        the caller.

        Args:
            request: RequestValues (or anything implementing its protocol)
            container: ModelContainer (or anything implementing its protocol)
            creating: True when filling a new model
        """
        filled = 0
        for field in self._visible_fields(creating):
            if field.read_only:
                continue
            field.fill(request, container)
            filled += 1

        logger.info("Panel filled", panel=self.name, fields=filled, creating=creating)
        return container

    def values(self, container) -> Dict[str, Any]:
        """Current value of every attribute-bearing field, keyed by attribute."""
        return {
            field.attribute: field.resolve(container)
            for field in self.expand()
            if field.attribute is not None
        }

    def form(self, container=None, request: Optional[RequestValues] = None, creating: bool = False) -> forms.Form:
        """
        Build a Django form for the panel.

        Form fields are keyed by (qualified) attribute. Initial values come
        from ``container``; when ``request`` is given the form is bound to
        the submitted values.
        """
        data = None
        if request is not None:
            data = {key: request.get(key) for key in request.keys()}

        form = forms.Form(data=data)
        for field in self._visible_fields(creating):
            form_field = field.form_field()
            if form_field is None:
                continue
            if container is not None:
                form_field.initial = field.resolve(container)
            form.fields[field.attribute] = form_field
        return form

    def validate(self, request, container=None, creating: bool = False):
        """
        Validate submitted values.

        Returns:
            ErrorDict: Field attributes mapped to error lists (empty when valid)
        """
        form = self.form(container, request, creating)
        if not form.is_valid():
            logger.info("Panel validation failed", panel=self.name, errors=list(form.errors))
        return form.errors

    def to_json(self, container=None, request=None, creating: bool = False) -> Dict[str, Any]:
        form = self.form(container, request, creating)
        return FormSerializer(form, self._visible_fields(creating), title=self.name).to_json()
