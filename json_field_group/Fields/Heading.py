from django.utils.html import strip_tags

from .Field import Field


class Heading(Field):
    """
    Display-only heading inside a field list.

    A heading has no attribute, never fills the model and has no form
    field. Its text is escaped unless ``as_html()`` is called.
    """

    component = 'heading-field'

    def __init__(self, name: str):
        super().__init__(name, attribute=None)
        self.attribute = None
        self.html = False

    def as_html(self) -> 'Heading':
        self.html = True
        return self

    def fill(self, request, container):
        return None

    def resolve(self, container):
        return None

    def form_field(self):
        return None

    @property
    def label(self) -> str:
        return strip_tags(self.name) if self.html else self.name

    def json_serialize(self):
        return {**super().json_serialize(), 'as_html': self.html, 'label': self.label}
