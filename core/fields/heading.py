"""
Heading Field

A section header inside forms and detail views. The field's name is the
content to render (plain text, or HTML when as_html() is set); no resource
attribute is read and nothing is ever written back to the model.
"""
from core.fields.base import Field
from core.fields.constants import Components


class Heading(Field):
    component = Components.HEADING
    is_heading = True

    def __init__(self, name, attribute=None, resolve_callback=None):
        super().__init__(name, attribute, resolve_callback)

        self.renders_html = False

        self.shown_on_index = False
        self.is_nullable = True
        self.is_readonly = True

    def as_html(self, as_html=True):
        self.renders_html = as_html
        return self

    def resolve(self, resource, attribute=None):
        # Headings display their own label, never resource data.
        self.value = self.name

    def resolve_for_display(self, resource):
        self.resolve(resource)

    def fill(self, request, model):
        return None

    def meta(self):
        return {
            **super().meta(),
            'asHtml': self.renders_html,
            'isHeading': self.is_heading,
        }
