"""
Line Field

A read-only line of text, typically grouped with other lines to build a
compact summary of a resource. The value is resolved from the resource (or
a resolve callback); when nothing resolves, the field's name is shown so the
row is never blank.

Style flags (as_small, as_heading, as_sub_text) are stored independently.
Only one is expected to be set; the frontend applies the last one it checks.
"""
from core.fields.base import Field
from core.fields.constants import Components


class Line(Field):
    component = Components.LINE
    is_line = True

    def __init__(self, name, attribute=None, resolve_callback=None):
        super().__init__(name, attribute, resolve_callback)

        self.display_as_small = False
        self.display_as_heading = False
        self.display_as_sub_text = False
        self.renders_html = False

        self.is_readonly = True

    def as_small(self, small=True):
        self.display_as_small = small
        return self

    def as_heading(self, heading=True):
        self.display_as_heading = heading
        return self

    def as_sub_text(self, sub_text=True):
        self.display_as_sub_text = sub_text
        return self

    def as_html(self, as_html=True):
        self.renders_html = as_html
        return self

    def resolve_for_display(self, resource):
        super().resolve_for_display(resource)

        if self.value is None:
            self.value = self.name

    def fill(self, request, model):
        return None

    def meta(self):
        return {
            **super().meta(),
            'asSmall': self.display_as_small,
            'asHeading': self.display_as_heading,
            'asSubText': self.display_as_sub_text,
            'asHtml': self.renders_html,
            'isLine': self.is_line,
        }
