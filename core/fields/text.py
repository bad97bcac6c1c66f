from core.fields.base import Field
from core.fields.constants import Components


class Text(Field):
    """Plain text input. Uses the base field behavior unchanged."""

    component = Components.TEXT
