"""
Field Constants
===============

Component identifiers understood by the frontend component registry, and
the enumerations used by field options.
"""
from django.db import models


# ============================================================================
# COMPONENTS
# ============================================================================

class Components:
    """Frontend widget identifiers, dispatched on by the component registry."""
    TEXT = 'TextField'
    ID = 'IDField'
    FILE = 'FileField'
    AUDIO = 'AudioField'
    HEADING = 'HeadingField'
    LINE = 'LineField'


# ============================================================================
# AUDIO PRELOAD
# ============================================================================

class Preload(models.TextChoices):
    """
    Values accepted by the HTML audio element's preload attribute.

    Use this instead of bare strings so invalid values are rejected when
    the field is configured.
    """
    NONE = 'none', 'None'
    METADATA = 'metadata', 'Metadata'
    AUTO = 'auto', 'Auto'
