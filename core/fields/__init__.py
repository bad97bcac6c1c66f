"""
Admin Panel Fields - Core Infrastructure

Field descriptors describing how model attributes are displayed, resolved,
filled back and serialized for the admin panel frontend.

Exports:
    Fields:
        - Field: Abstract base field
        - Text: Plain text field
        - ID: Primary key field
        - File: Uploaded file stored on a storage disk
        - Audio: File field rendered with an audio player
        - Heading: Section header (no data binding)
        - Line: Read-only text line

    Support:
        - Preload: Audio preload choices
        - FieldService: Resource-level operations over a list of fields
        - FieldSerializer: DRF serializer for the frontend payload

Usage:
    from core.fields import ID, Text, Audio, FieldService

    fields = [
        ID.make(),
        Text.make('Name').sortable(),
        Audio.make('Theme Song').preload(Audio.PRELOAD_AUTO),
    ]

    FieldService.resolve_fields(FieldService.detail_fields(fields, request, user), user)
    payload = FieldService.serialize_fields(fields)
"""

from .constants import Components, Preload
from .base import Field
from .text import Text
from .id import ID
from .file import File
from .audio import Audio
from .heading import Heading
from .line import Line
from .services import FieldService
from .serializers import FieldSerializer

__all__ = [
    'Components',
    'Preload',
    'Field',
    'Text',
    'ID',
    'File',
    'Audio',
    'Heading',
    'Line',
    'FieldService',
    'FieldSerializer',
]
