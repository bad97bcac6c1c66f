"""
Field defaults read from the ADMIN_FIELDS settings dict.

Usage:
    from core.fields.conf import get_setting

    disk = get_setting('DEFAULT_DISK')
"""
from django.conf import settings


DEFAULTS = {
    'DEFAULT_DISK': 'public',
    'FILE_PATH': 'files',
    'AUDIO_PATH': 'audio',
    'AUDIO_PRELOAD': 'metadata',
}


def get_setting(name):
    """Return ADMIN_FIELDS[name], falling back to the packaged default."""
    overrides = getattr(settings, 'ADMIN_FIELDS', None) or {}
    return overrides.get(name, DEFAULTS[name])
