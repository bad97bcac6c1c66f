"""
Audio Field

A File field rendered with an HTML audio player. Adds the player's preload
mode, restricted to the Preload choices.

Usage:
    Audio.make('Theme Song')
        .preload(Audio.PRELOAD_AUTO)
        .disable_download()
"""
from django.core.exceptions import ValidationError

from core.fields.conf import get_setting
from core.fields.constants import Components, Preload
from core.fields.file import File


class Audio(File):
    component = Components.AUDIO
    default_path_setting = 'AUDIO_PATH'

    PRELOAD_NONE = Preload.NONE
    PRELOAD_METADATA = Preload.METADATA
    PRELOAD_AUTO = Preload.AUTO

    def __init__(self, name, attribute=None, resolve_callback=None):
        super().__init__(name, attribute, resolve_callback)

        self.preload_mode = None
        self.preload(get_setting('AUDIO_PRELOAD'))

    def preload(self, mode):
        """
        Set the player's preload mode.

        Args:
            mode: a Preload member or one of 'none', 'metadata', 'auto'

        Raises:
            ValidationError: if mode is not a valid preload value
        """
        try:
            self.preload_mode = Preload(mode)
        except ValueError:
            raise ValidationError({
                'preload': f"Invalid preload mode {mode!r}; expected one of {', '.join(Preload.values)}"
            })
        return self

    def get_preload(self):
        return self.preload_mode

    def meta(self):
        return {
            **super().meta(),
            'preload': self.preload_mode.value,
        }
