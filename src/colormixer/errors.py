"""
Exception types for colormixer.

Everything raised on purpose by the package derives from ColorMixerError,
so callers can catch the whole family in one place.
"""

from typing import Optional


class ColorMixerError(Exception):
    """Base class for colormixer errors."""


class UnknownPresetError(ColorMixerError, KeyError):
    """A preset name outside the fixed set was requested."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Unknown preset: {self.name!r}"


class ClipboardUnavailableError(ColorMixerError):
    """The host denied clipboard access, or has no clipboard at all."""

    def __init__(self, message: str = "Clipboard is not available", text: Optional[str] = None):
        self.text = text
        super().__init__(message)


class ColorFormatError(ColorMixerError, ValueError):
    """A hex or rgb() string could not be parsed."""


class ChannelRangeError(ColorMixerError, ValueError):
    """A channel value outside [0, 255] under the strict channel policy."""

    def __init__(self, channel: str, value: int):
        self.channel = channel
        self.value = value
        super().__init__(f"Channel {channel} value {value} is outside 0-255")
