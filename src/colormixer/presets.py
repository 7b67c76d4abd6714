"""
The fixed preset table.

Six named colors, keyed by the Preset enum. The table is a read-only mapping
built once at import time; nothing in the package mutates it.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Union

from .color import Color
from .errors import UnknownPresetError


class Preset(Enum):
    """Preset names, as used in the UI's preset-<name> test ids."""

    RED = "red"
    GREEN = "green"
    BLUE = "blue"
    YELLOW = "yellow"
    BLACK = "black"
    WHITE = "white"

    @property
    def label(self) -> str:
        """Button label shown in the UI ("Red", "Black", ...)."""
        return self.value.capitalize()

    @property
    def color(self) -> Color:
        return PRESETS[self]

    @classmethod
    def parse(cls, name: Union["Preset", str]) -> "Preset":
        """Resolve a Preset or a case-insensitive name; raises UnknownPresetError."""
        if isinstance(name, Preset):
            return name
        if isinstance(name, str):
            try:
                return cls(name.strip().lower())
            except ValueError:
                pass
        raise UnknownPresetError(str(name))


PRESETS: Mapping[Preset, Color] = MappingProxyType({
    Preset.RED: Color(255, 0, 0),
    Preset.GREEN: Color(0, 255, 0),
    Preset.BLUE: Color(0, 0, 255),
    Preset.YELLOW: Color(255, 255, 0),
    Preset.BLACK: Color(0, 0, 0),
    Preset.WHITE: Color(255, 255, 255),
})


def preset_color(name: Union[Preset, str]) -> Color:
    """Look up a preset's color by enum or name."""
    return PRESETS[Preset.parse(name)]
