"""
RGB color value type.

A Color is an immutable (r, g, b) triple of 8-bit channels. The two display
formats the mixer UI shows are derived from it:

- hex:  "#FF5733" (uppercase, zero-padded, always 7 characters)
- rgb:  "rgb(255, 87, 51)"

Both formats parse back to the same Color, which is what lets a test read
either badge off a page and compare it with the model.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from .errors import ColorFormatError

CHANNEL_MIN = 0
CHANNEL_MAX = 255

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{3})$")
_RGB_RE = re.compile(r"^rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)$", re.IGNORECASE)


class Channel(Enum):
    """The three color channels."""

    R = "r"
    G = "g"
    B = "b"

    @classmethod
    def parse(cls, value) -> "Channel":
        """Accept a Channel, "r"/"R", or the full channel name ("red")."""
        if isinstance(value, Channel):
            return value
        key = str(value).strip().lower()
        aliases = {"red": "r", "green": "g", "blue": "b"}
        key = aliases.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValueError(f"Unknown channel: {value!r}") from None


def clamp_channel(value: int) -> int:
    """Clamp a channel value to [0, 255]."""
    return max(CHANNEL_MIN, min(CHANNEL_MAX, int(value)))


@dataclass(frozen=True)
class Color:
    """An 8-bit RGB color. Channels are clamped on construction."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        object.__setattr__(self, "r", clamp_channel(self.r))
        object.__setattr__(self, "g", clamp_channel(self.g))
        object.__setattr__(self, "b", clamp_channel(self.b))

    @classmethod
    def from_hex(cls, text: str) -> "Color":
        """Parse "#RRGGBB", "RRGGBB" or the "#RGB" shorthand."""
        match = _HEX_RE.match(text.strip()) if isinstance(text, str) else None
        if not match:
            raise ColorFormatError(f"Invalid hex color: {text!r}")
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(c * 2 for c in digits)
        return cls(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

    @classmethod
    def from_rgb_text(cls, text: str) -> "Color":
        """Parse "rgb(r, g, b)". Values above 255 are rejected, not clamped."""
        match = _RGB_RE.match(text.strip()) if isinstance(text, str) else None
        if not match:
            raise ColorFormatError(f"Invalid rgb color: {text!r}")
        values = [int(v) for v in match.groups()]
        if any(v > CHANNEL_MAX for v in values):
            raise ColorFormatError(f"Channel out of range in: {text!r}")
        return cls(*values)

    @property
    def hex(self) -> str:
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def rgb_text(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def channel(self, channel: Channel) -> int:
        return getattr(self, channel.value)

    def with_channel(self, channel: Channel, value: int) -> "Color":
        """Return a copy with one channel replaced (clamped)."""
        values = {"r": self.r, "g": self.g, "b": self.b}
        values[channel.value] = value
        return Color(**values)

    def to_tuple(self) -> Tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def to_dict(self) -> Dict[str, object]:
        return {"r": self.r, "g": self.g, "b": self.b, "hex": self.hex, "rgb": self.rgb_text}

    def __str__(self) -> str:
        return self.hex


INITIAL_COLOR = Color(255, 87, 51)
