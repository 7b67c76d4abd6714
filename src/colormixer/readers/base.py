"""
Abstract base interface for color readers.

A reader looks at a live color mixer page and reports which color it is
displaying. Readers can be swapped to compare testing styles: the DOM reader
uses data-testid selectors, the vision readers ask an AI model to read a
screenshot.
"""

import base64
import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..color import Color
from ..errors import ColorFormatError


@dataclass
class ColorReading:
    """What a reader saw on the page."""

    hex_value: Optional[str] = None  # e.g. "#FF5733"
    rgb_text: Optional[str] = None  # e.g. "rgb(255, 87, 51)"
    color_name: Optional[str] = None  # Color family, vision readers only
    reason: str = ""
    confidence: float = 1.0
    source: str = ""  # Reader that produced this

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source: str = "") -> "ColorReading":
        """Create ColorReading from a model's JSON response."""
        return cls(
            hex_value=data.get("hexValue") or data.get("hex_value") or data.get("hex"),
            rgb_text=data.get("rgbText") or data.get("rgb_text") or data.get("rgb"),
            color_name=data.get("colorName") or data.get("color_name"),
            reason=data.get("reason", ""),
            confidence=data.get("confidence", 1.0),
            source=source,
        )

    @property
    def hex_color(self) -> Optional[Color]:
        if not self.hex_value:
            return None
        try:
            return Color.from_hex(self.hex_value)
        except ColorFormatError:
            return None

    @property
    def rgb_color(self) -> Optional[Color]:
        if not self.rgb_text:
            return None
        try:
            return Color.from_rgb_text(self.rgb_text)
        except ColorFormatError:
            return None

    @property
    def color(self) -> Optional[Color]:
        """The color read, preferring the hex badge; None if nothing parsed."""
        return self.hex_color or self.rgb_color

    @property
    def consistent(self) -> bool:
        """True when both badges were read and describe the same color."""
        hex_color = self.hex_color
        return hex_color is not None and hex_color == self.rgb_color

    def to_dict(self) -> Dict[str, Any]:
        color = self.color
        return {
            "hex": self.hex_value,
            "rgb": self.rgb_text,
            "color_name": self.color_name,
            "parsed": color.hex if color else None,
            "consistent": self.consistent,
            "reason": self.reason,
            "confidence": self.confidence,
            "source": self.source,
        }


def parse_json_response(text: str) -> Dict[str, Any]:
    """Parse model output that may be wrapped in a ```json fence."""
    text = (text or "").strip()
    if text.startswith("```"):
        text = text.split("```")[1]
        if text.startswith("json"):
            text = text[4:]
    return json.loads(text.strip())


READ_COLOR_PROMPT = """You are checking a color mixer web app. Look at the screenshot.

The app shows the current color as a HEX badge (e.g. "HEX: #FF5733") and an
RGB badge (e.g. "RGB: rgb(255, 87, 51)").

Read both badges exactly as displayed and name the color family you see in the preview.

Return ONLY valid JSON (no markdown, no explanation):
{
    "hexValue": "<hex as shown, or null>",
    "rgbText": "<rgb() text as shown, or null>",
    "colorName": "<red | orange | yellow | green | blue | purple | black | white | ...>",
    "reason": "<brief explanation>",
    "confidence": <0.0 to 1.0>
}
"""


class ColorReader(ABC):
    """
    Abstract interface for reading the displayed color off a page.

    Example:
        class MyReader(ColorReader):
            name = "mine"

            def read(self, page):
                return ColorReading(hex_value=..., rgb_text=..., source=self.name)
    """

    name = "base"

    @abstractmethod
    def read(self, page) -> ColorReading:
        """
        Read the color the page currently displays.

        Args:
            page: Playwright page showing the color mixer

        Returns:
            ColorReading; unreadable pages give a reading whose color is None
        """
        pass


class VisionColorReader(ColorReader):
    """Shared screenshot handling for AI vision readers."""

    name = "vision"

    def read(self, page) -> ColorReading:
        screenshot_b64 = base64.b64encode(page.screenshot()).decode("utf-8")
        return self.read_screenshot(screenshot_b64)

    def read_screenshot(self, screenshot_b64: str) -> ColorReading:
        text = self._call_vision(READ_COLOR_PROMPT, screenshot_b64)
        try:
            return ColorReading.from_dict(parse_json_response(text), source=self.name)
        except (json.JSONDecodeError, AttributeError, IndexError) as e:
            return ColorReading(reason=f"Failed to parse AI response: {e}", confidence=0.0, source=self.name)

    @abstractmethod
    def _call_vision(self, prompt: str, screenshot_b64: str) -> str:
        """Send prompt + screenshot to the model; return its raw text."""
        pass
