"""
Selector-based reader.

Reads the hex and rgb badges through their data-testid attributes, the way
a conventional Playwright test does.
"""

from .base import ColorReader, ColorReading

HEX_SELECTOR = '[data-testid="hex-value"]'
RGB_SELECTOR = '[data-testid="rgb-value"]'


def strip_label(text: str, label: str) -> str:
    """Drop a "HEX:"/"RGB:" badge label and surrounding whitespace."""
    text = (text or "").strip()
    if text.upper().startswith(label.upper()):
        text = text[len(label):]
    return text.strip()


class DomColorReader(ColorReader):
    """Reads the color badges by selector."""

    name = "dom"

    def __init__(self, timeout: int = 5000):
        self.timeout = timeout  # ms, per badge

    def read(self, page) -> ColorReading:
        hex_text = page.locator(HEX_SELECTOR).inner_text(timeout=self.timeout)
        rgb_text = page.locator(RGB_SELECTOR).inner_text(timeout=self.timeout)
        return ColorReading(
            hex_value=strip_label(hex_text, "HEX:"),
            rgb_text=strip_label(rgb_text, "RGB:"),
            reason="Read from data-testid badges",
            source=self.name,
        )
