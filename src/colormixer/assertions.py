"""
Color assertions with smart retry.

Compare what a reader sees on the page with what a ColorState predicts.
Raise AssertionError on mismatch, so they read naturally inside pytest.
"""

import time
from typing import Callable, Optional, Union

from .color import Color
from .readers import ColorReader, ColorReading
from .state import ColorState


def wait_until(
    condition: Callable[[], bool],
    timeout: float = 10.0,
    poll_interval: float = 0.5,
    message: str = "Condition not met",
) -> bool:
    """
    Wait until a condition becomes true.

    Args:
        condition: Callable that returns True when condition is met
        timeout: Maximum time to wait
        poll_interval: Time between checks
        message: Error message if timeout

    Returns:
        True if condition was met, raises AssertionError if timeout
    """
    start = time.monotonic()
    last_error = None

    while True:
        try:
            if condition():
                return True
        except Exception as e:
            last_error = e

        if time.monotonic() - start >= timeout:
            break
        time.sleep(poll_interval)

    if last_error:
        raise AssertionError(f"{message}: {last_error}")
    raise AssertionError(message)


def expected_color(expected: Union[ColorState, Color, str]) -> Color:
    """Normalize a ColorState, Color or hex string to a Color."""
    if isinstance(expected, ColorState):
        return expected.color
    if isinstance(expected, Color):
        return expected
    return Color.from_hex(expected)


class ColorAssertions:
    """
    Assertions about the color a page displays.

    Usage:
        check = ColorAssertions(DomColorReader(), page)

        check.displays(state)
        check.displays_hex("#FF0000")
        check.consistent()
    """

    def __init__(self, reader: ColorReader, page, timeout: float = 5.0, poll_interval: float = 0.25):
        self.reader = reader
        self.page = page
        self.timeout = timeout
        self.poll_interval = poll_interval
        self.last_reading: Optional[ColorReading] = None

    def _read(self) -> ColorReading:
        self.last_reading = self.reader.read(self.page)
        return self.last_reading

    def displays(self, expected: Union[ColorState, Color, str], timeout: Optional[float] = None) -> bool:
        """Assert that the page shows the expected color on both badges."""
        color = expected_color(expected)

        def matches() -> bool:
            reading = self._read()
            return reading.hex_color == color and reading.rgb_color == color

        try:
            return wait_until(matches, timeout=self.timeout if timeout is None else timeout,
                              poll_interval=self.poll_interval)
        except AssertionError:
            seen = self.last_reading
            raise AssertionError(
                f"Page does not show {color.hex} / {color.rgb_text}: "
                f"saw {seen.hex_value if seen else None} / {seen.rgb_text if seen else None}"
            ) from None

    def displays_hex(self, hex_value: str, timeout: Optional[float] = None) -> bool:
        """Assert on the hex badge only."""
        color = Color.from_hex(hex_value)

        def matches() -> bool:
            return self._read().hex_color == color

        try:
            return wait_until(matches, timeout=self.timeout if timeout is None else timeout,
                              poll_interval=self.poll_interval)
        except AssertionError:
            seen = self.last_reading
            raise AssertionError(
                f"Hex badge does not show {color.hex}: saw {seen.hex_value if seen else None}"
            ) from None

    def consistent(self) -> bool:
        """Assert that the hex and rgb badges describe the same color."""
        reading = self._read()
        if not reading.consistent:
            raise AssertionError(
                f"Hex and RGB badges disagree: {reading.hex_value} vs {reading.rgb_text}"
            )
        return True
