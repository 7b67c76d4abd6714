"""
Page object for the color mixer app.

Wraps the app's data-testid contract so tests drive the UI in terms of
channels, presets and copy targets. Pass a ColorState to have every
interaction mirrored into the model, which then predicts what the page
must display.
"""

import logging
from typing import Optional, Union

from .color import Channel, clamp_channel
from .presets import Preset
from .state import ColorState, CopyTarget

logger = logging.getLogger(__name__)

PREVIEW_SELECTOR = '[data-testid="color-preview"]'
TOAST_TEXT = "Copied:"


def testid(value: str) -> str:
    return f'[data-testid="{value}"]'


class ColorMixerPage:
    """
    Color mixer UI, driven through Playwright (sync API).

    Usage:
        state = ColorState()
        mixer = ColorMixerPage(page, state=state)
        mixer.open("http://localhost:3000")
        mixer.apply_preset("red")
        mixer.set_channel("g", 128)
        ColorAssertions(DomColorReader(), page).displays(state)
    """

    def __init__(self, page, state: Optional[ColorState] = None, timeout: int = 5000):
        self.page = page
        self.state = state
        self.timeout = timeout  # ms

    def open(self, url: str):
        self.page.goto(url)
        self.page.locator(PREVIEW_SELECTOR).wait_for(timeout=self.timeout)
        if self.state is not None:
            self.state.reset()

    def set_channel(self, channel: Union[Channel, str], value: int):
        """
        Move a slider with the keyboard: Home/End for the bounds, otherwise
        Home followed by one ArrowRight per step.

        With a state attached, the state's channel policy runs first: a
        strict state raises ChannelRangeError before the slider moves.
        """
        channel = Channel.parse(channel)
        if self.state is not None:
            value = self.state.set_channel(channel, value)
        else:
            value = clamp_channel(value)

        slider = self.page.locator(testid(f"slider-{channel.value}"))
        slider.click(timeout=self.timeout)

        if value == 255:
            self.page.keyboard.press("End")
        else:
            self.page.keyboard.press("Home")
            for _ in range(value):
                self.page.keyboard.press("ArrowRight")
        logger.debug("Slider %s moved to %d", channel.name, value)

    def apply_preset(self, preset: Union[Preset, str]):
        preset = Preset.parse(preset)
        self.page.locator(testid(f"preset-{preset.value}")).click(timeout=self.timeout)
        if self.state is not None:
            self.state.apply_preset(preset)

    def copy(self, which: Union[CopyTarget, str] = CopyTarget.HEX) -> Optional[str]:
        """
        Click the hex or rgb badge.

        Returns:
            The text the model expects on the clipboard, if a state is attached
        """
        target = CopyTarget.parse(which)
        self.page.locator(testid(f"{target.value}-value")).click(timeout=self.timeout)
        if self.state is not None:
            return self.state.copy_to_clipboard(target)
        return None

    def channel_value(self, channel: Union[Channel, str]) -> int:
        """Numeric value shown next to a slider."""
        channel = Channel.parse(channel)
        text = self.page.locator(testid(f"value-{channel.value}")).inner_text(timeout=self.timeout)
        return int(text.strip())

    def toast_visible(self) -> bool:
        return self.page.get_by_text(TOAST_TEXT).first.is_visible()

    def preview_style(self) -> Optional[str]:
        return self.page.locator(f"{PREVIEW_SELECTOR} div").first.get_attribute("style")
