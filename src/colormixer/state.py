"""
ColorState - the single authoritative source of the mixer's current color.

Every UI event maps onto one method:

    slider drag      -> set_channel(Channel.R, 200)
    preset click     -> apply_preset(Preset.RED)
    badge click      -> copy_to_clipboard(CopyTarget.HEX)

Each ColorState is an owned value: one per page/session, passed to whatever
handlers need it. Nothing here is global.
"""

import logging
from enum import Enum
from typing import Optional, Union

from .clipboard import Clipboard, MemoryClipboard
from .color import CHANNEL_MAX, CHANNEL_MIN, Channel, Color
from .config import MixerConfig
from .errors import ChannelRangeError, ClipboardUnavailableError
from .feedback import CopyFeedback
from .history import EventKind, SessionLog
from .presets import PRESETS, Preset

logger = logging.getLogger(__name__)


class CopyTarget(Enum):
    """Which display string a copy action takes."""

    HEX = "hex"
    RGB = "rgb"

    @classmethod
    def parse(cls, value: Union["CopyTarget", str]) -> "CopyTarget":
        if isinstance(value, CopyTarget):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown copy target: {value!r} (expected 'hex' or 'rgb')") from None


class ColorState:
    """
    Current color plus the operations that change it.

    Usage:
        state = ColorState(clipboard=MemoryClipboard())
        state.to_hex()                       # "#FF5733"
        state.set_channel(Channel.G, 300)    # clamped to 255
        state.apply_preset("blue")
        state.copy_to_clipboard("rgb")       # "rgb(0, 0, 255)"
        state.feedback.visible               # True, for two seconds
    """

    def __init__(
        self,
        config: Optional[MixerConfig] = None,
        clipboard: Optional[Clipboard] = None,
        feedback: Optional[CopyFeedback] = None,
        log: Optional[SessionLog] = None,
        scheduler=None,
    ):
        """
        Initialize a color state.

        Args:
            config: MixerConfig (defaults: #FF5733, 2s feedback, clamping)
            clipboard: Clipboard to copy into (in-memory if None)
            feedback: CopyFeedback to drive (created from config if None)
            log: Optional SessionLog that records every change
            scheduler: Scheduler for the feedback timer, when feedback is None
        """
        self.config = config or MixerConfig()
        self.clipboard = clipboard if clipboard is not None else MemoryClipboard()
        self.feedback = feedback or CopyFeedback(self.config.feedback_duration, scheduler=scheduler)
        self.log = log
        self._color = self.config.initial_color

    @property
    def color(self) -> Color:
        return self._color

    @property
    def r(self) -> int:
        return self._color.r

    @property
    def g(self) -> int:
        return self._color.g

    @property
    def b(self) -> int:
        return self._color.b

    def get_channel(self, channel: Union[Channel, str]) -> int:
        return self._color.channel(Channel.parse(channel))

    def set_channel(self, channel: Union[Channel, str], value: int) -> int:
        """
        Set one channel, leaving the other two unchanged.

        Out-of-range values are clamped to [0, 255]. Under the "strict"
        channel policy they raise ChannelRangeError instead and the state
        is left as it was.

        Returns:
            The value actually stored
        """
        channel = Channel.parse(channel)
        value = int(value)
        if self.config.strict and not CHANNEL_MIN <= value <= CHANNEL_MAX:
            raise ChannelRangeError(channel.name, value)

        self._color = self._color.with_channel(channel, value)
        stored = self._color.channel(channel)
        if stored != value:
            logger.debug("Clamped channel %s from %d to %d", channel.name, value, stored)
        self._record(EventKind.CHANNEL, f"{channel.name}={stored}")
        return stored

    def set_color(self, color: Color):
        """Replace all three channels at once."""
        self._color = color
        self._record(EventKind.CHANNEL, f"set {color.rgb_text}")

    def apply_preset(self, name: Union[Preset, str]) -> Color:
        """
        Replace all three channels with a preset's values.

        Raises:
            UnknownPresetError: ``name`` is not one of the six presets
        """
        preset = Preset.parse(name)
        self._color = PRESETS[preset]
        self._record(EventKind.PRESET, preset.label)
        return self._color

    def reset(self):
        """Return to the configured initial color and hide any feedback."""
        self._color = self.config.initial_color
        self.feedback.hide()
        self._record(EventKind.RESET, "reset")

    def to_hex(self) -> str:
        return self._color.hex

    def to_rgb_text(self) -> str:
        return self._color.rgb_text

    def formatted(self, which: Union[CopyTarget, str]) -> str:
        target = CopyTarget.parse(which)
        return self.to_hex() if target == CopyTarget.HEX else self.to_rgb_text()

    def copy_to_clipboard(self, which: Union[CopyTarget, str] = CopyTarget.HEX) -> str:
        """
        Copy the hex or rgb display string and show copy feedback.

        Returns:
            The copied string

        Raises:
            ClipboardUnavailableError: the clipboard refused the write. The
                color is unchanged and no feedback is shown.
        """
        target = CopyTarget.parse(which)
        text = self.formatted(target)
        try:
            self.clipboard.write_text(text)
        except ClipboardUnavailableError as e:
            logger.warning("Copy of %s failed: %s", text, e)
            self._record(EventKind.COPY_FAILED, f"copy {target.value}", detail=str(e))
            raise

        self.feedback.show(text)
        self._record(EventKind.COPY, f"copy {target.value}", detail=text)
        return text

    def _record(self, kind: EventKind, description: str, detail: Optional[str] = None):
        logger.debug("%s: %s -> %s", kind.value, description, self._color.hex)
        if self.log is not None:
            self.log.record(kind, description, self._color.hex, detail=detail)

    def __repr__(self) -> str:
        return f"ColorState({self._color.rgb_text}, {self.feedback!r})"
