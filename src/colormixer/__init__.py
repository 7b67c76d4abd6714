"""
colormixer - RGB/Hex color model for the Color Mixer demo app

The color mixer is a small UI: three RGB sliders, six presets, and two
badges (hex and rgb) that copy their text to the clipboard with a short
"Copied:" toast. This package is the model both of its test styles assert
against:

1. Selector-based tests read the badges through data-testid attributes
2. AI vision tests ask a model to read the same badges off a screenshot

Quick Start:
    ```python
    from colormixer import ColorState, Channel, MemoryClipboard

    state = ColorState(clipboard=MemoryClipboard())
    state.to_hex()                      # "#FF5733"
    state.to_rgb_text()                 # "rgb(255, 87, 51)"

    state.set_channel(Channel.G, 999)   # clamped to 255
    state.apply_preset("blue")          # (0, 0, 255)
    state.copy_to_clipboard("hex")      # "#0000FF"
    state.feedback.message              # "Copied: #0000FF" for two seconds
    ```

Checking a live app:
    ```python
    from playwright.sync_api import sync_playwright
    from colormixer import ColorState, ColorMixerPage, ColorAssertions
    from colormixer.readers import create_reader

    with sync_playwright() as p:
        page = p.chromium.launch().new_page()
        state = ColorState()
        mixer = ColorMixerPage(page, state=state)
        mixer.open("http://localhost:3000")

        mixer.apply_preset("red")
        ColorAssertions(create_reader("dom"), page).displays(state)
    ```
"""

from .color import (
    Channel,
    Color,
    INITIAL_COLOR,
    clamp_channel,
)
from .presets import (
    Preset,
    PRESETS,
    preset_color,
)
from .errors import (
    ColorMixerError,
    UnknownPresetError,
    ClipboardUnavailableError,
    ColorFormatError,
    ChannelRangeError,
)
from .feedback import (
    CopyFeedback,
    FeedbackState,
    ThreadScheduler,
)
from .clipboard import (
    Clipboard,
    MemoryClipboard,
    PageClipboard,
)
from .config import MixerConfig
from .history import (
    SessionLog,
    ColorEvent,
    EventKind,
)
from .state import (
    ColorState,
    CopyTarget,
)
from .page import ColorMixerPage
from .assertions import (
    ColorAssertions,
    wait_until,
)

__version__ = "0.1.0"
__license__ = "MIT"

__all__ = [
    # Model
    "ColorState",
    "CopyTarget",
    "Color",
    "Channel",
    "INITIAL_COLOR",
    "clamp_channel",
    # Presets
    "Preset",
    "PRESETS",
    "preset_color",
    # Errors
    "ColorMixerError",
    "UnknownPresetError",
    "ClipboardUnavailableError",
    "ColorFormatError",
    "ChannelRangeError",
    # Feedback
    "CopyFeedback",
    "FeedbackState",
    "ThreadScheduler",
    # Clipboard
    "Clipboard",
    "MemoryClipboard",
    "PageClipboard",
    # Config / history
    "MixerConfig",
    "SessionLog",
    "ColorEvent",
    "EventKind",
    # Testing the app
    "ColorMixerPage",
    "ColorAssertions",
    "wait_until",
]
