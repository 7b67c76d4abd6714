"""
Runtime configuration.

Defaults match the mixer UI: start at #FF5733, show copy feedback for two
seconds, clamp out-of-range channel input. Every field can be overridden
from the environment with MixerConfig.from_env().
"""

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

from .color import INITIAL_COLOR, Color
from .feedback import DEFAULT_FEEDBACK_SECONDS

CHANNEL_POLICIES = ("clamp", "strict")
READER_TYPES = ("dom", "gemini", "openai")

ENV_PREFIX = "COLORMIXER_"


@dataclass
class MixerConfig:
    """Settings for a ColorState and the tooling around it."""

    initial_color: Color = field(default=INITIAL_COLOR)
    feedback_duration: float = DEFAULT_FEEDBACK_SECONDS
    channel_policy: str = "clamp"  # "clamp" or "strict"
    reader: str = "dom"  # How `colormixer check` reads the page
    model: Optional[str] = None  # Model override for AI readers

    def __post_init__(self):
        if self.channel_policy not in CHANNEL_POLICIES:
            raise ValueError(
                f"Unknown channel policy: {self.channel_policy!r} (expected one of {CHANNEL_POLICIES})"
            )
        if self.reader not in READER_TYPES:
            raise ValueError(f"Unknown reader: {self.reader!r} (expected one of {READER_TYPES})")
        if self.feedback_duration <= 0:
            raise ValueError(f"Feedback duration must be positive, got {self.feedback_duration}")

    @property
    def strict(self) -> bool:
        return self.channel_policy == "strict"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "MixerConfig":
        """
        Build a config from COLORMIXER_* environment variables.

        Recognized variables:
            COLORMIXER_INITIAL_COLOR     hex, e.g. "#FF5733"
            COLORMIXER_FEEDBACK_SECONDS  float
            COLORMIXER_CHANNEL_POLICY    "clamp" | "strict"
            COLORMIXER_READER            "dom" | "gemini" | "openai"
            COLORMIXER_MODEL             model name for AI readers
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        initial = env.get(f"{ENV_PREFIX}INITIAL_COLOR")
        if initial:
            kwargs["initial_color"] = Color.from_hex(initial)

        seconds = env.get(f"{ENV_PREFIX}FEEDBACK_SECONDS")
        if seconds:
            try:
                kwargs["feedback_duration"] = float(seconds)
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}FEEDBACK_SECONDS must be a number, got {seconds!r}") from None

        policy = env.get(f"{ENV_PREFIX}CHANNEL_POLICY")
        if policy:
            kwargs["channel_policy"] = policy.strip().lower()

        reader = env.get(f"{ENV_PREFIX}READER")
        if reader:
            kwargs["reader"] = reader.strip().lower()

        model = env.get(f"{ENV_PREFIX}MODEL")
        if model:
            kwargs["model"] = model

        return cls(**kwargs)
