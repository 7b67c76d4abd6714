"""
Color readers for colormixer.

A reader reports which color a live mixer page displays. Two styles are
available, mirroring the two ways the app gets tested:

    - DomColorReader: data-testid selectors (conventional Playwright)
    - GeminiColorReader / OpenAIColorReader: AI vision on a screenshot

Example:
    ```python
    from colormixer.readers import create_reader

    dom = create_reader("dom")
    vision = create_reader("gemini")  # GEMINI_API_KEY from the environment

    assert dom.read(page).color == vision.read(page).color
    ```
"""

import os
from typing import Optional

from .base import ColorReader, ColorReading, VisionColorReader, parse_json_response
from .dom import DomColorReader
from .gemini import GeminiColorReader
from .openai import OpenAIColorReader

API_KEY_ENV = {
    "gemini": "GEMINI_API_KEY",
    "openai": "OPENAI_API_KEY",
}


def create_reader(
    kind: str = "dom",
    api_key: Optional[str] = None,
    model: Optional[str] = None,
) -> ColorReader:
    """
    Create a reader by name.

    Will try to get the API key from the environment for AI readers.

    Args:
        kind: "dom", "gemini" or "openai"
        api_key: API key for AI readers (optional, will check environment)
        model: Model override for AI readers
    """
    if kind == "dom":
        return DomColorReader()

    if kind not in API_KEY_ENV:
        raise ValueError(f"Unknown reader type: {kind}")

    api_key = api_key or os.environ.get(API_KEY_ENV[kind])
    if not api_key:
        raise ValueError(f"No API key provided and {API_KEY_ENV[kind]} not in environment")

    if kind == "gemini":
        return GeminiColorReader(api_key, model or "gemini-2.0-flash")
    return OpenAIColorReader(api_key, model or "gpt-4o")


__all__ = [
    "ColorReader",
    "ColorReading",
    "VisionColorReader",
    "DomColorReader",
    "GeminiColorReader",
    "OpenAIColorReader",
    "create_reader",
    "parse_json_response",
]
