"""
Google Gemini color reader.

Asks a Gemini vision model to read the color badges off a screenshot.
Falls back to a cheaper model on rate limits.
"""

import logging
import time
from typing import Any, Dict, List, Optional, Tuple

from .base import VisionColorReader

logger = logging.getLogger(__name__)

# Model hierarchy: primary -> fallback (on rate limits)
MODEL_FALLBACKS = {
    "gemini-2.5-pro": "gemini-2.0-flash",
    "gemini-2.5-flash": "gemini-2.0-flash",
    "gemini-2.0-flash": "gemini-1.5-flash",
    "gemini-1.5-flash": None,
}

DEFAULT_MODEL = "gemini-2.0-flash"


RATE_LIMIT_MARKERS = ("429", "quota", "rate limit", "rate-limit", "resource has been exhausted")


def is_rate_limit(error: Exception) -> bool:
    text = str(error).lower()
    return any(marker in text for marker in RATE_LIMIT_MARKERS)


class GeminiColorReader(VisionColorReader):
    """
    Gemini implementation of ColorReader.

    Example:
        ```python
        reader = GeminiColorReader(api_key="your-gemini-api-key")
        reading = reader.read(page)
        reading.hex_value  # "#FF5733"
        ```
    """

    name = "gemini"

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        fallback_model: Optional[str] = "__auto__",
        max_retries: int = 3,
    ):
        """
        Initialize Gemini reader.

        Args:
            api_key: Google Generative AI API key
            model: Gemini model name (default: gemini-2.0-flash)
            fallback_model: Model for rate limits; defaults to MODEL_FALLBACKS[model],
                None disables fallback
            max_retries: Attempts per model before giving up on it
        """
        import google.generativeai as genai

        genai.configure(api_key=api_key)
        if fallback_model == "__auto__":
            fallback_model = MODEL_FALLBACKS.get(model)
        self.primary_model_name = model
        self.fallback_model_name = fallback_model
        self.model = genai.GenerativeModel(model)
        self.fallback_model = genai.GenerativeModel(fallback_model) if fallback_model else None
        self.max_retries = max_retries
        self.last_used_model = model

    def _make_image_part(self, screenshot_b64: str) -> Dict[str, Any]:
        return {
            "mime_type": "image/png",
            "data": screenshot_b64,
        }

    def _generate_with_fallback(self, content: List) -> Tuple[Any, str]:
        """
        Generate content, retrying and falling back on rate limits.

        Returns:
            Tuple of (response, model_name_used)
        """
        models_to_try = [(self.model, self.primary_model_name)]
        if self.fallback_model:
            models_to_try.append((self.fallback_model, self.fallback_model_name))

        last_error = None

        for model, model_name in models_to_try:
            for attempt in range(self.max_retries):
                try:
                    response = model.generate_content(content)
                    self.last_used_model = model_name
                    return response, model_name
                except Exception as e:
                    last_error = e
                    if is_rate_limit(e):
                        if attempt < self.max_retries - 1:
                            wait_time = 10 * (attempt + 1)  # 10s, 20s, 30s
                            logger.warning(
                                "Rate limit on %s, waiting %ss (attempt %d/%d)",
                                model_name, wait_time, attempt + 1, self.max_retries,
                            )
                            time.sleep(wait_time)
                        else:
                            logger.warning("Rate limit exhausted on %s, trying fallback", model_name)
                            break
                    elif attempt < self.max_retries - 1:
                        time.sleep(1)
                    else:
                        raise

        raise last_error or RuntimeError("All Gemini models failed")

    def _call_vision(self, prompt: str, screenshot_b64: str) -> str:
        response, _ = self._generate_with_fallback([prompt, self._make_image_part(screenshot_b64)])
        return response.text
