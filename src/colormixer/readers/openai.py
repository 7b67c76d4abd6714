"""
OpenAI color reader.

Uses a GPT-4o class vision model to read the color badges off a screenshot.
"""

from .base import VisionColorReader

DEFAULT_MODEL = "gpt-4o"


class OpenAIColorReader(VisionColorReader):
    """
    OpenAI implementation of ColorReader.

    Example:
        ```python
        reader = OpenAIColorReader(api_key="your-openai-api-key", model="gpt-4o")
        reading = reader.read(page)
        ```
    """

    name = "openai"

    def __init__(self, api_key: str, model: str = DEFAULT_MODEL):
        from openai import OpenAI

        self.client = OpenAI(api_key=api_key)
        self.model = model

    def _call_vision(self, prompt: str, screenshot_b64: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[
                {
                    "role": "user",
                    "content": [
                        {"type": "text", "text": prompt},
                        {
                            "type": "image_url",
                            "image_url": {
                                "url": f"data:image/png;base64,{screenshot_b64}",
                            },
                        },
                    ],
                }
            ],
            max_tokens=300,
        )
        return response.choices[0].message.content
