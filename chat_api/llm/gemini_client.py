# Role: Minimal wrapper around the Gemini API. Centralizes model name, optional temperature, and error handling,
# so the HTTP layer calls a single method: complete(prompt).

from __future__ import annotations

import logging
import os
from typing import Optional, Protocol

from google import genai

logger = logging.getLogger(__name__)


class ChatClient(Protocol):
    def complete(self, prompt: str) -> str: ...


class GeminiClient:
    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> None:
        # Key lines:
        # - Reads secrets from env (no secrets in code).
        # - Missing key raises here, so the process fails at startup and not on the first request.
        self.api_key = api_key or os.getenv("GEMINI_API_KEY")
        if not self.api_key:
            raise RuntimeError("Missing GEMINI_API_KEY in environment or .env")

        self.model_name = model or os.getenv("GEMINI_MODEL", "gemini-1.5-flash")

        if temperature is None and os.getenv("GEMINI_TEMPERATURE"):
            try:
                temperature = float(os.getenv("GEMINI_TEMPERATURE", ""))
            except ValueError as e:
                raise RuntimeError(f"Invalid GEMINI_TEMPERATURE: {e}") from e
        self.temperature = temperature

        self.client = genai.Client(api_key=self.api_key)

    def complete(self, prompt: str) -> str:
        # 1) Send the prompt as the only content (no system prompt, no history)
        # 2) Surface SDK/transport failures as RuntimeError
        # 3) Return the generated text unchanged
        kwargs = {"model": self.model_name, "contents": prompt}
        if self.temperature is not None:
            kwargs["config"] = {"temperature": self.temperature}

        logger.debug("Gemini request: model=%s prompt_chars=%d", self.model_name, len(prompt))

        try:
            resp = self.client.models.generate_content(**kwargs)
        except Exception as e:
            raise RuntimeError(f"Gemini API call failed: {e}") from e

        text = getattr(resp, "text", None)
        if text is None:
            raise RuntimeError("Gemini returned no text.")

        logger.debug("Gemini response: chars=%d", len(text))
        return text
