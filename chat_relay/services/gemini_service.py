from __future__ import annotations

import asyncio
import logging
from typing import Any

from google import genai
from google.genai import types

from chat_relay.core.errors import StartupError, UpstreamError, error_message
from chat_relay.core.settings import Settings, get_settings
from chat_relay.services.prompt import SamplingConfig

logger = logging.getLogger(__name__)


class GeminiService:
    def __init__(self, settings: Settings | None = None, client: Any | None = None):
        self._settings = settings or get_settings()

        if client is None:
            if not self._settings.gemini_api_key:
                raise StartupError("Missing GOOGLE_API_KEY in environment or .env")
            client = genai.Client(api_key=self._settings.gemini_api_key)
        self._client = client

    @property
    def model(self) -> str:
        return self._settings.gemini_model

    async def generate_text(
        self,
        contents: list[types.Content],
        sampling: SamplingConfig,
    ) -> str:
        config = sampling.to_generate_config()

        def _send() -> str:
            response = self._client.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )
            # `.text` is None when the response has no text parts; pass it on as empty.
            text = getattr(response, "text", None)
            return text if isinstance(text, str) else ""

        try:
            return await asyncio.to_thread(_send)
        except Exception as e:
            logger.exception("Gemini request failed")
            raise UpstreamError(error_message(e)) from e
