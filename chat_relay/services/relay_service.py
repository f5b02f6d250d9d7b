from __future__ import annotations

import logging
from typing import Protocol

from google.genai import types

from chat_relay.core.errors import MESSAGE_REQUIRED, ChatValidationError
from chat_relay.models.chat import ChatRequest, ChatResponse
from chat_relay.services.prompt import RelayConfig, SamplingConfig, build_contents

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate_text(
        self, contents: list[types.Content], sampling: SamplingConfig
    ) -> str: ...


def require_message(request: ChatRequest | None) -> str:
    message = request.message if request is not None else None
    if not isinstance(message, str) or not message:
        raise ChatValidationError(MESSAGE_REQUIRED)
    return message


class RelayService:
    """Turns one chat request into one upstream generation call."""

    def __init__(self, generator: TextGenerator, config: RelayConfig | None = None):
        self._generator = generator
        self._config = config or RelayConfig()

    @property
    def config(self) -> RelayConfig:
        return self._config

    async def reply(self, request: ChatRequest | None) -> ChatResponse:
        message = require_message(request)
        history = request.turns()

        contents = build_contents(self._config.system_instruction, history, message)
        logger.debug(
            f"Relaying chat turn (history={len(history)}, blocks={len(contents)})"
        )

        text = await self._generator.generate_text(contents, self._config.sampling)
        return ChatResponse(reply=text)
