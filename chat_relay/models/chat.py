from __future__ import annotations

import json
from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator, model_validator


def _stringify(value: Any) -> str:
    if not value:
        return ""
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


class ChatTurn(BaseModel):
    """One prior utterance, as the browser keeps it."""

    role: Literal["user", "model"] = "user"
    text: str = ""

    @model_validator(mode="before")
    @classmethod
    def _coerce_entry(cls, data: Any) -> Any:
        # Malformed entries become an empty user turn instead of failing.
        if not isinstance(data, dict):
            return {}
        return data

    @field_validator("role", mode="before")
    @classmethod
    def _normalize_role(cls, value: Any) -> str:
        return "model" if value == "model" else "user"

    @field_validator("text", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        return _stringify(value)


class ChatRequest(BaseModel):
    # Type and emptiness of `message` are checked by the relay service so the
    # caller gets the fixed 400 body instead of a schema error.
    message: Any = Field(default=None, description="Non-empty string")
    history: Any = Field(
        default_factory=list, description="List of {role, text} turns"
    )

    def turns(self) -> list[ChatTurn]:
        """Coerce `history` into turns; anything but a list (or null) is an error."""
        if self.history is None:
            return []
        if not isinstance(self.history, list):
            raise TypeError("history must be a list of {role, text} entries")
        return [ChatTurn.model_validate(entry) for entry in self.history]


class ChatResponse(BaseModel):
    reply: str


class ErrorResponse(BaseModel):
    error: str
