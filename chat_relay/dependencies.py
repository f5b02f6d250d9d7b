from __future__ import annotations

from fastapi import Request

from chat_relay.services.relay_service import RelayService


def get_relay_service(request: Request) -> RelayService:
    return request.app.state.relay_service
