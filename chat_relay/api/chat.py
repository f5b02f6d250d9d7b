import logging

from fastapi import APIRouter, Body, Depends

from chat_relay.core.errors import RelayError, UpstreamError, error_message
from chat_relay.dependencies import get_relay_service
from chat_relay.models.chat import ChatRequest, ChatResponse, ErrorResponse
from chat_relay.services.relay_service import RelayService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat_endpoint(
    request: ChatRequest | None = Body(default=None),
    relay_service: RelayService = Depends(get_relay_service),
) -> ChatResponse:
    try:
        return await relay_service.reply(request)
    except RelayError:
        raise
    except Exception as e:
        logger.exception("Chat endpoint failed")
        raise UpstreamError(error_message(e)) from e
