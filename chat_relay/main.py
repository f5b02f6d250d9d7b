from __future__ import annotations

import logging
import sys

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from chat_relay.api import chat, health
from chat_relay.core.errors import StartupError, register_exception_handlers
from chat_relay.core.logging import configure_logging
from chat_relay.core.settings import Settings, get_settings
from chat_relay.services.gemini_service import GeminiService
from chat_relay.services.relay_service import RelayService

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    relay_service: RelayService | None = None,
) -> FastAPI:
    settings = settings or get_settings()
    configure_logging(settings)

    if relay_service is None:
        # Raises StartupError when no API key is configured.
        relay_service = RelayService(GeminiService(settings=settings))

    app = FastAPI(title=settings.app_name)
    app.state.relay_service = relay_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(chat.router, prefix="/api")

    app.include_router(health.router)

    # Mounted last so API routes take precedence over the front end.
    app.mount(
        "/",
        StaticFiles(directory=settings.static_dir, html=True),
        name="static",
    )

    return app


def run() -> None:
    settings = get_settings()
    log_level = configure_logging(settings)

    try:
        app = create_app(settings)
    except StartupError as e:
        logger.error(str(e))
        sys.exit(1)

    logger.info(f"Server running: http://localhost:{settings.port}")
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=log_level,
        # keep the handlers installed by configure_logging
        log_config=None,
    )
