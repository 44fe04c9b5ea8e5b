from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator, cast

import httpx
import structlog
from fastapi import FastAPI

from streamgate.application.use_cases import PlaybackSessionUseCase
from streamgate.infrastructure.logos import HttpxLogoService
from streamgate.infrastructure.playback import BitrateLadderBuilder, PathResolver
from streamgate.interfaces.app_state import AppState

log = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan Hook: Initialize and cleanup all resources (DI Composition Root).

    Order matters:
        1. HTTP Client (required by the logo service)
        2. Playback core (resolver + ladder, pure)
        3. Logo service (optional)
        4. Playback session use case
    """
    state = cast(AppState, app.state)
    config = state.config

    # ========== 1) HTTP Client (shared resource) ==========
    state.http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(config.http_timeout_seconds),
        headers={"User-Agent": config.http_user_agent},
    )
    log.info("http_client_initialized", timeout=config.http_timeout_seconds)

    # ========== 2) Playback core ==========
    state.path_resolver = PathResolver(config.playback)
    state.ladder_builder = BitrateLadderBuilder(config.playback)
    log.info(
        "playback_core_initialized",
        dev_host=config.playback.dev_host,
        prod_host=config.playback.prod_host,
        tiers=[t.label for t in config.playback.tiers],
    )

    # ========== 3) Logo service ==========
    if config.logo_service_url:
        state.logo_service = HttpxLogoService(
            base_url=config.logo_service_url, http_client=state.http_client
        )
        log.info("logo_service_configured", base_url=config.logo_service_url)
    else:
        state.logo_service = None
        log.info("logo_service_disabled")

    # ========== 4) Use cases ==========
    state.playback_session_uc = PlaybackSessionUseCase(
        resolver=state.path_resolver,
        ladder=state.ladder_builder,
        logo_service=state.logo_service,
        embed_width=config.playback.embed_width,
        embed_height=config.playback.embed_height,
    )

    log.info("app_startup_complete")

    try:
        yield
    finally:
        await state.http_client.aclose()
        log.info("http_client_closed")
        log.info("app_shutdown_complete")
