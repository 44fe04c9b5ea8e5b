"""Application state container for FastAPI dependency injection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
from starlette.datastructures import State

from streamgate.infrastructure.config import AppConfig

if TYPE_CHECKING:
    from streamgate.application.use_cases import PlaybackSessionUseCase
    from streamgate.domain.ports import LogoServicePort
    from streamgate.infrastructure.playback import BitrateLadderBuilder, PathResolver


class AppState(State):
    """FastAPI application state with all DI resources.

    Lifecycle managed by composition.py::lifespan().
    """

    # Configuration
    config: AppConfig

    # Infrastructure
    http_client: httpx.AsyncClient

    # Playback core (pure, shared across requests)
    path_resolver: PathResolver
    ladder_builder: BitrateLadderBuilder

    # Collaborators (None when no logo service is configured)
    logo_service: LogoServicePort | None

    # Application Services
    playback_session_uc: PlaybackSessionUseCase
