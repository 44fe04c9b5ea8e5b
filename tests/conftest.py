"""Shared test fixtures for the streamgate test suite."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from streamgate.domain.entities.playback import (
    Logo,
    ViewerEntitlement,
    ViewerIdentity,
)
from streamgate.infrastructure.config.schema import PlaybackConfig
from streamgate.infrastructure.playback import BitrateLadderBuilder, PathResolver
from streamgate.interfaces.auth import RequestAuthProvider

# ---------------------------------------------------------------------------
# Playback core fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def playback_config() -> PlaybackConfig:
    """PlaybackConfig with default hosts and tier table."""
    return PlaybackConfig()


@pytest.fixture()
def path_resolver(playback_config: PlaybackConfig) -> PathResolver:
    return PathResolver(playback_config)


@pytest.fixture()
def ladder_builder(playback_config: PlaybackConfig) -> BitrateLadderBuilder:
    return BitrateLadderBuilder(playback_config)


# ---------------------------------------------------------------------------
# Collaborator fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def viewer_auth() -> RequestAuthProvider:
    """Auth provider for viewer "joao" with a 1500 kbps entitlement."""
    return RequestAuthProvider(
        viewer=ViewerIdentity(login="joao", email="joao@example.com", id="7"),
        entitlement=ViewerEntitlement(max_bitrate_kbps=1500),
        token="token-123",
    )


@pytest.fixture()
def logos() -> list[Logo]:
    return [
        Logo(id=1, name="Main", url="https://cdn.example.com/logo-main.png"),
        Logo(id=2, name="Alt", url="https://cdn.example.com/logo-alt.png"),
    ]


@pytest.fixture()
def logo_service(logos: list[Logo]) -> AsyncMock:
    """LogoServicePort mock returning two logos."""
    service = AsyncMock()
    service.list_logos = AsyncMock(return_value=logos)
    return service
