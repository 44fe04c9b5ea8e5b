"""Port for the watermark logo collaborator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from streamgate.domain.entities.playback import Logo


@runtime_checkable
class LogoServicePort(Protocol):
    """Lists watermark logos available to a viewer."""

    async def list_logos(self, token: str | None) -> list[Logo]:
        """Return available logos. The first one is the default watermark."""
        ...
