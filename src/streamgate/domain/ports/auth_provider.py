"""Port for the viewer authentication collaborator."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from streamgate.domain.entities.playback import ViewerEntitlement, ViewerIdentity


@runtime_checkable
class AuthProviderPort(Protocol):
    """Supplies the current viewer, their bitrate entitlement and a token.

    The token is only used for collaborator I/O (e.g. the logo service),
    never by URL or ladder resolution.
    """

    @property
    def viewer(self) -> ViewerIdentity:
        """Identity of the current viewer."""
        ...

    @property
    def entitlement(self) -> ViewerEntitlement:
        """Bitrate entitlement (defaults applied when absent)."""
        ...

    async def get_token(self) -> str | None:
        """Fetch a bearer token for the current viewer. None = anonymous."""
        ...
