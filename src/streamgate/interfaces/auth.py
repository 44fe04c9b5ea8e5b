"""Request-scoped auth provider built from incoming HTTP headers.

The surrounding platform authenticates viewers and forwards their identity:

    X-Viewer-Login        login name
    X-Viewer-Email        email (login fallback)
    X-Viewer-Id           numeric/opaque id (last fallback)
    X-Viewer-Max-Bitrate  entitlement in kbps
    Authorization         ``Bearer <token>`` reused for collaborator calls
"""

from __future__ import annotations

import structlog
from starlette.requests import Request

from streamgate.domain.entities.playback import (
    DEFAULT_MAX_BITRATE_KBPS,
    ViewerEntitlement,
    ViewerIdentity,
)

log = structlog.get_logger(__name__)


def parse_bitrate(raw: str | None, default: int) -> int:
    if raw is None or not raw.strip():
        return default
    try:
        return int(float(raw))
    except (ValueError, OverflowError):
        log.debug("viewer_bitrate_header_invalid", value=raw)
        return default


def _bearer_token(authorization: str | None) -> str | None:
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


class RequestAuthProvider:
    """Implements ``AuthProviderPort`` for one request."""

    def __init__(
        self,
        *,
        viewer: ViewerIdentity,
        entitlement: ViewerEntitlement,
        token: str | None = None,
    ) -> None:
        self._viewer = viewer
        self._entitlement = entitlement
        self._token = token

    @classmethod
    def from_request(
        cls, request: Request, *, default_bitrate: int = DEFAULT_MAX_BITRATE_KBPS
    ) -> RequestAuthProvider:
        headers = request.headers
        viewer = ViewerIdentity(
            login=headers.get("x-viewer-login") or None,
            email=headers.get("x-viewer-email") or None,
            id=headers.get("x-viewer-id") or None,
        )
        entitlement = ViewerEntitlement(
            max_bitrate_kbps=parse_bitrate(
                headers.get("x-viewer-max-bitrate"), default_bitrate
            )
        )
        return cls(
            viewer=viewer,
            entitlement=entitlement,
            token=_bearer_token(headers.get("authorization")),
        )

    @property
    def viewer(self) -> ViewerIdentity:
        return self._viewer

    @property
    def entitlement(self) -> ViewerEntitlement:
        return self._entitlement

    async def get_token(self) -> str | None:
        return self._token
