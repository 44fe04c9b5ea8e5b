"""Playback session use case: URL, ladder, watermark and embed code for a viewer."""

from __future__ import annotations

import structlog

from streamgate.domain.entities.playback import (
    Logo,
    PlaybackSession,
    Watermark,
)
from streamgate.domain.ports.auth_provider import AuthProviderPort
from streamgate.domain.ports.logo_service import LogoServicePort
from streamgate.infrastructure.playback.bitrate_ladder import BitrateLadderBuilder
from streamgate.infrastructure.playback.embed_code import render_iframe_embed
from streamgate.infrastructure.playback.path_resolver import PathResolver

log = structlog.get_logger(__name__)


class PlaybackSessionUseCase:
    """Assembles a PlaybackSession from an asset reference and the current viewer.

    Collaborator I/O (token, logos) runs first and is best-effort: failures are
    logged and the session is built without a watermark. URL resolution and the
    quality ladder are pure and always succeed.
    """

    def __init__(
        self,
        *,
        resolver: PathResolver,
        ladder: BitrateLadderBuilder,
        logo_service: LogoServicePort | None = None,
        embed_width: int = 640,
        embed_height: int = 360,
    ) -> None:
        self._resolver = resolver
        self._ladder = ladder
        self._logo_service = logo_service
        self._embed_width = embed_width
        self._embed_height = embed_height

    async def _load_logos(self, auth: AuthProviderPort) -> list[Logo]:
        if self._logo_service is None:
            return []

        try:
            token = await auth.get_token()
        except Exception:
            log.warning("playback_token_fetch_failed", exc_info=True)
            return []

        try:
            return await self._logo_service.list_logos(token)
        except Exception:
            log.warning("playback_logo_fetch_failed", exc_info=True)
            return []

    async def execute(
        self,
        raw_path: str | None,
        *,
        auth: AuthProviderPort,
        hostname: str,
        origin: str = "",
        enable_watermark: bool = True,
    ) -> PlaybackSession:
        """Build the playback session.

        Args:
            raw_path: Storage path, embed URL or None for the viewer's live stream.
            auth: Auth provider for the current viewer.
            hostname: Hostname the viewer is browsing (selects delivery host).
            origin: Origin prefixed to iframe fallback URLs.
            enable_watermark: Use the first logo as watermark when available.

        Returns:
            PlaybackSession (never raises for degenerate input).
        """
        logos = await self._load_logos(auth) if enable_watermark else []

        viewer_login = auth.viewer.resolved_login
        target = self._resolver.resolve(
            raw_path, viewer_login=viewer_login, hostname=hostname, origin=origin
        )
        variants = self._ladder.build(target.url, auth.entitlement.max_bitrate_kbps)

        watermark = Watermark(enabled=True, url=logos[0].url) if logos else Watermark()

        log.info(
            "playback_session_built",
            mode=target.mode.value,
            viewer_login=viewer_login,
            variants=len(variants),
            watermark=watermark.enabled,
        )
        return PlaybackSession(
            target=target,
            variants=variants,
            viewer_login=viewer_login,
            watermark=watermark,
            logos=logos,
            embed_code=render_iframe_embed(
                target.url, width=self._embed_width, height=self._embed_height
            ),
        )
