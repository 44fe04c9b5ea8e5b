"""Playback API endpoints (session, resolve, ladder)."""

from __future__ import annotations

from typing import Any, cast

import structlog
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from streamgate.domain.entities.playback import (
    DeliveryTarget,
    PlaybackSession,
    QualityVariant,
)
from streamgate.interfaces.app_state import AppState
from streamgate.interfaces.auth import RequestAuthProvider, parse_bitrate

log = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/playback", tags=["playback"])

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


def _request_context(
    request: Request, hostname: str | None, origin: str | None
) -> tuple[str, str]:
    """Hostname and origin of the page asking for playback.

    Explicit query parameters win over the request URL so an embedding page
    can state where it is served from.
    """
    url = request.url
    resolved_origin = origin if origin is not None else f"{url.scheme}://{url.netloc}"
    resolved_hostname = hostname if hostname is not None else (url.hostname or "")
    return resolved_hostname, resolved_origin


def _parse_flag(raw: str | None, default: bool) -> bool:
    """Lenient boolean query parsing; unknown values keep the default."""
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    log.debug("playback_flag_invalid", value=raw)
    return default


def _format_target(target: DeliveryTarget) -> dict[str, str]:
    return {"url": target.url, "mode": target.mode.value}


def _format_variant(variant: QualityVariant) -> dict[str, Any]:
    return {
        "label": variant.label,
        "src": variant.src,
        "bitrate": variant.bitrate_kbps,
        "resolution": variant.resolution,
    }


def _format_session(session: PlaybackSession) -> dict[str, Any]:
    return {
        "target": _format_target(session.target),
        "qualityLevels": [_format_variant(v) for v in session.variants],
        "viewerLogin": session.viewer_login,
        "watermark": {
            "enabled": session.watermark.enabled,
            "url": session.watermark.url,
        },
        "logos": [
            {"id": logo.id, "name": logo.name, "url": logo.url}
            for logo in session.logos
        ],
        "embedCode": session.embed_code,
    }


@router.get("/session")
async def playback_session(
    request: Request,
    path: str | None = None,
    hostname: str | None = None,
    origin: str | None = None,
    watermark: str | None = None,
) -> JSONResponse:
    """Full playback session for the viewer identified by the request headers."""
    state = cast(AppState, request.app.state)
    auth = RequestAuthProvider.from_request(
        request, default_bitrate=state.config.playback.default_max_bitrate_kbps
    )
    resolved_hostname, resolved_origin = _request_context(request, hostname, origin)

    session = await state.playback_session_uc.execute(
        path,
        auth=auth,
        hostname=resolved_hostname,
        origin=resolved_origin,
        enable_watermark=_parse_flag(watermark, True),
    )
    return JSONResponse(content=_format_session(session))


@router.get("/resolve")
async def playback_resolve(
    request: Request,
    path: str | None = None,
    hostname: str | None = None,
    origin: str | None = None,
) -> JSONResponse:
    """Resolve an asset reference to its canonical playback URL."""
    state = cast(AppState, request.app.state)
    auth = RequestAuthProvider.from_request(
        request, default_bitrate=state.config.playback.default_max_bitrate_kbps
    )
    resolved_hostname, resolved_origin = _request_context(request, hostname, origin)

    target = state.path_resolver.resolve(
        path,
        viewer_login=auth.viewer.resolved_login,
        hostname=resolved_hostname,
        origin=resolved_origin,
    )
    return JSONResponse(content=_format_target(target))


@router.get("/ladder")
async def playback_ladder(
    request: Request,
    url: str = "",
    max_bitrate: str | None = None,
) -> JSONResponse:
    """Quality ladder for ``url``.

    ``max_bitrate`` overrides the X-Viewer-Max-Bitrate header; unparsable
    values fall back to the configured default entitlement.
    """
    state = cast(AppState, request.app.state)
    default_bitrate = state.config.playback.default_max_bitrate_kbps
    if max_bitrate is not None:
        limit = parse_bitrate(max_bitrate, default_bitrate)
    else:
        auth = RequestAuthProvider.from_request(
            request, default_bitrate=default_bitrate
        )
        limit = auth.entitlement.max_bitrate_kbps

    variants = state.ladder_builder.build(url, limit)
    return JSONResponse(
        content={"variants": [_format_variant(v) for v in variants]}
    )
