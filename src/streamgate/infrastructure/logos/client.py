"""Async httpx client for the logo service."""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from streamgate.domain.entities.playback import Logo

log = structlog.get_logger(__name__)

_LOGOS_PATH = "/api/logos"


class HttpxLogoService:
    """Fetches watermark logos from the logo service.

    Implements ``LogoServicePort`` from domain.ports.logo_service.
    Any transport or payload problem yields an empty list: watermarks are
    optional and must never block playback.
    """

    def __init__(self, *, base_url: str, http_client: httpx.AsyncClient) -> None:
        self._base_url = base_url.rstrip("/")
        self._http = http_client

    @staticmethod
    def _parse_logo(item: Any) -> Logo | None:
        if not isinstance(item, dict):
            return None
        url = item.get("url")
        if not url:
            return None
        try:
            logo_id = int(item.get("id", 0))
        except (TypeError, ValueError):
            return None
        # The upstream API names the field "nome"; accept both spellings.
        name = item.get("name") or item.get("nome") or ""
        return Logo(id=logo_id, name=str(name), url=str(url))

    async def list_logos(self, token: str | None) -> list[Logo]:
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        url = f"{self._base_url}{_LOGOS_PATH}"
        try:
            resp = await self._http.get(url, headers=headers)
            if resp.status_code == 401:
                log.warning("logo_service_unauthorized", status=401)
                return []
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPStatusError:
            log.warning("logo_service_http_error", url=url, exc_info=True)
            return []
        except httpx.HTTPError:
            log.warning("logo_service_network_error", url=url, exc_info=True)
            return []
        except ValueError:
            log.warning("logo_service_invalid_json", url=url)
            return []

        if not isinstance(data, list):
            log.warning("logo_service_unexpected_payload", type=type(data).__name__)
            return []

        logos = [logo for logo in map(self._parse_logo, data) if logo is not None]
        log.debug("logo_service_loaded", count=len(logos))
        return logos
