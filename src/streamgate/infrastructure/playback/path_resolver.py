"""PathResolver: classifies asset references and builds playback URLs.

A raw reference is one of:
    - empty                        -> generic iframe player for the viewer's live stream
    - an already-built embed URL   -> returned unchanged
    - ``owner/folder/file[.ext]``  -> rewritten to the delivery server's play.php

Storage paths may carry leading slashes and one content-root alias
(``/content/joao/shows/video.avi``). Anything that cannot be classified
degrades to the iframe player instead of raising.
"""

from __future__ import annotations

import re

import structlog

from streamgate.domain.entities.playback import DeliveryMode, DeliveryTarget
from streamgate.infrastructure.config.schema import PlaybackConfig

log = structlog.get_logger(__name__)

# Trailing extension of a file name (".avi", "." or nothing).
_EXTENSION_RE = re.compile(r"\.[^/.]*$")

_DELIVERY_URL = "https://{host}:{port}/play.php?login={owner}&video={folder}/{file}"


class PathResolver:
    """Turns an asset reference plus request context into a DeliveryTarget.

    Pure: every environment input (hostname, origin, viewer login) is an
    explicit argument, hosts and markers come from PlaybackConfig.
    """

    def __init__(self, config: PlaybackConfig) -> None:
        self._dev_host = config.dev_host
        self._prod_host = config.prod_host
        self._dev_hostnames = {h.lower() for h in config.dev_hostnames}
        self._port = config.delivery_port
        self._extension = config.video_extension
        self._embed_markers = tuple(config.embed_markers)
        self._iframe_path = config.iframe_path
        self._live_suffix = config.live_stream_suffix

        aliases = [a.strip("/") for a in config.content_root_aliases if a.strip("/")]
        self._alias_re = (
            re.compile("^(?:" + "|".join(re.escape(a) for a in aliases) + ")/")
            if aliases
            else None
        )

    def delivery_host(self, hostname: str) -> str:
        """Delivery-server host for the hostname the viewer is browsing."""
        if hostname.lower() in self._dev_hostnames:
            return self._dev_host
        return self._prod_host

    def is_embed_url(self, raw_path: str) -> bool:
        return any(marker in raw_path for marker in self._embed_markers)

    def fallback_url(self, viewer_login: str, origin: str = "") -> str:
        """Iframe player URL for the viewer's live stream (root-relative without origin)."""
        return (
            f"{origin.rstrip('/')}{self._iframe_path}"
            f"?stream={viewer_login}{self._live_suffix}"
        )

    def normalize_file_name(self, file_name: str) -> str:
        """Force the canonical video extension onto a file name."""
        if file_name.endswith(self._extension):
            return file_name
        if _EXTENSION_RE.search(file_name):
            return _EXTENSION_RE.sub(self._extension, file_name)
        return f"{file_name}{self._extension}"

    def split_storage_path(self, raw_path: str) -> tuple[str, str, str] | None:
        """Split a storage path into ``(owner, folder, file)``.

        Returns None when fewer than three segments remain after stripping
        leading slashes and one content-root alias. Empty segments count.
        """
        clean = raw_path.lstrip("/")
        if self._alias_re is not None:
            clean = self._alias_re.sub("", clean, count=1)
        parts = clean.split("/")
        if len(parts) < 3:
            return None
        return parts[0], parts[1], parts[2]

    def build_delivery_url(
        self, owner: str, folder: str, file_name: str, hostname: str
    ) -> str:
        return _DELIVERY_URL.format(
            host=self.delivery_host(hostname),
            port=self._port,
            owner=owner,
            folder=folder,
            file=self.normalize_file_name(file_name),
        )

    def resolve(
        self,
        raw_path: str | None,
        *,
        viewer_login: str,
        hostname: str,
        origin: str = "",
    ) -> DeliveryTarget:
        """Classify ``raw_path`` and produce its canonical playback URL.

        Never raises. Resolving an already-resolved URL returns the same URL;
        rewritten and fallback targets come back in ``embed`` mode the second time,
        after which the whole target is a fixed point.
        """
        if not raw_path or not raw_path.strip():
            return self._fallback(viewer_login, origin, reason="empty")

        if self.is_embed_url(raw_path):
            return DeliveryTarget(url=raw_path, mode=DeliveryMode.EMBED)

        segments = self.split_storage_path(raw_path)
        if segments is None:
            return self._fallback(viewer_login, origin, reason="too_few_segments")

        owner, folder, file_name = segments
        url = self.build_delivery_url(owner, folder, file_name, hostname)
        log.debug("playback_path_rewritten", raw_path=raw_path, url=url)
        return DeliveryTarget(url=url, mode=DeliveryMode.STORAGE_REWRITE)

    def _fallback(self, viewer_login: str, origin: str, *, reason: str) -> DeliveryTarget:
        log.debug("playback_path_fallback", reason=reason, viewer_login=viewer_login)
        return DeliveryTarget(
            url=self.fallback_url(viewer_login, origin),
            mode=DeliveryMode.FALLBACK_IFRAME,
        )
