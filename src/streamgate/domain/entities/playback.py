"""Domain entities for playback resolution.

Pure value objects without framework dependencies or I/O.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

DEFAULT_MAX_BITRATE_KBPS = 2500

# Placeholder used when the viewer has neither login, email nor id.
_ANONYMOUS_ID = "usuario"


class DeliveryMode(str, Enum):
    """How a resolved URL is delivered to the player."""

    EMBED = "embed"
    STORAGE_REWRITE = "storage-rewrite"
    FALLBACK_IFRAME = "fallback-iframe"


@dataclass(frozen=True)
class DeliveryTarget:
    """Canonical playback URL for an asset reference.

    ``url`` is absolute or root-relative; ``""`` means unresolvable.
    """

    url: str
    mode: DeliveryMode


@dataclass(frozen=True)
class BitrateTier:
    """One entitlement-gated rung of the quality ladder."""

    label: str  # "480p", "720p", ...
    bitrate_kbps: int
    resolution: str  # "854x480"


@dataclass(frozen=True)
class QualityVariant:
    """A selectable quality level. ``bitrate_kbps == 0`` marks "Auto"."""

    label: str
    src: str
    bitrate_kbps: int
    resolution: str


@dataclass(frozen=True)
class ViewerEntitlement:
    """Maximum bitrate a viewer may receive."""

    max_bitrate_kbps: int = DEFAULT_MAX_BITRATE_KBPS


@dataclass(frozen=True)
class ViewerIdentity:
    """Viewer as exposed by the auth provider."""

    login: str | None = None
    email: str | None = None
    id: str | None = None

    @property
    def resolved_login(self) -> str:
        """Login used for stream names: login, else email local part, else id."""
        if self.login:
            return self.login
        if self.email:
            return self.email.split("@")[0]
        return f"user_{self.id or _ANONYMOUS_ID}"


@dataclass(frozen=True)
class Logo:
    """Watermark image offered by the logo service."""

    id: int
    name: str
    url: str


@dataclass(frozen=True)
class Watermark:
    enabled: bool = False
    url: str = ""


@dataclass(frozen=True)
class PlaybackSession:
    """Everything a player needs to start playback for one viewer."""

    target: DeliveryTarget
    variants: list[QualityVariant] = field(default_factory=list)
    viewer_login: str = ""
    watermark: Watermark = field(default_factory=Watermark)
    logos: list[Logo] = field(default_factory=list)
    embed_code: str = ""
