from .playback import (
    DEFAULT_MAX_BITRATE_KBPS,
    BitrateTier,
    DeliveryMode,
    DeliveryTarget,
    Logo,
    PlaybackSession,
    QualityVariant,
    ViewerEntitlement,
    ViewerIdentity,
    Watermark,
)

__all__ = [
    "DEFAULT_MAX_BITRATE_KBPS",
    "BitrateTier",
    "DeliveryMode",
    "DeliveryTarget",
    "Logo",
    "PlaybackSession",
    "QualityVariant",
    "ViewerEntitlement",
    "ViewerIdentity",
    "Watermark",
]
