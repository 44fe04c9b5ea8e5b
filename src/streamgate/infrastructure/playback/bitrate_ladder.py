"""Quality ladder construction gated by the viewer's bitrate entitlement."""

from __future__ import annotations

import math
from typing import Any

from streamgate.domain.entities.playback import BitrateTier, QualityVariant
from streamgate.infrastructure.config.schema import PlaybackConfig

AUTO_LABEL = "Auto"


class BitrateLadderBuilder:
    """Builds the selectable quality variants for one playback URL.

    All tiers come from PlaybackConfig.
    The ladder always starts with the "Auto" sentinel (bitrate 0) and then
    lists every tier whose threshold the entitlement reaches, ascending.

    With the default table an entitlement of 1500 kbps yields
    ``[Auto, 480p, 720p]``. Every variant points at the same URL: tiers gate
    what the viewer may pick, they do not select a different encode.
    """

    def __init__(self, config: PlaybackConfig) -> None:
        self._tiers: list[BitrateTier] = sorted(
            config.bitrate_tiers(), key=lambda t: t.bitrate_kbps
        )
        self._default_bitrate = config.default_max_bitrate_kbps

    @property
    def tiers(self) -> list[BitrateTier]:
        return list(self._tiers)

    def effective_bitrate(self, max_bitrate_kbps: Any) -> float:
        """Normalize an entitlement value.

        None means "not provided" and falls back to the configured default.
        Anything that is not a finite, non-negative number counts as 0
        (below every tier).
        """
        if max_bitrate_kbps is None:
            return float(self._default_bitrate)
        if isinstance(max_bitrate_kbps, bool) or not isinstance(
            max_bitrate_kbps, (int, float)
        ):
            return 0.0
        if math.isnan(max_bitrate_kbps) or max_bitrate_kbps < 0:
            return 0.0
        return float(max_bitrate_kbps)

    def build(
        self, base_url: str, max_bitrate_kbps: Any = None
    ) -> list[QualityVariant]:
        """Return the ladder for ``base_url``, Auto first, strictly ascending."""
        limit = self.effective_bitrate(max_bitrate_kbps)
        ladder = [
            QualityVariant(
                label=AUTO_LABEL, src=base_url, bitrate_kbps=0, resolution=AUTO_LABEL
            )
        ]
        for tier in self._tiers:
            if limit >= tier.bitrate_kbps:
                ladder.append(
                    QualityVariant(
                        label=tier.label,
                        src=base_url,
                        bitrate_kbps=tier.bitrate_kbps,
                        resolution=tier.resolution,
                    )
                )
        return ladder
