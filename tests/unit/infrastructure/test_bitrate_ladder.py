"""Tests for BitrateLadderBuilder (entitlement-gated quality variants)."""

from __future__ import annotations

import pytest

from streamgate.infrastructure.config.schema import PlaybackConfig, TierConfig
from streamgate.infrastructure.playback.bitrate_ladder import BitrateLadderBuilder

URL = "https://samhost.wcore.com.br:1443/play.php?login=joao&video=shows/video.mp4"


def _labels(builder: BitrateLadderBuilder, limit: object) -> list[str]:
    return [v.label for v in builder.build(URL, limit)]


class TestBuild:
    def test_1500_gives_three_entries(self, ladder_builder: BitrateLadderBuilder) -> None:
        assert _labels(ladder_builder, 1500) == ["Auto", "480p", "720p"]

    def test_default_entitlement(self, ladder_builder: BitrateLadderBuilder) -> None:
        assert _labels(ladder_builder, None) == ["Auto", "480p", "720p", "1080p"]

    def test_full_ladder(self, ladder_builder: BitrateLadderBuilder) -> None:
        ladder = ladder_builder.build(URL, 4000)
        assert [v.label for v in ladder] == ["Auto", "480p", "720p", "1080p", "1080p+"]
        assert [v.bitrate_kbps for v in ladder] == [0, 800, 1500, 2500, 4000]
        assert [v.resolution for v in ladder] == [
            "Auto",
            "854x480",
            "1280x720",
            "1920x1080",
            "1920x1080",
        ]

    @pytest.mark.parametrize("limit", [0, 1, 500, 799, 799.9])
    def test_below_lowest_tier(
        self, ladder_builder: BitrateLadderBuilder, limit: float
    ) -> None:
        assert _labels(ladder_builder, limit) == ["Auto"]

    @pytest.mark.parametrize("limit", [4000, 4001, 10_000, 1e9])
    def test_at_or_above_top_tier(
        self, ladder_builder: BitrateLadderBuilder, limit: float
    ) -> None:
        ladder = ladder_builder.build(URL, limit)
        assert len(ladder) == 5
        bitrates = [v.bitrate_kbps for v in ladder]
        assert all(a < b for a, b in zip(bitrates, bitrates[1:]))

    @pytest.mark.parametrize(
        ("limit", "count"),
        [(800, 2), (1499, 2), (1500, 3), (2499, 3), (2500, 4), (3999, 4)],
    )
    def test_thresholds_are_inclusive(
        self, ladder_builder: BitrateLadderBuilder, limit: int, count: int
    ) -> None:
        assert len(ladder_builder.build(URL, limit)) == count

    @pytest.mark.parametrize("limit", [0, 800, 1500, 2500, 4000, 9999])
    def test_ladder_invariants(
        self, ladder_builder: BitrateLadderBuilder, limit: int
    ) -> None:
        ladder = ladder_builder.build(URL, limit)
        assert ladder[0].bitrate_kbps == 0
        assert ladder[0].label == "Auto"
        assert all(v.bitrate_kbps <= limit for v in ladder[1:])
        assert all(v.src == URL for v in ladder)

    def test_empty_url_is_kept(self, ladder_builder: BitrateLadderBuilder) -> None:
        ladder = ladder_builder.build("", 4000)
        assert all(v.src == "" for v in ladder)


class TestInvalidEntitlement:
    @pytest.mark.parametrize(
        "limit", [-1, -5000, float("nan"), "fast", True, object()]
    )
    def test_behaves_as_below_all_tiers(
        self, ladder_builder: BitrateLadderBuilder, limit: object
    ) -> None:
        assert _labels(ladder_builder, limit) == ["Auto"]

    def test_effective_bitrate(self, ladder_builder: BitrateLadderBuilder) -> None:
        assert ladder_builder.effective_bitrate(None) == 2500
        assert ladder_builder.effective_bitrate(1200) == 1200
        assert ladder_builder.effective_bitrate(-3) == 0
        assert ladder_builder.effective_bitrate(float("inf")) == float("inf")


class TestConfigurable:
    def test_custom_tiers_and_default(self) -> None:
        config = PlaybackConfig(
            default_max_bitrate_kbps=300,
            tiers=[
                TierConfig(label="240p", bitrate_kbps=300, resolution="426x240"),
                TierConfig(label="360p", bitrate_kbps=600, resolution="640x360"),
            ],
        )
        builder = BitrateLadderBuilder(config)
        assert _labels(builder, None) == ["Auto", "240p"]
        assert _labels(builder, 600) == ["Auto", "240p", "360p"]

    def test_tiers_property_is_a_copy(
        self, ladder_builder: BitrateLadderBuilder
    ) -> None:
        tiers = ladder_builder.tiers
        tiers.clear()
        assert len(ladder_builder.tiers) == 4
