"""Tests for playback domain entities."""

from __future__ import annotations

import pytest

from streamgate.domain.entities.playback import (
    DEFAULT_MAX_BITRATE_KBPS,
    DeliveryMode,
    DeliveryTarget,
    PlaybackSession,
    QualityVariant,
    ViewerEntitlement,
    ViewerIdentity,
    Watermark,
)


class TestDeliveryMode:
    def test_values(self) -> None:
        assert DeliveryMode.EMBED.value == "embed"
        assert DeliveryMode.STORAGE_REWRITE.value == "storage-rewrite"
        assert DeliveryMode.FALLBACK_IFRAME.value == "fallback-iframe"

    def test_compares_with_str(self) -> None:
        assert DeliveryMode.EMBED == "embed"


class TestDeliveryTarget:
    def test_frozen(self) -> None:
        target = DeliveryTarget(url="/x", mode=DeliveryMode.EMBED)
        with pytest.raises(AttributeError):
            target.url = "/y"  # type: ignore[misc]

    def test_equality(self) -> None:
        a = DeliveryTarget(url="/x", mode=DeliveryMode.EMBED)
        b = DeliveryTarget(url="/x", mode=DeliveryMode.EMBED)
        assert a == b


class TestQualityVariant:
    def test_frozen(self) -> None:
        variant = QualityVariant(
            label="Auto", src="/x", bitrate_kbps=0, resolution="Auto"
        )
        with pytest.raises(AttributeError):
            variant.bitrate_kbps = 800  # type: ignore[misc]


class TestViewerEntitlement:
    def test_default(self) -> None:
        assert ViewerEntitlement().max_bitrate_kbps == DEFAULT_MAX_BITRATE_KBPS
        assert DEFAULT_MAX_BITRATE_KBPS == 2500


class TestViewerIdentity:
    def test_login_wins(self) -> None:
        viewer = ViewerIdentity(login="maria", email="other@example.com", id="5")
        assert viewer.resolved_login == "maria"

    def test_email_local_part(self) -> None:
        viewer = ViewerIdentity(email="maria.silva@example.com", id="5")
        assert viewer.resolved_login == "maria.silva"

    def test_id_fallback(self) -> None:
        assert ViewerIdentity(id="42").resolved_login == "user_42"

    def test_anonymous_fallback(self) -> None:
        assert ViewerIdentity().resolved_login == "user_usuario"

    def test_empty_login_is_ignored(self) -> None:
        viewer = ViewerIdentity(login="", email="ana@example.com")
        assert viewer.resolved_login == "ana"


class TestPlaybackSession:
    def test_defaults(self) -> None:
        session = PlaybackSession(
            target=DeliveryTarget(url="/x", mode=DeliveryMode.FALLBACK_IFRAME)
        )
        assert session.variants == []
        assert session.logos == []
        assert session.watermark == Watermark(enabled=False, url="")
        assert session.embed_code == ""
