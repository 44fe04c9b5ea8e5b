"""Hardcoded default configuration values."""

from __future__ import annotations

from typing import Any

from streamgate.domain.entities.playback import DEFAULT_MAX_BITRATE_KBPS

DEFAULT_CONFIG: dict[str, Any] = {
    "app_name": "streamgate",
    "environment": "dev",
    "http": {
        "timeout_seconds": 10.0,
        "user_agent": "streamgate/0.1.0",
    },
    "logging": {
        "level": "INFO",
        "format": None,  # Derived from environment in schema.py
    },
    "logos": {
        "service_url": None,
    },
    "playback": {
        "default_max_bitrate_kbps": DEFAULT_MAX_BITRATE_KBPS,
    },
}
