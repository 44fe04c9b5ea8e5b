from __future__ import annotations

from .load import load_config
from .schema import AppConfig, EnvOverrides, PlaybackConfig

__all__ = ["AppConfig", "EnvOverrides", "PlaybackConfig", "load_config"]
