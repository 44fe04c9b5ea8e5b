"""Pydantic configuration models with validation."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from streamgate.domain.entities.playback import DEFAULT_MAX_BITRATE_KBPS, BitrateTier

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class TierConfig(BaseModel):
    """One row of the bitrate tier table."""

    label: str
    bitrate_kbps: int
    resolution: str


def _default_tiers() -> list[TierConfig]:
    return [
        TierConfig(label="480p", bitrate_kbps=800, resolution="854x480"),
        TierConfig(label="720p", bitrate_kbps=1500, resolution="1280x720"),
        TierConfig(label="1080p", bitrate_kbps=2500, resolution="1920x1080"),
        TierConfig(label="1080p+", bitrate_kbps=4000, resolution="1920x1080"),
    ]


class PlaybackConfig(BaseModel):
    """Delivery hosts, path classification rules and the bitrate tier table.

    All values configurable via YAML (playback section) or ENV vars.
    """

    dev_host: str = Field(
        default="stmv1.udicast.com",
        description="Delivery-server host used when serving a dev hostname.",
    )
    prod_host: str = Field(
        default="samhost.wcore.com.br",
        description="Delivery-server host used for every other hostname.",
    )
    dev_hostnames: list[str] = Field(
        default=["localhost", "127.0.0.1"],
        description="Hostnames treated as local/dev environments.",
    )
    delivery_port: int = Field(
        default=1443,
        description="Port of the delivery server's play.php endpoint.",
    )

    video_extension: str = Field(
        default=".mp4",
        description="Canonical container extension enforced on rewritten files.",
    )
    content_root_aliases: list[str] = Field(
        default=["content", "streaming"],
        description="Leading path segment stripped before splitting a storage path.",
    )
    embed_markers: list[str] = Field(
        default=["play.php", "/api/players/iframe"],
        description="Substrings marking a path as an already-built embed URL.",
    )

    iframe_path: str = Field(
        default="/api/players/iframe",
        description="Route of the generic iframe player (fallback mode).",
    )
    live_stream_suffix: str = Field(
        default="_live",
        description="Suffix appended to the viewer login for the live stream name.",
    )

    default_max_bitrate_kbps: int = Field(
        default=DEFAULT_MAX_BITRATE_KBPS,
        description="Entitlement assumed when the auth provider supplies none.",
    )
    tiers: list[TierConfig] = Field(
        default_factory=_default_tiers,
        description="Quality tiers, strictly ascending by bitrate.",
    )

    embed_width: int = Field(default=640, description="Embed iframe width (px).")
    embed_height: int = Field(default=360, description="Embed iframe height (px).")

    @field_validator("video_extension")
    @classmethod
    def _validate_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError("video_extension must look like '.mp4'")
        return v

    @field_validator("delivery_port")
    @classmethod
    def _validate_port(cls, v: int) -> int:
        if not 1 <= v <= 65535:
            raise ValueError("delivery_port must be within 1..65535")
        return v

    @field_validator("tiers")
    @classmethod
    def _validate_tiers(cls, v: list[TierConfig]) -> list[TierConfig]:
        previous = 0
        for tier in v:
            if tier.bitrate_kbps <= previous:
                raise ValueError(
                    "tiers must have positive, strictly increasing bitrate_kbps"
                )
            previous = tier.bitrate_kbps
        labels = [t.label for t in v]
        if len(set(labels)) != len(labels):
            raise ValueError("tier labels must be unique")
        return v

    def bitrate_tiers(self) -> list[BitrateTier]:
        """Tier table as domain value objects."""
        return [
            BitrateTier(
                label=t.label, bitrate_kbps=t.bitrate_kbps, resolution=t.resolution
            )
            for t in self.tiers
        ]


class AppConfig(BaseModel):
    """
    Canonical application configuration (validated, final).

    Note:
    - YAML is expected to be sectioned (http/logging/logos/playback).
    - Environment variables are handled by EnvOverrides(BaseSettings) to allow strict
      precedence control (defaults < YAML < ENV < CLI) in load.py.
    """

    # General
    app_name: str = Field(default="streamgate", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # HTTP client for collaborators (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=10.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="Timeout in seconds for collaborator requests.",
    )
    http_user_agent: str = Field(
        default="streamgate/0.1.0",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Logo service (YAML section: logos.*)
    logo_service_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "logo_service_url",
            AliasPath("logos", "service_url"),
        ),
        description="Base URL of the logo service. None = watermark logos disabled.",
    )

    # Playback resolution (YAML section: playback.*)
    playback: PlaybackConfig = Field(default_factory=PlaybackConfig)

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "user_agent": self.http_user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
            "logos": {"service_url": self.logo_service_url},
            "playback": self.playback.model_dump(),
        }


class EnvOverrides(BaseSettings):
    """
    Environment-variable overrides (all optional).

    load.py creates EnvOverrides() to read STREAMGATE_* variables, converts
    them to a dict of set values and merges that over YAML/defaults before
    AppConfig is validated.

    Supported env var examples (flat, explicit):
    - STREAMGATE_ENVIRONMENT
    - STREAMGATE_LOG_LEVEL
    - STREAMGATE_LOGO_SERVICE_URL
    - STREAMGATE_DEV_HOST / STREAMGATE_PROD_HOST
    - STREAMGATE_DEFAULT_MAX_BITRATE_KBPS
    """

    model_config = SettingsConfigDict(
        env_prefix="STREAMGATE_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    logo_service_url: Optional[str] = None

    dev_host: Optional[str] = None
    prod_host: Optional[str] = None
    default_max_bitrate_kbps: Optional[int] = None

    def to_update_dict(self) -> dict[str, Any]:
        """
        Return only values that were actually provided (non-None), for merging.
        """
        return self.model_dump(exclude_none=True)
