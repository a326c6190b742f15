"""
Timeline configuration settings.

Bounds for collaborator I/O and the in-memory template cache used by the
timeline service.

Dependencies: pydantic, pydantic_settings
System role: Timeline derivation tuning
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from studio.configs.base import BaseSettings


class TimelineSettings(BaseSettings):
    """Session timeline service configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="TIMELINE_",
        case_sensitive=False,
        extra="ignore",
    )

    storage_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        description="Upper bound for a single session/template/timeline storage call",
    )
    template_cache_ttl_seconds: float = Field(
        default=300.0,
        ge=0,
        description="Seconds a loaded timeline template stays cached (0 disables caching)",
    )
