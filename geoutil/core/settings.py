from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOUTIL_",
        case_sensitive=False,
    )

    # 8 chars is roughly 38m x 19m, half a city block.
    default_precision: int = Field(default=8, ge=1)

    # Radius search
    radius_min_points: int = Field(default=1, ge=1, le=5)
    # Per-direction cap, applied on top of one lap of the axis at the hash precision.
    radius_max_steps: int = Field(default=4096, ge=1)


@lru_cache
def get_settings() -> Settings:
    return Settings()
