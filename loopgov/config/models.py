"""Settings model for the loop governor."""

from __future__ import annotations

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class GovernorSettings(BaseSettings):
    """Pacing settings; environment variables use the ``LOOPGOV_`` prefix."""

    min_interval_sec: float = Field(default=10.0, gt=0.0, description="Minimum start-to-start cycle interval.")
    max_interval_sec: float = Field(default=3600.0, gt=0.0, description="Ceiling for computed intervals.")
    backoff_factor: float = Field(default=1.5, gt=1.0, description="Base multiplier on generic failures.")
    debug_logging: bool = Field(default=False)

    model_config = SettingsConfigDict(
        env_prefix="LOOPGOV_",
        extra="ignore",
        frozen=True,
    )

    @model_validator(mode="after")
    def _check_interval_bounds(self) -> GovernorSettings:
        if self.max_interval_sec < self.min_interval_sec:
            raise ValueError("max_interval_sec must be >= min_interval_sec")
        return self
