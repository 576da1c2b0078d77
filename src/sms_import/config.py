"""Library configuration using Pydantic settings."""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from ``SMS_IMPORT_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SMS_IMPORT_",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging
    log_level: str = "INFO"
    log_file: str | None = None
    log_json: bool = False

    # Parsing
    timezone: str | None = Field(
        default=None,
        description="IANA zone attached to parsed timestamps (naive when unset)",
    )

    # Categorization
    suggest_from_body: bool = False

    # Batch scans
    scan_workers: int = Field(default=4, ge=1)

    # Money
    currency: str = "VND"

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept any casing for the log level name."""
        return v.strip().upper()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str | None) -> str | None:
        """Reject zone names the tz database does not know."""
        if v is None or not v.strip():
            return None
        try:
            ZoneInfo(v.strip())
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone: {v}") from exc
        return v.strip()

    @property
    def tzinfo(self) -> ZoneInfo | None:
        """Zone for parsed timestamps, or None for naive local time."""
        return ZoneInfo(self.timezone) if self.timezone else None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
