from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # === Application ===
    APP_NAME: str = "Workflow Dashboard"
    APP_VERSION: str = "1.0.0"
    API_VERSION: str = "v1"
    LOG_LEVEL: str = "INFO"

    # === Catalog ===
    CATALOG_FILLER_COUNT: int = 45
    CATALOG_DEFAULT_LIMIT: int = 25
    CATALOG_MAX_LIMIT: int = 1000
    # "unfiltered" reports the catalog size before filters, "filtered" after
    CATALOG_TOTAL_COUNT_MODE: str = "unfiltered"

    # === Randomness ===
    # Unset means a fresh, unseeded source per request
    RANDOM_SEED: int | None = None

    # === HTTP transport ===
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]
    GZIP_MINIMUM_SIZE: int = 1024

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_catalog_limits(self) -> "Settings":
        """The default page size must fit under the maximum page size."""
        if self.CATALOG_DEFAULT_LIMIT > self.CATALOG_MAX_LIMIT:
            raise ValueError("CATALOG_DEFAULT_LIMIT must not exceed CATALOG_MAX_LIMIT")
        return self

    @field_validator("CATALOG_FILLER_COUNT")
    @classmethod
    def validate_filler_count(cls, v: int) -> int:
        if v < 0:
            raise ValueError("Catalog filler count must not be negative")
        return v

    @field_validator("CATALOG_DEFAULT_LIMIT")
    @classmethod
    def validate_default_limit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("Default page limit must be positive")
        return v

    @field_validator("CATALOG_TOTAL_COUNT_MODE")
    @classmethod
    def validate_total_count_mode(cls, v: str) -> str:
        v = v.lower()
        if v not in ("unfiltered", "filtered"):
            raise ValueError("CATALOG_TOTAL_COUNT_MODE must be 'unfiltered' or 'filtered'")
        return v


try:
    settings = Settings()
except Exception as e:
    import sys

    print(f"CRITICAL: Configuration validation failed: {e}")
    sys.exit(1)
