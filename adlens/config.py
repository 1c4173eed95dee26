"""AdLens — Central Configuration via Pydantic Settings."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    # ── App ──
    log_level: str = "INFO"
    service_version: str = "1.0.0"

    # ── Platforms ──
    meta_platform_label: str = "Meta Ads"
    google_platform_label: str = "Google Ads"

    # ── Chart palette ──
    meta_color: str = "#1877F2"
    google_color: str = "#4285F4"
    neutral_color: str = "#9CA3AF"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
