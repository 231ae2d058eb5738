"""
Application Settings.

All configuration comes from .env / environment variables and is read
once at process start.
"""

from functools import lru_cache
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Settings loaded from environment variables."""

    # --- App ---
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    log_level: str = "INFO"

    # --- Verification provider (Jumio Netverify v4) ---
    jumio_token: str = ""
    jumio_secret: str = ""
    jumio_base_url: str = "https://netverify.com/api/v4"
    jumio_user_agent: str = "identity-reconciliation-relay"
    # Required by the provider; outcome is reported through the widget callbacks
    jumio_success_url: str = "https://example.com/success"
    jumio_error_url: str = "https://example.com/error"
    default_user_reference: str = "guest_user"
    request_timeout: float | None = None

    # --- Reconciliation ---
    name_threshold: float = 85.0
    address_threshold: float = 70.0
    city_threshold: float = 80.0
    accepted_documents: list[tuple[str, str]] = [("DRIVING_LICENSE", "GBR")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


@lru_cache
def get_settings() -> Settings:
    """Settings singleton."""
    return Settings()
