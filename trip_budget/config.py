"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Hosted trip database (PostgREST-style REST API)
    trip_store_url: str = "http://localhost:54321/rest/v1"
    trip_store_api_key: str = ""

    # Service
    service_name: str = "trip-budget"
    log_level: str = "INFO"

    # HTTP Client
    http_timeout_seconds: float = 5.0
    store_write_max_retries: int = 5
    store_write_backoff_base: float = 1.0  # Exponential backoff base in seconds

    # Funding planner
    savings_slider_max: float = 2000.0  # Upper bound of the monthly per-person slider


settings = Settings()
