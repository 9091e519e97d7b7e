from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "MedRecords API"
    app_version: str = "0.1.0"
    debug: bool = False

    host: str = "0.0.0.0"
    port: int = Field(default=8081, description="Inbound listen port. Set via PORT environment variable.")

    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_methods: list[str] = ["GET", "POST", "OPTIONS"]
    cors_allow_headers: list[str] = ["Content-Type", "X-Request-Id", "X-Requested-With"]

    # Query-execution service the INSERT statements are forwarded to
    query_service_url: str = "http://localhost:8001"
    query_service_path: str = "/query"
    query_service_timeout_seconds: float = Field(
        default=10.0,
        gt=0,
        description="Upper bound for the single outbound call to the query service.",
    )

    # Deployment variant: append RETURNING id and reply with the generated id
    return_record_id: bool = False

    log_level: str = "INFO"
    log_raw_bodies: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def query_service_endpoint(self) -> str:
        return f"{self.query_service_url.rstrip('/')}/{self.query_service_path.lstrip('/')}"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
