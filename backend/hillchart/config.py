"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    hillchart_env: str = "development"
    hillchart_log_level: str = "info"

    # Server
    hillchart_host: str = "0.0.0.0"
    hillchart_port: int = 3000

    # CORS
    cors_origins: list[str] = ["*"]

    # Rendering
    pixel_density: int = 2
    cache_max_age: int = 86400

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
