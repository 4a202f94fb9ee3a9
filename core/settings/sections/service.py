from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """
    HTTP service settings.
    Loaded automatically from .env with prefix ORDERS_*
    """

    app_name: str = "Order Service"
    environment: str = "development"
    log_level: str = "INFO"

    # Insert the lifecycle statuses on startup when missing
    seed_reference_data: bool = True

    cors_origins: List[str] = Field(
        default_factory=lambda: ["http://localhost:3000", "http://127.0.0.1:3000"]
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ORDERS_",
        extra="ignore",
    )
