# core/settings/app.py
from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.infrastructure.database.config import DatabaseSettings
from core.settings.sections.service import ServiceSettings


class AppSettings(BaseModel):
    """
    Central application settings aggregator.
    Sections are loaded when get_app_settings() is first called,
    not at import time.
    """

    model_config = ConfigDict(extra="ignore")

    service: ServiceSettings
    database: DatabaseSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    """Return cached global settings for the entire app."""
    return AppSettings(
        service=ServiceSettings(),
        database=DatabaseSettings(),
    )
