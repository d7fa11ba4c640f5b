"""Pydantic v2 configuration schema with strict validation."""

from typing import Literal

from pydantic import BaseModel, Field

from skylens.ingest.weather_client import DEFAULT_USER_AGENT, WEATHER_BASE_URL

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class ApiConfig(BaseModel):
    model_config = {"extra": "forbid"}

    base_url: str = WEATHER_BASE_URL
    timeout_seconds: float = Field(default=10.0, gt=0.0)
    user_agent: str = DEFAULT_USER_AGENT


class ContactConfig(BaseModel):
    model_config = {"extra": "forbid"}

    # No real backend; submission is a fixed artificial delay
    submission_delay_seconds: float = Field(default=1.5, ge=0.0)


class StorageConfig(BaseModel):
    model_config = {"extra": "forbid"}

    db_path: str = "data/skylens.db"


class AppConfig(BaseModel):
    model_config = {"extra": "forbid"}

    api: ApiConfig = ApiConfig()
    contact: ContactConfig = ContactConfig()
    storage: StorageConfig = StorageConfig()
    log_level: LogLevel = "WARNING"
