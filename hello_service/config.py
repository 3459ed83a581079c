from __future__ import annotations

import os
from typing import Literal

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Process settings, read from the environment at startup."""

    app_env: Literal["dev", "staging", "production"] = "dev"
    host: str = "0.0.0.0"
    port: int = Field(default=8000, ge=1, le=65535)
    log_level: Literal["critical", "error", "warning", "info", "debug"] = "info"

    @field_validator("app_env", "log_level", mode="before")
    @classmethod
    def _normalize(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().lower()
        return value


def get_settings() -> Settings:
    return Settings(
        app_env=os.getenv("APP_ENV", "dev"),
        host=os.getenv("HOST", "0.0.0.0"),
        port=os.getenv("PORT", "8000"),
        log_level=os.getenv("LOG_LEVEL", "info"),
    )
