"""Runtime settings read from the environment."""

from __future__ import annotations
import logging
import os
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "STEELBUILDER_"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(ENV_PREFIX + name, default)


class Settings(BaseModel):
    log_level: str = "INFO"
    cache_size: int = Field(default=256, ge=1)
    host: str = "0.0.0.0"
    port: int = 8000
    cors_origins: list[str] = ["*"]

    @classmethod
    def from_env(cls) -> Settings:
        origins = _get_env("CORS_ORIGINS", "*") or "*"
        return cls(
            log_level=(_get_env("LOG_LEVEL", "INFO") or "INFO").upper(),
            cache_size=int(_get_env("CACHE_SIZE", "256") or 256),
            host=_get_env("HOST", "0.0.0.0") or "0.0.0.0",
            port=int(_get_env("PORT", "8000") or 8000),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()],
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()


def configure_logging(settings: Settings | None = None) -> None:
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)
