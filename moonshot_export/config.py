"""Runtime configuration for the exporter."""

import logging
import os
from dataclasses import dataclass

DEFAULT_DATABASE_URL = "sqlite:///./moonshot.db"
DEFAULT_BASE_URL = "https://api.moonshot.cn"
DEFAULT_LOG_LEVEL = "WARNING"

ENV_DATABASE_URL = "MOONSHOT_EXPORT_DATABASE_URL"
ENV_BASE_URL = "MOONSHOT_EXPORT_BASE_URL"
ENV_LOG_LEVEL = "MOONSHOT_EXPORT_LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    """Exporter settings, resolved from the environment."""

    database_url: str = DEFAULT_DATABASE_URL
    base_url: str = DEFAULT_BASE_URL
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        log_level = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()
        # getLevelName returns an int only for registered level names
        if not isinstance(logging.getLevelName(log_level), int):
            log_level = DEFAULT_LOG_LEVEL
        return cls(
            database_url=os.environ.get(ENV_DATABASE_URL, DEFAULT_DATABASE_URL),
            base_url=os.environ.get(ENV_BASE_URL, DEFAULT_BASE_URL),
            log_level=log_level,
        )
