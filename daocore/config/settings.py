"""
Runtime configuration read from the environment.

A `.env` file in the working directory is loaded first (python-dotenv); real
environment variables take precedence over it.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    status_api_base_uri: str = "https://api.twitter.com"
    http_timeout_seconds: float = 10.0
    database_url: str = "sqlite:///quotes.db"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        if load_env_file:
            load_dotenv()
        defaults = cls()
        return cls(
            status_api_base_uri=os.environ.get("STATUS_API_BASE_URI", defaults.status_api_base_uri),
            http_timeout_seconds=float(
                os.environ.get("HTTP_TIMEOUT_SECONDS", defaults.http_timeout_seconds)
            ),
            database_url=os.environ.get("DATABASE_URL", defaults.database_url),
            log_level=os.environ.get("LOG_LEVEL", defaults.log_level).upper(),
        )
