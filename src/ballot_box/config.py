"""Settings for the HTTP front end and CLI, read from the environment.

Every variable is prefixed with ``BALLOT_`` (``BALLOT_PORT=8080``) and may
also come from a ``.env`` file. ``get_settings()`` is cached per process.
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BALLOT_", env_file=".env", case_sensitive=False
    )

    # Server
    host: str = "127.0.0.1"
    port: int = 5000
    caller_header: str = "X-Caller-Identity"

    # CLI
    server_url: str = "http://127.0.0.1:5000"
    request_timeout: float = 2.0

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("server_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("log_format")
    @classmethod
    def known_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
