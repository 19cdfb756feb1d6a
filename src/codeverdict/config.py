"""Environment-based configuration."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings

_LEVEL_NAMES = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("logs")
    debug_mode: bool = False

    # API
    api_key: str = ""
    cors_origins: str = "http://localhost:3000"
    api_host: str = "127.0.0.1"
    api_port: int = 8000

    # Analysis
    max_code_chars: int = 200_000

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("log_level")
    @classmethod
    def _validate_level(cls, v: str) -> str:
        if v not in _LEVEL_NAMES:
            raise ValueError(
                f"log_level must be one of {', '.join(_LEVEL_NAMES)}"
            )
        return v

    @field_validator("max_code_chars")
    @classmethod
    def _validate_max_code_chars(cls, v: int) -> int:
        if v < 1:
            raise ValueError("max_code_chars must be positive")
        return v

    @property
    def effective_log_level(self) -> str:
        """DEBUG when ``debug_mode`` is on, else ``log_level``."""
        return "DEBUG" if self.debug_mode else self.log_level

    @property
    def cors_origin_list(self) -> list[str]:
        """CORS origins parsed from the comma-separated setting."""
        return [
            o.strip() for o in self.cors_origins.split(",") if o.strip()
        ]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }
