"""Application configuration via pydantic-settings."""

import os
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root (this file lives at backend/gameserver/config.py)
_PROJECT_DIR = Path(__file__).resolve().parent.parent.parent

# The game build is checked in under frontend/
_DEFAULT_STATIC_DIR = _PROJECT_DIR / "frontend"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Network
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=3000, ge=0, le=65535)

    # Static root and the page "/" redirects to
    STATIC_DIR: str = str(_DEFAULT_STATIC_DIR)
    ENTRY_PATH: str = "/game/main.html"

    LOG_LEVEL: str = "info"

    @field_validator("ENTRY_PATH")
    @classmethod
    def _entry_path_is_absolute(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("ENTRY_PATH must start with '/'")
        return value

    @field_validator("LOG_LEVEL")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        value = value.lower()
        if value not in ("critical", "error", "warning", "info", "debug", "trace"):
            raise ValueError(f"Unknown log level: {value}")
        return value

    @property
    def static_path(self) -> Path:
        return Path(self.STATIC_DIR)

    @property
    def entry_file(self) -> Path:
        """Filesystem location of the entry page under the static root."""
        return self.static_path / self.ENTRY_PATH.lstrip("/")


def _build_settings(**overrides) -> Settings:
    """Build settings, resolving a relative STATIC_DIR against the cwd.

    Keyword overrides (from the command line) win over the environment.
    """
    s = Settings(
        _env_file=str(_PROJECT_DIR / ".env"),
        _env_file_encoding="utf-8",
        **{k: v for k, v in overrides.items() if v is not None},
    )
    if not os.path.isabs(s.STATIC_DIR):
        s.STATIC_DIR = str(Path(s.STATIC_DIR).resolve())
    return s

