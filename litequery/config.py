"""
Central configuration loader.
Reads from environment variables (and a repo-root .env); validated by pydantic.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


_REPO_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    """Settings for locating and opening database files."""

    model_config = SettingsConfigDict(
        env_prefix="LITEQUERY_",
        env_file=_REPO_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Storage root every database file name is resolved against
    data_root: Path = Field(default=_REPO_ROOT / "data")

    # Connection flags
    foreign_keys: bool = True
    timeout: float = Field(default=5.0, ge=0)

    # Allow file names such as "../x.db" to resolve outside data_root
    allow_path_escape: bool = False

    log_level: str = "INFO"


def get_settings(**overrides) -> Settings:
    """Build settings from the current environment; nothing is cached."""
    return Settings(**overrides)


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------
def get_repo_root() -> Path:
    return _REPO_ROOT


def get_data_root() -> Path:
    return get_settings().data_root
