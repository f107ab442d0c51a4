"""Mini README: Centralised configuration for pocketledger.

Structure:
    * LedgerSettings - pydantic-settings model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values come from ``POCKETLEDGER_*`` environment variables or a local
    ``.env`` file. ``data_directory`` is expanded and created on load so the
    JSON backend can write its document straight away.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .ledger.models import HISTORY_LIMIT


class LedgerSettings(BaseSettings):
    """Runtime configuration for the ledger, its storage and its interfaces."""

    model_config = SettingsConfigDict(
        env_prefix="POCKETLEDGER_",
        env_file=".env",
        case_sensitive=False,
    )

    environment: str = Field(
        "development",
        description="Environment label shown by the CLI and the web service.",
    )
    data_directory: Path = Field(
        Path("data"),
        description="Directory holding the persisted ledger document.",
    )
    storage_backend: str = Field(
        "json",
        description="Identifier of the registered key-value backend to persist into.",
    )
    store_filename: str = Field(
        "ledger.json",
        description="File name of the ledger document inside ``data_directory``.",
    )
    history_limit: int = Field(
        HISTORY_LIMIT,
        description="Number of most recent transactions retained in the history.",
        ge=1,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level used by the CLI and web entry points.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the web service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the web service exposes.",
        ge=1,
        le=65535,
    )

    @field_validator("data_directory", mode="before")
    @classmethod
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure configured paths expand user directories and exist."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def store_path(self) -> Path:
        """Full path of the ledger document for file based backends."""

        return self.data_directory / self.store_filename


@lru_cache()
def get_settings() -> LedgerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerSettings()
