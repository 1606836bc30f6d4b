# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""SQLite database settings."""

from dataclasses import dataclass
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider

SQLITE_FILE_NAME_ENV_KEY = "SQLITE_FILE_NAME"


@dataclass
class SqliteConfig:
    """Path of the SQLite database file (SQLITE_FILE_NAME)."""

    file: str = "local.db"

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "SqliteConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.file = provider.get_str(SQLITE_FILE_NAME_ENV_KEY, cfg.file)

        return cfg
