# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""PostgreSQL connection settings."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import U16_MAX, ConfigProvider
from .env_provider import resolve_provider

POSTGRES_HOST_ENV_KEY = "POSTGRES_HOST"
POSTGRES_PORT_ENV_KEY = "POSTGRES_PORT"
POSTGRES_USER_ENV_KEY = "POSTGRES_USER"
POSTGRES_PASSWORD_ENV_KEY = "POSTGRES_PASSWORD"
POSTGRES_DB_ENV_KEY = "POSTGRES_DB"
POSTGRES_SSL_MODE_ENV_KEY = "POSTGRES_SSL_MODE"
POSTGRES_CA_PATH_ENV_KEY = "POSTGRES_CA_PATH"


class PostgresSslMode(Enum):
    """Whether connections must use TLS."""

    DISABLED = "disabled"
    REQUIRED = "required"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "PostgresSslMode":
        """Case-sensitive: only the exact literal ``required`` enables TLS."""
        if value == "required":
            return cls.REQUIRED
        return cls.DISABLED


@dataclass
class PostgresConfig:
    """PostgreSQL connection parameters.

    The port is a 16-bit value; anything larger keeps the default.
    """

    host: str = "localhost"
    port: int = 0
    user: str = ""
    password: str = ""
    db: str = ""
    ssl_mode: PostgresSslMode = PostgresSslMode.DISABLED
    ca_path: str = ""

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "PostgresConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.host = provider.get_str(POSTGRES_HOST_ENV_KEY, cfg.host)
        cfg.port = provider.get_int(POSTGRES_PORT_ENV_KEY, cfg.port, maximum=U16_MAX)
        cfg.user = provider.get_str(POSTGRES_USER_ENV_KEY, cfg.user)
        cfg.password = provider.get_str(POSTGRES_PASSWORD_ENV_KEY, cfg.password)
        cfg.db = provider.get_str(POSTGRES_DB_ENV_KEY, cfg.db)
        ssl_mode = provider.get_optional(POSTGRES_SSL_MODE_ENV_KEY)
        if ssl_mode is not None:
            cfg.ssl_mode = PostgresSslMode.from_str(ssl_mode)
        cfg.ca_path = provider.get_str(POSTGRES_CA_PATH_ENV_KEY, cfg.ca_path)

        return cfg

    def address(self) -> str:
        return f"{self.host}:{self.port}"
