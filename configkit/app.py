# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Core application settings."""

from dataclasses import dataclass
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider
from .environment import Environment
from .secrets_manager import SecretsManagerKind

APP_NAME_ENV_KEY = "APP_NAME"
APP_NAMESPACE_ENV_KEY = "NAMESPACE"
SECRET_MANAGER_ENV_KEY = "SECRET_MANAGER"
SECRET_KEY_ENV_KEY = "SECRET_KEY"
HOST_NAME_ENV_KEY = "HOST_NAME"
APP_PORT_ENV_KEY = "APP_PORT"
LOG_LEVEL_ENV_KEY = "LOG_LEVEL"
ENABLE_EXTERNAL_CREATES_LOGGING_ENV_KEY = "ENABLE_EXTERNAL_CREATES_LOGGING"


@dataclass
class AppConfig:
    """Identity and listen address of the application.

    Attributes:
        name: Application name (APP_NAME)
        env: Deployment environment (RUST_ENV)
        namespace: Deployment namespace (NAMESPACE)
        secret_manager: Secrets manager to use (SECRET_MANAGER)
        secret_key: Key of the application's secret bundle (SECRET_KEY)
        host: Bind host (HOST_NAME)
        port: Bind port (APP_PORT)
        log_level: Log level name (LOG_LEVEL)
        enable_external_creates_logging: Let third-party libraries log
            (ENABLE_EXTERNAL_CREATES_LOGGING)
    """

    name: str = "default-name"
    env: Environment = Environment.LOCAL
    namespace: str = "local"
    secret_manager: SecretsManagerKind = SecretsManagerKind.NONE
    secret_key: str = "context"
    host: str = "0.0.0.0"
    port: int = 31033
    log_level: str = "debug"
    enable_external_creates_logging: bool = False

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "AppConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.name = provider.get_str(APP_NAME_ENV_KEY, cfg.name)
        cfg.env = Environment.from_env(provider)
        cfg.namespace = provider.get_str(APP_NAMESPACE_ENV_KEY, cfg.namespace)
        cfg.secret_manager = SecretsManagerKind.from_str(
            provider.get_optional(SECRET_MANAGER_ENV_KEY)
        )
        cfg.secret_key = provider.get_str(SECRET_KEY_ENV_KEY, cfg.secret_key)
        cfg.host = provider.get_str(HOST_NAME_ENV_KEY, cfg.host)
        cfg.port = provider.get_int(APP_PORT_ENV_KEY, cfg.port)
        cfg.log_level = provider.get_str(LOG_LEVEL_ENV_KEY, cfg.log_level)
        cfg.enable_external_creates_logging = provider.get_bool(
            ENABLE_EXTERNAL_CREATES_LOGGING_ENV_KEY, cfg.enable_external_creates_logging
        )

        return cfg

    def address(self) -> str:
        """Bind address in ``host:port`` form, e.g. ``0.0.0.0:31033``."""
        return f"{self.host}:{self.port}"
