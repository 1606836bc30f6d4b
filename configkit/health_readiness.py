# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Health and readiness probe server settings."""

from dataclasses import dataclass
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider

HEALTH_READINESS_PORT_ENV_KEY = "HEALTH_READINESS_PORT"
ENABLE_HEALTH_READINESS_ENV_KEY = "ENABLE_HEALTH_READINESS"


@dataclass
class HealthReadinessConfig:
    """Port and on/off switch for the probe endpoint."""

    port: int = 8888
    enable: bool = False

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "HealthReadinessConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.port = provider.get_int(HEALTH_READINESS_PORT_ENV_KEY, cfg.port)
        cfg.enable = provider.get_bool(ENABLE_HEALTH_READINESS_ENV_KEY, cfg.enable)

        return cfg

    def address(self) -> str:
        """Probe server bind address; always listens on all interfaces."""
        return f"0.0.0.0:{self.port}"
