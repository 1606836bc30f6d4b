# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""InfluxDB settings."""

from dataclasses import dataclass
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider

INFLUX_HOST_ENV_KEY = "INFLUX_HOST"
INFLUX_PORT_ENV_KEY = "INFLUX_PORT"
INFLUX_BUCKET_ENV_KEY = "INFLUX_BUCKET"
INFLUX_TOKEN_ENV_KEY = "INFLUX_TOKEN"


@dataclass
class InfluxConfig:
    """InfluxDB server, bucket and token."""

    host: str = "http://localhost"
    port: int = 8086
    bucket: str = "default"
    token: str = "token"

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "InfluxConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.host = provider.get_str(INFLUX_HOST_ENV_KEY, cfg.host)
        cfg.port = provider.get_int(INFLUX_PORT_ENV_KEY, cfg.port)
        cfg.bucket = provider.get_str(INFLUX_BUCKET_ENV_KEY, cfg.bucket)
        cfg.token = provider.get_str(INFLUX_TOKEN_ENV_KEY, cfg.token)

        return cfg

    def address(self) -> str:
        """Server address, e.g. ``http://localhost:8086``."""
        return f"{self.host}:{self.port}"
