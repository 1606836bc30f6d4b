# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Distributed tracing export settings."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider
from .otlp import (
    DEFAULT_RATE_BASE,
    OTLP_ACCESS_KEY_ENV_KEY,
    OTLP_EXPORTER_ENDPOINT_ENV_KEY,
    OTLP_EXPORTER_INTERVAL_ENV_KEY,
    OTLP_EXPORTER_TIMEOUT_ENV_KEY,
    OTLP_EXPORTER_TYPE_ENV_KEY,
    OTLP_TRACE_EXPORTER_RATE_BASE_ENV_KEY,
    OTLP_TRACES_ENABLED_ENV_KEY,
)


class TraceExporterKind(Enum):
    """Tracing backend."""

    STDOUT = "stdout"
    OTLP_GRPC = "otlp-grpc"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "TraceExporterKind":
        if value is not None and value.lower() in ("otlp", "otlp-grpc", "grpc"):
            return cls.OTLP_GRPC
        return cls.STDOUT


@dataclass
class TraceConfig:
    """Trace collection and export."""

    enable: bool = False
    exporter: TraceExporterKind = TraceExporterKind.STDOUT
    host: str = ""
    header_access_key: str = ""
    access_key: str = ""
    service_type: str = ""
    export_timeout: int = 30
    export_interval: int = 60
    export_rate_base: float = DEFAULT_RATE_BASE

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "TraceConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.enable = provider.get_bool(OTLP_TRACES_ENABLED_ENV_KEY, cfg.enable)
        exporter = provider.get_optional(OTLP_EXPORTER_TYPE_ENV_KEY)
        if exporter is not None:
            cfg.exporter = TraceExporterKind.from_str(exporter)
        cfg.host = provider.get_str(OTLP_EXPORTER_ENDPOINT_ENV_KEY, cfg.host)
        cfg.access_key = provider.get_str(OTLP_ACCESS_KEY_ENV_KEY, cfg.access_key)
        cfg.export_timeout = provider.get_int(OTLP_EXPORTER_TIMEOUT_ENV_KEY, cfg.export_timeout)
        cfg.export_interval = provider.get_int(OTLP_EXPORTER_INTERVAL_ENV_KEY, cfg.export_interval)
        cfg.export_rate_base = provider.get_float(
            OTLP_TRACE_EXPORTER_RATE_BASE_ENV_KEY, cfg.export_rate_base
        )

        return cfg
