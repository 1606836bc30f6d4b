# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Application metrics export settings."""

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
    OTLP_METRIC_EXPORTER_RATE_BASE_ENV_KEY,
    OTLP_METRICS_ENABLED_ENV_KEY,
)


class MetricExporterKind(Enum):
    """Metrics backend."""

    STDOUT = "stdout"
    OTLP_GRPC = "otlp-grpc"
    PROMETHEUS = "prometheus"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "MetricExporterKind":
        """Case-insensitive, with aliases; unknown names select ``STDOUT``."""
        if value is None:
            return cls.STDOUT
        lowered = value.lower()
        if lowered in ("otlp", "otlp-grpc", "grpc"):
            return cls.OTLP_GRPC
        if lowered in ("prom", "prometheus"):
            return cls.PROMETHEUS
        return cls.STDOUT


@dataclass
class MetricConfig:
    """Metrics collection and export.

    The host, access key and timing fields only apply to the OTLP exporter.
    Timeout and interval are whole seconds.
    """

    enable: bool = False
    exporter: MetricExporterKind = MetricExporterKind.STDOUT
    host: str = ""
    header_access_key: str = ""
    access_key: str = ""
    service_type: str = ""
    export_timeout: int = 30
    export_interval: int = 60
    export_rate_base: float = DEFAULT_RATE_BASE

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "MetricConfig":
        """Build metrics settings from the shared ``OTLP_*`` variables."""
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.enable = provider.get_bool(OTLP_METRICS_ENABLED_ENV_KEY, cfg.enable)
        exporter = provider.get_optional(OTLP_EXPORTER_TYPE_ENV_KEY)
        if exporter is not None:
            cfg.exporter = MetricExporterKind.from_str(exporter)
        cfg.host = provider.get_str(OTLP_EXPORTER_ENDPOINT_ENV_KEY, cfg.host)
        cfg.access_key = provider.get_str(OTLP_ACCESS_KEY_ENV_KEY, cfg.access_key)
        cfg.export_timeout = provider.get_int(OTLP_EXPORTER_TIMEOUT_ENV_KEY, cfg.export_timeout)
        cfg.export_interval = provider.get_int(OTLP_EXPORTER_INTERVAL_ENV_KEY, cfg.export_interval)
        cfg.export_rate_base = provider.get_float(
            OTLP_METRIC_EXPORTER_RATE_BASE_ENV_KEY, cfg.export_rate_base
        )

        return cfg
