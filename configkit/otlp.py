# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""OpenTelemetry exporter settings shared by metrics and traces."""

from dataclasses import dataclass
from datetime import timedelta
from enum import Enum
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider

OTLP_EXPORTER_TYPE_ENV_KEY = "OTLP_EXPORTER_TYPE"
OTLP_EXPORTER_ENDPOINT_ENV_KEY = "OTLP_EXPORTER_ENDPOINT"
OTLP_ACCESS_KEY_ENV_KEY = "OTLP_ACCESS_KEY"
OTLP_EXPORTER_TIMEOUT_ENV_KEY = "OTLP_EXPORTER_TIMEOUT"
OTLP_EXPORTER_INTERVAL_ENV_KEY = "OTLP_EXPORTER_INTERVAL"
OTLP_EXPORTER_RATE_BASE_ENV_KEY = "OTLP_EXPORTER_RATE_BASE"
OTLP_METRIC_EXPORTER_RATE_BASE_ENV_KEY = "OTLP_METRIC_EXPORTER_RATE_BASE"
OTLP_TRACE_EXPORTER_RATE_BASE_ENV_KEY = "OTLP_TRACE_EXPORTER_RATE_BASE"
OTLP_METRICS_ENABLED_ENV_KEY = "OTLP_METRICS_ENABLED"
OTLP_TRACES_ENABLED_ENV_KEY = "OTLP_TRACES_ENABLED"

DEFAULT_RATE_BASE = 0.8


class OTLPExporterType(Enum):
    """Where telemetry is exported."""

    OTLP = "otlp"
    STDOUT = "stdout"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "OTLPExporterType":
        if value is not None and value.lower() == "otlp":
            return cls.OTLP
        return cls.STDOUT


@dataclass
class OTLPConfig:
    """OpenTelemetry exporter settings.

    Exporting is off unless ``metrics_enabled`` or ``traces_enabled`` is
    switched on explicitly; populating the endpoint alone enables nothing.
    Rate bases are sampling ratios, conventionally in [0, 1] but not checked.

    Attributes:
        exporter_type: otlp or stdout (OTLP_EXPORTER_TYPE)
        endpoint: Collector endpoint (OTLP_EXPORTER_ENDPOINT)
        access_key: Collector auth token (OTLP_ACCESS_KEY)
        exporter_timeout: Export timeout, whole seconds (OTLP_EXPORTER_TIMEOUT)
        exporter_interval: Export interval, whole seconds (OTLP_EXPORTER_INTERVAL)
        exporter_rate_base: Base sampling rate (OTLP_EXPORTER_RATE_BASE)
        metric_exporter_rate_base: (OTLP_METRIC_EXPORTER_RATE_BASE)
        trace_exporter_rate_base: (OTLP_TRACE_EXPORTER_RATE_BASE)
        metrics_enabled: (OTLP_METRICS_ENABLED)
        traces_enabled: (OTLP_TRACES_ENABLED)
    """

    exporter_type: OTLPExporterType = OTLPExporterType.STDOUT
    endpoint: str = "http://localhost:4317"
    access_key: str = "token"
    exporter_timeout: timedelta = timedelta(seconds=60)
    exporter_interval: timedelta = timedelta(seconds=60)
    exporter_rate_base: float = DEFAULT_RATE_BASE
    metric_exporter_rate_base: float = DEFAULT_RATE_BASE
    trace_exporter_rate_base: float = DEFAULT_RATE_BASE
    metrics_enabled: bool = False
    traces_enabled: bool = False

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "OTLPConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.exporter_type = OTLPExporterType.from_str(
            provider.get_optional(OTLP_EXPORTER_TYPE_ENV_KEY)
        )
        cfg.endpoint = provider.get_str(OTLP_EXPORTER_ENDPOINT_ENV_KEY, cfg.endpoint)
        cfg.access_key = provider.get_str(OTLP_ACCESS_KEY_ENV_KEY, cfg.access_key)
        cfg.exporter_timeout = provider.get_duration(
            OTLP_EXPORTER_TIMEOUT_ENV_KEY, cfg.exporter_timeout
        )
        cfg.exporter_interval = provider.get_duration(
            OTLP_EXPORTER_INTERVAL_ENV_KEY, cfg.exporter_interval
        )
        cfg.exporter_rate_base = provider.get_float(
            OTLP_EXPORTER_RATE_BASE_ENV_KEY, cfg.exporter_rate_base
        )
        cfg.metric_exporter_rate_base = provider.get_float(
            OTLP_METRIC_EXPORTER_RATE_BASE_ENV_KEY, cfg.metric_exporter_rate_base
        )
        cfg.trace_exporter_rate_base = provider.get_float(
            OTLP_TRACE_EXPORTER_RATE_BASE_ENV_KEY, cfg.trace_exporter_rate_base
        )
        cfg.metrics_enabled = provider.get_bool(OTLP_METRICS_ENABLED_ENV_KEY, cfg.metrics_enabled)
        cfg.traces_enabled = provider.get_bool(OTLP_TRACES_ENABLED_ENV_KEY, cfg.traces_enabled)

        return cfg
