# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for OTLP, metrics and trace export settings."""

from datetime import timedelta

from configkit import (
    Configs,
    MetricConfig,
    MetricExporterKind,
    OTLPConfig,
    OTLPExporterType,
    TraceConfig,
    TraceExporterKind,
)


class TestOTLPConfig:
    """Tests for OTLPConfig."""

    def test_defaults(self):
        cfg = OTLPConfig.from_env()

        assert cfg == OTLPConfig()
        assert cfg.exporter_type is OTLPExporterType.STDOUT
        assert cfg.endpoint == "http://localhost:4317"
        assert cfg.access_key == "token"
        assert cfg.exporter_timeout == timedelta(seconds=60)
        assert cfg.exporter_interval == timedelta(seconds=60)
        assert cfg.exporter_rate_base == 0.8
        assert cfg.metric_exporter_rate_base == 0.8
        assert cfg.trace_exporter_rate_base == 0.8
        assert cfg.metrics_enabled is False
        assert cfg.traces_enabled is False

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OTLP_EXPORTER_TYPE", "OTLP")
        monkeypatch.setenv("OTLP_EXPORTER_ENDPOINT", "http://collector:4317")
        monkeypatch.setenv("OTLP_EXPORTER_TIMEOUT", "10")
        monkeypatch.setenv("OTLP_EXPORTER_INTERVAL", "15")
        monkeypatch.setenv("OTLP_EXPORTER_RATE_BASE", "0.5")
        monkeypatch.setenv("OTLP_TRACE_EXPORTER_RATE_BASE", "0.1")
        monkeypatch.setenv("OTLP_METRICS_ENABLED", "true")

        cfg = OTLPConfig.from_env()

        assert cfg.exporter_type is OTLPExporterType.OTLP
        assert cfg.endpoint == "http://collector:4317"
        assert cfg.exporter_timeout == timedelta(seconds=10)
        assert cfg.exporter_interval == timedelta(seconds=15)
        assert cfg.exporter_rate_base == 0.5
        assert cfg.metric_exporter_rate_base == 0.8
        assert cfg.trace_exporter_rate_base == 0.1
        assert cfg.metrics_enabled is True
        assert cfg.traces_enabled is False

    def test_endpoint_alone_enables_nothing(self, monkeypatch):
        monkeypatch.setenv("OTLP_EXPORTER_ENDPOINT", "http://collector:4317")

        cfg = OTLPConfig.from_env()

        assert cfg.metrics_enabled is False
        assert cfg.traces_enabled is False

    def test_invalid_values_keep_defaults(self, monkeypatch):
        monkeypatch.setenv("OTLP_EXPORTER_TIMEOUT", "10s")
        monkeypatch.setenv("OTLP_EXPORTER_INTERVAL", str(10**14))
        monkeypatch.setenv("OTLP_EXPORTER_RATE_BASE", "half")
        monkeypatch.setenv("OTLP_METRICS_ENABLED", "TRUE")

        cfg = OTLPConfig.from_env()

        assert cfg.exporter_timeout == timedelta(seconds=60)
        assert cfg.exporter_interval == timedelta(seconds=60)
        assert cfg.exporter_rate_base == 0.8
        assert cfg.metrics_enabled is False

    def test_unknown_exporter_type_is_stdout(self):
        assert OTLPExporterType.from_str("jaeger") is OTLPExporterType.STDOUT
        assert OTLPExporterType.from_str(None) is OTLPExporterType.STDOUT


class TestMetricConfig:
    """Tests for MetricConfig."""

    def test_defaults(self):
        cfg = MetricConfig.from_env()

        assert cfg.enable is False
        assert cfg.exporter is MetricExporterKind.STDOUT
        assert cfg.export_timeout == 30
        assert cfg.export_interval == 60
        assert cfg.export_rate_base == 0.8

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OTLP_METRICS_ENABLED", "true")
        monkeypatch.setenv("OTLP_EXPORTER_TYPE", "otlp")
        monkeypatch.setenv("OTLP_EXPORTER_ENDPOINT", "http://collector:4317")
        monkeypatch.setenv("OTLP_ACCESS_KEY", "key")
        monkeypatch.setenv("OTLP_METRIC_EXPORTER_RATE_BASE", "0.25")

        cfg = MetricConfig.from_env()

        assert cfg.enable is True
        assert cfg.exporter is MetricExporterKind.OTLP_GRPC
        assert cfg.host == "http://collector:4317"
        assert cfg.access_key == "key"
        assert cfg.export_rate_base == 0.25

    def test_exporter_aliases(self):
        assert MetricExporterKind.from_str("Prometheus") is MetricExporterKind.PROMETHEUS
        assert MetricExporterKind.from_str("prom") is MetricExporterKind.PROMETHEUS
        assert MetricExporterKind.from_str("grpc") is MetricExporterKind.OTLP_GRPC
        assert MetricExporterKind.from_str("statsd") is MetricExporterKind.STDOUT


class TestTraceConfig:
    """Tests for TraceConfig."""

    def test_defaults(self):
        cfg = TraceConfig.from_env()

        assert cfg.enable is False
        assert cfg.exporter is TraceExporterKind.STDOUT
        assert cfg.export_rate_base == 0.8

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("OTLP_TRACES_ENABLED", "true")
        monkeypatch.setenv("OTLP_EXPORTER_TYPE", "otlp-grpc")
        monkeypatch.setenv("OTLP_EXPORTER_TIMEOUT", "5")
        monkeypatch.setenv("OTLP_TRACE_EXPORTER_RATE_BASE", "1.0")

        cfg = TraceConfig.from_env()

        assert cfg.enable is True
        assert cfg.exporter is TraceExporterKind.OTLP_GRPC
        assert cfg.export_timeout == 5
        assert cfg.export_rate_base == 1.0


class TestOversizedDurations:
    """Tests for durations beyond what timedelta can hold."""

    def test_aggregate_keeps_default_interval(self, monkeypatch):
        monkeypatch.setenv("OTLP_EXPORTER_INTERVAL", str(2**64 - 1))

        configs = Configs.from_env()

        assert configs.otlp.exporter_interval == timedelta(seconds=60)
