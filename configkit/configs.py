# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Aggregate of every service configuration record."""

import logging
from dataclasses import dataclass, field
from typing import Generic, Optional, TypeVar

from .app import AppConfig
from .aws import AwsConfig
from .base import ConfigProvider
from .dynamic import DynamicConfigs, Empty
from .dynamo import DynamoConfig
from .env_provider import resolve_provider
from .health_readiness import HealthReadinessConfig
from .identity_server import IdentityServerConfig
from .influx import InfluxConfig
from .kafka import KafkaConfig
from .metrics import MetricConfig
from .mqtt import MQTTConfig
from .otlp import OTLPConfig
from .postgres import PostgresConfig
from .rabbitmq import RabbitMQConfig
from .sqlite import SqliteConfig
from .traces import TraceConfig

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=DynamicConfigs)


@dataclass
class Configs(Generic[T]):
    """All service configuration records plus an application extension.

    ``Configs()`` holds compiled-in defaults everywhere. ``Configs.from_env``
    builds every record from the environment. Each record is owned by this
    aggregate alone; ``copy.deepcopy`` yields an independent equal copy.

    Loading again never updates an existing aggregate: it produces a new one,
    so readers holding the previous value are unaffected.

    Attributes:
        app: Core application settings
        otlp: OpenTelemetry exporter settings
        metrics: Metrics export settings
        traces: Trace export settings
        identity: Identity server settings
        mqtt: MQTT broker settings
        rabbitmq: RabbitMQ broker settings
        kafka: Kafka broker settings
        postgres: PostgreSQL settings
        dynamo: DynamoDB settings
        sqlite: SQLite settings
        influx: InfluxDB settings
        aws: AWS credentials
        health_readiness: Health/readiness probe settings
        dynamic: Application-specific configuration (a ``DynamicConfigs``)
    """

    app: AppConfig = field(default_factory=AppConfig)
    otlp: OTLPConfig = field(default_factory=OTLPConfig)
    metrics: MetricConfig = field(default_factory=MetricConfig)
    traces: TraceConfig = field(default_factory=TraceConfig)
    identity: IdentityServerConfig = field(default_factory=IdentityServerConfig)
    mqtt: MQTTConfig = field(default_factory=MQTTConfig)
    rabbitmq: RabbitMQConfig = field(default_factory=RabbitMQConfig)
    kafka: KafkaConfig = field(default_factory=KafkaConfig)
    postgres: PostgresConfig = field(default_factory=PostgresConfig)
    dynamo: DynamoConfig = field(default_factory=DynamoConfig)
    sqlite: SqliteConfig = field(default_factory=SqliteConfig)
    influx: InfluxConfig = field(default_factory=InfluxConfig)
    aws: AwsConfig = field(default_factory=AwsConfig)
    health_readiness: HealthReadinessConfig = field(default_factory=HealthReadinessConfig)
    dynamic: T = field(default_factory=Empty)  # type: ignore[assignment]

    @classmethod
    def from_env(
        cls,
        dynamic_cls: type[T] = Empty,  # type: ignore[assignment]
        provider: Optional[ConfigProvider] = None,
    ) -> "Configs[T]":
        """Build every record from the environment.

        Args:
            dynamic_cls: Zero-argument constructible class with a ``load()``
                method; defaults to ``Empty``
            provider: Source of values (defaults to the process environment)

        Returns:
            A freshly built Configs instance

        Raises:
            TypeError: If dynamic_cls instances have no ``load()`` method
        """
        provider = resolve_provider(provider)

        dynamic = dynamic_cls()
        if not isinstance(dynamic, DynamicConfigs):
            raise TypeError(
                f"{dynamic_cls.__name__} cannot be used as dynamic configuration: "
                "it must define a load() method"
            )
        dynamic.load()

        configs = cls(
            app=AppConfig.from_env(provider),
            otlp=OTLPConfig.from_env(provider),
            metrics=MetricConfig.from_env(provider),
            traces=TraceConfig.from_env(provider),
            identity=IdentityServerConfig.from_env(provider),
            mqtt=MQTTConfig.from_env(provider),
            rabbitmq=RabbitMQConfig.from_env(provider),
            kafka=KafkaConfig.from_env(provider),
            postgres=PostgresConfig.from_env(provider),
            dynamo=DynamoConfig.from_env(provider),
            sqlite=SqliteConfig.from_env(provider),
            influx=InfluxConfig.from_env(provider),
            aws=AwsConfig.from_env(provider),
            health_readiness=HealthReadinessConfig.from_env(provider),
            dynamic=dynamic,
        )
        logger.debug(
            "Loaded configuration for %s (env=%s, dynamic=%s)",
            configs.app.name,
            configs.app.env,
            dynamic_cls.__name__,
        )
        return configs

    def rabbitmq_uri(self) -> str:
        """AMQP URI for the configured RabbitMQ broker."""
        return self.rabbitmq.uri()


def load_configs(
    dynamic_cls: type[T] = Empty,  # type: ignore[assignment]
    provider: Optional[ConfigProvider] = None,
) -> Configs[T]:
    """Load the full configuration aggregate.

    Example:
        >>> configs = load_configs()
        >>> configs.app.address()
        '0.0.0.0:31033'
    """
    return Configs.from_env(dynamic_cls, provider)
