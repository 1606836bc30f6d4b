# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""configkit: environment-driven configuration records for services.

One dataclass per external service or subsystem, each built from compiled-in
defaults overlaid with whatever the environment provides. Values that are
missing or cannot be parsed keep their defaults; loading never fails.
"""

__version__ = "0.1.0"

from .app import AppConfig
from .aws import AwsConfig
from .base import ConfigProvider
from .configs import Configs, load_configs
from .dotenv_provider import DotEnvConfigProvider
from .dump import to_dict
from .dynamic import DynamicConfigs, Empty
from .dynamo import DynamoConfig
from .env_provider import EnvConfigProvider
from .environment import Environment
from .factory import create_config_provider
from .health_readiness import HealthReadinessConfig
from .identity_server import IdentityServerConfig
from .influx import InfluxConfig
from .kafka import KafkaConfig
from .metrics import MetricConfig, MetricExporterKind
from .mqtt import MQTTBrokerKind, MQTTConfig, MQTTConnectionConfig, MQTTTransport
from .otlp import OTLPConfig, OTLPExporterType
from .postgres import PostgresConfig, PostgresSslMode
from .rabbitmq import RabbitMQConfig
from .secrets_manager import SecretsManagerKind
from .sqlite import SqliteConfig
from .static_provider import StaticConfigProvider
from .traces import TraceConfig, TraceExporterKind

__all__ = [
    # Version
    "__version__",
    # Configuration Providers
    "ConfigProvider",
    "EnvConfigProvider",
    "StaticConfigProvider",
    "DotEnvConfigProvider",
    "create_config_provider",
    # Aggregate
    "Configs",
    "load_configs",
    "DynamicConfigs",
    "Empty",
    # Records
    "Environment",
    "AppConfig",
    "SecretsManagerKind",
    "AwsConfig",
    "PostgresConfig",
    "PostgresSslMode",
    "SqliteConfig",
    "DynamoConfig",
    "InfluxConfig",
    "KafkaConfig",
    "RabbitMQConfig",
    "MQTTConfig",
    "MQTTConnectionConfig",
    "MQTTBrokerKind",
    "MQTTTransport",
    "OTLPConfig",
    "OTLPExporterType",
    "MetricConfig",
    "MetricExporterKind",
    "TraceConfig",
    "TraceExporterKind",
    "IdentityServerConfig",
    "HealthReadinessConfig",
    # Inspection
    "to_dict",
]
