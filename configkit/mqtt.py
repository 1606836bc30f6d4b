# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""MQTT broker settings, for one broker or many."""

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional

from .base import ConfigProvider, parse_unsigned
from .env_provider import resolve_provider

logger = logging.getLogger(__name__)

MQTT_MULTI_BROKER_ENABLED_ENV_KEY = "MQTT_MULTI_BROKER_ENABLED"
MQTT_BROKERS_ENV_KEY = "MQTT_BROKERS"
MQTT_BROKER_KIND_ENV_KEY = "MQTT_BROKER_KIND"
MQTT_HOST_ENV_KEY = "MQTT_HOST"
MQTT_TRANSPORT_ENV_KEY = "MQTT_TRANSPORT"
MQTT_PORT_ENV_KEY = "MQTT_PORT"
MQTT_USER_ENV_KEY = "MQTT_USER"
MQTT_PASSWORD_ENV_KEY = "MQTT_PASSWORD"
MQTT_CA_CERT_PATH_ENV_KEY = "MQTT_CA_CERT_PATH"
MQTT_CERT_PATH_ENV_KEY = "MQTT_CERT_PATH"
MQTT_PRIVATE_KEY_PATH_ENV_KEY = "MQTT_PRIVATE_KEY_PATH"

DEFAULT_CONNECTION_TAG = "default"


class MQTTBrokerKind(Enum):
    """Flavour of MQTT broker."""

    DEFAULT = "default"
    AWS_IOT_CORE = "awsiotcore"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "MQTTBrokerKind":
        if value is not None and value.upper() == "AWSIOTCORE":
            return cls.AWS_IOT_CORE
        return cls.DEFAULT


class MQTTTransport(Enum):
    """Transport used to reach the broker."""

    TCP = "tcp"
    SSL = "ssl"
    WS = "ws"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value: Optional[str]) -> "MQTTTransport":
        if value is None:
            return cls.TCP
        upper = value.upper()
        if upper == "SSL":
            return cls.SSL
        if upper == "WS":
            return cls.WS
        return cls.TCP


@dataclass
class MQTTConnectionConfig:
    """Settings for a single MQTT broker connection.

    The certificate paths and device name are only used with public cloud
    brokers such as AWS IoT Core.
    """

    tag: str = DEFAULT_CONNECTION_TAG
    broker_kind: MQTTBrokerKind = MQTTBrokerKind.DEFAULT
    host: str = "localhost"
    transport: MQTTTransport = MQTTTransport.TCP
    port: int = 1883
    user: str = "mqtt_user"
    password: str = "password"
    device_name: str = ""
    root_ca_path: str = ""
    cert_path: str = ""
    private_key_path: str = ""

    @classmethod
    def from_env(
        cls,
        provider: Optional[ConfigProvider] = None,
        tag: str = DEFAULT_CONNECTION_TAG,
    ) -> "MQTTConnectionConfig":
        """Build the single-broker connection from the ``MQTT_*`` variables."""
        provider = resolve_provider(provider)
        cfg = cls(tag=tag)

        broker_kind = provider.get_optional(MQTT_BROKER_KIND_ENV_KEY)
        if broker_kind is not None:
            cfg.broker_kind = MQTTBrokerKind.from_str(broker_kind)
        cfg.host = provider.get_str(MQTT_HOST_ENV_KEY, cfg.host)
        transport = provider.get_optional(MQTT_TRANSPORT_ENV_KEY)
        if transport is not None:
            cfg.transport = MQTTTransport.from_str(transport)
        cfg.port = provider.get_int(MQTT_PORT_ENV_KEY, cfg.port)
        cfg.user = provider.get_str(MQTT_USER_ENV_KEY, cfg.user)
        cfg.password = provider.get_str(MQTT_PASSWORD_ENV_KEY, cfg.password)
        cfg.root_ca_path = provider.get_str(MQTT_CA_CERT_PATH_ENV_KEY, cfg.root_ca_path)
        cfg.cert_path = provider.get_str(MQTT_CERT_PATH_ENV_KEY, cfg.cert_path)
        cfg.private_key_path = provider.get_str(
            MQTT_PRIVATE_KEY_PATH_ENV_KEY, cfg.private_key_path
        )

        return cfg

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MQTTConnectionConfig":
        """Build a connection from an already-decoded broker entry.

        Callers that decode ``MQTT_BROKERS`` themselves can use this to turn
        each entry into a record. Missing keys keep their defaults; enum and
        port values follow the same fallback rules as the environment.

        Args:
            data: Mapping with any of this record's field names as keys

        Returns:
            MQTTConnectionConfig instance
        """
        cfg = cls()

        for attr in ("tag", "host", "user", "password", "device_name",
                     "root_ca_path", "cert_path", "private_key_path"):
            value = data.get(attr)
            if value is not None:
                setattr(cfg, attr, str(value))

        if data.get("broker_kind") is not None:
            cfg.broker_kind = MQTTBrokerKind.from_str(str(data["broker_kind"]))
        if data.get("transport") is not None:
            cfg.transport = MQTTTransport.from_str(str(data["transport"]))
        if data.get("port") is not None:
            port = parse_unsigned(data["port"])
            if port is None:
                logger.warning(
                    "MQTTConnectionConfig: invalid port %r for connection %s, using default %r",
                    data["port"],
                    cfg.tag,
                    cfg.port,
                )
            else:
                cfg.port = port

        return cfg

    def address(self) -> str:
        return f"{self.host}:{self.port}"


def _default_connections() -> list[MQTTConnectionConfig]:
    return [MQTTConnectionConfig(tag=DEFAULT_CONNECTION_TAG)]


@dataclass
class MQTTConfig:
    """MQTT settings for one broker or many.

    With multi-broker mode off, ``connection_configs`` holds exactly one
    connection tagged ``default``, built from the ``MQTT_*`` variables.
    With it on, ``brokers`` carries the raw ``MQTT_BROKERS`` text untouched:
    decoding it into connections is left to the caller (see
    ``MQTTConnectionConfig.from_dict``), and ``connection_configs`` keeps
    its single default entry.
    """

    multi_broker_enabled: bool = False
    brokers: str = "[]"
    connection_configs: list[MQTTConnectionConfig] = field(default_factory=_default_connections)

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "MQTTConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.multi_broker_enabled = provider.get_bool(
            MQTT_MULTI_BROKER_ENABLED_ENV_KEY, cfg.multi_broker_enabled
        )
        if not cfg.multi_broker_enabled:
            cfg.connection_configs = [MQTTConnectionConfig.from_env(provider)]
        cfg.brokers = provider.get_str(MQTT_BROKERS_ENV_KEY, cfg.brokers)

        return cfg

    def get_connection(self, tag: str) -> MQTTConnectionConfig | None:
        """Get a connection by tag, or None if no connection carries it."""
        for connection in self.connection_configs:
            if connection.tag == tag:
                return connection
        return None
