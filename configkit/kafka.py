# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Apache Kafka broker settings."""

from dataclasses import dataclass
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider

KAFKA_HOST_ENV_KEY = "KAFKA_HOST"
KAFKA_PORT_ENV_KEY = "KAFKA_PORT"
KAFKA_TIMEOUT_ENV_KEY = "KAFKA_TIMEOUT"
KAFKA_SECURITY_PROTOCOL_ENV_KEY = "KAFKA_SECURITY_PROTOCOL"
KAFKA_SASL_MECHANISMS_ENV_KEY = "KAFKA_SASL_MECHANISMS"
KAFKA_CERTIFICATE_PATH_ENV_KEY = "KAFKA_CERTIFICATE_PATH"
KAFKA_CA_PATH_ENV_KEY = "KAFKA_CA_PATH"
KAFKA_TRUST_STORE_PATH_ENV_KEY = "KAFKA_TRUST_STORE_PATH"
KAFKA_TRUST_STORE_PASSWORD_ENV_KEY = "KAFKA_TRUST_STORE_PASSWORD"
KAFKA_KEY_STORE_PATH_ENV_KEY = "KAFKA_KEY_STORE_PATH"
KAFKA_KEY_STORE_PASSWORD_ENV_KEY = "KAFKA_KEY_STORE_PASSWORD"
KAFKA_ENDPOINT_IDENTIFICATION_ALGORITHM_ENV_KEY = "KAFKA_ENDPOINT_IDENTIFICATION_ALGORITHM"
KAFKA_USER_ENV_KEY = "KAFKA_USER"
KAFKA_PASSWORD_ENV_KEY = "KAFKA_PASSWORD"

# String fields loaded verbatim, keyed by attribute name
_STRING_FIELDS = {
    "host": KAFKA_HOST_ENV_KEY,
    "security_protocol": KAFKA_SECURITY_PROTOCOL_ENV_KEY,
    "sasl_mechanisms": KAFKA_SASL_MECHANISMS_ENV_KEY,
    "certificate_path": KAFKA_CERTIFICATE_PATH_ENV_KEY,
    "ca_path": KAFKA_CA_PATH_ENV_KEY,
    "trust_store_path": KAFKA_TRUST_STORE_PATH_ENV_KEY,
    "trust_store_password": KAFKA_TRUST_STORE_PASSWORD_ENV_KEY,
    "key_store_path": KAFKA_KEY_STORE_PATH_ENV_KEY,
    "key_store_password": KAFKA_KEY_STORE_PASSWORD_ENV_KEY,
    "endpoint_identification_algorithm": KAFKA_ENDPOINT_IDENTIFICATION_ALGORITHM_ENV_KEY,
    "user": KAFKA_USER_ENV_KEY,
    "password": KAFKA_PASSWORD_ENV_KEY,
}


@dataclass
class KafkaConfig:
    """Kafka broker address, SASL credentials and TLS material.

    Attributes:
        host: Broker host (KAFKA_HOST)
        port: Broker port (KAFKA_PORT)
        timeout: Connection timeout in milliseconds (KAFKA_TIMEOUT)
        security_protocol: e.g. SASL_SSL, PLAINTEXT (KAFKA_SECURITY_PROTOCOL)
        sasl_mechanisms: e.g. PLAIN, SCRAM-SHA-512 (KAFKA_SASL_MECHANISMS)
        certificate_path: Client certificate (KAFKA_CERTIFICATE_PATH)
        ca_path: CA certificate (KAFKA_CA_PATH)
        trust_store_path: Trust store (KAFKA_TRUST_STORE_PATH)
        trust_store_password: Trust store password (KAFKA_TRUST_STORE_PASSWORD)
        key_store_path: Key store (KAFKA_KEY_STORE_PATH)
        key_store_password: Key store password (KAFKA_KEY_STORE_PASSWORD)
        endpoint_identification_algorithm: (KAFKA_ENDPOINT_IDENTIFICATION_ALGORITHM)
        user: SASL username (KAFKA_USER)
        password: SASL password (KAFKA_PASSWORD)
    """

    host: str = "localhost"
    port: int = 9094
    timeout: int = 6000
    security_protocol: str = "SASL_SSL"
    sasl_mechanisms: str = "PLAIN"
    certificate_path: str = ""
    ca_path: str = ""
    trust_store_path: str = ""
    trust_store_password: str = ""
    key_store_path: str = ""
    key_store_password: str = ""
    endpoint_identification_algorithm: str = ""
    user: str = ""
    password: str = ""

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "KafkaConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        for attr, key in _STRING_FIELDS.items():
            setattr(cfg, attr, provider.get_str(key, getattr(cfg, attr)))
        cfg.port = provider.get_int(KAFKA_PORT_ENV_KEY, cfg.port)
        cfg.timeout = provider.get_int(KAFKA_TIMEOUT_ENV_KEY, cfg.timeout)

        return cfg

    def address(self) -> str:
        """Bootstrap server in ``host:port`` form."""
        return f"{self.host}:{self.port}"
