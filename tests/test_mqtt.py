# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for MQTT settings."""

import logging

from configkit import MQTTBrokerKind, MQTTConfig, MQTTConnectionConfig, MQTTTransport


class TestMQTTEnums:
    """Tests for MQTT enum resolution."""

    def test_broker_kind(self):
        assert MQTTBrokerKind.from_str("AWSIoTCore") is MQTTBrokerKind.AWS_IOT_CORE
        assert MQTTBrokerKind.from_str("mosquitto") is MQTTBrokerKind.DEFAULT
        assert MQTTBrokerKind.from_str(None) is MQTTBrokerKind.DEFAULT

    def test_transport(self):
        assert MQTTTransport.from_str("ssl") is MQTTTransport.SSL
        assert MQTTTransport.from_str("WS") is MQTTTransport.WS
        assert MQTTTransport.from_str("quic") is MQTTTransport.TCP
        assert str(MQTTTransport.SSL) == "ssl"


class TestMQTTConnectionConfig:
    """Tests for MQTTConnectionConfig."""

    def test_defaults(self):
        cfg = MQTTConnectionConfig()

        assert cfg.tag == "default"
        assert cfg.broker_kind is MQTTBrokerKind.DEFAULT
        assert cfg.transport is MQTTTransport.TCP
        assert cfg.address() == "localhost:1883"
        assert cfg.user == "mqtt_user"
        assert cfg.password == "password"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("MQTT_BROKER_KIND", "awsiotcore")
        monkeypatch.setenv("MQTT_HOST", "iot.example.com")
        monkeypatch.setenv("MQTT_TRANSPORT", "ssl")
        monkeypatch.setenv("MQTT_PORT", "8883")
        monkeypatch.setenv("MQTT_CA_CERT_PATH", "/certs/ca.pem")
        monkeypatch.setenv("MQTT_CERT_PATH", "/certs/cert.pem")
        monkeypatch.setenv("MQTT_PRIVATE_KEY_PATH", "/certs/key.pem")

        cfg = MQTTConnectionConfig.from_env()

        assert cfg.broker_kind is MQTTBrokerKind.AWS_IOT_CORE
        assert cfg.transport is MQTTTransport.SSL
        assert cfg.address() == "iot.example.com:8883"
        assert cfg.root_ca_path == "/certs/ca.pem"
        assert cfg.cert_path == "/certs/cert.pem"
        assert cfg.private_key_path == "/certs/key.pem"

    def test_from_dict(self):
        cfg = MQTTConnectionConfig.from_dict({
            "tag": "telemetry",
            "host": "broker-2",
            "port": 1884,
            "transport": "ws",
        })

        assert cfg.tag == "telemetry"
        assert cfg.address() == "broker-2:1884"
        assert cfg.transport is MQTTTransport.WS
        assert cfg.user == "mqtt_user"

    def test_from_dict_invalid_port(self, caplog):
        with caplog.at_level(logging.WARNING, logger="configkit.mqtt"):
            cfg = MQTTConnectionConfig.from_dict({"tag": "x", "port": "not-a-port"})

        assert cfg.port == 1883
        assert "not-a-port" in caplog.text


class TestMQTTConfig:
    """Tests for MQTTConfig."""

    def test_single_broker_default(self):
        cfg = MQTTConfig.from_env()

        assert cfg.multi_broker_enabled is False
        assert cfg.brokers == "[]"
        assert len(cfg.connection_configs) == 1
        assert cfg.connection_configs[0].tag == "default"

    def test_single_broker_uses_environment(self, monkeypatch):
        monkeypatch.setenv("MQTT_HOST", "mqtt.internal")
        monkeypatch.setenv("MQTT_USER", "sensor")

        cfg = MQTTConfig.from_env()

        assert len(cfg.connection_configs) == 1
        connection = cfg.get_connection("default")
        assert connection is not None
        assert connection.host == "mqtt.internal"
        assert connection.user == "sensor"

    def test_multi_broker_keeps_raw_brokers(self, monkeypatch):
        brokers = '[{"tag": "a", "host": "h1"}, {"tag": "b", "host": "h2"}]'
        monkeypatch.setenv("MQTT_MULTI_BROKER_ENABLED", "true")
        monkeypatch.setenv("MQTT_BROKERS", brokers)
        monkeypatch.setenv("MQTT_HOST", "ignored")

        cfg = MQTTConfig.from_env()

        assert cfg.multi_broker_enabled is True
        assert cfg.brokers == brokers
        assert len(cfg.connection_configs) == 1
        assert cfg.connection_configs[0].host == "localhost"

    def test_get_connection_unknown_tag(self):
        assert MQTTConfig().get_connection("missing") is None

    def test_default_lists_are_independent(self):
        first = MQTTConfig()
        second = MQTTConfig()

        first.connection_configs.append(MQTTConnectionConfig(tag="extra"))

        assert len(second.connection_configs) == 1
