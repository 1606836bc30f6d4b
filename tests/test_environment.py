# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Tests for deployment environment resolution."""

import pytest

from configkit import Environment


class TestEnvironmentFromStr:
    """Tests for Environment.from_str."""

    @pytest.mark.parametrize("value,expected", [
        ("production", Environment.PROD),
        ("PRODUCTION", Environment.PROD),
        ("prod", Environment.PROD),
        ("PRD", Environment.PROD),
        ("staging", Environment.STAGING),
        ("STG", Environment.STAGING),
        ("develop", Environment.DEV),
        ("DEV", Environment.DEV),
    ])
    def test_known_aliases(self, value, expected):
        assert Environment.from_str(value) is expected

    @pytest.mark.parametrize("value", ["Prod", "Staging", "local", "qa", "", None])
    def test_unknown_resolves_to_local(self, value):
        assert Environment.from_str(value) is Environment.LOCAL


class TestEnvironmentFromEnv:
    """Tests for Environment.from_env."""

    def test_missing_variable(self):
        assert Environment.from_env() is Environment.LOCAL

    def test_reads_rust_env(self, monkeypatch):
        monkeypatch.setenv("RUST_ENV", "staging")

        env = Environment.from_env()

        assert env is Environment.STAGING
        assert env.is_stg()
        assert not env.is_prod()

    def test_display_names(self):
        assert [str(e) for e in Environment] == ["local", "dev", "stg", "prd"]

    def test_predicates_are_exclusive(self):
        for env in Environment:
            flags = [env.is_local(), env.is_dev(), env.is_stg(), env.is_prod()]
            assert flags.count(True) == 1
