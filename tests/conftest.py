# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Test fixtures for configkit."""

import importlib
import pkgutil

import pytest

import configkit


def _recognised_env_keys() -> set[str]:
    """Collect every ``*_ENV_KEY`` constant declared in the package."""
    keys = set()
    for module_info in pkgutil.iter_modules(configkit.__path__):
        if module_info.name == "__main__":
            continue
        module = importlib.import_module(f"configkit.{module_info.name}")
        for name, value in vars(module).items():
            if name.endswith("_ENV_KEY") and isinstance(value, str):
                keys.add(value)
    return keys


RECOGNISED_ENV_KEYS = frozenset(_recognised_env_keys())


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove every recognised key so tests start from an empty environment."""
    for key in RECOGNISED_ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
