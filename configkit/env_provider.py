# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Environment-backed configuration provider."""

import os
from collections.abc import Mapping
from typing import Any, Optional

from .base import ConfigProvider


class EnvConfigProvider(ConfigProvider):
    """Configuration provider that reads from environment variables.

    The process environment is consulted on every lookup, so a provider
    created at import time still observes later changes.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None):
        self._environ = environ if environ is not None else os.environ

    def get(self, key: str, default: Any = None) -> Any:
        return self._environ.get(key, default)


def resolve_provider(provider: Optional[ConfigProvider] = None) -> ConfigProvider:
    """Return the given provider, or one backed by the process environment."""
    if provider is None:
        return EnvConfigProvider()
    return provider
