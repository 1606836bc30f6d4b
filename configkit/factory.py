# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory helpers for configuration providers."""

from typing import Optional

from .base import ConfigProvider
from .dotenv_provider import DotEnvConfigProvider
from .env_provider import EnvConfigProvider
from .static_provider import StaticConfigProvider


def create_config_provider(provider_type: Optional[str] = None, **kwargs) -> ConfigProvider:
    """Create a configuration provider by type.

    Args:
        provider_type: Type of config provider (required).
                      Options: "env", "static", "dotenv"
        **kwargs: Additional configuration for the provider
                  (e.g. ``config`` for static, ``path`` for dotenv)

    Returns:
        ConfigProvider instance

    Raises:
        ValueError: If provider_type is missing or unknown
    """
    if not provider_type:
        raise ValueError(
            "provider_type parameter is required. "
            "Must be one of: env, static, dotenv"
        )

    provider_type = provider_type.lower()

    if provider_type == "env":
        return EnvConfigProvider(**kwargs)
    if provider_type == "static":
        return StaticConfigProvider(**kwargs)
    if provider_type == "dotenv":
        return DotEnvConfigProvider(**kwargs)

    raise ValueError(
        f"Unknown provider_type: {provider_type}. "
        f"Must be one of: env, static, dotenv"
    )
