# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Deployment environment resolution."""

from enum import Enum
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider

ENVIRONMENT_ENV_KEY = "RUST_ENV"

_ALIASES = {
    "production": "prd",
    "PRODUCTION": "prd",
    "prod": "prd",
    "PROD": "prd",
    "prd": "prd",
    "PRD": "prd",
    "staging": "stg",
    "STAGING": "stg",
    "stg": "stg",
    "STG": "stg",
    "develop": "dev",
    "DEVELOP": "dev",
    "dev": "dev",
    "DEV": "dev",
}


class Environment(Enum):
    """Deployment environment of the running application.

    Resolution never fails: unknown or missing input resolves to ``LOCAL``.
    Matching is case-sensitive over a fixed set of lower- and upper-case
    spellings, so ``"Prod"`` is not recognised.
    """

    LOCAL = "local"
    DEV = "dev"
    STAGING = "stg"
    PROD = "prd"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_str(cls, value: Optional[str]) -> "Environment":
        """Map an environment name or abbreviation to a variant."""
        if value is None:
            return cls.LOCAL
        alias = _ALIASES.get(value)
        if alias is None:
            return cls.LOCAL
        return cls(alias)

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "Environment":
        """Resolve the environment from the ``RUST_ENV`` variable."""
        return cls.from_str(resolve_provider(provider).get_optional(ENVIRONMENT_ENV_KEY))

    def is_local(self) -> bool:
        return self is Environment.LOCAL

    def is_dev(self) -> bool:
        return self is Environment.DEV

    def is_stg(self) -> bool:
        return self is Environment.STAGING

    def is_prod(self) -> bool:
        return self is Environment.PROD
