# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Extension point for application-specific configuration."""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class DynamicConfigs(Protocol):
    """Application-specific configuration plugged into ``Configs``.

    Any class works as long as it can be constructed with no arguments
    (its defaults) and exposes ``load()`` to populate itself in place from
    the environment, files, or any other source.

    Example:
        >>> @dataclass
        ... class FeatureFlags:
        ...     beta: bool = False
        ...
        ...     def load(self) -> None:
        ...         self.beta = os.environ.get("FEATURE_BETA") == "true"
        >>>
        >>> configs = Configs.from_env(FeatureFlags)
        >>> configs.dynamic.beta
        False
    """

    def load(self) -> None:
        ...


@dataclass
class Empty:
    """Placeholder for applications without extra configuration."""

    def load(self) -> None:
        pass
