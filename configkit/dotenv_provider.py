# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Dotenv-file configuration provider."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from dotenv import dotenv_values

from .base import ConfigProvider

logger = logging.getLogger(__name__)


class DotEnvConfigProvider(ConfigProvider):
    """Configuration provider that layers a ``.env`` file under the environment.

    Values present in the process environment take precedence over the file,
    matching ``python-dotenv``'s non-overriding behaviour. The file is read
    once, at construction; ``os.environ`` is never modified.

    Example:
        >>> provider = DotEnvConfigProvider("deploy/local.env")
        >>> configs = Configs.from_env(provider=provider)
    """

    def __init__(
        self,
        path: str | os.PathLike = ".env",
        environ: Optional[Mapping[str, str]] = None,
    ):
        """Initialize the dotenv provider.

        Args:
            path: Path to the dotenv file; a missing file contributes nothing
            environ: Mapping that overrides the file (defaults to os.environ)
        """
        self._path = Path(path)
        self._environ = environ if environ is not None else os.environ
        self._file_values: dict[str, str] = {}

        if self._path.is_file():
            # Keys declared without a value come back as None; treat as absent
            self._file_values = {
                key: value
                for key, value in dotenv_values(self._path).items()
                if value is not None
            }
            logger.debug(
                "DotEnvConfigProvider: loaded %d value(s) from %s",
                len(self._file_values),
                self._path,
            )
        else:
            logger.debug("DotEnvConfigProvider: no dotenv file at %s", self._path)

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str, default: Any = None) -> Any:
        value = self._environ.get(key)
        if value is not None:
            return value
        return self._file_values.get(key, default)
