# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Secrets manager selection."""

from enum import Enum
from typing import Optional


class SecretsManagerKind(Enum):
    """Which secrets manager an application should read secrets from."""

    NONE = "none"
    AWS_SECRET_MANAGER = "aws"

    @classmethod
    def from_str(cls, value: Optional[str]) -> "SecretsManagerKind":
        """Case-insensitive lookup; anything but ``aws`` selects ``NONE``."""
        if value is not None and value.upper() == "AWS":
            return cls.AWS_SECRET_MANAGER
        return cls.NONE
