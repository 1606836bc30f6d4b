# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""AWS credential settings."""

from dataclasses import dataclass
from typing import Optional

from .base import ConfigProvider
from .env_provider import resolve_provider

AWS_DEFAULT_REGION = "us-east-1"

AWS_IAM_ACCESS_KEY_ID_ENV_KEY = "AWS_IAM_ACCESS_KEY_ID"
AWS_IAM_SECRET_ACCESS_KEY_ENV_KEY = "AWS_IAM_SECRET_ACCESS_KEY"
AWS_ACCESS_KEY_ID_ENV_KEY = "AWS_ACCESS_KEY_ID"
AWS_SECRET_ACCESS_KEY_ENV_KEY = "AWS_SECRET_ACCESS_KEY"
AWS_SESSION_TOKEN_ENV_KEY = "AWS_SESSION_TOKEN"


@dataclass
class AwsConfig:
    """AWS credentials.

    ``None`` means "not configured" and is distinct from an empty string.
    The compiled-in defaults are the ``local`` placeholders used against
    local AWS emulators; ``from_env`` reports exactly what the environment
    holds, so unset credentials come back as ``None``.
    """

    access_key_id: Optional[str] = "local"
    secret_access_key: Optional[str] = "local"
    session_token: Optional[str] = None

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "AwsConfig":
        provider = resolve_provider(provider)

        access_key_id = provider.get_optional(AWS_IAM_ACCESS_KEY_ID_ENV_KEY)
        if access_key_id is None:
            access_key_id = provider.get_optional(AWS_ACCESS_KEY_ID_ENV_KEY)

        secret_access_key = provider.get_optional(AWS_IAM_SECRET_ACCESS_KEY_ENV_KEY)
        if secret_access_key is None:
            secret_access_key = provider.get_optional(AWS_SECRET_ACCESS_KEY_ENV_KEY)

        return cls(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=provider.get_optional(AWS_SESSION_TOKEN_ENV_KEY),
        )
