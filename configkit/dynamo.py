# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Amazon DynamoDB settings."""

from dataclasses import dataclass
from typing import Optional

from .aws import AWS_DEFAULT_REGION
from .base import ConfigProvider
from .env_provider import resolve_provider

DYNAMO_ENDPOINT_ENV_KEY = "DYNAMO_ENDPOINT"
DYNAMO_REGION_ENV_KEY = "DYNAMO_REGION"
DYNAMO_TABLE_ENV_KEY = "DYNAMO_TABLE"
DYNAMO_EXPIRE_ENV_KEY = "DYNAMO_EXPIRE"

# One year, in seconds
DEFAULT_DYNAMO_EXPIRE = 31536000


@dataclass
class DynamoConfig:
    """DynamoDB endpoint, region, table and item TTL.

    Attributes:
        endpoint: Endpoint URL (DYNAMO_ENDPOINT)
        region: AWS region (DYNAMO_REGION)
        table: Table name (DYNAMO_TABLE)
        expire: Item time-to-live in seconds (DYNAMO_EXPIRE)
    """

    endpoint: str = "localhost"
    region: str = AWS_DEFAULT_REGION
    table: str = ""
    expire: int = DEFAULT_DYNAMO_EXPIRE

    @classmethod
    def from_env(cls, provider: Optional[ConfigProvider] = None) -> "DynamoConfig":
        provider = resolve_provider(provider)
        cfg = cls()

        cfg.endpoint = provider.get_str(DYNAMO_ENDPOINT_ENV_KEY, cfg.endpoint)
        cfg.region = provider.get_str(DYNAMO_REGION_ENV_KEY, cfg.region)
        cfg.table = provider.get_str(DYNAMO_TABLE_ENV_KEY, cfg.table)
        cfg.expire = provider.get_int(DYNAMO_EXPIRE_ENV_KEY, cfg.expire)

        return cfg
