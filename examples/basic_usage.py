# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Example: loading service configuration with configkit.

This example shows how to:
1. Load every configuration record from the environment
2. Plug in application-specific configuration
3. Layer a dotenv file under the environment
"""

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from configkit import Configs, DotEnvConfigProvider, load_configs


@dataclass
class WorkerSettings:
    """Settings only this application cares about."""

    batch_size: int = 100
    dry_run: bool = False

    def load(self) -> None:
        batch_size = os.environ.get("WORKER_BATCH_SIZE", "")
        if batch_size.isdigit():
            self.batch_size = int(batch_size)
        self.dry_run = os.environ.get("WORKER_DRY_RUN") == "true"


def example_basic_loading():
    """Example 1: Load the aggregate from the environment."""
    print("=" * 60)
    print("Example 1: Basic Loading")
    print("=" * 60)

    os.environ["APP_NAME"] = "order-service"
    os.environ["RABBITMQ_HOST"] = "rabbitmq.example.com"
    os.environ["APP_PORT"] = "not-a-port"

    configs = load_configs()

    print(f"App: {configs.app.name} ({configs.app.env})")
    # The invalid port silently keeps its default
    print(f"Listening on: {configs.app.address()}")
    print(f"RabbitMQ: {configs.rabbitmq_uri()}")
    print()


def example_dynamic_configs():
    """Example 2: Application-specific configuration."""
    print("=" * 60)
    print("Example 2: Dynamic Configuration")
    print("=" * 60)

    os.environ["WORKER_BATCH_SIZE"] = "250"

    configs = Configs.from_env(WorkerSettings)

    print(f"Batch size: {configs.dynamic.batch_size}")
    print(f"Dry run: {configs.dynamic.dry_run}")
    print()


def example_dotenv_file():
    """Example 3: Values from a dotenv file."""
    print("=" * 60)
    print("Example 3: Dotenv File")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp:
        env_file = Path(tmp) / ".env"
        env_file.write_text("POSTGRES_HOST=db.internal\nPOSTGRES_PORT=5432\n", encoding="utf-8")

        configs = Configs.from_env(provider=DotEnvConfigProvider(env_file))

    print(f"Postgres: {configs.postgres.address()}")
    print()


if __name__ == "__main__":
    example_basic_loading()
    example_dynamic_configs()
    example_dotenv_file()
