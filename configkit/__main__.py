# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Module entry point: ``python -m configkit dump``."""

import argparse
import dataclasses
import json
import logging
import sys
from typing import Optional, Sequence

from .base import ConfigProvider
from .configs import Configs
from .dotenv_provider import DotEnvConfigProvider
from .dump import to_dict
from .env_provider import EnvConfigProvider

SECTIONS = tuple(f.name for f in dataclasses.fields(Configs))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m configkit",
        description="Inspect the configuration resolved from the environment",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command")

    dump = subparsers.add_parser("dump", help="Print the resolved configuration as JSON")
    dump.add_argument(
        "--env-file",
        help="Dotenv file layered under the process environment",
    )
    dump.add_argument(
        "--section",
        help=f"Only print one section ({', '.join(SECTIONS)})",
    )
    dump.add_argument(
        "--show-secrets",
        action="store_true",
        help="Print credentials instead of masking them",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point; returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command != "dump":
        parser.print_usage(sys.stderr)
        return 1

    provider: ConfigProvider
    if args.env_file:
        provider = DotEnvConfigProvider(args.env_file)
    else:
        provider = EnvConfigProvider()

    configs = Configs.from_env(provider=provider)
    output = to_dict(configs, redact=not args.show_secrets)

    if args.section:
        if args.section not in output:
            print(
                f"Error: unknown section '{args.section}'. "
                f"Must be one of: {', '.join(SECTIONS)}",
                file=sys.stderr,
            )
            return 1
        output = output[args.section]

    print(json.dumps(output, indent=2, sort_keys=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
