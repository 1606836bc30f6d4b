# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Render configuration records as JSON-friendly dictionaries."""

import dataclasses
from datetime import timedelta
from enum import Enum
from typing import Any

REDACTED = "***"

# Field names whose values are credentials
SECRET_FIELDS = frozenset({
    "password",
    "token",
    "access_key",
    "secret_access_key",
    "session_token",
    "client_secret",
    "trust_store_password",
    "key_store_password",
})


def to_dict(obj: Any, redact: bool = True) -> Any:
    """Convert a record, the aggregate, or any value inside them.

    Enums become their value, durations become seconds, and nested records
    become dictionaries. With ``redact``, non-empty credential fields are
    replaced by ``***`` so the result is safe to log.

    Args:
        obj: Configuration record or value
        redact: Mask credential fields

    Returns:
        Value made of dicts, lists, strings, numbers, booleans and None
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        result = {}
        for f in dataclasses.fields(obj):
            value = getattr(obj, f.name)
            if redact and f.name in SECRET_FIELDS and value:
                result[f.name] = REDACTED
            else:
                result[f.name] = to_dict(value, redact)
        return result
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, timedelta):
        return obj.total_seconds()
    if isinstance(obj, (list, tuple)):
        return [to_dict(item, redact) for item in obj]
    if isinstance(obj, dict):
        return {key: to_dict(value, redact) for key, value in obj.items()}
    return obj
