"""Canonical JSON: sorted keys, compact separators, normalised numbers."""

from __future__ import annotations

import json
import math
from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Any
from uuid import UUID

from pydantic import BaseModel

from .errors import AppError
from .models import StepEditOp


def _to_json_value(value: Any) -> Any:
    if isinstance(value, StepEditOp):
        return value.to_json_value()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, AppError):
        return value.to_dict()
    if isinstance(value, Enum):
        return _to_json_value(value.value)
    if isinstance(value, UUID):
        return str(value)
    if isinstance(value, datetime):
        text = value.isoformat()
        return text[:-6] + "Z" if text.endswith("+00:00") else text
    return value


def _normalize(value: Any) -> Any:
    value = _to_json_value(value)
    if isinstance(value, Mapping):
        for key in value:
            if not isinstance(key, str):
                raise TypeError(f"object keys must be strings, got {type(key).__name__}")
        return {key: _normalize(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [_normalize(item) for item in value]
    if value is None or isinstance(value, (bool, str, int)):
        return value
    if isinstance(value, float):
        # Non-finite floats have no JSON representation and become null.
        return value if math.isfinite(value) else None
    raise TypeError(f"value of type {type(value).__name__} is not JSON serialisable")


def to_canonical_json(value: Any) -> str:
    """Serialise ``value`` as canonical JSON text."""
    return json.dumps(
        _normalize(value),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )