"""Application error envelope shared across the command surface."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class AppErrorCode(str, Enum):
    """Stable error codes carried by every failed command."""

    PERMISSION_DENIED = "PERMISSION_DENIED"
    VALIDATION_FAILED = "VALIDATION_FAILED"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    POLICY_BLOCKED = "POLICY_BLOCKED"
    NETWORK_BLOCKED = "NETWORK_BLOCKED"
    EXPORT_GATE_FAILED = "EXPORT_GATE_FAILED"
    PROVIDER_SCHEMA_INVALID = "PROVIDER_SCHEMA_INVALID"
    IO = "IO"
    DB = "DB"
    JOB_CANCELLED = "JOB_CANCELLED"
    UNSUPPORTED = "UNSUPPORTED"
    INTERNAL = "INTERNAL"

    @property
    def display_name(self) -> str:
        """The code in CamelCase, as used in error messages."""
        return "".join(part.capitalize() for part in self.name.split("_"))


@dataclass(kw_only=True)
class AppError(Exception):
    """An error that can cross the command boundary as a JSON object."""

    code: AppErrorCode
    message: str
    details: Optional[str] = None
    recoverable: bool = False
    action_hint: Optional[str] = None

    def __post_init__(self) -> None:
        self.code = AppErrorCode(self.code)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.code.display_name}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the wire form; absent optional fields are omitted."""
        out: dict[str, Any] = {"code": self.code.value, "message": self.message}
        if self.details is not None:
            out["details"] = self.details
        out["recoverable"] = self.recoverable
        if self.action_hint is not None:
            out["action_hint"] = self.action_hint
        return out

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "AppError":
        """Build an error from its wire form, rejecting malformed input."""
        if not isinstance(data, Mapping):
            raise ValueError("app error must be a JSON object")
        try:
            code = AppErrorCode(data["code"])
            message = data["message"]
            recoverable = data["recoverable"]
        except KeyError as exc:
            raise ValueError(f"app error is missing field {exc.args[0]!r}") from None
        if not isinstance(message, str):
            raise ValueError("app error message must be a string")
        if not isinstance(recoverable, bool):
            raise ValueError("app error recoverable must be a boolean")
        details = data.get("details")
        action_hint = data.get("action_hint")
        for name, value in (("details", details), ("action_hint", action_hint)):
            if value is not None and not isinstance(value, str):
                raise ValueError(f"app error {name} must be a string")
        return cls(
            code=code,
            message=message,
            details=details,
            recoverable=recoverable,
            action_hint=action_hint,
        )