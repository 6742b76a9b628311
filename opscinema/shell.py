"""Guarded execution of allow-listed shell commands, and file checks."""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence

MAX_TIMEOUT_SECS = 30

_BLOCKED_COMMANDS = frozenset(
    {"rm", "mv", "dd", "diskutil", "chmod", "chown", "truncate", "mkfs", "sudo"}
)
_BLOCKED_ARGS = frozenset({"-rf", "-fr", "-r", "-f"})


class ShellCommandError(RuntimeError):
    """A command was refused, failed, or timed out."""


def _is_destructive_arg(arg: str) -> bool:
    return (
        "--delete" in arg
        or "/dev/" in arg
        or "sudo" in arg
        or arg in _BLOCKED_ARGS
    )


def _has_destructive_flag(arg: str) -> bool:
    return arg.startswith("-") and len(arg) > 2 and "r" in arg and "f" in arg


def is_destructive(cmd: str, args: Sequence[str]) -> bool:
    """True when the command or any of its arguments could destroy data."""
    if cmd in _BLOCKED_COMMANDS:
        return True
    lowered = (arg.lower() for arg in args)
    return any(_is_destructive_arg(a) or _has_destructive_flag(a) for a in lowered)


def run_shell(
    allowed: Sequence[str], cmd: str, args: Sequence[str], timeout_secs: int
) -> str:
    """Run an allow-listed, non-destructive command and return its output.

    Standard error, when not blank, is appended after a ``[stderr]`` marker.
    Raises :class:`ShellCommandError` when the command is refused, exits
    unsuccessfully or outlives its timeout.
    """
    if cmd not in allowed:
        raise ShellCommandError("command not allowed")
    if timeout_secs > MAX_TIMEOUT_SECS:
        raise ShellCommandError("timeout too high")
    if is_destructive(cmd, args):
        raise ShellCommandError("destructive command is blocked")

    try:
        completed = subprocess.run(
            [cmd, *args],
            stdin=subprocess.DEVNULL,
            capture_output=True,
            timeout=max(timeout_secs, 1),
            check=False,
        )
    except subprocess.TimeoutExpired:
        raise ShellCommandError("command timed out") from None
    except OSError as exc:
        raise ShellCommandError(f"run {cmd}: {exc}") from exc

    text = completed.stdout.decode("utf-8", errors="replace")
    stderr = completed.stderr.decode("utf-8", errors="replace")
    if stderr.strip():
        text += "\n[stderr]\n" + stderr
    if completed.returncode != 0:
        raise ShellCommandError(f"command failed: {text.strip()}")
    return text


def file_exists(path: str | os.PathLike[str]) -> bool:
    """True when ``path`` names an existing file or directory."""
    return os.path.exists(path)