"""Contract between the host and verifier implementations."""

from __future__ import annotations

from pydantic import StrictStr

from .models import U32, _Model


class VerifierCapabilitySpec(_Model):
    """What a verifier is allowed to touch."""

    verifier_id: StrictStr
    allow_read_paths: list[StrictStr]
    allow_commands: list[StrictStr]
    timeout_secs: U32
    allow_network_hosts: list[StrictStr]


class VerifierExecutionResult(_Model):
    """Outcome reported by a verifier run."""

    status: StrictStr
    output: StrictStr
    warnings: list[StrictStr]