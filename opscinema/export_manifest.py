"""Export bundle manifest and the bundle hash that seals it."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from pydantic import StrictBool, StrictStr

from .hashing import blake3_hex
from .models import U32, U64, _Model


class BundleType(str, Enum):
    """Kind of exported bundle."""

    TUTORIAL_PACK = "tutorial_pack"
    PROOF_BUNDLE = "proof_bundle"
    RUNBOOK = "runbook"


class ManifestWarning(_Model):
    code: StrictStr
    message: StrictStr


class ManifestFileEntry(_Model):
    path: StrictStr
    hash_blake3: StrictStr
    size_bytes: U64


class PolicyAttestations(_Model):
    evidence_coverage_passed: StrictBool
    tutorial_strict_passed: StrictBool
    offline_policy_enforced: StrictBool


class ModelPin(_Model):
    role: StrictStr
    model_id: StrictStr
    digest: StrictStr


class ExportManifestV1(_Model):
    manifest_version: U32
    bundle_type: BundleType
    session_id: StrictStr
    created_at_utc: StrictStr
    files: list[ManifestFileEntry]
    warnings: list[ManifestWarning]
    policy: PolicyAttestations
    model_pins: list[ModelPin]
    manifest_hash: StrictStr
    bundle_hash: StrictStr


def compute_bundle_hash(entries_sorted: Iterable[tuple[str, str]]) -> str:
    """Hash ``(path, file_hash)`` pairs, already sorted, into one bundle hash.

    Each pair contributes ``path\\nhash\\n``; the order of the pairs matters.
    """
    text = "".join(f"{path}\n{file_hash}\n" for path, file_hash in entries_sorted)
    return blake3_hex(text.encode("utf-8"))