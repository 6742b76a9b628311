import pytest
from pydantic import ValidationError

from opscinema.export_manifest import (
    BundleType,
    ExportManifestV1,
    ManifestFileEntry,
    ManifestWarning,
    ModelPin,
    PolicyAttestations,
    compute_bundle_hash,
)
from opscinema.hashing import blake3_hex

EMPTY_BLAKE3 = "af1349b9f5f9a1a6a0404dea36dcc9499bcb25c9adc112b7cc9a93cae41f3262"


def _manifest(bundle_type=BundleType.TUTORIAL_PACK):
    return ExportManifestV1(
        manifest_version=1,
        bundle_type=bundle_type,
        session_id="session-test",
        created_at_utc="2024-01-01T00:00:00Z",
        files=[ManifestFileEntry(path="tutorial.json", hash_blake3=blake3_hex(b"{}"), size_bytes=2)],
        warnings=[ManifestWarning(code="WARN", message="tutorial warning")],
        policy=PolicyAttestations(
            evidence_coverage_passed=True,
            tutorial_strict_passed=True,
            offline_policy_enforced=True,
        ),
        model_pins=[ModelPin(role="tutorial_generation", model_id="m1", digest="sha256:testdigest")],
        manifest_hash="",
        bundle_hash="",
    )


def test_empty_bundle_hash_is_hash_of_empty_input():
    assert compute_bundle_hash([]) == EMPTY_BLAKE3


def test_bundle_hash_covers_path_and_hash_lines():
    entries = [("a.json", "h1"), ("b.json", "h2")]
    assert compute_bundle_hash(entries) == blake3_hex(b"a.json\nh1\nb.json\nh2\n")


def test_bundle_hash_depends_on_order():
    entries = [("a.json", "h1"), ("b.json", "h2")]
    assert compute_bundle_hash(entries) != compute_bundle_hash(list(reversed(entries)))


def test_bundle_hash_accepts_generator():
    entries = [("x", "y")]
    assert compute_bundle_hash(iter(entries)) == compute_bundle_hash(entries)


@pytest.mark.parametrize(
    "member, wire",
    [
        (BundleType.TUTORIAL_PACK, "tutorial_pack"),
        (BundleType.PROOF_BUNDLE, "proof_bundle"),
        (BundleType.RUNBOOK, "runbook"),
    ],
)
def test_bundle_type_wire_names(member, wire):
    assert _manifest(member).model_dump(mode="json")["bundle_type"] == wire


def test_manifest_json_roundtrip():
    manifest = _manifest()
    back = ExportManifestV1.model_validate_json(manifest.model_dump_json())
    assert back == manifest


def test_manifest_rejects_unknown_bundle_type():
    data = _manifest().model_dump(mode="json")
    data["bundle_type"] = "zip"
    with pytest.raises(ValidationError):
        ExportManifestV1.model_validate(data)


def test_file_entry_rejects_negative_size():
    with pytest.raises(ValidationError):
        ManifestFileEntry(path="p", hash_blake3="h", size_bytes=-1)