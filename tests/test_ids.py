from uuid import RFC_4122, UUID

import pytest

from opscinema.ids import EVIDENCE_NAMESPACE_UUID, deterministic_evidence_id

SESSION = UUID("12345678-1234-5678-1234-567812345678")


def test_namespace_constant_and_rfc_variant():
    assert str(EVIDENCE_NAMESPACE_UUID) == "d4214da8-7c85-4ff4-84ba-9e6f0bba4a1f"
    evidence_id = deterministic_evidence_id(SESSION, "keyframe", "frame-0")
    assert evidence_id.variant == RFC_4122
    assert evidence_id.version == 5


def test_is_deterministic_and_version_5():
    first = deterministic_evidence_id(SESSION, "ocr_block", "block-1")
    second = deterministic_evidence_id(SESSION, "ocr_block", "block-1")
    assert first == second
    assert first.version == 5


def test_inputs_change_the_id():
    base = deterministic_evidence_id(SESSION, "ocr_block", "block-1")
    assert base != deterministic_evidence_id(SESSION, "keyframe", "block-1")
    assert base != deterministic_evidence_id(SESSION, "ocr_block", "block-2")
    other = UUID("87654321-4321-8765-4321-876543218765")
    assert base != deterministic_evidence_id(other, "ocr_block", "block-1")


def test_string_session_id_is_normalised():
    upper = str(SESSION).upper()
    assert deterministic_evidence_id(upper, "k", "s") == deterministic_evidence_id(SESSION, "k", "s")


def test_invalid_session_id_raises():
    with pytest.raises(ValueError):
        deterministic_evidence_id("not-a-uuid", "k", "s")