import json
from datetime import datetime, timezone
from uuid import UUID

import pytest

from opscinema.canon_json import to_canonical_json
from opscinema.errors import AppError, AppErrorCode
from opscinema.models import AssetRef, CaptureState, DeleteOp, EvidenceCoverageResponse


def test_canonicalizes_key_order():
    value = {"b": 1, "a": {"d": 2, "c": 1}}
    assert to_canonical_json(value) == '{"a":{"c":1,"d":2},"b":1}'


def test_arrays_keep_order_and_nested_objects_are_sorted():
    value = [{"z": 1, "y": 2}, 3, [2, 1]]
    assert to_canonical_json(value) == '[{"y":2,"z":1},3,[2,1]]'


def test_non_ascii_is_kept_verbatim():
    assert to_canonical_json({"t": "é"}) == '{"t":"é"}'


def test_floats_and_non_finite():
    assert to_canonical_json({"f": 1.5}) == '{"f":1.5}'
    assert to_canonical_json({"n": float("nan"), "i": float("inf")}) == '{"i":null,"n":null}'


def test_models_are_serialised_with_sorted_keys():
    assert to_canonical_json(AssetRef(asset_id="a1")) == '{"asset_id":"a1"}'
    cov = EvidenceCoverageResponse(missing_step_ids=[], missing_generated_block_ids=["b"], pass_=False)
    text = to_canonical_json(cov)
    assert text == '{"missing_generated_block_ids":["b"],"missing_step_ids":[],"pass":false}'


def test_step_edit_op_is_tagged():
    step_id = UUID("00000000-0000-0000-0000-000000000001")
    text = to_canonical_json(DeleteOp(step_id=step_id))
    assert text == '{"delete":{"step_id":"00000000-0000-0000-0000-000000000001"}}'


def test_enums_uuids_datetimes_and_errors():
    value = {
        "state": CaptureState.IDLE,
        "at": datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        "err": AppError(code=AppErrorCode.IO, message="m"),
    }
    parsed = json.loads(to_canonical_json(value))
    assert parsed["state"] == "IDLE"
    assert parsed["at"] == "2024-01-02T03:04:05Z"
    assert parsed["err"] == {"code": "IO", "message": "m", "recoverable": False}


def test_is_stable_under_reordering():
    a = {"x": [1, {"q": 1, "p": 2}], "y": None}
    b = {"y": None, "x": [1, {"p": 2, "q": 1}]}
    assert to_canonical_json(a) == to_canonical_json(b)


def test_rejects_non_string_keys():
    with pytest.raises(TypeError):
        to_canonical_json({1: "a"})


def test_rejects_unknown_types():
    with pytest.raises(TypeError):
        to_canonical_json({"s": {1, 2}})