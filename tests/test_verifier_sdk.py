import pytest
from pydantic import ValidationError

from opscinema.verifier_sdk import VerifierCapabilitySpec, VerifierExecutionResult


def _spec(**overrides):
    fields = dict(
        verifier_id="shell.safe_echo",
        allow_read_paths=["/tmp"],
        allow_commands=["echo"],
        timeout_secs=5,
        allow_network_hosts=["127.0.0.1"],
    )
    fields.update(overrides)
    return VerifierCapabilitySpec(**fields)


def test_capability_spec_roundtrip():
    spec = _spec()
    assert VerifierCapabilitySpec.model_validate_json(spec.model_dump_json()) == spec


def test_capability_spec_field_names():
    assert set(_spec().model_dump()) == {
        "verifier_id",
        "allow_read_paths",
        "allow_commands",
        "timeout_secs",
        "allow_network_hosts",
    }


def test_capability_spec_rejects_negative_timeout():
    with pytest.raises(ValidationError):
        _spec(timeout_secs=-1)


def test_capability_spec_rejects_missing_field():
    with pytest.raises(ValidationError):
        VerifierCapabilitySpec.model_validate({"verifier_id": "v"})


def test_execution_result_roundtrip():
    result = VerifierExecutionResult(status="FAILED", output="out", warnings=["w1", "w2"])
    back = VerifierExecutionResult.model_validate(result.model_dump(mode="json"))
    assert back == result
    assert back.warnings == ["w1", "w2"]


def test_execution_result_rejects_non_string_output():
    with pytest.raises(ValidationError):
        VerifierExecutionResult(status="OK", output=3, warnings=[])