import pytest

from opscinema.errors import AppError, AppErrorCode


def _sample() -> AppError:
    return AppError(
        code=AppErrorCode.PERMISSION_DENIED,
        message="m",
        details="d",
        recoverable=True,
        action_hint="hint",
    )


def test_roundtrip_through_dict():
    err = _sample()
    assert AppError.from_dict(err.to_dict()) == err


def test_optional_fields_are_skipped_when_absent():
    err = AppError(code=AppErrorCode.NOT_FOUND, message="missing", recoverable=False)
    data = err.to_dict()
    assert "details" not in data
    assert "action_hint" not in data
    assert data["code"] == "NOT_FOUND"
    assert AppError.from_dict(data) == err


def test_str_uses_camel_case_code():
    assert str(_sample()) == "PermissionDenied: m"


def test_codes_use_screaming_snake_case():
    assert AppErrorCode.EXPORT_GATE_FAILED.value == "EXPORT_GATE_FAILED"
    assert AppErrorCode("JOB_CANCELLED") is AppErrorCode.JOB_CANCELLED


def test_code_given_as_string_is_normalised():
    err = AppError(code="CONFLICT", message="x")
    assert err.code is AppErrorCode.CONFLICT


def test_can_be_raised_and_caught():
    data = _sample().to_dict()
    with pytest.raises(AppError) as info:
        raise AppError.from_dict(data)
    assert info.value.to_dict() == data
    assert str(info.value) == "PermissionDenied: m"


def test_from_dict_rejects_unknown_code():
    with pytest.raises(ValueError):
        AppError.from_dict({"code": "NOPE", "message": "m", "recoverable": True})


def test_from_dict_rejects_missing_field():
    with pytest.raises(ValueError):
        AppError.from_dict({"code": "IO", "message": "m"})


def test_from_dict_rejects_wrong_types():
    with pytest.raises(ValueError):
        AppError.from_dict({"code": "IO", "message": "m", "recoverable": "yes"})