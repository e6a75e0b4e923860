import pytest

from mtxstructs.errors import (
    Error,
    ErrorCode,
    error_code_from_string,
    error_code_to_string,
)


@pytest.mark.parametrize(
    "code", [c for c in ErrorCode if c is not ErrorCode.M_NOT_FOUND]
)
def test_round_trip(code):
    assert error_code_from_string(error_code_to_string(code)) is code


def test_to_string_value():
    assert error_code_to_string(ErrorCode.M_FORBIDDEN) == "M_FORBIDDEN"
    assert error_code_to_string(ErrorCode.M_MISSING_TOKEN) == "M_MISSING_TOKEN"


def test_not_found_is_read_as_unrecognized():
    assert error_code_to_string(ErrorCode.M_NOT_FOUND) == "M_NOT_FOUND"
    assert error_code_from_string("M_NOT_FOUND") is ErrorCode.M_UNRECOGNIZED


def test_unknown_code():
    assert error_code_from_string("M_SOMETHING_ELSE") is ErrorCode.M_UNRECOGNIZED
    assert error_code_from_string("") is ErrorCode.M_UNRECOGNIZED


def test_error_from_json():
    err = Error.from_json({"errcode": "M_LIMIT_EXCEEDED", "error": "Too many requests"})
    assert err.errcode is ErrorCode.M_LIMIT_EXCEEDED
    assert err.error == "Too many requests"


def test_error_from_json_missing_field():
    with pytest.raises(KeyError):
        Error.from_json({"errcode": "M_FORBIDDEN"})
    with pytest.raises(KeyError):
        Error.from_json({"error": "nope"})


def test_error_from_json_wrong_type():
    with pytest.raises(TypeError):
        Error.from_json({"errcode": 3, "error": "nope"})