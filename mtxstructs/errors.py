"""Error codes and error bodies returned by a Matrix homeserver."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Mapping


class ErrorCode(enum.Enum):
    """Standard error codes a homeserver may report."""

    M_UNRECOGNIZED = enum.auto()
    M_FORBIDDEN = enum.auto()
    M_UNKNOWN_TOKEN = enum.auto()
    M_BAD_JSON = enum.auto()
    M_NOT_JSON = enum.auto()
    M_NOT_FOUND = enum.auto()
    M_LIMIT_EXCEEDED = enum.auto()
    M_USER_IN_USE = enum.auto()
    M_INVALID_USERNAME = enum.auto()
    M_ROOM_IN_USE = enum.auto()
    M_INVALID_ROOM_STATE = enum.auto()
    M_BAD_PAGINATION = enum.auto()
    M_THREEPID_IN_USE = enum.auto()
    M_THREEPID_NOT_FOUND = enum.auto()
    M_SERVER_NOT_TRUSTED = enum.auto()
    M_MISSING_TOKEN = enum.auto()


# M_NOT_FOUND is deliberately absent: it is read back as M_UNRECOGNIZED.
_PARSEABLE = {code.name: code for code in ErrorCode if code is not ErrorCode.M_NOT_FOUND}


def error_code_to_string(code: ErrorCode) -> str:
    """Return the wire name of an error code."""
    return code.name


def error_code_from_string(code: str) -> ErrorCode:
    """Parse a wire error code; unknown codes become M_UNRECOGNIZED."""
    return _PARSEABLE.get(code, ErrorCode.M_UNRECOGNIZED)


def _require_str(obj: Mapping[str, Any], key: str) -> str:
    value = obj[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, not {type(value).__name__}")
    return value


@dataclass
class Error:
    """An error body: a code and a human readable message."""

    errcode: ErrorCode = ErrorCode.M_UNRECOGNIZED
    error: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Error":
        return cls(
            errcode=error_code_from_string(_require_str(obj, "errcode")),
            error=_require_str(obj, "error"),
        )