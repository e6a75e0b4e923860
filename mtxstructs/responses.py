"""Responses for key claims, key changes and groups."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _object(obj: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = obj[key]
    if not isinstance(value, Mapping):
        raise TypeError(f"{key!r} must be an object, not {type(value).__name__}")
    return value


def _string_list(obj: Mapping[str, Any], key: str) -> list[str]:
    value = obj[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"{key!r} must be a list of strings")
    return list(value)


def _nullable_string(obj: Mapping[str, Any], key: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, not {type(value).__name__}")
    return value


@dataclass
class ClaimKeys:
    """Response of a one-time key claim."""

    failures: dict[str, Any] = field(default_factory=dict)
    one_time_keys: dict[str, dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "ClaimKeys":
        failures = dict(_object(obj, "failures"))
        keys = _object(obj, "one_time_keys")
        one_time_keys = {
            user: dict(_object(keys, user)) for user in keys
        }
        return cls(failures=failures, one_time_keys=one_time_keys)


@dataclass
class KeyChanges:
    """Users whose device keys changed, and users who left shared rooms."""

    changed: list[str] = field(default_factory=list)
    left: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "KeyChanges":
        return cls(changed=_string_list(obj, "changed"), left=_string_list(obj, "left"))


@dataclass
class JoinedGroups:
    """The groups the user belongs to."""

    groups: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "JoinedGroups":
        return cls(groups=_string_list(obj, "groups"))


@dataclass
class GroupProfile:
    """Name and avatar of a group."""

    name: str = ""
    avatar_url: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "GroupProfile":
        return cls(
            name=_nullable_string(obj, "name"),
            avatar_url=_nullable_string(obj, "avatar_url"),
        )