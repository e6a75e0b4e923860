"""Request bodies sent to the client-server API."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


class Visibility(enum.Enum):
    """Whether a new room is published in the room directory."""

    PRIVATE = "private"
    PUBLIC = "public"


class Preset(enum.Enum):
    """State presets for a new room."""

    PRIVATE_CHAT = enum.auto()
    PUBLIC_CHAT = enum.auto()
    TRUSTED_PRIVATE_CHAT = enum.auto()


_PRESET_NAMES = {
    Preset.PRIVATE_CHAT: "private_chat",
    Preset.PUBLIC_CHAT: "public_chat",
    Preset.TRUSTED_PRIVATE_CHAT: "trusted_private_chat",
}


def visibility_to_string(visibility: Visibility) -> str:
    """Return the wire name of a room visibility."""
    return visibility.value


def preset_to_string(preset: Preset) -> str:
    """Return the wire name of a room preset."""
    return _PRESET_NAMES.get(preset, "private_chat")


@dataclass
class CreateRoom:
    """Body of a room creation request."""

    name: str = ""
    topic: str = ""
    room_alias_name: str = ""
    invite: list[str] = field(default_factory=list)
    is_direct: bool = False
    preset: Preset = Preset.PRIVATE_CHAT
    visibility: Visibility = Visibility.PRIVATE

    def to_json(self) -> dict[str, Any]:
        optional = {
            "name": self.name,
            "topic": self.topic,
            "room_alias_name": self.room_alias_name,
            "invite": list(self.invite),
        }
        obj: dict[str, Any] = {key: value for key, value in optional.items() if value}
        obj["is_direct"] = self.is_direct
        obj["preset"] = preset_to_string(self.preset)
        obj["visibility"] = visibility_to_string(self.visibility)
        return obj


@dataclass
class Login:
    """Body of a login request."""

    user: str = ""
    password: str = ""
    medium: str = ""
    address: str = ""
    token: str = ""
    device_id: str = ""
    initial_device_display_name: str = ""
    type: str = "m.login.password"

    def to_json(self) -> dict[str, Any]:
        optional = {
            "medium": self.medium,
            "address": self.address,
            "token": self.token,
            "password": self.password,
            "device_id": self.device_id,
            "initial_device_display_name": self.initial_device_display_name,
        }
        obj: dict[str, Any] = {key: value for key, value in optional.items() if value}
        obj["user"] = self.user
        obj["type"] = self.type
        return obj


@dataclass
class AvatarUrl:
    """Body of a request that sets the user's avatar."""

    avatar_url: str = ""

    def to_json(self) -> dict[str, Any]:
        return {"avatar_url": self.avatar_url}


@dataclass
class DisplayName:
    """Body of a request that sets the user's display name."""

    displayname: str = ""

    def to_json(self) -> dict[str, Any]:
        return {"displayname": self.displayname}


@dataclass
class RoomInvite:
    """Body of a request that invites a user to a room."""

    user_id: str = ""

    def to_json(self) -> dict[str, Any]:
        return {"user_id": self.user_id}


@dataclass
class TypingNotification:
    """Body of a typing notification; timeout is in milliseconds."""

    typing: bool = False
    timeout: int = 15000

    def to_json(self) -> dict[str, Any]:
        return {"typing": self.typing, "timeout": self.timeout}


@dataclass
class UploadKeys:
    """Body of a key upload: the device keys object and one-time keys."""

    device_keys: dict[str, Any] = field(default_factory=dict)
    one_time_keys: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> dict[str, Any]:
        obj: dict[str, Any] = {}
        if self.device_keys.get("user_id"):
            obj["device_keys"] = self.device_keys
        if self.one_time_keys:
            obj["one_time_keys"] = self.one_time_keys
        return obj


@dataclass
class QueryKeys:
    """Body of a key query: user IDs mapped to the devices to query."""

    timeout: int = 10000
    device_keys: dict[str, list[str]] = field(default_factory=dict)
    token: str = ""

    def to_json(self) -> dict[str, Any]:
        return {
            "timeout": self.timeout,
            "device_keys": {user: list(devices) for user, devices in self.device_keys.items()},
            "token": self.token,
        }