"""Contents of encrypted events and key sharing messages."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field, fields
from typing import Any, Mapping, TypeVar

from mtxstructs.event_types import EventType, event_type_from_string, event_type_to_string
from mtxstructs.media_info import _number, _object, _string

OLM_ALGORITHM = "m.olm.v1.curve25519-aes-sha2"
MEGOLM_ALGORITHM = "m.megolm.v1.aes-sha2"

_T = TypeVar("_T")


def _read_strings(cls: type[_T], obj: Mapping[str, Any]) -> _T:
    """Build cls from obj, every field a required string."""
    return cls(**{f.name: _string(obj, f.name) for f in fields(cls)})  # type: ignore[arg-type]


def _write_fields(value: Any) -> dict[str, Any]:
    """Write every field of value in declaration order."""
    return {f.name: getattr(value, f.name) for f in fields(value)}


@dataclass
class OlmCipherContent:
    """One Olm ciphertext and its message type."""

    body: str = ""
    type: int = 0

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "OlmCipherContent":
        return cls(body=_string(obj, "body"), type=_number(obj, "type"))

    def to_json(self) -> dict[str, Any]:
        return {"body": self.body, "type": self.type}


@dataclass
class OlmEncrypted:
    """Olm encrypted content, keyed by the recipient's identity key."""

    algorithm: str = OLM_ALGORITHM
    sender_key: str = ""
    ciphertext: dict[str, OlmCipherContent] = field(default_factory=dict)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "OlmEncrypted":
        return cls(
            algorithm=OLM_ALGORITHM,
            sender_key=_string(obj, "sender_key"),
            ciphertext={
                recipient: OlmCipherContent.from_json(content)
                for recipient, content in _object(obj, "ciphertext").items()
            },
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "algorithm": self.algorithm,
            "sender_key": self.sender_key,
            "ciphertext": {
                recipient: content.to_json() for recipient, content in self.ciphertext.items()
            },
        }


@dataclass
class Encrypted:
    """Content of an m.room.encrypted event (Megolm)."""

    algorithm: str = ""
    ciphertext: str = ""
    device_id: str = ""
    sender_key: str = ""
    session_id: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Encrypted":
        return _read_strings(cls, obj)

    def to_json(self) -> dict[str, Any]:
        return _write_fields(self)


@dataclass
class RoomKey:
    """Content of an m.room_key message that shares a session key."""

    algorithm: str = ""
    room_id: str = ""
    session_id: str = ""
    session_key: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "RoomKey":
        return _read_strings(cls, obj)

    def to_json(self) -> dict[str, Any]:
        return _write_fields(self)


class RequestAction(enum.Enum):
    """Whether a key request asks for a key or cancels an earlier request."""

    REQUEST = "request"
    CANCELLATION = "request_cancellation"


_BODY_FIELDS = ("room_id", "sender_key", "session_id", "algorithm")


@dataclass
class KeyRequest:
    """An m.room_key_request event: a request for a Megolm session key."""

    sender: str = ""
    type: EventType = EventType.ROOM_KEY_REQUEST
    action: RequestAction = RequestAction.REQUEST
    request_id: str = ""
    requesting_device_id: str = ""
    room_id: str = ""
    sender_key: str = ""
    session_id: str = ""
    algorithm: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "KeyRequest":
        content = _object(obj, "content")
        request = cls(
            sender=_string(obj, "sender"),
            type=event_type_from_string(_string(obj, "type")),
            request_id=_string(content, "request_id"),
            requesting_device_id=_string(content, "requesting_device_id"),
        )
        action = _string(content, "action")
        if action == RequestAction.REQUEST.value:
            body = _object(content, "body")
            request.action = RequestAction.REQUEST
            for key in _BODY_FIELDS:
                setattr(request, key, _string(body, key))
        elif action == RequestAction.CANCELLATION.value:
            request.action = RequestAction.CANCELLATION
        return request

    def to_json(self) -> dict[str, Any]:
        content: dict[str, Any] = {
            "request_id": self.request_id,
            "requesting_device_id": self.requesting_device_id,
        }
        if self.action is RequestAction.REQUEST:
            content["body"] = {
                "room_id": self.room_id,
                "sender_key": self.sender_key,
                "session_id": self.session_id,
                "algorithm": MEGOLM_ALGORITHM,
            }
        content["action"] = self.action.value
        return {
            "sender": self.sender,
            "type": event_type_to_string(self.type),
            "content": content,
        }