"""Event and message type names and their lookup."""

from __future__ import annotations

import enum
from typing import Any, Mapping, Optional


class EventType(enum.Enum):
    """Known event types; the value is the wire name."""

    ROOM_KEY_REQUEST = "m.room_key_request"
    ROOM_ALIASES = "m.room.aliases"
    ROOM_AVATAR = "m.room.avatar"
    ROOM_CANONICAL_ALIAS = "m.room.canonical_alias"
    ROOM_CREATE = "m.room.create"
    ROOM_ENCRYPTED = "m.room.encrypted"
    ROOM_ENCRYPTION = "m.room.encryption"
    ROOM_GUEST_ACCESS = "m.room.guest_access"
    ROOM_HISTORY_VISIBILITY = "m.room.history_visibility"
    ROOM_JOIN_RULES = "m.room.join_rules"
    ROOM_MEMBER = "m.room.member"
    ROOM_MESSAGE = "m.room.message"
    ROOM_NAME = "m.room.name"
    ROOM_POWER_LEVELS = "m.room.power_levels"
    ROOM_TOPIC = "m.room.topic"
    ROOM_REDACTION = "m.room.redaction"
    ROOM_PINNED_EVENTS = "m.room.pinned_events"
    STICKER = "m.sticker"
    TAG = "m.tag"
    UNSUPPORTED = ""


class MessageType(enum.Enum):
    """Known message types of room messages."""

    AUDIO = enum.auto()
    EMOTE = enum.auto()
    FILE = enum.auto()
    IMAGE = enum.auto()
    LOCATION = enum.auto()
    NOTICE = enum.auto()
    TEXT = enum.auto()
    VIDEO = enum.auto()
    UNKNOWN = enum.auto()


_MESSAGE_TYPES = {
    "m.audio": MessageType.AUDIO,
    "m.emote": MessageType.EMOTE,
    "m.file": MessageType.FILE,
    "m.image": MessageType.IMAGE,
    "m.location": MessageType.LOCATION,
    "m.notice": MessageType.NOTICE,
    "m.text": MessageType.TEXT,
    "m.video": MessageType.VIDEO,
}


def event_type_from_string(type_: str) -> EventType:
    """Map a wire name to an event type; unknown names are UNSUPPORTED."""
    try:
        return EventType(type_)
    except ValueError:
        return EventType.UNSUPPORTED


def event_type_to_string(event_type: EventType) -> str:
    """Return the wire name of an event type (empty for UNSUPPORTED)."""
    return event_type.value


def _string_field(obj: Mapping[str, Any], key: str) -> str:
    value = obj[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, not {type(value).__name__}")
    return value


def event_type_of(obj: Mapping[str, Any]) -> EventType:
    """Return the type of an event object from its "type" field."""
    if "type" in obj:
        return event_type_from_string(_string_field(obj, "type"))
    return EventType.UNSUPPORTED


def message_type_from_string(type_: str) -> MessageType:
    """Map a msgtype name to a message type; unknown names are UNKNOWN."""
    return _MESSAGE_TYPES.get(type_, MessageType.UNKNOWN)


def message_type_of(obj: Optional[Mapping[str, Any]]) -> MessageType:
    """Return the message type of a content object from its "msgtype" field."""
    if obj is None or "msgtype" not in obj:
        return MessageType.UNKNOWN
    return message_type_from_string(_string_field(obj, "msgtype"))