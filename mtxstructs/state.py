"""Contents of room state events."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from mtxstructs.media_info import ImageInfo, _bool, _checked, _object, _string


def _nullable_string(obj: Mapping[str, Any], key: str, *, required: bool) -> Optional[str]:
    """Return the string under key, or None when it is null (or absent and optional)."""
    if not required and key not in obj:
        return None
    if obj[key] is None:
        return None
    return _string(obj, key)


def _string_list(obj: Mapping[str, Any], key: str) -> list[str]:
    value = obj[key]
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise TypeError(f"{key!r} must be a list of strings")
    return list(value)


def _level(value: Any, key: str) -> int:
    return int(_checked(value, key, (int, float), "a number"))


def _level_map(obj: Mapping[str, Any], key: str) -> dict[str, int]:
    return {name: _level(level, f"{key}.{name}") for name, level in _object(obj, key).items()}


@dataclass
class Aliases:
    """Content of an m.room.aliases event."""

    aliases: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Aliases":
        return cls(aliases=_string_list(obj, "aliases"))

    def to_json(self) -> dict[str, Any]:
        return {"aliases": list(self.aliases)}


@dataclass
class Avatar:
    """Content of an m.room.avatar event."""

    image_info: ImageInfo = field(default_factory=ImageInfo)
    url: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Avatar":
        info = obj.get("info")
        image_info = ImageInfo.from_json(info) if info is not None else ImageInfo()
        url = _nullable_string(obj, "url", required=False)
        return cls(image_info=image_info, url=url if url is not None else "")

    def to_json(self) -> dict[str, Any]:
        return {"info": self.image_info.to_json(), "url": self.url}


@dataclass
class CanonicalAlias:
    """Content of an m.room.canonical_alias event."""

    alias: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "CanonicalAlias":
        alias = _nullable_string(obj, "alias", required=True)
        return cls(alias=alias if alias is not None else "")

    def to_json(self) -> dict[str, Any]:
        return {"alias": self.alias}


@dataclass
class Create:
    """Content of an m.room.create event."""

    creator: str = ""
    federate: bool = True

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Create":
        create = cls(creator=_string(obj, "creator"))
        if "m.federate" in obj:
            create.federate = _bool(obj, "m.federate")
        return create

    def to_json(self) -> dict[str, Any]:
        return {"creator": self.creator, "m.federate": self.federate}


@dataclass
class Encryption:
    """Content of an m.room.encryption event."""

    algorithm: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Encryption":
        return cls(algorithm=_string(obj, "algorithm"))

    def to_json(self) -> dict[str, Any]:
        return {"algorithm": self.algorithm}


class AccessState(enum.Enum):
    """Whether guests may join a room."""

    CAN_JOIN = "can_join"
    FORBIDDEN = "forbidden"


def access_state_to_string(state: AccessState) -> str:
    """Return the wire name of a guest access state."""
    return state.value


def string_to_access_state(state: str) -> AccessState:
    """Parse a guest access state; anything but "can_join" is FORBIDDEN."""
    return AccessState.CAN_JOIN if state == "can_join" else AccessState.FORBIDDEN


@dataclass
class GuestAccess:
    """Content of an m.room.guest_access event."""

    guest_access: AccessState = AccessState.FORBIDDEN

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "GuestAccess":
        return cls(guest_access=string_to_access_state(_string(obj, "guest_access")))

    def to_json(self) -> dict[str, Any]:
        return {"guest_access": access_state_to_string(self.guest_access)}


class Visibility(enum.Enum):
    """Who may read the history of a room."""

    WORLD_READABLE = "world_readable"
    INVITED = "invited"
    SHARED = "shared"
    JOINED = "joined"


def visibility_to_string(rule: Visibility) -> str:
    """Return the wire name of a history visibility rule."""
    return rule.value


def string_to_visibility(rule: str) -> Visibility:
    """Parse a history visibility rule; unknown names are JOINED."""
    try:
        return Visibility(rule)
    except ValueError:
        return Visibility.JOINED


@dataclass
class HistoryVisibility:
    """Content of an m.room.history_visibility event."""

    history_visibility: Visibility = Visibility.SHARED

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "HistoryVisibility":
        return cls(history_visibility=string_to_visibility(_string(obj, "history_visibility")))

    def to_json(self) -> dict[str, Any]:
        return {"history_visibility": visibility_to_string(self.history_visibility)}


class JoinRule(enum.Enum):
    """Who may join a room."""

    PUBLIC = "public"
    INVITE = "invite"
    KNOCK = "knock"
    PRIVATE = "private"


_JOIN_RULES = {
    "public": JoinRule.PUBLIC,
    "invite": JoinRule.INVITE,
    # Only the capitalised spelling is recognised when parsing.
    "Knock": JoinRule.KNOCK,
}


def join_rule_to_string(rule: JoinRule) -> str:
    """Return the wire name of a join rule."""
    return rule.value


def string_to_join_rule(rule: str) -> JoinRule:
    """Parse a join rule; unrecognised names are PRIVATE."""
    return _JOIN_RULES.get(rule, JoinRule.PRIVATE)


@dataclass
class JoinRules:
    """Content of an m.room.join_rules event."""

    join_rule: JoinRule = JoinRule.INVITE

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "JoinRules":
        return cls(join_rule=string_to_join_rule(_string(obj, "join_rule")))

    def to_json(self) -> dict[str, Any]:
        return {"join_rule": join_rule_to_string(self.join_rule)}


class Membership(enum.Enum):
    """Membership state of a user in a room."""

    JOIN = "join"
    INVITE = "invite"
    BAN = "ban"
    LEAVE = "leave"
    KNOCK = "knock"


def membership_to_string(membership: Membership) -> str:
    """Return the wire name of a membership state."""
    return membership.value


def string_to_membership(membership: str) -> Membership:
    """Parse a membership state; unknown names are KNOCK."""
    try:
        return Membership(membership)
    except ValueError:
        return Membership.KNOCK


@dataclass
class Member:
    """Content of an m.room.member event."""

    membership: Membership = Membership.JOIN
    avatar_url: str = ""
    display_name: str = ""
    is_direct: bool = False

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Member":
        member = cls(membership=string_to_membership(_string(obj, "membership")))
        display_name = _nullable_string(obj, "displayname", required=False)
        if display_name is not None:
            member.display_name = display_name
        avatar_url = _nullable_string(obj, "avatar_url", required=False)
        if avatar_url is not None:
            member.avatar_url = avatar_url
        if "is_direct" in obj:
            member.is_direct = _bool(obj, "is_direct")
        return member

    def to_json(self) -> dict[str, Any]:
        return {
            "membership": membership_to_string(self.membership),
            "avatar_url": self.avatar_url,
            "displayname": self.display_name,
            "is_direct": self.is_direct,
        }


@dataclass
class Name:
    """Content of an m.room.name event."""

    name: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Name":
        name = _nullable_string(obj, "name", required=True)
        return cls(name=name if name is not None else "")

    def to_json(self) -> dict[str, Any]:
        return {"name": self.name}


@dataclass
class PinnedEvents:
    """Content of an m.room.pinned_events event."""

    pinned: list[str] = field(default_factory=list)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "PinnedEvents":
        return cls(pinned=_string_list(obj, "pinned"))

    def to_json(self) -> dict[str, Any]:
        return {"pinned": list(self.pinned)}


_MODERATOR = 50
_USER = 0


@dataclass
class PowerLevels:
    """Content of an m.room.power_levels event."""

    ban: int = _MODERATOR
    invite: int = _MODERATOR
    kick: int = _MODERATOR
    redact: int = _MODERATOR
    events: dict[str, int] = field(default_factory=dict)
    users: dict[str, int] = field(default_factory=dict)
    events_default: int = _USER
    users_default: int = _USER
    state_default: int = _MODERATOR

    _LEVELS = ("ban", "invite", "kick", "redact", "events_default", "users_default", "state_default")

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "PowerLevels":
        levels = cls()
        for key in cls._LEVELS:
            if key in obj:
                setattr(levels, key, _level(obj[key], key))
        for key in ("events", "users"):
            if key in obj:
                setattr(levels, key, _level_map(obj, key))
        return levels

    def to_json(self) -> dict[str, Any]:
        obj: dict[str, Any] = {
            "ban": self.ban,
            "kick": self.kick,
            "invite": self.invite,
            "redact": self.redact,
        }
        if self.events:
            obj["events"] = dict(self.events)
        if self.users:
            obj["users"] = dict(self.users)
        obj["events_default"] = self.events_default
        obj["users_default"] = self.users_default
        obj["state_default"] = self.state_default
        return obj


@dataclass
class Topic:
    """Content of an m.room.topic event."""

    topic: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Topic":
        topic = _nullable_string(obj, "topic", required=True)
        return cls(topic=topic if topic is not None else "")

    def to_json(self) -> dict[str, Any]:
        return {"topic": self.topic}