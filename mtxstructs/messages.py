"""Contents of room messages and redactions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, TypeVar

from mtxstructs.media_info import AudioInfo, FileInfo, ImageInfo, VideoInfo

FORMAT_MSG_TYPE = "org.matrix.custom.html"

_Info = TypeVar("_Info", AudioInfo, FileInfo, ImageInfo, VideoInfo)


def _string(obj: Mapping[str, Any], key: str) -> str:
    value = obj[key]
    if not isinstance(value, str):
        raise TypeError(f"{key!r} must be a string, not {type(value).__name__}")
    return value


def _optional_string(obj: Mapping[str, Any], key: str, default: str = "") -> str:
    return _string(obj, key) if key in obj else default


def _info(obj: Mapping[str, Any], info_type: type[_Info]) -> _Info:
    if "info" not in obj:
        return info_type()
    value = obj["info"]
    if not isinstance(value, Mapping):
        raise TypeError(f"'info' must be an object, not {type(value).__name__}")
    return info_type.from_json(value)


def _formatted(
    msgtype: str, body: str, formatted_body: str
) -> dict[str, Any]:
    obj: dict[str, Any] = {"msgtype": msgtype, "body": body}
    if formatted_body:
        obj["format"] = FORMAT_MSG_TYPE
        obj["formatted_body"] = formatted_body
    return obj


@dataclass
class Audio:
    """Content of an m.audio message."""

    body: str = ""
    msgtype: str = "m.audio"
    url: str = ""
    info: AudioInfo = field(default_factory=AudioInfo)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Audio":
        return cls(
            body=_string(obj, "body"),
            msgtype=_string(obj, "msgtype"),
            url=_optional_string(obj, "url"),
            info=_info(obj, AudioInfo),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "msgtype": "m.audio",
            "body": self.body,
            "url": self.url,
            "info": self.info.to_json(),
        }


@dataclass
class Emote:
    """Content of an m.emote message."""

    body: str = ""
    msgtype: str = "m.emote"
    format: str = ""
    formatted_body: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Emote":
        return cls(
            body=_string(obj, "body"),
            msgtype=_string(obj, "msgtype"),
            format=_optional_string(obj, "format"),
            formatted_body=_optional_string(obj, "formatted_body"),
        )

    def to_json(self) -> dict[str, Any]:
        return _formatted("m.emote", self.body, self.formatted_body)


@dataclass
class File:
    """Content of an m.file message."""

    body: str = ""
    msgtype: str = "m.file"
    filename: str = ""
    url: str = ""
    info: FileInfo = field(default_factory=FileInfo)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "File":
        return cls(
            body=_string(obj, "body"),
            msgtype=_string(obj, "msgtype"),
            filename=_optional_string(obj, "filename"),
            url=_optional_string(obj, "url"),
            info=_info(obj, FileInfo),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "msgtype": "m.file",
            "body": self.body,
            "filename": self.filename,
            "url": self.url,
            "info": self.info.to_json(),
        }


@dataclass
class Image:
    """Content of an m.image message."""

    body: str = ""
    msgtype: str = "m.image"
    url: str = ""
    info: ImageInfo = field(default_factory=ImageInfo)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Image":
        return cls(
            body=_string(obj, "body"),
            msgtype=_string(obj, "msgtype"),
            url=_optional_string(obj, "url"),
            info=_info(obj, ImageInfo),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "msgtype": "m.image",
            "body": self.body,
            "url": self.url,
            "info": self.info.to_json(),
        }


@dataclass
class StickerImage:
    """Content of an m.sticker event."""

    body: str = ""
    url: str = ""
    info: ImageInfo = field(default_factory=ImageInfo)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "StickerImage":
        return cls(
            body=_string(obj, "body"),
            url=_optional_string(obj, "url"),
            info=_info(obj, ImageInfo),
        )

    def to_json(self) -> dict[str, Any]:
        return {"body": self.body, "url": self.url, "info": self.info.to_json()}


@dataclass
class Notice:
    """Content of an m.notice message."""

    body: str = ""
    msgtype: str = "m.notice"
    format: str = ""
    formatted_body: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Notice":
        return cls(
            body=_string(obj, "body"),
            msgtype=_string(obj, "msgtype"),
            format=_optional_string(obj, "format"),
            formatted_body=_optional_string(obj, "formatted_body"),
        )

    def to_json(self) -> dict[str, Any]:
        return _formatted("m.notice", self.body, self.formatted_body)


@dataclass
class Text:
    """Content of an m.text message."""

    body: str = ""
    msgtype: str = "m.text"
    format: str = ""
    formatted_body: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Text":
        return cls(
            body=_string(obj, "body"),
            msgtype=_string(obj, "msgtype"),
            format=_optional_string(obj, "format"),
            formatted_body=_optional_string(obj, "formatted_body"),
        )

    def to_json(self) -> dict[str, Any]:
        return _formatted("m.text", self.body, self.formatted_body)


@dataclass
class Video:
    """Content of an m.video message."""

    body: str = ""
    msgtype: str = "m.video"
    url: str = ""
    info: VideoInfo = field(default_factory=VideoInfo)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Video":
        return cls(
            body=_string(obj, "body"),
            msgtype=_string(obj, "msgtype"),
            url=_optional_string(obj, "url"),
            info=_info(obj, VideoInfo),
        )

    def to_json(self) -> dict[str, Any]:
        return {
            "msgtype": "m.video",
            "body": self.body,
            "url": self.url,
            "info": self.info.to_json(),
        }


@dataclass
class Redaction:
    """Content of an m.room.redaction event."""

    reason: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Redaction":
        reason: Optional[str] = None
        if obj.get("reason") is not None:
            reason = _string(obj, "reason")
        return cls(reason=reason if reason is not None else "")

    def to_json(self) -> dict[str, Any]:
        return {"reason": self.reason}