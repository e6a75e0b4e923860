"""Metadata describing thumbnails, images, files, audio and video."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Callable, Mapping, TypeVar


def _checked(value: Any, key: str, kinds: Any, what: str) -> Any:
    """Return value if it is one of kinds, else raise TypeError naming key."""
    if not isinstance(value, kinds):
        raise TypeError(f"{key!r} must be {what}, not {type(value).__name__}")
    return value


def _string(obj: Mapping[str, Any], key: str) -> str:
    return _checked(obj[key], key, str, "a string")


def _number(obj: Mapping[str, Any], key: str) -> int:
    return int(_checked(obj[key], key, (int, float), "a number"))


def _bool(obj: Mapping[str, Any], key: str) -> bool:
    return _checked(obj[key], key, bool, "a boolean")


def _object(obj: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    return _checked(obj[key], key, Mapping, "an object")


_T = TypeVar("_T")


def _parse_fields(cls: type[_T], obj: Mapping[str, Any]) -> _T:
    """Build cls from obj, reading only the fields that are present."""
    return cls(
        **{
            f.name: _PARSERS[f.type](obj, f.name)
            for f in fields(cls)  # type: ignore[arg-type]
            if f.name in obj
        }
    )


def _dump_fields(value: Any, order: tuple[str, ...]) -> dict[str, Any]:
    """Write every field of value named in order, in that order."""
    return {key: _encode(getattr(value, key)) for key in order}


def _encode(value: Any) -> Any:
    return value.to_json() if isinstance(value, ThumbnailInfo) else value


@dataclass
class ThumbnailInfo:
    """Size and type of a thumbnail."""

    h: int = 0
    w: int = 0
    size: int = 0
    mimetype: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "ThumbnailInfo":
        return _parse_fields(cls, obj)

    def to_json(self) -> dict[str, Any]:
        return _dump_fields(self, ("h", "w", "size", "mimetype"))


def _thumbnail(obj: Mapping[str, Any], key: str) -> ThumbnailInfo:
    return ThumbnailInfo.from_json(_object(obj, key))


_PARSERS: dict[str, Callable[[Mapping[str, Any], str], Any]] = {
    "int": _number,
    "str": _string,
    "ThumbnailInfo": _thumbnail,
}


@dataclass
class ImageInfo:
    """Size, type and thumbnail of an image."""

    h: int = 0
    w: int = 0
    size: int = 0
    mimetype: str = ""
    thumbnail_url: str = ""
    thumbnail_info: ThumbnailInfo = field(default_factory=ThumbnailInfo)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "ImageInfo":
        return _parse_fields(cls, obj)

    def to_json(self) -> dict[str, Any]:
        return _dump_fields(
            self, ("h", "w", "size", "mimetype", "thumbnail_url", "thumbnail_info")
        )


@dataclass
class FileInfo:
    """Size, type and thumbnail of a file."""

    size: int = 0
    mimetype: str = ""
    thumbnail_url: str = ""
    thumbnail_info: ThumbnailInfo = field(default_factory=ThumbnailInfo)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "FileInfo":
        return _parse_fields(cls, obj)

    def to_json(self) -> dict[str, Any]:
        return _dump_fields(self, ("size", "mimetype", "thumbnail_url", "thumbnail_info"))


@dataclass
class AudioInfo:
    """Duration (ms), size and type of an audio clip."""

    duration: int = 0
    size: int = 0
    mimetype: str = ""

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "AudioInfo":
        return _parse_fields(cls, obj)

    def to_json(self) -> dict[str, Any]:
        return _dump_fields(self, ("size", "duration", "mimetype"))


@dataclass
class VideoInfo:
    """Dimensions, duration (ms), size, type and thumbnail of a video."""

    h: int = 0
    w: int = 0
    size: int = 0
    duration: int = 0
    mimetype: str = ""
    thumbnail_url: str = ""
    thumbnail_info: ThumbnailInfo = field(default_factory=ThumbnailInfo)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "VideoInfo":
        return _parse_fields(cls, obj)

    def to_json(self) -> dict[str, Any]:
        return _dump_fields(
            self,
            ("size", "h", "w", "duration", "thumbnail_url", "thumbnail_info", "mimetype"),
        )