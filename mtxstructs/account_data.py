"""Contents of account data events."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from mtxstructs.media_info import _object


@dataclass
class Tag:
    """Content of an m.tag event: tag names mapped to their properties."""

    tags: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, obj: Mapping[str, Any]) -> "Tag":
        return cls(tags=dict(_object(obj, "tags")))

    def to_json(self) -> dict[str, Any]:
        return {"tags": dict(self.tags)}