"""Tag records and their association with monitors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping


def _int(value: Any) -> int:
    return 0 if value is None else int(value)


def _str(value: Any) -> str:
    return "" if value is None else str(value)


@dataclass
class Tag:
    """A tag that can be attached to monitors."""

    id: int = 0
    name: str = ""
    color: str = ""

    def __str__(self) -> str:
        return f"Tag{{ID: {self.id}, Name: {self.name}, Color: {self.color}}}"

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; a zero id is left out."""
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data["name"] = self.name
        data["color"] = self.color
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Tag":
        """Build a tag from its wire form."""
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            color=_str(data.get("color")),
        )


@dataclass
class MonitorTag:
    """The association between a monitor and a tag, with an optional value."""

    id: int = 0
    tag_id: int = 0
    monitor_id: int = 0
    value: str = ""
    name: str = ""
    color: str = ""

    def __str__(self) -> str:
        return (
            f"MonitorTag{{ID: {self.id}, TagID: {self.tag_id}, "
            f"MonitorID: {self.monitor_id}, Value: {self.value}, "
            f"Name: {self.name}, Color: {self.color}}}"
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form."""
        return {
            "id": self.id,
            "tag_id": self.tag_id,
            "monitor_id": self.monitor_id,
            "value": self.value,
            "name": self.name,
            "color": self.color,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MonitorTag":
        """Build an association from its wire form."""
        return cls(
            id=_int(data.get("id")),
            tag_id=_int(data.get("tag_id")),
            monitor_id=_int(data.get("monitor_id")),
            value=_str(data.get("value")),
            name=_str(data.get("name")),
            color=_str(data.get("color")),
        )


@dataclass
class TagWithMonitors(Tag):
    """A tag together with the IDs of the monitors that carry it."""

    monitors: list[int] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form: the tag's fields plus the monitor IDs."""
        data = super().to_dict()
        data["monitors"] = list(self.monitors)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TagWithMonitors":
        """Build the record from its wire form."""
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            color=_str(data.get("color")),
            monitors=[int(m) for m in data.get("monitors") or []],
        )


@dataclass
class MonitorTags:
    """All tag associations of one monitor."""

    monitor_id: int = 0
    tags: list[MonitorTag] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form."""
        return {
            "monitor_id": self.monitor_id,
            "tags": [t.to_dict() for t in self.tags],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "MonitorTags":
        """Build the record from its wire form."""
        return cls(
            monitor_id=_int(data.get("monitor_id")),
            tags=[MonitorTag.from_dict(t) for t in data.get("tags") or []],
        )