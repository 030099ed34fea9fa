"""Status page, public group, public monitor and incident records."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class Theme(str, Enum):
    """Status page themes."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class IncidentStyle(str, Enum):
    """Incident display styles."""

    INFO = "info"
    WARNING = "warning"
    DANGER = "danger"
    PRIMARY = "primary"


_THEMES = frozenset(t.value for t in Theme)
_STYLES = frozenset(s.value for s in IncidentStyle)


def valid_theme(theme: str) -> bool:
    """Return True if the theme is one the server accepts."""
    return str(getattr(theme, "value", theme)) in _THEMES


def valid_incident_style(style: str) -> bool:
    """Return True if the incident style is one the server accepts."""
    return str(getattr(style, "value", style)) in _STYLES


def _int(value: Any) -> int:
    return 0 if value is None else int(value)


def _str(value: Any) -> str:
    return "" if value is None else str(value)


def _bool(value: Any) -> bool:
    return False if value is None else bool(value)


@dataclass
class Incident:
    """An incident shown on a status page."""

    id: int = 0
    title: str = ""
    content: str = ""
    style: str = ""
    pin: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; a zero id is left out."""
        data: dict[str, Any] = {}
        if self.id:
            data["id"] = self.id
        data.update(title=self.title, content=self.content, style=self.style, pin=self.pin)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Incident":
        """Build an incident from its wire form."""
        return cls(
            id=_int(data.get("id")),
            title=_str(data.get("title")),
            content=_str(data.get("content")),
            style=_str(data.get("style")),
            pin=_bool(data.get("pin")),
        )


@dataclass
class PublicMonitor:
    """A monitor listed in a public group."""

    id: int = 0
    send_url: Optional[bool] = None

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form; an unset send_url is left out."""
        data: dict[str, Any] = {"id": self.id}
        if self.send_url is not None:
            data["sendUrl"] = self.send_url
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PublicMonitor":
        """Build the record from its wire form."""
        send_url = data.get("sendUrl")
        return cls(
            id=_int(data.get("id")),
            send_url=None if send_url is None else bool(send_url),
        )


@dataclass
class PublicGroup:
    """A named group of monitors on a status page."""

    id: int = 0
    name: str = ""
    weight: int = 0
    monitor_list: list[PublicMonitor] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form."""
        return {
            "id": self.id,
            "name": self.name,
            "weight": self.weight,
            "monitorList": [m.to_dict() for m in self.monitor_list],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "PublicGroup":
        """Build the group from its wire form."""
        return cls(
            id=_int(data.get("id")),
            name=_str(data.get("name")),
            weight=_int(data.get("weight")),
            monitor_list=[PublicMonitor.from_dict(m) for m in data.get("monitorList") or []],
        )


@dataclass
class StatusPage:
    """A public status page."""

    id: int = 0
    slug: str = ""
    title: str = ""
    description: str = ""
    icon: str = ""
    theme: str = ""
    published: bool = False
    show_tags: bool = False
    domain_name_list: list[str] = field(default_factory=list)
    google_analytics_id: str = ""
    custom_css: str = ""
    footer_text: str = ""
    show_powered_by: bool = False
    show_certificate_expiry: bool = False
    public_group_list: list[PublicGroup] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire form."""
        return {
            "id": self.id,
            "slug": self.slug,
            "title": self.title,
            "description": self.description,
            "icon": self.icon,
            "theme": self.theme,
            "published": self.published,
            "showTags": self.show_tags,
            "domainNameList": list(self.domain_name_list),
            "googleAnalyticsId": self.google_analytics_id,
            "customCSS": self.custom_css,
            "footerText": self.footer_text,
            "showPoweredBy": self.show_powered_by,
            "showCertificateExpiry": self.show_certificate_expiry,
            "publicGroupList": [g.to_dict() for g in self.public_group_list],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StatusPage":
        """Build the status page from its wire form."""
        return cls(
            id=_int(data.get("id")),
            slug=_str(data.get("slug")),
            title=_str(data.get("title")),
            description=_str(data.get("description")),
            icon=_str(data.get("icon")),
            theme=_str(data.get("theme")),
            published=_bool(data.get("published")),
            show_tags=_bool(data.get("showTags")),
            domain_name_list=[str(d) for d in data.get("domainNameList") or []],
            google_analytics_id=_str(data.get("googleAnalyticsId")),
            custom_css=_str(data.get("customCSS")),
            footer_text=_str(data.get("footerText")),
            show_powered_by=_bool(data.get("showPoweredBy")),
            show_certificate_expiry=_bool(data.get("showCertificateExpiry")),
            public_group_list=[PublicGroup.from_dict(g) for g in data.get("publicGroupList") or []],
        )