"""Tag operations and the local cache of monitor-tag associations."""

from __future__ import annotations

import json
import threading
from dataclasses import replace
from typing import Any, Callable, Iterable, Mapping, Union

from .errors import KumaError, NotFoundError
from .tag import MonitorTag, Tag

Emit = Callable[..., Mapping[str, Any]]
MonitorTagLike = Union[MonitorTag, Mapping[str, Any]]
FetchMonitorTags = Callable[[int], Iterable[MonitorTagLike]]


def _as_monitor_tag(item: MonitorTagLike) -> MonitorTag:
    if isinstance(item, MonitorTag):
        return replace(item)
    return MonitorTag.from_dict(item)


class TagService:
    """Tag and monitor-tag operations.

    ``emit(event, *args)`` sends a request to the server and returns its
    response mapping; ``fetch_monitor_tags(monitor_id)`` loads the current
    tag associations of one monitor. Monitor tags are read from a local cache
    that is fed by ``set_monitor_tags`` and ``remove_monitor``.
    """

    def __init__(self, emit: Emit, fetch_monitor_tags: FetchMonitorTags) -> None:
        self._emit = emit
        self._fetch_monitor_tags = fetch_monitor_tags
        self._lock = threading.Lock()
        self._monitor_tags: dict[int, list[MonitorTag]] = {}

    # cache maintenance

    def set_monitor_tags(self, monitor_id: int, tags: Iterable[MonitorTagLike]) -> None:
        """Store the tag associations of a monitor in the cache."""
        normalized = [_as_monitor_tag(t) for t in tags]
        with self._lock:
            self._monitor_tags[monitor_id] = normalized

    def remove_monitor(self, monitor_id: int) -> None:
        """Drop a monitor from the cache."""
        with self._lock:
            self._monitor_tags.pop(monitor_id, None)

    # server calls

    def _call(self, context: str, event: str, *args: Any) -> Mapping[str, Any]:
        try:
            response = self._emit(event, *args)
        except Exception as exc:
            raise KumaError(f"{context}: {exc}") from exc
        if not response.get("ok"):
            raise KumaError(f"{context}: {response.get('msg') or ''}")
        return response

    def _refresh(self, context: str, monitor_id: int) -> None:
        try:
            tags = [_as_monitor_tag(t) for t in self._fetch_monitor_tags(monitor_id)]
        except Exception as exc:
            raise KumaError(f"{context}: failed to refresh cache: {exc}") from exc
        with self._lock:
            self._monitor_tags[monitor_id] = tags

    # tags

    def get_tags(self) -> list[Tag]:
        """Return all tags known to the server."""
        response = self._call("get tags", "getTags")
        try:
            return [Tag.from_dict(t) for t in response.get("tags") or []]
        except (TypeError, ValueError, AttributeError) as exc:
            raise KumaError(f"get tags: {exc}") from exc

    def get_tag(self, tag_id: int) -> Tag:
        """Return the tag with the given ID or raise NotFoundError."""
        for tag in self.get_tags():
            if tag.id == tag_id:
                return tag
        raise NotFoundError(f"get tag {tag_id}")

    def create_tag(self, tag: Tag) -> int:
        """Create a tag and return its new ID."""
        response = self._call("create tag", "addTag", tag.to_dict())
        try:
            return Tag.from_dict(response.get("tag") or {}).id
        except (TypeError, ValueError, AttributeError) as exc:
            raise KumaError(f"create tag: {exc}") from exc

    def update_tag(self, tag: Tag) -> None:
        """Update an existing tag."""
        self._call(f"update tag {tag.id}", "editTag", tag.to_dict())

    def delete_tag(self, tag_id: int) -> None:
        """Delete a tag; its monitor associations go with it."""
        self._call(f"delete tag {tag_id}", "deleteTag", tag_id)
        with self._lock:
            for monitor_id, tags in self._monitor_tags.items():
                self._monitor_tags[monitor_id] = [t for t in tags if t.tag_id != tag_id]

    # monitor-tag associations

    def add_monitor_tag(self, tag_id: int, monitor_id: int, value: str) -> MonitorTag:
        """Attach a tag with a value to a monitor and return the association."""
        context = f"add monitor tag (tag {tag_id}, monitor {monitor_id})"
        self._call(context, "addMonitorTag", tag_id, monitor_id, value)
        self._refresh(context, monitor_id)
        with self._lock:
            for tag in self._monitor_tags.get(monitor_id, []):
                if tag.tag_id == tag_id and tag.value == value:
                    return replace(tag)
        raise KumaError(f"{context}: tag added but not found in monitor tags")

    def update_monitor_tag(self, tag_id: int, monitor_id: int, value: str) -> None:
        """Change the value of a monitor-tag association."""
        context = f"update monitor tag (tag {tag_id}, monitor {monitor_id})"
        self._call(context, "editMonitorTag", tag_id, monitor_id, value)
        self._refresh(context, monitor_id)

    def delete_monitor_tag_with_value(self, tag_id: int, monitor_id: int, value: str) -> None:
        """Remove the association of a tag with a monitor that has the given value."""
        context = (
            f"delete monitor tag with value (tag {tag_id}, monitor {monitor_id}, "
            f"value {json.dumps(value)})"
        )
        self._call(context, "deleteMonitorTag", tag_id, monitor_id, value)
        self._refresh(context, monitor_id)

    def delete_monitor_tag(self, tag_id: int, monitor_id: int) -> None:
        """Remove every association of a tag with a monitor, whatever the value."""
        context = f"delete monitor tag (tag {tag_id}, monitor {monitor_id})"
        try:
            tags = self.get_monitor_tags(monitor_id)
        except KumaError as exc:
            raise KumaError(f"{context}: failed to fetch tags: {exc}") from exc
        for tag in tags:
            if tag.tag_id == tag_id:
                try:
                    self.delete_monitor_tag_with_value(tag_id, monitor_id, tag.value)
                except KumaError as exc:
                    raise KumaError(f"{context}: {exc}") from exc

    def get_monitor_tags(self, monitor_id: int) -> list[MonitorTag]:
        """Return the cached tag associations of a monitor."""
        with self._lock:
            tags = self._monitor_tags.get(monitor_id)
            if tags is None:
                raise NotFoundError(f"get monitor tags (monitor {monitor_id})")
            return [replace(t) for t in tags]

    def get_tag_monitors(self, tag_id: int) -> list[int]:
        """Return the IDs of cached monitors that carry the tag."""
        with self._lock:
            return [
                monitor_id
                for monitor_id, tags in self._monitor_tags.items()
                if any(t.tag_id == tag_id for t in tags)
            ]