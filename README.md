# kumaclient

Data models and a tag service for an Uptime Kuma monitoring server.

## Installation

```
pip install kumaclient
```

The package has no dependencies outside the standard library.

## What it contains

- `kumaclient.tag` holds the `Tag`, `MonitorTag`, `TagWithMonitors` and
  `MonitorTags` dataclasses. Each one has `to_dict()` and the classmethod
  `from_dict()`, which use the server's JSON field names. `Tag.to_dict()`
  leaves out `id` while it is zero.
- `kumaclient.statuspage` holds the `StatusPage`, `PublicGroup`,
  `PublicMonitor` and `Incident` dataclasses. It also has the `Theme` enum
  (`light`, `dark`, `auto`) and the `IncidentStyle` enum (`info`, `warning`,
  `danger`, `primary`), and the checks `valid_theme()` and
  `valid_incident_style()`.
  - `Incident.to_dict()` leaves out `id` while it is zero.
  - `PublicMonitor.to_dict()` leaves out `sendUrl` while `send_url` is
    `None`.
- `kumaclient.errors` holds `KumaError`, the base error. It also holds
  `NotFoundError`, a subclass of both `KumaError` and `LookupError`.
- `kumaclient.tags` holds `TagService`. It handles tags and monitor-tag
  associations, and keeps a local cache of the tags on each monitor.

## Using the tag service

`TagService` does no networking of its own. You give it two callables:

- `emit(event, *args)` sends an event to the server and returns the response
  as a mapping.
  - The response must have a true `"ok"` key. Otherwise the service raises
    `KumaError` with the response's `"msg"`.
  - `getTags` must answer with a `"tags"` list.
  - `addTag` must answer with a `"tag"` mapping that holds the new `"id"`.
- `fetch_monitor_tags(monitor_id)` returns the current tags of one monitor.
  It may return `MonitorTag` objects or mappings in wire form.

```python
from kumaclient.tag import Tag
from kumaclient.tags import TagService

service = TagService(emit, fetch_monitor_tags)

tag_id = service.create_tag(Tag(name="Environment", color="#FF0000"))
association = service.add_monitor_tag(tag_id, 1, "production")

print(service.get_monitor_tags(1))
print(service.get_tag_monitors(tag_id))
```

Operations on tags:

- `get_tags()`
- `get_tag(tag_id)`
- `create_tag(tag)`, which returns the new ID
- `update_tag(tag)`
- `delete_tag(tag_id)`, which also removes the tag from every cached monitor

Operations on monitor-tag associations:

- `add_monitor_tag(tag_id, monitor_id, value)`
- `update_monitor_tag(tag_id, monitor_id, value)`
- `delete_monitor_tag_with_value(tag_id, monitor_id, value)`
- `delete_monitor_tag(tag_id, monitor_id)`, which removes the association
  whatever its value

After each change to an association, the service calls `fetch_monitor_tags`
to refresh that monitor's entry in the cache.

`get_monitor_tags()` and `get_tag_monitors()` read only the cache. You fill
the cache with `set_monitor_tags(monitor_id, tags)`, and drop a monitor from
it with `remove_monitor(monitor_id)`.

Errors:

- `get_tag()` raises `NotFoundError` for an unknown tag.
- `get_monitor_tags()` raises `NotFoundError` for a monitor that is not in
  the cache.
- Other failures raise `KumaError`.

## Status pages

```python
from kumaclient.statuspage import Incident, IncidentStyle, valid_theme

incident = Incident(title="Maintenance", content="In progress.", style=IncidentStyle.INFO.value)
payload = incident.to_dict()  # "id" is left out while it is zero
assert valid_theme("dark")
```

## What it does not do

The package opens no connection to a server. Sending events is the job of
the `emit` callable you provide.

It has no models or operations for monitors or notifications beyond their
tag associations. It has no operations for status pages beyond the data
models, and it has no command-line tool.

## Running the tests

```
pip install -e ".[test]"
pytest
```