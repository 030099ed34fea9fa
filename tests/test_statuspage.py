import json

import pytest

from kumaclient.statuspage import (
    Incident,
    IncidentStyle,
    PublicGroup,
    PublicMonitor,
    StatusPage,
    Theme,
    valid_incident_style,
    valid_theme,
)


def _json_round_trip(data):
    return json.loads(json.dumps(data))


@pytest.mark.parametrize(
    "member, expected",
    [(Theme.LIGHT, "light"), (Theme.DARK, "dark"), (Theme.AUTO, "auto")],
)
def test_theme_helpers(member, expected):
    assert member.value == expected
    assert member == expected


@pytest.mark.parametrize(
    "theme, expected",
    [("light", True), ("dark", True), ("auto", True), ("invalid", False), ("", False)],
)
def test_valid_theme(theme, expected):
    assert valid_theme(theme) is expected


def test_valid_theme_accepts_members():
    assert all(valid_theme(t) for t in Theme)


@pytest.mark.parametrize(
    "member, expected",
    [
        (IncidentStyle.INFO, "info"),
        (IncidentStyle.WARNING, "warning"),
        (IncidentStyle.DANGER, "danger"),
        (IncidentStyle.PRIMARY, "primary"),
    ],
)
def test_style_helpers(member, expected):
    assert member.value == expected
    assert member == expected


@pytest.mark.parametrize(
    "style, expected",
    [
        ("info", True),
        ("warning", True),
        ("danger", True),
        ("primary", True),
        ("invalid", False),
        ("", False),
    ],
)
def test_valid_incident_style(style, expected):
    assert valid_incident_style(style) is expected


@pytest.mark.parametrize(
    "incident",
    [
        Incident(id=1, title="Service Degradation",
                 content="We are experiencing issues with our API service.",
                 style="warning", pin=True),
        Incident(title="Maintenance Window", content="Scheduled maintenance in progress.",
                 style="info", pin=False),
        Incident(id=2, title="Major Outage", content="All services are currently down.",
                 style="danger", pin=True),
        Incident(title="New Feature Release", content="We've just released a new feature!",
                 style="primary", pin=False),
    ],
)
def test_incident_marshal_unmarshal(incident):
    assert Incident.from_dict(_json_round_trip(incident.to_dict())) == incident


def test_incident_omit_empty_id():
    incident = Incident(title="Test", content="Test content", style="info", pin=False)
    result = _json_round_trip(incident.to_dict())
    assert "id" not in result
    assert result["title"] == "Test"


_COMPLETE_PAGE = StatusPage(
    id=1,
    slug="test-page",
    title="Test Status Page",
    description="This is a test status page",
    icon="/icon.svg",
    theme="light",
    published=True,
    show_tags=True,
    domain_name_list=["status.example.com"],
    google_analytics_id="UA-123456-1",
    custom_css="body { background: #fff; }",
    footer_text="© 2024 Example Inc.",
    show_powered_by=False,
    show_certificate_expiry=True,
    public_group_list=[
        PublicGroup(id=10, name="Web Services", weight=1, monitor_list=[
            PublicMonitor(id=100, send_url=True),
            PublicMonitor(id=101, send_url=False),
        ]),
        PublicGroup(id=20, name="Databases", weight=2, monitor_list=[
            PublicMonitor(id=200, send_url=None),
        ]),
    ],
)


@pytest.mark.parametrize(
    "page",
    [_COMPLETE_PAGE, StatusPage(slug="minimal", title="Minimal")],
)
def test_status_page_marshal_unmarshal(page):
    assert StatusPage.from_dict(_json_round_trip(page.to_dict())) == page


def test_status_page_wire_keys():
    data = _COMPLETE_PAGE.to_dict()
    assert data["showTags"] is True
    assert data["googleAnalyticsId"] == "UA-123456-1"
    assert data["customCSS"] == "body { background: #fff; }"
    assert data["publicGroupList"][0]["monitorList"][0] == {"id": 100, "sendUrl": True}


@pytest.mark.parametrize(
    "group",
    [
        PublicGroup(id=1, name="Test Group", weight=5, monitor_list=[
            PublicMonitor(id=10, send_url=True),
            PublicMonitor(id=20, send_url=None),
        ]),
        PublicGroup(name="Empty Group"),
    ],
)
def test_public_group_marshal_unmarshal(group):
    assert PublicGroup.from_dict(_json_round_trip(group.to_dict())) == group


@pytest.mark.parametrize(
    "monitor",
    [
        PublicMonitor(id=1, send_url=True),
        PublicMonitor(id=2, send_url=False),
        PublicMonitor(id=3, send_url=None),
    ],
)
def test_public_monitor_marshal_unmarshal(monitor):
    assert PublicMonitor.from_dict(_json_round_trip(monitor.to_dict())) == monitor


def test_public_monitor_omits_unset_send_url():
    assert PublicMonitor(id=3).to_dict() == {"id": 3}