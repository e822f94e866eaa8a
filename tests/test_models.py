"""Tests for missionhome/models.py — record parsing into mission variants."""

from datetime import date, datetime
from zoneinfo import ZoneInfo

from missionhome.models import (
    Member,
    OneOffMission,
    RecurringMission,
    mission_from_dict,
)
from missionhome.recurrence import occurs_on


def test_one_off_variant():
    m = mission_from_dict({
        "id": "m1",
        "title": "Vacuum",
        "dueDate": "2024-06-03T10:00:00",
        "repeat": {"type": "none"},
        "completed": True,
        "completedAt": "2024-06-03T12:00:00",
        "expValue": "15",
        "completedDates": ["2024-06-03"],
    })
    assert isinstance(m, OneOffMission)
    assert not m.is_recurring
    assert m.due_date == datetime(2024, 6, 3, 10, 0)
    assert m.completed is True
    assert m.exp_value == 15
    assert not hasattr(m, "completed_dates")


def test_recurring_variant():
    m = mission_from_dict({
        "id": "m2",
        "repeat": {"type": "weekly"},
        "completedDates": ["2024-06-10", date(2024, 6, 17), datetime(2024, 6, 24, 20, 0), "", 7],
        "skipDates": [" 2024-07-01 "],
    })
    assert isinstance(m, RecurringMission)
    assert m.repeat_type == "weekly"
    assert m.completed_dates == {"2024-06-10", "2024-06-17", "2024-06-24"}
    assert m.skip_dates == {"2024-07-01"}


def test_unknown_repeat_type_is_kept():
    m = mission_from_dict({"id": "m", "repeat": {"type": "yearly"}})
    assert isinstance(m, RecurringMission)
    assert m.repeat_type == "yearly"


def test_repeat_as_plain_string_is_ignored():
    m = mission_from_dict({"repeat": "daily"})
    assert isinstance(m, OneOffMission)
    assert m.repeat_type == "none"


def test_repeat_type_is_not_normalised():
    upper = mission_from_dict({"id": "a", "dueDate": "2024-06-03", "repeat": {"type": "Weekly"}})
    blank = mission_from_dict({"id": "b", "dueDate": "2024-06-03", "repeat": {"type": ""}})
    assert isinstance(upper, RecurringMission)
    assert upper.repeat_type == "Weekly"
    assert blank.repeat_type == ""
    assert not occurs_on(upper, date(2024, 6, 10))
    assert not occurs_on(blank, date(2024, 6, 3))


def test_malformed_fields_are_coerced():
    m = mission_from_dict({
        "id": 12,
        "expValue": "lots",
        "completed": "yes",
        "completedAt": "whenever",
        "skipDates": "2024-06-03",
        "assignedToUserId": "  ",
    })
    assert m.id == "12"
    assert m.exp_value == 0
    assert m.completed is False
    assert m.completed_at is None
    assert m.skip_dates == frozenset()
    assert m.assigned_to_user_id is None
    assert mission_from_dict({"expValue": -5}).exp_value == 0


def test_empty_record():
    m = mission_from_dict({})
    assert isinstance(m, OneOffMission)
    assert m.due_date is None
    assert isinstance(mission_from_dict(None), OneOffMission)


def test_mission_to_dict_uses_camel_case():
    m = mission_from_dict({
        "id": "m",
        "dueDate": "2024-06-03",
        "repeat": {"type": "daily"},
        "completedDates": ["2024-06-04", "2024-06-03"],
        "assignedToUserId": "kid",
    })
    d = m.to_dict()
    assert d["repeat"] == {"type": "daily"}
    assert d["dueDate"] == "2024-06-03T00:00:00"
    assert d["completedDates"] == ["2024-06-03", "2024-06-04"]
    assert d["assignedToUserId"] == "kid"
    assert "assignedByUserId" not in d


def test_member_from_dict():
    member = Member.from_dict({
        "uid": "abc",
        "id": "doc-id",
        "username": "ola",
        "photoURL": "p.png",
        "totalExp": "120",
    })
    assert member.id == "abc"
    assert member.name == "ola"
    assert member.avatar_url == "p.png"
    assert member.total_exp == 120
    assert member.level == 1


def test_member_prefers_avatar_url_and_display_name():
    member = Member.from_dict({"id": "x", "displayName": "Ola", "username": "ola", "avatarUrl": "a.png", "photoURL": "p.png"})
    assert member.name == "Ola"
    assert member.avatar_url == "a.png"
    assert member.to_dict()["avatarUrl"] == "a.png"


def test_timestamps_use_given_zone():
    warsaw = ZoneInfo("Europe/Warsaw")
    m = mission_from_dict({
        "id": "m",
        "repeat": {"type": "daily"},
        "dueDate": "2024-05-01T08:00:00+00:00",
        "completedAt": "2024-05-31T21:30:00+00:00",
        "completedDates": [datetime(2024, 5, 31, 22, 30, tzinfo=ZoneInfo("UTC"))],
    }, tz=warsaw)
    assert m.due_date == datetime(2024, 5, 1, 10, 0)
    assert m.completed_at == datetime(2024, 5, 31, 23, 30)
    assert m.completed_dates == {"2024-06-01"}
