"""Tests for missionhome/ownership.py — mine / delegated / unrelated."""

import itertools

from missionhome.models import mission_from_dict
from missionhome.ownership import DELEGATED, MINE, OWNERSHIP_CLASSES, UNRELATED, classify, is_delegated, is_mine


def _mission(assigned_to=None, assigned_by=None, created_by=None):
    return mission_from_dict({
        "id": "m1",
        "dueDate": "2024-06-03",
        "assignedToUserId": assigned_to,
        "assignedByUserId": assigned_by,
        "createdByUserId": created_by,
    })


def test_assigned_to_viewer_is_mine():
    assert classify(_mission(assigned_to="v", assigned_by="x"), "v") == MINE


def test_unassigned_mission_belongs_to_its_author():
    assert classify(_mission(assigned_by="v"), "v") == MINE
    assert classify(_mission(created_by="v"), "v") == MINE
    assert classify(_mission(created_by="x"), "v") == UNRELATED


def test_assigned_to_someone_else_by_viewer_is_delegated():
    assert classify(_mission(assigned_to="kid", assigned_by="v"), "v") == DELEGATED
    assert classify(_mission(assigned_to="kid", created_by="v"), "v") == DELEGATED
    assert is_delegated(_mission(assigned_to="kid", created_by="v"), "v")


def test_unrelated_mission():
    assert classify(_mission(assigned_to="kid", assigned_by="mom"), "v") == UNRELATED


def test_missing_viewer_is_always_unrelated():
    assert classify(_mission(assigned_to="v"), None) == UNRELATED
    assert classify(_mission(created_by="v"), "") == UNRELATED
    assert not is_mine(_mission(assigned_to="v"), None)


def test_numeric_ids_are_compared_as_strings():
    m = mission_from_dict({"id": "m", "assignedToUserId": 42})
    assert classify(m, "42") == MINE


def test_classify_is_total_and_exclusive():
    ids = [None, "v", "x", "y"]
    for assigned_to, assigned_by, created_by in itertools.product(ids, repeat=3):
        m = _mission(assigned_to, assigned_by, created_by)
        for viewer in (None, "v", "x"):
            kind = classify(m, viewer)
            assert kind in OWNERSHIP_CLASSES
            assert [is_mine(m, viewer), is_delegated(m, viewer)].count(True) <= 1
            assert kind == classify(m, viewer)
