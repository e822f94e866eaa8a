"""Shared test fixtures for MissionHome tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml


SNAPSHOT = {
    "missions": [
        {
            "id": "dishes",
            "title": "Wash the dishes",
            "dueDate": "2024-06-03T18:00:00",
            "repeat": {"type": "weekly"},
            "skipDates": ["2024-06-17"],
            "completedDates": ["2024-06-10"],
            "expValue": 20,
            "assignedToUserId": "kid",
            "assignedToName": "Ola",
            "assignedByUserId": "mom",
            "assignedByName": "Mama",
            "createdByUserId": "mom",
        },
        {
            "id": "trash",
            "title": "Take out the trash",
            "dueDate": "2024-06-10T08:00:00",
            "repeat": {"type": "none"},
            "completed": True,
            "completedAt": "2024-06-10T09:15:00",
            "completedByUserId": "mom",
            "expValue": 10,
            "createdByUserId": "mom",
            "createdByName": "Mama",
        },
        {
            "id": "plants",
            "title": "Water the plants",
            "dueDate": "2024-06-01",
            "repeat": {"type": "daily"},
            "expValue": 5,
            "assignedToUserId": "dad",
            "createdByUserId": "dad",
        },
    ],
    "members": [
        {"uid": "mom", "displayName": "Anna", "photoURL": "https://example.com/anna.png", "totalExp": 450},
        {"uid": "kid", "username": "ola123", "totalExp": 300},
        {"uid": "dad", "displayName": "Piotr", "totalExp": 300},
    ],
    "deletedMissions": [
        {
            "id": "old-laundry",
            "title": "Laundry",
            "dueDate": "2024-06-10",
            "assignedToUserId": "mom",
        },
    ],
}


@pytest.fixture
def snapshot_data() -> dict:
    return json.loads(json.dumps(SNAPSHOT))


@pytest.fixture
def snapshot_file(tmp_path: Path) -> Path:
    """Write the sample snapshot as JSON into a temporary directory."""
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(SNAPSHOT, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def snapshot_yaml(tmp_path: Path) -> Path:
    path = tmp_path / "snapshot.yaml"
    path.write_text(yaml.dump(SNAPSHOT, default_flow_style=False), encoding="utf-8")
    return path


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    settings = {
        "locale": "en",
        "timezone": "Europe/Warsaw",
        "levels": {"base_exp": 200, "step_exp": 100},
    }
    path = tmp_path / "settings.yaml"
    path.write_text(yaml.dump(settings, default_flow_style=False), encoding="utf-8")
    return path
