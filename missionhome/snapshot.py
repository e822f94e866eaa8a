"""Load a point-in-time snapshot of missions and members."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import tzinfo
from pathlib import Path
from typing import Any

from missionhome.fileio import read_document
from missionhome.models import Member, Mission, mission_from_dict

logger = logging.getLogger(__name__)


@dataclass
class Snapshot:
    missions: list[Mission] = field(default_factory=list)
    members: list[Member] = field(default_factory=list)
    deleted_missions: list[Mission] = field(default_factory=list)


def _records(d: dict[str, Any], *keys: str) -> list[dict[str, Any]]:
    for key in keys:
        if key not in d:
            continue
        items = d.get(key) or []
        if not isinstance(items, list):
            logger.warning("Snapshot field %r is not a list, ignoring it", key)
            return []
        records = []
        for i, item in enumerate(items):
            if isinstance(item, dict):
                records.append(item)
            else:
                logger.warning("Skipping non-object entry %d in %r", i, key)
        return records
    return []


def snapshot_from_dict(d: dict[str, Any], tz: tzinfo | None = None) -> Snapshot:
    if not d or not isinstance(d, dict):
        return Snapshot()
    return Snapshot(
        missions=[mission_from_dict(r, tz) for r in _records(d, "missions")],
        members=[Member.from_dict(r) for r in _records(d, "members", "users")],
        deleted_missions=[mission_from_dict(r, tz) for r in _records(d, "deletedMissions", "deleted_missions")],
    )


def load_snapshot(path: Path, tz: tzinfo | None = None) -> Snapshot:
    """Read a JSON or YAML snapshot file; a missing file is an empty snapshot.

    Pass ``get_timezone(settings)`` as *tz* so that timestamps land on the
    same calendar days as ``today(settings)``.
    """
    return snapshot_from_dict(read_document(path), tz)
