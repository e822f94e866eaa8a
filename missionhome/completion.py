"""Per-occurrence completion checks."""

from __future__ import annotations

from datetime import date, datetime

from missionhome.dates import date_key, is_same_day
from missionhome.models import Mission, RecurringMission


def is_done_on(mission: Mission, day: date | datetime) -> bool:
    """Return True if the occurrence of *mission* on *day* was completed.

    One-off missions carry a single ``completed`` flag that is not tied to a
    day. Recurring missions are done for a day when its key is recorded in
    ``completed_dates``, or when the legacy ``completed_at`` timestamp falls
    on that day.
    """
    if not isinstance(mission, RecurringMission):
        return mission.completed

    if date_key(day) in mission.completed_dates:
        return True
    return mission.completed_at is not None and is_same_day(mission.completed_at, day)
