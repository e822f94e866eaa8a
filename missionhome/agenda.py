"""Per-day agenda for the calendar view.

Splits the missions that occur on a day into the viewer's own and the ones
the viewer delegated, each further split into pending and completed.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable

from missionhome.completion import is_done_on
from missionhome.dates import date_key
from missionhome.models import DayAgenda, Mission
from missionhome.ownership import DELEGATED, MINE, classify
from missionhome.recurrence import occurs_on


def build_day_agenda(
    missions: Iterable[Mission],
    viewer_id: str | None,
    day: date | datetime,
    deleted: Iterable[Mission] = (),
) -> DayAgenda:
    """Partition the day's occurrences for *viewer_id*.

    Deleted missions are evaluated with the same occurrence rules and kept
    when the viewer owns or delegated them.
    """
    agenda = DayAgenda(day=date_key(day))
    for mission in missions:
        kind = classify(mission, viewer_id)
        if kind not in (MINE, DELEGATED) or not occurs_on(mission, day):
            continue
        done = is_done_on(mission, day)
        if kind == MINE:
            (agenda.my_completed if done else agenda.my_pending).append(mission)
        else:
            (agenda.delegated_completed if done else agenda.delegated_pending).append(mission)

    agenda.deleted = [
        m for m in deleted
        if classify(m, viewer_id) in (MINE, DELEGATED) and occurs_on(m, day)
    ]
    return agenda


def _involved(missions: Iterable[Mission], viewer_id: str | None) -> list[Mission]:
    return [m for m in missions if classify(m, viewer_id) in (MINE, DELEGATED)]


def has_missions_on_day(missions: Iterable[Mission], viewer_id: str | None, day: date | datetime) -> bool:
    return any(occurs_on(m, day) for m in _involved(missions, viewer_id))


def has_completed_on_day(missions: Iterable[Mission], viewer_id: str | None, day: date | datetime) -> bool:
    return any(occurs_on(m, day) and is_done_on(m, day) for m in _involved(missions, viewer_id))


def month_markers(
    missions: Iterable[Mission],
    viewer_id: str | None,
    days: Iterable[date | None],
) -> dict[str, dict[str, bool]]:
    """Marker flags per date key for a calendar grid (None cells skipped)."""
    involved = _involved(missions, viewer_id)
    markers = {}
    for day in days:
        if day is None:
            continue
        occurring = [m for m in involved if occurs_on(m, day)]
        markers[date_key(day)] = {
            "hasMissions": bool(occurring),
            "hasCompleted": any(is_done_on(m, day) for m in occurring),
        }
    return markers


def sort_by_due_date(missions: Iterable[Mission]) -> list[Mission]:
    """Ascending by due date; missions without one come first."""
    return sorted(missions, key=lambda m: (m.due_date is not None, m.due_date or datetime.min))
