"""Household statistics over completed missions.

Uses the same single ``completed`` flag and ``completed_at`` timestamp as
the default ranking. Archived missions are left out of every figure.
"""

from __future__ import annotations

import math
from datetime import date, datetime
from typing import Iterable

from missionhome.dates import PERIOD_ALL, PERIOD_MONTH, PERIOD_WEEK, VALID_PERIODS, period_window
from missionhome.labels import UNKNOWN_ID, Directory
from missionhome.models import MemberStats, Mission, TitleCount
from missionhome.settings import POLISH_LABELS, LabelSet


def _live(missions: Iterable[Mission]) -> list[Mission]:
    return [m for m in missions if not m.archived]


def _completed_within(mission: Mission, start: datetime, end: datetime) -> bool:
    at = mission.completed_at
    return mission.completed and at is not None and start <= at <= end


def completed_in_period(
    missions: Iterable[Mission],
    period: str,
    anchor: date | datetime,
) -> list[Mission]:
    """Completed missions whose completion time falls inside *period*."""
    live = _live(missions)
    if period == PERIOD_ALL:
        return [m for m in live if m.completed]
    if period not in VALID_PERIODS:
        return []
    start, end = period_window(period, anchor)
    return [m for m in live if _completed_within(m, start, end)]


def completion_rate(missions: Iterable[Mission]) -> int:
    """Percentage of missions marked completed, rounded half up."""
    live = _live(missions)
    if not live:
        return 0
    done = sum(1 for m in live if m.completed)
    return math.floor(done * 100 / len(live) + 0.5)


def aggregate_by_title(
    missions: Iterable[Mission],
    limit: int | None = None,
    labels: LabelSet = POLISH_LABELS,
) -> list[TitleCount]:
    """Count missions per title, case-insensitively, most frequent first.

    The first spelling seen is kept as the label; ties keep first-seen order.
    """
    rows: dict[str, TitleCount] = {}
    for mission in missions:
        raw = (mission.title or labels.unnamed).strip()
        if not raw:
            continue
        key = raw.lower()
        row = rows.setdefault(key, TitleCount(key=key, label=raw))
        row.count += 1
    result = sorted(rows.values(), key=lambda r: r.count, reverse=True)
    return result[:limit] if limit is not None else result


def member_stats(
    missions: Iterable[Mission],
    directory: Directory,
    anchor: date | datetime,
    labels: LabelSet = POLISH_LABELS,
) -> list[MemberStats]:
    """Per-assignee completion counts and EXP for the week and month of *anchor*.

    Missions without an assignee are grouped under ``unknown``. Assignees
    missing from *directory* are dropped. Sorted by weekly count, descending.
    """
    week_start, week_end = period_window(PERIOD_WEEK, anchor)
    month_start, month_end = period_window(PERIOD_MONTH, anchor)
    rows: dict[str, MemberStats] = {}

    for mission in _live(missions):
        if not mission.completed or mission.completed_at is None:
            continue
        person_id = mission.assigned_to_user_id or UNKNOWN_ID
        row = rows.get(person_id)
        if row is None:
            member = directory.get(person_id)
            member_name = (member.name or member.email) if member else None
            label = (
                member_name
                or mission.assigned_to_name
                or mission.assigned_by_name
                or (labels.unassigned if person_id == UNKNOWN_ID else labels.family_member)
            )
            initial = label.strip()[:1].upper() or "?"
            row = rows[person_id] = MemberStats(id=person_id, label=label, avatar_initial=initial)

        if _completed_within(mission, week_start, week_end):
            row.week_count += 1
            row.week_exp += mission.exp_value
        if _completed_within(mission, month_start, month_end):
            row.month_count += 1
            row.month_exp += mission.exp_value

    kept = [r for r in rows.values() if r.id == UNKNOWN_ID or r.id in directory]
    kept.sort(key=lambda r: r.week_count, reverse=True)
    return kept
