"""Period EXP ranking.

Scores users by the EXP of missions completed inside a day, week or month
window, or by their cumulative ``totalExp`` for the all-time period.

Two attribution rules are available. ``timestamp`` (the default) matches
the existing ranking: a mission counts once, when its single ``completed``
flag is set and ``completed_at`` falls inside the window, whatever its
recurrence. ``occurrences`` instead counts every day of the window on which
the calendar shows a recurring mission as done (occurring and completed),
so skip dates, the series start and the archived flag apply, and no day
scores twice.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Iterable

from missionhome.completion import is_done_on
from missionhome.dates import (
    PERIOD_ALL,
    VALID_PERIODS,
    add_days,
    period_window,
    start_of_day,
)
from missionhome.models import Member, Mission, RankEntry, RecurringMission
from missionhome.recurrence import occurs_on

logger = logging.getLogger(__name__)


ATTRIBUTION_TIMESTAMP = "timestamp"
ATTRIBUTION_OCCURRENCES = "occurrences"
VALID_ATTRIBUTIONS = {ATTRIBUTION_TIMESTAMP, ATTRIBUTION_OCCURRENCES}


def _in_window(moment: datetime, start: datetime, end: datetime) -> bool:
    return start <= moment <= end


def _timestamp_exp(mission: Mission, start: datetime, end: datetime) -> int:
    if not mission.completed:
        return 0
    if mission.completed_at is None:
        logger.debug("Mission %r is completed without a usable completedAt", mission.id)
        return 0
    return mission.exp_value if _in_window(mission.completed_at, start, end) else 0


def _occurrence_exp(mission: RecurringMission, start: datetime, end: datetime) -> int:
    """One award per day of the window that the calendar shows as done."""
    done_days = 0
    day = start_of_day(start)
    while day <= end:
        if occurs_on(mission, day) and is_done_on(mission, day):
            done_days += 1
        day = add_days(day, 1)
    return mission.exp_value * done_days


def period_exp(
    mission: Mission,
    start: datetime,
    end: datetime,
    attribution: str = ATTRIBUTION_TIMESTAMP,
) -> int:
    """EXP that *mission* contributes to its assignee inside [start, end]."""
    if attribution == ATTRIBUTION_OCCURRENCES and isinstance(mission, RecurringMission):
        return _occurrence_exp(mission, start, end)
    return _timestamp_exp(mission, start, end)


def rank(
    users: Iterable[Member],
    missions: Iterable[Mission],
    period: str,
    anchor_date: date | datetime,
    attribution: str = ATTRIBUTION_TIMESTAMP,
) -> list[RankEntry]:
    """Rank *users* by EXP earned in *period* around *anchor_date*.

    Sorted by score descending; equal scores keep the input order. EXP goes
    to the mission's ``assigned_to_user_id``, which is read from
    ``assignedToUserId``, then ``assignedToId``, then ``assignedToUID``. The
    old ranking screen tried ``assignedToId`` first, so a record carrying two
    different values is credited differently here.
    """
    users = list(users)
    scores = {u.id: 0 for u in users}

    if period == PERIOD_ALL:
        scores = {u.id: u.total_exp for u in users}
    elif period not in VALID_PERIODS:
        logger.warning("Unknown ranking period %r; all scores are zero", period)
    else:
        if attribution not in VALID_ATTRIBUTIONS:
            logger.warning("Unknown attribution %r, using %r", attribution, ATTRIBUTION_TIMESTAMP)
            attribution = ATTRIBUTION_TIMESTAMP
        start, end = period_window(period, anchor_date)
        for mission in missions:
            assignee = mission.assigned_to_user_id
            if not assignee or assignee not in scores:
                continue
            scores[assignee] += period_exp(mission, start, end, attribution)

    entries = [RankEntry(user=u, period_exp=scores.get(u.id, 0)) for u in users]
    entries.sort(key=lambda e: e.period_exp, reverse=True)
    return entries
