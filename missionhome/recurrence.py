"""Recurrence evaluation: does a mission occur on a given calendar day?"""

from __future__ import annotations

import logging
from datetime import date, datetime

from missionhome.dates import date_key, start_of_day
from missionhome.models import (
    REPEAT_DAILY,
    REPEAT_MONTHLY,
    REPEAT_NONE,
    REPEAT_WEEKLY,
    Mission,
)

logger = logging.getLogger(__name__)


def occurs_on(mission: Mission, day: date | datetime) -> bool:
    """Return True if *mission* has an occurrence on *day*.

    One-off missions occur on their due day only. A recurring series starts
    on its due day and repeats every day, on the same weekday, or on the
    same day of the month. Months without that day (e.g. the 31st) are
    never matched; the day is not clamped. Skip dates win over the pattern.
    Archived missions, missions without a due date and unknown repeat types
    never occur.
    """
    if mission.archived:
        return False
    if mission.due_date is None:
        logger.debug("Mission %r has no usable due date", mission.id)
        return False

    day0 = start_of_day(day)
    due0 = start_of_day(mission.due_date)

    if date_key(day0) in mission.skip_dates:
        return False

    repeat = mission.repeat_type
    if repeat == REPEAT_NONE:
        return day0 == due0

    if due0 > day0:
        return False

    if repeat == REPEAT_DAILY:
        return True
    if repeat == REPEAT_WEEKLY:
        return day0.weekday() == due0.weekday()
    if repeat == REPEAT_MONTHLY:
        return day0.day == due0.day

    logger.debug("Mission %r has unknown repeat type %r", mission.id, repeat)
    return False
