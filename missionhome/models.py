"""Typed dataclasses for mission and member snapshots.

Records arrive as camelCase dicts from the document store; from_dict maps
them to snake_case fields. Unknown keys are ignored, missing keys use
defaults and malformed values are coerced or dropped rather than raised.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo
from typing import Any

from missionhome.dates import date_key, parse_datetime


REPEAT_NONE = "none"
REPEAT_DAILY = "daily"
REPEAT_WEEKLY = "weekly"
REPEAT_MONTHLY = "monthly"
VALID_REPEAT_TYPES = {REPEAT_NONE, REPEAT_DAILY, REPEAT_WEEKLY, REPEAT_MONTHLY}


# ── Field coercion ────────────────────────────────────────────


def _opt_str(value: Any) -> str | None:
    """Normalise an optional id/name field: empty and missing become None."""
    if value is None or isinstance(value, bool):
        return None
    s = str(value).strip()
    return s or None


def _first_str(d: dict[str, Any], *keys: str) -> str | None:
    for key in keys:
        value = _opt_str(d.get(key))
        if value:
            return value
    return None


def _to_int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(float(value))
    except (TypeError, ValueError, OverflowError):
        return default


def _key_set(values: Any, tz: tzinfo | None = None) -> frozenset[str]:
    """Build a date-key set from a stored list of keys or dates."""
    if not isinstance(values, (list, tuple, set, frozenset)):
        return frozenset()
    keys = set()
    for v in values:
        if isinstance(v, (date, datetime)):
            keys.add(date_key(parse_datetime(v, tz)))
        elif isinstance(v, str) and v.strip():
            keys.add(v.strip())
    return frozenset(keys)


def _repeat_type(d: dict[str, Any]) -> str:
    """The stored ``repeat.type`` verbatim; ``none`` only when it is absent.

    No case folding: ``"Weekly"`` or ``""`` stay unknown types and fail closed.
    """
    repeat = d.get("repeat")
    value = repeat.get("type") if isinstance(repeat, dict) else None
    return REPEAT_NONE if value is None else str(value)


def _iso(dt: datetime | None) -> str | None:
    return dt.isoformat() if dt else None


# ── Missions ──────────────────────────────────────────────────


@dataclass
class Mission:
    """Fields shared by every mission record."""

    id: str = ""
    title: str = ""
    due_date: datetime | None = None
    skip_dates: frozenset[str] = field(default_factory=frozenset)
    archived: bool = False
    exp_value: int = 0
    # raw completion fields; read by the ranking aggregator for every variant
    completed: bool = False
    completed_at: datetime | None = None
    # assignment
    assigned_to_user_id: str | None = None
    assigned_to_name: str | None = None
    assigned_by_user_id: str | None = None
    assigned_by_name: str | None = None
    created_by_user_id: str | None = None
    created_by_name: str | None = None
    completed_by_user_id: str | None = None
    completed_by_name: str | None = None

    repeat_type = REPEAT_NONE

    @property
    def is_recurring(self) -> bool:
        return self.repeat_type != REPEAT_NONE

    @classmethod
    def _common_fields(cls, d: dict[str, Any], tz: tzinfo | None = None) -> dict[str, Any]:
        return {
            "id": str(d.get("id", "") or ""),
            "title": str(d.get("title", "") or ""),
            "due_date": parse_datetime(d.get("dueDate"), tz),
            "skip_dates": _key_set(d.get("skipDates"), tz),
            "archived": bool(d.get("archived", False)),
            "exp_value": max(0, _to_int(d.get("expValue"))),
            "completed": d.get("completed") is True,
            "completed_at": parse_datetime(d.get("completedAt"), tz),
            "assigned_to_user_id": _first_str(d, "assignedToUserId", "assignedToId", "assignedToUID"),
            "assigned_to_name": _opt_str(d.get("assignedToName")),
            "assigned_by_user_id": _opt_str(d.get("assignedByUserId")),
            "assigned_by_name": _opt_str(d.get("assignedByName")),
            "created_by_user_id": _opt_str(d.get("createdByUserId")),
            "created_by_name": _opt_str(d.get("createdByName")),
            "completed_by_user_id": _opt_str(d.get("completedByUserId")),
            "completed_by_name": _opt_str(d.get("completedByName")),
        }

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "dueDate": _iso(self.due_date),
            "repeat": {"type": self.repeat_type},
            "archived": self.archived,
            "expValue": self.exp_value,
            "completed": self.completed,
            "completedAt": _iso(self.completed_at),
        }
        if self.skip_dates:
            d["skipDates"] = sorted(self.skip_dates)
        optional = {
            "assignedToUserId": self.assigned_to_user_id,
            "assignedToName": self.assigned_to_name,
            "assignedByUserId": self.assigned_by_user_id,
            "assignedByName": self.assigned_by_name,
            "createdByUserId": self.created_by_user_id,
            "createdByName": self.created_by_name,
            "completedByUserId": self.completed_by_user_id,
            "completedByName": self.completed_by_name,
        }
        d.update({k: v for k, v in optional.items() if v is not None})
        return d


@dataclass
class OneOffMission(Mission):
    """A mission that occurs once, on its due date."""

    @classmethod
    def from_dict(cls, d: dict[str, Any], tz: tzinfo | None = None) -> OneOffMission:
        return cls(**cls._common_fields(d, tz))


@dataclass
class RecurringMission(Mission):
    """A mission series anchored at its due date.

    ``repeat_type`` is kept verbatim even when unrecognised so that the
    recurrence evaluator can fail closed on it.
    """

    repeat_type: str = REPEAT_DAILY
    completed_dates: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_dict(cls, d: dict[str, Any], tz: tzinfo | None = None) -> RecurringMission:
        return cls(
            repeat_type=_repeat_type(d),
            completed_dates=_key_set(d.get("completedDates"), tz),
            **cls._common_fields(d, tz),
        )

    def to_dict(self) -> dict[str, Any]:
        d = super().to_dict()
        if self.completed_dates:
            d["completedDates"] = sorted(self.completed_dates)
        return d


def mission_from_dict(d: dict[str, Any], tz: tzinfo | None = None) -> Mission:
    """Build the right mission variant for a stored record.

    *tz* is the zone whose calendar days the engine works in; aware
    timestamps are converted into it (host zone when None).
    """
    if not d or not isinstance(d, dict):
        return OneOffMission()
    if _repeat_type(d) == REPEAT_NONE:
        return OneOffMission.from_dict(d, tz)
    return RecurringMission.from_dict(d, tz)


# ── Members ───────────────────────────────────────────────────


@dataclass
class Member:
    id: str = ""
    display_name: str | None = None
    username: str | None = None
    email: str | None = None
    avatar_url: str | None = None
    total_exp: int = 0
    level: int = 1

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Member:
        if not d or not isinstance(d, dict):
            return cls()
        return cls(
            id=_first_str(d, "uid", "userId", "id") or "",
            display_name=_opt_str(d.get("displayName")),
            username=_opt_str(d.get("username")),
            email=_opt_str(d.get("email")),
            avatar_url=_first_str(d, "avatarUrl", "photoURL"),
            total_exp=_to_int(d.get("totalExp")),
            level=_to_int(d.get("level"), default=1),
        )

    @property
    def name(self) -> str | None:
        return self.display_name or self.username

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"id": self.id, "totalExp": self.total_exp, "level": self.level}
        if self.display_name:
            d["displayName"] = self.display_name
        if self.username:
            d["username"] = self.username
        if self.email:
            d["email"] = self.email
        if self.avatar_url:
            d["avatarUrl"] = self.avatar_url
        return d


@dataclass
class Viewer:
    """The signed-in user looking at the data, passed explicitly."""

    user_id: str | None = None
    display_name: str | None = None
    avatar_url: str | None = None


# ── Results ───────────────────────────────────────────────────


@dataclass(frozen=True)
class ResolvedLabel:
    id: str
    label: str
    avatar_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "label": self.label, "avatarUrl": self.avatar_url}


@dataclass
class RankEntry:
    user: Member
    period_exp: int = 0

    def to_dict(self) -> dict[str, Any]:
        d = self.user.to_dict()
        d["periodExp"] = self.period_exp
        return d


@dataclass
class DayAgenda:
    day: str = ""
    my_pending: list[Mission] = field(default_factory=list)
    my_completed: list[Mission] = field(default_factory=list)
    delegated_pending: list[Mission] = field(default_factory=list)
    delegated_completed: list[Mission] = field(default_factory=list)
    deleted: list[Mission] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not (
            self.my_pending
            or self.my_completed
            or self.delegated_pending
            or self.delegated_completed
            or self.deleted
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "day": self.day,
            "myPending": [m.id for m in self.my_pending],
            "myCompleted": [m.id for m in self.my_completed],
            "delegatedPending": [m.id for m in self.delegated_pending],
            "delegatedCompleted": [m.id for m in self.delegated_completed],
            "deleted": [m.id for m in self.deleted],
        }


@dataclass(frozen=True)
class LevelProgress:
    level: int
    exp_into_level: int
    exp_to_next_level: int
    progress_percent: int


# ── Stats ─────────────────────────────────────────────────────


@dataclass
class MemberStats:
    id: str = ""
    label: str = ""
    avatar_initial: str = "?"
    week_count: int = 0
    month_count: int = 0
    week_exp: int = 0
    month_exp: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "label": self.label,
            "avatarInitial": self.avatar_initial,
            "weekCount": self.week_count,
            "monthCount": self.month_count,
            "weekExp": self.week_exp,
            "monthExp": self.month_exp,
        }


@dataclass
class TitleCount:
    key: str = ""
    label: str = ""
    count: int = 0
