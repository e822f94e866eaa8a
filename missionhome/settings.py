"""Settings file, display placeholders and local time for MissionHome."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from missionhome.fileio import read_yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelSet:
    """Placeholders used when a person cannot be named."""

    you: str
    unnamed: str
    unknown: str
    unassigned: str
    family_member: str


POLISH_LABELS = LabelSet(
    you="Ty",
    unnamed="Bez nazwy",
    unknown="Nieznane",
    unassigned="Nieprzypisane",
    family_member="Członek rodziny",
)
ENGLISH_LABELS = LabelSet(
    you="You",
    unnamed="Unnamed",
    unknown="Unknown",
    unassigned="Unassigned",
    family_member="Family member",
)
LABELS_BY_LOCALE = {"pl": POLISH_LABELS, "en": ENGLISH_LABELS}


@dataclass
class Settings:
    locale: str = "pl"
    timezone: str = "UTC"
    level_base_exp: int = 100
    level_step_exp: int = 50

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> Settings:
        if not d or not isinstance(d, dict):
            return cls()
        levels = d.get("levels") or {}
        if not isinstance(levels, dict):
            levels = {}
        return cls(
            locale=str(d.get("locale", "pl")).strip().lower() or "pl",
            timezone=str(d.get("timezone", "UTC")),
            level_base_exp=int(levels.get("base_exp", 100)),
            level_step_exp=int(levels.get("step_exp", 50)),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "locale": self.locale,
            "timezone": self.timezone,
            "levels": {"base_exp": self.level_base_exp, "step_exp": self.level_step_exp},
        }


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a YAML file; defaults when missing or empty."""
    if path is None:
        return Settings()
    return Settings.from_dict(read_yaml(path))


def labels_for(settings: Settings | None = None) -> LabelSet:
    if settings is None:
        return POLISH_LABELS
    return LABELS_BY_LOCALE.get(settings.locale.split("-")[0], POLISH_LABELS)


def get_timezone(settings: Settings | None = None) -> ZoneInfo:
    """Configured timezone, falling back to UTC when invalid."""
    name = settings.timezone if settings else "UTC"
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown timezone %r, using UTC", name)
        return ZoneInfo("UTC")


def now_local(settings: Settings | None = None) -> datetime:
    """Current wall-clock time in the configured timezone, as a naive datetime."""
    return datetime.now(get_timezone(settings)).replace(tzinfo=None)


def today(settings: Settings | None = None) -> date:
    return now_local(settings).date()
