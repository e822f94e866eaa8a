"""EXP to level conversion.

Reaching level 2 costs 100 EXP and every further level costs 50 EXP more
than the previous one: L2=100, L3=250, L4=450, L5=700 (cumulative).
The curve can be changed per household through ``Settings``.
"""

from __future__ import annotations

import math
from typing import Any

from missionhome.models import LevelProgress
from missionhome.settings import Settings


BASE_LEVEL_EXP = 100
LEVEL_EXP_STEP = 50


def _clean_total(total_exp: Any) -> int:
    """Whole, finite, non-negative EXP; anything else counts as 0."""
    if not isinstance(total_exp, (int, float)) or isinstance(total_exp, bool):
        return 0
    if not math.isfinite(total_exp) or total_exp <= 0:
        return 0
    return int(total_exp)


def required_exp_for_level(level: int, base: int = BASE_LEVEL_EXP, step: int = LEVEL_EXP_STEP) -> int:
    """Cumulative EXP needed to reach *level*."""
    if level <= 1:
        return 0
    n = level - 1
    return n * base + step * n * (n - 1) // 2


def level_for_exp(total_exp: int, base: int = BASE_LEVEL_EXP, step: int = LEVEL_EXP_STEP) -> int:
    total = _clean_total(total_exp)
    base, step = int(base), int(step)
    if total == 0 or base <= 0 or step < 0:
        return 1
    if step == 0:
        return total // base + 1
    # largest n with n*base + step*n*(n-1)/2 <= total
    b = 2 * base - step
    n = max(0, (math.isqrt(b * b + 8 * step * total) - b) // (2 * step))
    while required_exp_for_level(n + 2, base, step) <= total:
        n += 1
    while n > 0 and required_exp_for_level(n + 1, base, step) > total:
        n -= 1
    return n + 1


def level_progress(total_exp: int, base: int = BASE_LEVEL_EXP, step: int = LEVEL_EXP_STEP) -> LevelProgress:
    total = _clean_total(total_exp)
    level = level_for_exp(total, base, step)
    floor = required_exp_for_level(level, base, step)
    ceiling = required_exp_for_level(level + 1, base, step)
    into = max(0, total - floor)
    span = ceiling - floor
    return LevelProgress(
        level=level,
        exp_into_level=into,
        exp_to_next_level=max(0, ceiling - max(total, floor)),
        progress_percent=min(100, round(into / span * 100)) if span > 0 else 100,
    )


def level_progress_for(total_exp: int, settings: Settings | None = None) -> LevelProgress:
    """Progress on the curve configured in *settings* (defaults when None)."""
    if settings is None:
        return level_progress(total_exp)
    return level_progress(total_exp, settings.level_base_exp, settings.level_step_exp)
