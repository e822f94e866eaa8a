"""MissionHome engine — mission occurrence, attribution and EXP ranking.

Public API re-exports for convenient imports:
    from missionhome import occurs_on, is_done_on, classify, rank, ...
"""

# Dates
from missionhome.dates import (
    PERIOD_DAY,
    PERIOD_WEEK,
    PERIOD_MONTH,
    PERIOD_ALL,
    parse_datetime,
    start_of_day,
    end_of_day,
    start_of_week,
    end_of_week,
    start_of_month,
    end_of_month,
    date_key,
    is_same_day,
    add_days,
    add_months,
    period_window,
    shift_period,
    month_grid,
)

# Models
from missionhome.models import (
    REPEAT_NONE,
    REPEAT_DAILY,
    REPEAT_WEEKLY,
    REPEAT_MONTHLY,
    Mission,
    OneOffMission,
    RecurringMission,
    mission_from_dict,
    Member,
    Viewer,
    ResolvedLabel,
    RankEntry,
    DayAgenda,
    LevelProgress,
    MemberStats,
    TitleCount,
)

# Occurrence engine
from missionhome.recurrence import occurs_on
from missionhome.completion import is_done_on
from missionhome.ownership import (
    MINE,
    DELEGATED,
    UNRELATED,
    classify,
    is_mine,
    is_delegated,
)

# Labels
from missionhome.labels import (
    build_directory,
    resolve_creator,
    resolve_assignee,
    resolve_completer,
    label_text,
)

# Calendar
from missionhome.agenda import (
    build_day_agenda,
    has_missions_on_day,
    has_completed_on_day,
    month_markers,
    sort_by_due_date,
)

# Ranking & levels
from missionhome.ranking import (
    ATTRIBUTION_TIMESTAMP,
    ATTRIBUTION_OCCURRENCES,
    period_exp,
    rank,
)
from missionhome.levels import (
    required_exp_for_level,
    level_for_exp,
    level_progress,
    level_progress_for,
)

# Stats
from missionhome.stats import (
    completed_in_period,
    completion_rate,
    aggregate_by_title,
    member_stats,
)

# Snapshot & settings
from missionhome.snapshot import Snapshot, load_snapshot, snapshot_from_dict
from missionhome.settings import (
    LabelSet,
    POLISH_LABELS,
    ENGLISH_LABELS,
    Settings,
    load_settings,
    labels_for,
    get_timezone,
    now_local,
    today,
)
