"""Classify a mission relative to the viewing user."""

from __future__ import annotations

from missionhome.models import Mission


MINE = "mine"
DELEGATED = "delegated"
UNRELATED = "unrelated"
OWNERSHIP_CLASSES = (MINE, DELEGATED, UNRELATED)


def classify(mission: Mission, viewer_id: str | None) -> str:
    """Return ``mine``, ``delegated`` or ``unrelated`` for *viewer_id*.

    A mission without an assignee belongs to whoever assigned or created it.
    """
    if not viewer_id:
        return UNRELATED
    viewer_id = str(viewer_id)

    assigned_to = mission.assigned_to_user_id
    made_by_viewer = viewer_id in (mission.assigned_by_user_id, mission.created_by_user_id)

    if assigned_to == viewer_id:
        return MINE
    if assigned_to is None:
        return MINE if made_by_viewer else UNRELATED
    return DELEGATED if made_by_viewer else UNRELATED


def is_mine(mission: Mission, viewer_id: str | None) -> bool:
    return classify(mission, viewer_id) == MINE


def is_delegated(mission: Mission, viewer_id: str | None) -> bool:
    return classify(mission, viewer_id) == DELEGATED
