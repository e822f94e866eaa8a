"""Display labels for the creator, assignee and completer of a mission.

Every role resolves through the same chain:

1. the viewer's own id    -> the viewer's best-known name
2. an id in the directory -> the member's name, then the stored name
3. a stored name only     -> the stored name as-is
4. an unresolvable id     -> the "unknown" placeholder

Stored (denormalised) names are consulted only after the directory lookup,
so a stale copy on the mission never hides the member's current name.
"""

from __future__ import annotations

from typing import Iterable

from missionhome.models import Member, Mission, ResolvedLabel, Viewer
from missionhome.settings import POLISH_LABELS, LabelSet


SELF_ID = "self"
UNKNOWN_ID = "unknown"

Directory = dict[str, Member]


def build_directory(members: Iterable[Member]) -> Directory:
    """Index members by id; members without an id are left out."""
    return {m.id: m for m in members if m.id}


def _resolve(
    person_id: str | None,
    stored_name: str | None,
    directory: Directory,
    viewer: Viewer | None,
    labels: LabelSet,
) -> ResolvedLabel | None:
    if not person_id and not stored_name:
        return None

    if viewer and viewer.user_id and person_id == str(viewer.user_id):
        me = directory.get(person_id)
        label = (
            (me.name if me else None)
            or viewer.display_name
            or stored_name
            or labels.you
        )
        avatar = (me.avatar_url if me else None) or viewer.avatar_url
        return ResolvedLabel(id=SELF_ID, label=label, avatar_url=avatar)

    if person_id:
        found = directory.get(person_id)
        if found:
            return ResolvedLabel(
                id=found.id,
                label=found.name or stored_name or labels.unnamed,
                avatar_url=found.avatar_url,
            )

    if stored_name:
        return ResolvedLabel(id=person_id or UNKNOWN_ID, label=stored_name)

    return ResolvedLabel(id=person_id or UNKNOWN_ID, label=labels.unknown)


def resolve_creator(
    mission: Mission,
    directory: Directory,
    viewer: Viewer | None = None,
    labels: LabelSet = POLISH_LABELS,
) -> ResolvedLabel | None:
    """Who added the mission: the assigner first, then the creator."""
    person_id = mission.assigned_by_user_id or mission.created_by_user_id
    name = mission.assigned_by_name or mission.created_by_name
    return _resolve(person_id, name, directory, viewer, labels)


def resolve_assignee(
    mission: Mission,
    directory: Directory,
    viewer: Viewer | None = None,
    labels: LabelSet = POLISH_LABELS,
) -> ResolvedLabel | None:
    return _resolve(mission.assigned_to_user_id, mission.assigned_to_name, directory, viewer, labels)


def resolve_completer(
    mission: Mission,
    directory: Directory,
    viewer: Viewer | None = None,
    labels: LabelSet = POLISH_LABELS,
) -> ResolvedLabel | None:
    """Who completed the mission; the assignee when nobody was recorded."""
    if mission.completed_by_user_id or mission.completed_by_name:
        return _resolve(
            mission.completed_by_user_id, mission.completed_by_name, directory, viewer, labels
        )
    return resolve_assignee(mission, directory, viewer, labels)


def label_text(resolved: ResolvedLabel | None, labels: LabelSet = POLISH_LABELS) -> str:
    """Plain label for display, with the unknown placeholder for None."""
    return resolved.label if resolved else labels.unknown
