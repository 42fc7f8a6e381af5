"""
Project Service

Applies lifecycle decisions through the store. Every function takes the
HackathonStore handle explicitly; each write is a single-row, version-checked
SheetTable call and nothing is retried on conflict.
"""

from typing import List
from typing import Optional

from loguru import logger

from hackathon_api.exceptions import AuthorizationError
from hackathon_api.exceptions import ValidationError
from hackathon_api.lifecycle.access import ProjectContext
from hackathon_api.lifecycle.access import can_assign_judges
from hackathon_api.lifecycle.access import can_delete_project
from hackathon_api.lifecycle.access import can_lock_project
from hackathon_api.lifecycle.access import can_update_project
from hackathon_api.lifecycle.membership import MembershipAction
from hackathon_api.lifecycle.membership import membership_action
from hackathon_api.lifecycle.reconcile import reconcile_entities
from hackathon_api.models.hackathon import Hackathon
from hackathon_api.models.hacker import Hacker
from hackathon_api.models.judging import Judging
from hackathon_api.models.project import Project
from hackathon_api.models.registration import Registration
from hackathon_api.models.team_member import TeamMember
from hackathon_api.store import HackathonStore


def save_project(
    store: HackathonStore,
    hacker: Hacker,
    project: Project,
    context: ProjectContext = ProjectContext.EDIT,
    judge_names: Optional[List[str]] = None,
    hackathon: Optional[Hackathon] = None,
) -> Project:
    """
    Create or update a project, then bring its judgings in line with judge_names.

    Access is decided against the stored project (owner and lock state as
    persisted), not against the submitted copy. All checks run before the
    first write.

    Args:
        store: Store handle
        hacker: Acting hacker
        project: Submitted project; for EDIT it must carry the version last read
        context: NEW to create, EDIT to update
        judge_names: Requested judge names; None leaves judges untouched
        hackathon: Hackathon to attach the project to when it has none

    Returns:
        The stored project with members and judges filled in

    Raises:
        AuthorizationError: If the hacker may not edit, lock/unlock or assign judges
        ValidationError: If a field fails its domain rule
        NotFoundError: If an edited project no longer exists
        ConflictError: If the project changed since it was read
    """
    stored = None if context == ProjectContext.NEW else store.hydrate(store.projects.get(project.id))

    if not can_update_project(hacker, stored, context):
        reason = "project is locked" if stored is not None and stored.locked else "not the project owner"
        raise AuthorizationError("update project", hacker.id, reason)

    was_locked = stored.locked if stored else False
    if project.locked != was_locked and not can_lock_project(hacker):
        raise AuthorizationError("lock project", hacker.id)

    judge_changes = None
    if judge_names is not None:
        current_judges = stored.judges if stored else []
        judge_changes = reconcile_entities(current_judges, judge_names, store.hackers.judges(), lambda h: h.name)
        if (judge_changes.added or judge_changes.removed) and not can_assign_judges(hacker):
            raise AuthorizationError("assign judges", hacker.id)

    errors = project.validate_fields()
    if errors:
        raise ValidationError(errors)

    if stored is None:
        project.user_id = project.user_id or hacker.id
    else:
        # ownership and creation date are not editable through the form
        project.user_id = stored.user_id
        project.date_created = stored.date_created
        if "date_created" in stored.parse_errors:
            # unparsed cell is written back as it was read
            project.parse_errors["date_created"] = stored.parse_errors["date_created"]
    if not project.hackathon_id:
        if stored is not None and stored.hackathon_id:
            project.hackathon_id = stored.hackathon_id
        elif hackathon is not None:
            project.hackathon_id = hackathon.id

    saved = store.projects.create(project) if stored is None else store.projects.update(project)

    if judge_changes is not None:
        for judge in judge_changes.added:
            if store.judgings.find(saved.id, judge.id) is None:
                store.judgings.create(Judging(user_id=judge.id, project_id=saved.id))
        for judge in judge_changes.removed:
            judging = store.judgings.find(saved.id, judge.id)
            if judging is not None:
                store.judgings.delete(judging)
        if judge_changes.added or judge_changes.removed:
            logger.info(
                "Project judges reconciled",
                project_id=saved.id,
                added=[judge.name for judge in judge_changes.added],
                removed=[judge.name for judge in judge_changes.removed],
            )

    return store.hydrate(saved)


def change_membership(
    store: HackathonStore,
    hacker: Hacker,
    hackathon: Optional[Hackathon],
    project: Project,
) -> MembershipAction:
    """
    Join or leave a project, whichever membership_action allows.

    The project and its members are re-read under the store's membership lock
    so concurrent joins cannot overfill the team.

    Returns:
        The action applied (NO_CHANGE when nothing was written)
    """
    with store.membership_lock:
        current = store.hydrate(store.projects.get(project.id))
        action = membership_action(hacker, hackathon, current)

        if action == MembershipAction.JOIN:
            store.team_members.create(TeamMember(user_id=hacker.id, project_id=current.id))
        elif action == MembershipAction.LEAVE:
            member = store.team_members.find(current.id, hacker.id)
            if member is not None:
                store.team_members.delete(member)

    logger.info(
        "Membership change evaluated",
        project_id=current.id,
        hacker_id=hacker.id,
        action=action.value,
    )
    return action


def delete_project(store: HackathonStore, hacker: Hacker, project: Project) -> None:
    """
    Delete a project, then its team member and judging rows.

    The project row is deleted first, under the caller's version, so a stale
    read fails before anything else is touched.

    Raises:
        AuthorizationError: If the hacker may not delete the stored project
        NotFoundError: If the project no longer exists
        ConflictError: If the project changed since it was read
    """
    stored = store.projects.get(project.id)
    if not can_delete_project(hacker, stored):
        raise AuthorizationError(
            "delete project", hacker.id, "project is locked" if stored.locked else "not the project owner"
        )

    store.projects.delete(project)

    for member in store.team_members.for_project(stored.id):
        store.team_members.delete(member)
    for judging in store.judgings.for_project(stored.id):
        store.judgings.delete(judging)

    logger.info("Project deleted", project_id=stored.id, hacker_id=hacker.id)


def register(store: HackathonStore, hacker: Hacker, hackathon: Hackathon) -> Registration:
    """Return the hacker's registration for the hackathon, creating it if needed."""
    with store.registration_lock:
        existing = store.registrations.find(hacker.id, hackathon.id)
        if existing is not None:
            return existing
        registration = store.registrations.create(Registration(user_id=hacker.id, hackathon_id=hackathon.id))
    logger.info("Hacker registered", hacker_id=hacker.id, hackathon_id=hackathon.id)
    return registration
