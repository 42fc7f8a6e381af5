"""
Project Access Predicates

A project is either open-editable or locked. Locking and unlocking are
reserved for elevated hackers (administrator, judge, staff); every other field
change is gated by can_update_project, which stops owners from editing once
the project is locked.
"""

from enum import Enum
from typing import Optional

from hackathon_api.models.hacker import Hacker
from hackathon_api.models.project import Project


class ProjectContext(str, Enum):
    """What the caller is doing with the project form."""

    NEW = "new"
    EDIT = "edit"


def can_update_project(
    hacker: Hacker,
    project: Optional[Project] = None,
    context: ProjectContext = ProjectContext.EDIT,
) -> bool:
    """Elevated hackers always; anyone creating a project; owners while unlocked."""
    if hacker.is_elevated():
        return True
    if context == ProjectContext.NEW:
        return True
    return project is not None and project.is_owner(hacker.id) and not project.locked


def can_lock_project(hacker: Hacker) -> bool:
    """Only elevated hackers toggle the lock. Owners and members never can."""
    return hacker.is_elevated()


def can_delete_project(hacker: Hacker, project: Project) -> bool:
    """Elevated hackers, or the owner of an unlocked project."""
    if hacker.is_elevated():
        return True
    return project.is_owner(hacker.id) and not project.locked


def can_assign_judges(hacker: Hacker) -> bool:
    return hacker.can_admin()
