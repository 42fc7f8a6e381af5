"""Team membership decision."""

from enum import Enum
from typing import Optional

from hackathon_api.models.hackathon import Hackathon
from hackathon_api.models.hacker import Hacker
from hackathon_api.models.project import Project


class MembershipAction(str, Enum):
    """What a hacker's membership button would do for a project."""

    JOIN = "join"
    LEAVE = "leave"
    NO_CHANGE = "nochange"


def membership_action(
    hacker: Hacker,
    hackathon: Optional[Hackathon],
    project: Optional[Project],
) -> MembershipAction:
    """
    Decide whether the hacker can join or leave the project.

    Locked projects and a missing hackathon context never change. Members may
    leave; non-members may join while the team is below max_team_size. A
    max_team_size cell that did not parse admits nobody.
    Total and side-effect free; applying the action is a separate write.
    """
    if project is None or project.locked or hackathon is None:
        return MembershipAction.NO_CHANGE
    if project.has_member(hacker.id):
        return MembershipAction.LEAVE
    capacity = hackathon.max_team_size
    if "max_team_size" in hackathon.parse_errors or not isinstance(capacity, int):
        return MembershipAction.NO_CHANGE
    if len(project.members) < capacity:
        return MembershipAction.JOIN
    return MembershipAction.NO_CHANGE
