"""
Hackathon Store

Explicit handle bundling every typed collection over one tabular backend.
Service functions and HTTP dependencies receive this handle instead of
reaching for module-level state.
"""

import threading
from dataclasses import dataclass
from dataclasses import field
from typing import Dict
from typing import List

from loguru import logger

from hackathon_api.models.project import Project
from hackathon_api.sheets.backend import InMemoryBackend
from hackathon_api.sheets.backend import TabularBackend
from hackathon_api.tables import Hackathons
from hackathon_api.tables import Hackers
from hackathon_api.tables import Judgings
from hackathon_api.tables import Projects
from hackathon_api.tables import Registrations
from hackathon_api.tables import TeamMembers


@dataclass
class HackathonStore:
    """All collections of one hackathon workbook."""

    backend: TabularBackend
    projects: Projects
    registrations: Registrations
    team_members: TeamMembers
    judgings: Judgings
    hackathons: Hackathons
    hackers: Hackers
    # serializes join/leave so a team never grows past max_team_size
    membership_lock: threading.Lock = field(default_factory=threading.Lock)
    # one registration row per hacker and hackathon
    registration_lock: threading.Lock = field(default_factory=threading.Lock)

    @classmethod
    def from_backend(cls, backend: TabularBackend) -> "HackathonStore":
        return cls(
            backend=backend,
            projects=Projects(backend),
            registrations=Registrations(backend),
            team_members=TeamMembers(backend),
            judgings=Judgings(backend),
            hackathons=Hackathons(backend),
            hackers=Hackers(backend),
        )

    @classmethod
    def in_memory(cls) -> "HackathonStore":
        return cls.from_backend(InMemoryBackend())

    def hydrate(self, project: Project) -> Project:
        """Fill the derived member ids and judge names of one project."""
        return self.hydrate_all([project])[0]

    def hydrate_all(self, projects: List[Project]) -> List[Project]:
        """
        Fill derived members and judges for many projects with one read per tab.

        Judges whose hacker row no longer exists are left out.
        """
        members: Dict[str, List[str]] = {}
        for member in self.team_members.list():
            members.setdefault(member.project_id, []).append(member.user_id)

        names = {hacker.id: hacker.name for hacker in self.hackers.list()}
        judges: Dict[str, List[str]] = {}
        for judging in self.judgings.list():
            name = names.get(judging.user_id)
            if name is None:
                logger.debug("Judging references unknown hacker", judging_id=judging.id, hacker_id=judging.user_id)
                continue
            judges.setdefault(judging.project_id, []).append(name)

        for project in projects:
            project.members = members.get(project.id, []) if project.id else []
            project.judges = judges.get(project.id, []) if project.id else []
        return projects
