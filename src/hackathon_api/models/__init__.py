"""
Sheet Record Models

Typed rows for every tab the store reads or writes.
"""

from hackathon_api.models.hackathon import Hackathon
from hackathon_api.models.hacker import Hacker
from hackathon_api.models.hacker import HackerRole
from hackathon_api.models.judging import Judging
from hackathon_api.models.project import Project
from hackathon_api.models.registration import Registration
from hackathon_api.models.team_member import TeamMember

__all__ = [
    "Hackathon",
    "Hacker",
    "HackerRole",
    "Judging",
    "Project",
    "Registration",
    "TeamMember",
]
