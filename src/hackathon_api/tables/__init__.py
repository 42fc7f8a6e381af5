"""
Typed Collections

SheetTable specializations, one per tab, adding read-only domain queries.
"""

from hackathon_api.tables.hackathons import Hackathons
from hackathon_api.tables.hackers import Hackers
from hackathon_api.tables.judgings import Judgings
from hackathon_api.tables.projects import Projects
from hackathon_api.tables.registrations import Registrations
from hackathon_api.tables.team_members import TeamMembers

__all__ = [
    "Hackathons",
    "Hackers",
    "Judgings",
    "Projects",
    "Registrations",
    "TeamMembers",
]
