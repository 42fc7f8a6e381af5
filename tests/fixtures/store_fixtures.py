"""Fixtures for the in-memory backend, the store and seeded rows."""

from datetime import datetime
from datetime import timezone
from typing import Dict

import pytest

from hackathon_api.models.hackathon import Hackathon
from hackathon_api.models.hacker import Hacker
from hackathon_api.models.project import Project
from hackathon_api.sheets.backend import InMemoryBackend
from hackathon_api.store import HackathonStore


@pytest.fixture
def backend():
    """Empty in-memory workbook."""
    return InMemoryBackend()


@pytest.fixture
def store(backend):
    """Store over the in-memory workbook."""
    return HackathonStore.from_backend(backend)


@pytest.fixture
def hackathon(store) -> Hackathon:
    """The current hackathon, with room for two hackers per team."""
    return store.hackathons.create(
        Hackathon(
            name="Spring Hack",
            location="Online",
            date=datetime(2024, 5, 1, tzinfo=timezone.utc),
            max_team_size=2,
            default=True,
        )
    )


@pytest.fixture
def hackers(store) -> Dict[str, Hacker]:
    """
    Seeded hackers keyed by role in the tests.

    alice, bob and carol are judges; olive owns projects; uma and ian hold no capability.
    """
    seeded = {
        "admin": Hacker(name="Ada", roles=["admin"]),
        "staff": Hacker(name="Sam", roles=["staff"]),
        "alice": Hacker(name="Alice", roles=["judge"]),
        "bob": Hacker(name="Bob", roles=["judge"]),
        "carol": Hacker(name="Carol", roles=["judge"]),
        "olive": Hacker(name="Olive", roles=["user"]),
        "uma": Hacker(name="Uma", roles=["user"]),
        "ian": Hacker(name="Ian", roles=[]),
    }
    return {key: store.hackers.create(hacker) for key, hacker in seeded.items()}


@pytest.fixture
def project(store, hackers, hackathon) -> Project:
    """An unlocked project owned by olive in the current hackathon."""
    created = store.projects.create(
        Project(
            title="Sheet Sync",
            description="Keeps two spreadsheets in step",
            user_id=hackers["olive"].id,
            hackathon_id=hackathon.id,
            technologies=["python", "fastapi"],
        )
    )
    return store.hydrate(created)


@pytest.fixture
def locked_project(store, hackers, hackathon) -> Project:
    """A locked project owned by olive."""
    created = store.projects.create(
        Project(
            title="Frozen",
            user_id=hackers["olive"].id,
            hackathon_id=hackathon.id,
            locked=True,
        )
    )
    return store.hydrate(created)
