"""Constant values used for tests."""

from pathlib import Path

THIS_DIR = Path(__file__).parent
PROJECT_DIR = (THIS_DIR / "../").resolve()

# Base path for all API routes; must match main.py include_router(..., prefix="/api")
API_BASE = "/api"

# Canonically encoded projects row, in tab order
PROJECT_CELLS = (
    "owner-1",
    "hackathon-1",
    "Sheet Sync",
    "Keeps two spreadsheets in step",
    "2024-05-01T10:00:00+00:00",
    "Open",
    "TRUE",
    "FALSE",
    "python,fastapi",
    "\0",
)
