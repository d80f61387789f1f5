"""Pytest configuration and fixtures."""
import pytest

from goalboard.config import Settings
from goalboard.services.board_service import BoardService


@pytest.fixture
def goal_record():
    """Wire record for a weekly goal with progress."""
    return {
        "id": "g1",
        "title": "Run 5k",
        "description": "",
        "period": "weekly",
        "status": "to-do",
        "progress": 0,
        "createdAt": 1700000000,
    }


@pytest.fixture
def legacy_goal_record():
    """Wire record written before progress tracking existed."""
    return {
        "id": "g-legacy",
        "title": "Read 12 books",
        "description": "One per month",
        "period": "yearly",
        "status": "planned",
        "createdAt": 1690000000000,
    }


@pytest.fixture
def board():
    """Board with default column titles, independent of the environment."""
    return BoardService(settings=Settings(_env_file=None))
