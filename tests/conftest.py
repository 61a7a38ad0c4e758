"""
Pytest fixtures and configuration for all tests.
"""

import os

# Settings() needs a Mongo URI even though tests never open a real connection
os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

import pytest
from datetime import datetime, timedelta
from typing import AsyncGenerator
from mongomock_motor import AsyncMongoMockClient

from app.services.leaderboard_cache import MatchLocks

TEST_DB_NAME = "cricket_picks_test"

BASE_TIME = datetime(2026, 3, 15, 14, 0, 0)


@pytest.fixture(scope="function")
async def test_db() -> AsyncGenerator:
    """
    Provide a clean in-memory database for each test.

    mongomock-motor exposes the motor API, so repositories run unchanged.
    """
    client = AsyncMongoMockClient()
    db = client[TEST_DB_NAME]

    yield db

    # Cleanup: drop all collections after test
    collection_names = await db.list_collection_names()
    for collection_name in collection_names:
        await db[collection_name].drop()


@pytest.fixture
def base_time():
    return BASE_TIME


@pytest.fixture
def locks():
    """Private lock registry so tests don't share state with each other."""
    return MatchLocks()


@pytest.fixture
def sample_match_data():
    """Sample completed match."""
    return {
        "id": "M1",
        "team1": "Mumbai Indians",
        "team2": "Chennai Super Kings",
        "venue": "Wankhede Stadium",
        "timestamp": BASE_TIME,
        "description": None,
        "status": "completed",
    }


@pytest.fixture
def make_prediction():
    """Build prediction documents; `order` spaces out submission times."""
    def _make(user: str, players: list[str], order: int, match_id: str = "M1") -> dict:
        return {
            "id": f"{user}:{match_id}",
            "user_id": user,
            "user_email": f"{user.lower()}@example.com",
            "match_id": match_id,
            "selected_players": players,
            "created_at": BASE_TIME - timedelta(hours=2) + timedelta(minutes=order),
        }
    return _make


@pytest.fixture
def make_target():
    """Build player target documents."""
    def _make(player: str, target: float, actual=None, match_id: str = "M1") -> dict:
        return {
            "id": f"{player}:{match_id}",
            "player_id": player,
            "match_id": match_id,
            "target": target,
            "actual": actual,
        }
    return _make


@pytest.fixture
async def seeded_db(test_db, sample_match_data, make_prediction, make_target):
    """
    Match M1 with the classic ranking case:

    - A picks 3 players, 2 meet target
    - B picks 3 players, 3 meet target
    - C picks 3 players, 1 meets target
    """
    await test_db["matches"].insert_one(dict(sample_match_data))

    # p1..p4 meet their targets, p5..p6 don't
    await test_db["player_targets"].insert_many([
        make_target("p1", 30, 45),
        make_target("p2", 2, 3),
        make_target("p3", 25, 25),
        make_target("p4", 10, 12),
        make_target("p5", 50, 12),
        make_target("p6", 3, 0),
    ])

    await test_db["predictions"].insert_many([
        make_prediction("A", ["p1", "p2", "p5"], order=1),
        make_prediction("B", ["p1", "p3", "p4"], order=2),
        make_prediction("C", ["p4", "p5", "p6"], order=3),
    ])

    return test_db
