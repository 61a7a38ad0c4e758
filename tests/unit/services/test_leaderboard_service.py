"""
Unit tests for LeaderboardService
"""

import asyncio
import logging
import pytest
from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from pymongo.errors import ServerSelectionTimeoutError

from app.services.leaderboard_service import LeaderboardService


class TestLeaderboardService:
    """Test suite for the public leaderboard entry point."""

    @pytest.mark.asyncio
    async def test_list_eligible_matches_only_completed_newest_first(
        self, test_db, sample_match_data, base_time
    ):
        await test_db["matches"].insert_many([
            {**sample_match_data, "id": "old", "timestamp": base_time - timedelta(days=3)},
            {**sample_match_data, "id": "new", "timestamp": base_time},
            {**sample_match_data, "id": "mid", "timestamp": base_time - timedelta(days=1)},
            {**sample_match_data, "id": "live", "status": "live"},
            {**sample_match_data, "id": "soon", "status": "upcoming",
             "timestamp": base_time + timedelta(days=2)},
        ])
        service = LeaderboardService(test_db)

        matches = await service.list_eligible_matches()

        assert [m.id for m in matches] == ["new", "mid", "old"]
        assert all(m.is_completed for m in matches)

    @pytest.mark.asyncio
    async def test_list_eligible_matches_empty(self, test_db):
        service = LeaderboardService(test_db)

        assert await service.list_eligible_matches() == []

    @pytest.mark.asyncio
    async def test_get_leaderboard_ranks_and_caches(self, seeded_db, locks):
        service = LeaderboardService(seeded_db, locks=locks)

        snapshot = await service.get_leaderboard("M1")

        assert [(e.user_id, e.correct_picks) for e in snapshot.entries] == [
            ("B", 3), ("A", 2), ("C", 1)
        ]
        assert await seeded_db["leaderboards"].count_documents({"_id": "M1"}) == 1

    @pytest.mark.asyncio
    async def test_get_leaderboard_for_live_match_is_best_effort(self, seeded_db, locks, caplog):
        await seeded_db["matches"].update_one({"id": "M1"}, {"$set": {"status": "live"}})
        service = LeaderboardService(seeded_db, locks=locks)

        with caplog.at_level(logging.WARNING, logger="app.services.ranking_engine"):
            snapshot = await service.get_leaderboard("M1")

        assert len(snapshot.entries) == 3
        assert "status live" in caplog.text

    @pytest.mark.asyncio
    async def test_concurrent_requests_share_one_computation(self, seeded_db, locks):
        """Services are built per request but share the process-wide locks."""
        services = [LeaderboardService(seeded_db, locks=locks) for _ in range(8)]

        results = await asyncio.gather(*[s.get_leaderboard("M1") for s in services])

        assert all(r == results[0] for r in results)
        assert await seeded_db["leaderboards"].count_documents({}) == 1

    @pytest.mark.asyncio
    async def test_cached_leaderboard_served_when_matches_unavailable(self, seeded_db, locks):
        """A cache hit only reads the leaderboards collection."""
        service = LeaderboardService(seeded_db, locks=locks)
        stored = await service.get_leaderboard("M1")

        broken = MagicMock()
        broken.find_one = AsyncMock(side_effect=ServerSelectionTimeoutError("matches down"))
        service.match_repo.collection = broken
        service.engine.match_repo.collection = broken

        assert await service.get_leaderboard("M1") == stored
        broken.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_refresh_leaderboard(self, seeded_db, locks):
        service = LeaderboardService(seeded_db, locks=locks)
        await service.get_leaderboard("M1")

        await seeded_db["player_targets"].update_many({}, {"$set": {"actual": None}})
        snapshot = await service.refresh_leaderboard("M1")

        assert [e.correct_picks for e in snapshot.entries] == [0, 0, 0]
        # Everybody tied: submission order
        assert [e.user_id for e in snapshot.entries] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_title_follows_top_size(self, test_db):
        service = LeaderboardService(test_db, top_size=20)

        assert service.top_size == 20
        assert service.title == "Top 20 Players"

    @pytest.mark.asyncio
    async def test_default_title(self, test_db):
        assert LeaderboardService(test_db).title == "Top 10 Players"
