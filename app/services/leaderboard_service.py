"""
LeaderboardService - Public entry point for match leaderboards.

Only completed matches are offered (list_eligible_matches), so the
compute-once cache never freezes a leaderboard that could still change.
"""

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.leaderboard import LeaderboardSnapshot
from app.models.match import Match, MatchStatus
from app.repositories.base import DEFAULT_STORE_TIMEOUT
from app.repositories.match_repository import MatchRepository
from app.services.leaderboard_cache import LeaderboardCache, MatchLocks, match_locks
from app.services.ranking_engine import DEFAULT_TOP_SIZE, RankingEngine


class LeaderboardService:
    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        top_size: int = DEFAULT_TOP_SIZE,
        timeout: float = DEFAULT_STORE_TIMEOUT,
        locks: MatchLocks = match_locks,
    ):
        self.match_repo = MatchRepository(db, timeout)
        self.engine = RankingEngine(db, top_size=top_size, timeout=timeout)
        self.cache = LeaderboardCache(db, self.engine, timeout=timeout, locks=locks)

    @property
    def top_size(self) -> int:
        return self.engine.top_size

    @property
    def title(self) -> str:
        return f"Top {self.top_size} Players"

    async def list_eligible_matches(self) -> list[Match]:
        """Completed matches, most recent first."""
        matches = await self.match_repo.list_by_status(MatchStatus.COMPLETED)
        return sorted(matches, key=lambda m: m.timestamp, reverse=True)

    async def get_leaderboard(self, match_id: str) -> LeaderboardSnapshot:
        """
        Get the leaderboard of a match.

        Meant for ids coming from list_eligible_matches. Other ids are
        served on a best-effort basis: the snapshot is computed anyway and
        stays cached even if the match is not finished (RankingEngine logs
        a warning when that happens). Cache hits never touch the matches
        collection.
        """
        return await self.cache.get(match_id)

    async def refresh_leaderboard(self, match_id: str) -> LeaderboardSnapshot:
        """Recompute and store the leaderboard of a match."""
        return await self.cache.refresh(match_id)
