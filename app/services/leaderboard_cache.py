"""
LeaderboardCache - Read-through, compute-once cache of match leaderboards.

A snapshot is computed on the first miss and served from the database on
every later read. Within a process a per-match lock lets only one
coroutine compute a given match; across processes the conditional write
in LeaderboardRepository leaves a single winning writer.

Snapshots are never invalidated on their own: callers must only ask for
completed matches (LeaderboardService takes care of that) or use refresh().
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.models.leaderboard import LeaderboardSnapshot
from app.repositories.base import DEFAULT_STORE_TIMEOUT
from app.repositories.leaderboard_repository import LeaderboardRepository
from app.services.ranking_engine import RankingEngine

logger = logging.getLogger(__name__)


class MatchLocks:
    """Registry of per-match asyncio locks, dropped when nobody holds them."""

    def __init__(self):
        self._locks: dict[str, asyncio.Lock] = {}
        self._users: dict[str, int] = {}

    @asynccontextmanager
    async def hold(self, match_id: str) -> AsyncIterator[None]:
        lock = self._locks.setdefault(match_id, asyncio.Lock())
        self._users[match_id] = self._users.get(match_id, 0) + 1
        try:
            async with lock:
                yield
        finally:
            self._users[match_id] -= 1
            if not self._users[match_id]:
                del self._users[match_id]
                del self._locks[match_id]

    def __len__(self) -> int:
        return len(self._locks)


# Shared by every cache built in this process (services are built per request)
match_locks = MatchLocks()


class LeaderboardCache:
    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        engine: RankingEngine,
        timeout: float = DEFAULT_STORE_TIMEOUT,
        locks: MatchLocks = match_locks,
    ):
        self.repo = LeaderboardRepository(db, timeout)
        self.engine = engine
        self.locks = locks

    async def get(self, match_id: str) -> LeaderboardSnapshot:
        """
        Return the leaderboard of a match, computing it at most once.

        Empty leaderboards are returned but not stored, so the next call
        tries again once predictions exist.
        """
        snapshot = await self.repo.read(match_id)
        if snapshot is not None:
            logger.debug(f"Leaderboard cache hit for match {match_id}")
            return snapshot

        async with self.locks.hold(match_id):
            # Someone may have filled it while we waited for the lock
            snapshot = await self.repo.read(match_id)
            if snapshot is not None:
                logger.debug(f"Leaderboard for match {match_id} filled while waiting")
                return snapshot

            logger.info(f"Leaderboard cache miss for match {match_id}, computing")
            return await self._compute_and_store(match_id)

    async def refresh(self, match_id: str) -> LeaderboardSnapshot:
        """
        Compute the leaderboard of a match again and swap it in.

        The stored snapshot is only replaced once the new one is ready, so a
        failed or cancelled refresh leaves the previous snapshot in place.
        An empty result never replaces a stored snapshot.
        """
        async with self.locks.hold(match_id):
            logger.info(f"Refreshing leaderboard for match {match_id}")
            snapshot = await self.engine.compute(match_id)
            if snapshot.is_empty:
                stored = await self.repo.read(match_id)
                if stored is not None:
                    logger.warning(
                        f"Refresh of match {match_id} found no predictions, keeping stored snapshot"
                    )
                    return stored
                return snapshot

            await self.repo.replace(snapshot)
            logger.info(
                f"✅ Replaced leaderboard for match {match_id} ({len(snapshot.entries)} entries)"
            )
            return snapshot

    async def _compute_and_store(self, match_id: str) -> LeaderboardSnapshot:
        snapshot = await self.engine.compute(match_id)
        if snapshot.is_empty:
            return snapshot

        if await self.repo.write_if_absent(snapshot):
            logger.info(
                f"✅ Stored leaderboard for match {match_id} ({len(snapshot.entries)} entries)"
            )
            return snapshot

        # Another process stored it first, serve the winner
        logger.warning(f"Leaderboard for match {match_id} was already stored by another writer")
        stored = await self.repo.read(match_id)
        return stored if stored is not None else snapshot
