"""
RankingEngine - Converts the raw predictions of a match into a ranked top N.

Pure read + derive: it owns no state and never writes to the database.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.errors import MatchNotFoundError
from app.models.leaderboard import LeaderboardEntry, LeaderboardSnapshot
from app.models.player_target import PlayerMatchTarget
from app.models.prediction import Prediction
from app.repositories.base import DEFAULT_STORE_TIMEOUT
from app.repositories.match_repository import MatchRepository
from app.repositories.player_target_repository import PlayerTargetRepository
from app.repositories.prediction_repository import PredictionRepository

logger = logging.getLogger(__name__)

DEFAULT_TOP_SIZE = 10


def utc_now() -> datetime:
    """Naive UTC truncated to milliseconds, the precision Mongo stores."""
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


class RankingEngine:
    def __init__(
        self,
        db: AsyncIOMotorDatabase,
        top_size: int = DEFAULT_TOP_SIZE,
        timeout: float = DEFAULT_STORE_TIMEOUT,
        clock: Callable[[], datetime] = utc_now,
    ):
        if top_size < 1:
            raise ValueError("top_size must be at least 1")
        self.match_repo = MatchRepository(db, timeout)
        self.prediction_repo = PredictionRepository(db, timeout)
        self.target_repo = PlayerTargetRepository(db, timeout)
        self.top_size = top_size
        self.clock = clock

    async def compute(self, match_id: str) -> LeaderboardSnapshot:
        """
        Compute the leaderboard of a match.

        Raises MatchNotFoundError when the match does not exist. A match
        without predictions yields an empty snapshot, not an error.
        """
        match = await self.match_repo.get(match_id)
        if not match:
            raise MatchNotFoundError(match_id)
        if not match.is_completed:
            logger.warning(
                f"Computing leaderboard for match {match_id} with status {match.status.value}"
            )

        predictions = await self.prediction_repo.list_by_match(match_id)
        if not predictions:
            logger.info(f"No predictions yet for match {match_id}")
            return LeaderboardSnapshot(match_id=match_id, entries=[], last_updated=self.clock())

        # One batch query for every target of the match
        targets = await self.target_repo.list_targets(match_id)

        entries = [self._score(prediction, targets) for prediction in predictions]

        # sorted() is stable and predictions come in submission order,
        # so ties keep the earlier submission first
        ranked = sorted(entries, key=lambda e: -e.correct_picks)

        logger.debug(
            f"Ranked {len(entries)} predictions for match {match_id}, keeping top {self.top_size}"
        )
        return LeaderboardSnapshot(
            match_id=match_id,
            entries=ranked[: self.top_size],
            last_updated=self.clock(),
        )

    def _score(
        self,
        prediction: Prediction,
        targets: dict[str, PlayerMatchTarget],
    ) -> LeaderboardEntry:
        correct = 0
        for player_id in prediction.selected_players:
            target: Optional[PlayerMatchTarget] = targets.get(player_id)
            if target is None:
                # Incomplete data is expected while scoring is in progress
                logger.debug(
                    f"Prediction {prediction.id} picks player {player_id} "
                    f"with no target for match {prediction.match_id}"
                )
                continue
            if target.is_met():
                correct += 1

        return LeaderboardEntry(
            user_id=prediction.user_id,
            display_name=prediction.label,
            correct_picks=correct,
            total_picks=len(prediction.selected_players),
            match_id=prediction.match_id,
        )
