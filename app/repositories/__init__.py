from .match_repository import MatchRepository
from .prediction_repository import PredictionRepository
from .player_target_repository import PlayerTargetRepository
from .leaderboard_repository import LeaderboardRepository

__all__ = [
    "MatchRepository",
    "PredictionRepository",
    "PlayerTargetRepository",
    "LeaderboardRepository",
]
