from .match import Match, MatchStatus
from .prediction import Prediction
from .player_target import PlayerMatchTarget
from .leaderboard import LeaderboardEntry, LeaderboardSnapshot

__all__ = [
    "Match",
    "MatchStatus",
    "Prediction",
    "PlayerMatchTarget",
    "LeaderboardEntry",
    "LeaderboardSnapshot",
]
