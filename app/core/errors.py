"""
Errores del motor de leaderboards.

Los repositorios y los servicios comparten esta jerarquía, por eso vive en core.
"""


class LeaderboardError(Exception):
    """Base exception for leaderboard engine errors."""
    pass


class MatchNotFoundError(LeaderboardError):
    """Raised when a match id cannot be resolved."""

    def __init__(self, match_id: str):
        self.match_id = match_id
        super().__init__(f"Match {match_id} not found")


class StorageUnavailableError(LeaderboardError):
    """Raised when a store call fails or times out. Callers may retry."""
    pass
