from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel


class MatchStatus(str, Enum):
    UPCOMING = "upcoming"
    LIVE = "live"
    COMPLETED = "completed"


class Match(BaseModel):
    """Partido de cricket (solo lectura para el motor de leaderboards)"""

    id: str

    team1: str
    team2: str
    venue: str

    timestamp: datetime
    description: Optional[str] = None

    status: MatchStatus = MatchStatus.UPCOMING

    class Config:
        populate_by_name = True

    @property
    def label(self) -> str:
        """Texto que se muestra en el selector de partidos"""
        if self.description:
            return self.description
        return f"{self.team1} vs {self.team2}"

    @property
    def is_completed(self) -> bool:
        return self.status == MatchStatus.COMPLETED
