from datetime import datetime
from pydantic import BaseModel, Field, model_validator


class LeaderboardEntry(BaseModel):
    """Entrada en la tabla de clasificación de un partido (resultado derivado)"""

    user_id: str
    display_name: str

    correct_picks: int = Field(ge=0)
    total_picks: int = Field(ge=0)

    match_id: str

    class Config:
        populate_by_name = True

    @model_validator(mode="after")
    def _check_bounds(self):
        if self.correct_picks > self.total_picks:
            raise ValueError("correct_picks cannot exceed total_picks")
        return self

    @property
    def accuracy(self) -> float:
        if not self.total_picks:
            return 0.0
        return round(self.correct_picks / self.total_picks * 100, 2)


class LeaderboardSnapshot(BaseModel):
    """Leaderboard cacheado de un partido: top N ordenado + fecha de cálculo"""

    match_id: str
    entries: list[LeaderboardEntry] = Field(default_factory=list)
    last_updated: datetime

    class Config:
        populate_by_name = True

    @property
    def is_empty(self) -> bool:
        return not self.entries
