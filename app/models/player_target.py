from typing import Optional
from pydantic import BaseModel


class PlayerMatchTarget(BaseModel):
    """Objetivo estadístico de un jugador en un partido"""

    id: str  # player_id:match_id

    player_id: str
    match_id: str

    target: float
    actual: Optional[float] = None  # None mientras el partido no está puntuado

    class Config:
        populate_by_name = True

    def is_met(self) -> bool:
        return self.actual is not None and self.actual >= self.target
