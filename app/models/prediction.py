from datetime import datetime
from typing import Optional
from pydantic import BaseModel, field_validator


class Prediction(BaseModel):
    """Predicción de un usuario: los jugadores que eligió para un partido"""

    id: str

    user_id: str
    user_email: str
    display_name: Optional[str] = None

    match_id: str
    selected_players: list[str]

    created_at: datetime  # orden de envío, desempata el ranking

    class Config:
        populate_by_name = True

    @field_validator("selected_players")
    @classmethod
    def _drop_repeated_players(cls, players: list[str]) -> list[str]:
        # Un jugador cuenta una sola vez por predicción
        return list(dict.fromkeys(players))

    @property
    def label(self) -> str:
        if self.display_name:
            return self.display_name
        return self.user_email.split("@")[0]
