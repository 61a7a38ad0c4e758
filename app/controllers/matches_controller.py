"""
Controlador de partidos - solo los partidos que tienen leaderboard
"""

from datetime import datetime
from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.dependencies import Leaderboards
from app.core.errors import StorageUnavailableError


router = APIRouter(prefix="/matches", tags=["matches"])


class MatchResponse(BaseModel):
    """Partido completado, tal como se ofrece en el selector."""
    id: str
    label: str
    team1: str
    team2: str
    venue: str
    timestamp: datetime
    description: Optional[str] = None
    status: str


@router.get("/completed", response_model=list[MatchResponse])
async def get_completed_matches(leaderboards: Leaderboards):
    """
    Partidos completados, más recientes primero.

    Son los únicos ids que se deben pedir a /leaderboard/{match_id}.
    """
    try:
        matches = await leaderboards.list_eligible_matches()
    except StorageUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))

    return [
        MatchResponse(
            id=m.id,
            label=m.label,
            team1=m.team1,
            team2=m.team2,
            venue=m.venue,
            timestamp=m.timestamp,
            description=m.description,
            status=m.status.value,
        )
        for m in matches
    ]
