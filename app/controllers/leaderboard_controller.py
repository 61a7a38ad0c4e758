"""
Controlador de leaderboards - Endpoints de clasificación por partido

El leaderboard se calcula la primera vez que se pide y luego se sirve
desde la caché persistida.
"""

from datetime import datetime

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from app.core.dependencies import Leaderboards
from app.core.errors import MatchNotFoundError, StorageUnavailableError


router = APIRouter(prefix="/leaderboard", tags=["leaderboard"])


class LeaderboardEntryResponse(BaseModel):
    """Entrada del leaderboard (usuario y aciertos)."""
    rank: int
    user_id: str
    display_name: str
    correct_picks: int
    total_picks: int
    accuracy: float


class LeaderboardResponse(BaseModel):
    """Leaderboard de un partido."""
    match_id: str
    title: str
    top_size: int
    last_updated: datetime
    entries: list[LeaderboardEntryResponse]


@router.get("/{match_id}", response_model=LeaderboardResponse)
async def get_match_leaderboard(match_id: str, leaderboards: Leaderboards):
    """
    Obtener el leaderboard de un partido.

    Una lista vacía significa que todavía no hay predicciones, no es un error.
    """
    try:
        snapshot = await leaderboards.get_leaderboard(match_id)
    except MatchNotFoundError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Match {match_id} not found"
        )
    except StorageUnavailableError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=str(exc))

    return LeaderboardResponse(
        match_id=snapshot.match_id,
        title=leaderboards.title,
        top_size=leaderboards.top_size,
        last_updated=snapshot.last_updated,
        entries=[
            LeaderboardEntryResponse(
                rank=idx + 1,
                user_id=e.user_id,
                display_name=e.display_name,
                correct_picks=e.correct_picks,
                total_picks=e.total_picks,
                accuracy=e.accuracy,
            )
            for idx, e in enumerate(snapshot.entries)
        ]
    )
