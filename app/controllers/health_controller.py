"""
Controlador de salud - estado del servicio de leaderboards
"""

from fastapi import APIRouter
from pydantic import BaseModel

from app.core.config import get_settings
from app.database import Database
from app.services.leaderboard_cache import match_locks


router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Estado de la conexión y del motor de leaderboards."""
    status: str
    database: str
    leaderboard_top_size: int
    computations_in_flight: int


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """
    Chequeo del servicio de leaderboards.

    computations_in_flight cuenta los partidos que tienen un cálculo en
    curso (o requests esperando su lock) en este proceso. No hace queries.
    """
    return HealthResponse(
        status="ok",
        database="connected" if Database.db is not None else "disconnected",
        leaderboard_top_size=get_settings().leaderboard_top_size,
        computations_in_flight=len(match_locks),
    )
