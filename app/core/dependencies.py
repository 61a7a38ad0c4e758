"""
Dependencies de FastAPI para inyeccion de BD y servicios
"""

from typing import Annotated

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from app.core.config import Settings, get_settings
from app.database import get_database
from app.services.leaderboard_service import LeaderboardService


async def get_leaderboard_service(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> LeaderboardService:
    """
    Construye el servicio por request.

    Los locks por partido son de proceso (ver leaderboard_cache.match_locks),
    asi que varios requests simultaneos comparten el mismo lock.
    """
    return LeaderboardService(
        db,
        top_size=settings.leaderboard_top_size,
        timeout=settings.store_timeout_seconds,
    )


# Alias de tipos para que se vea mas limpio en los endpoints
Leaderboards = Annotated[LeaderboardService, Depends(get_leaderboard_service)]
