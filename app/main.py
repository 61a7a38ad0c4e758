"""
Entry point de la API
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from app.core.config import get_settings
from app.database import Database

from app.controllers.health_controller import router as health_router
from app.controllers.matches_controller import router as matches_router
from app.controllers.leaderboard_controller import router as leaderboard_router

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await Database.connect()
    yield
    await Database.disconnect()

# Creo la app
app = FastAPI(
    title="Cricket Picks Leaderboard API",
    description="Leaderboards por partido de la app de predicciones de cricket",
    version="1.0.0",
    lifespan=lifespan
)

# Agrego todos los routers de los controllers al app
app.include_router(health_router)
app.include_router(matches_router)
app.include_router(leaderboard_router)


@app.get("/")
async def root():
    # Endpoint raíz, sirve para verificar que la API está levantada
    return {
        "name": "Cricket Picks Leaderboard API",
        "version": "1.0.0",
        "docs": "/docs"  # Link a la documentación interactiva de Swagger
    }
