"""
🏏 MatchRepository - lectura de partidos

El ciclo de vida de los partidos lo maneja la administración; aquí solo se lee.
"""

from typing import Optional

from app.models.match import Match, MatchStatus
from app.repositories.base import MongoRepository


class MatchRepository(MongoRepository):
    collection_name = "matches"

    async def get(self, match_id: str) -> Optional[Match]:
        """Obtiene un partido por ID"""
        doc = await self._run(self.collection.find_one({"id": match_id}), "get")
        return Match(**doc) if doc else None

    async def list_by_status(self, status: MatchStatus) -> list[Match]:
        """Obtiene los partidos con un estado, más recientes primero"""
        cursor = self.collection.find({"status": status.value}).sort("timestamp", -1)
        docs = await self._run(cursor.to_list(length=None), "list_by_status")
        return [Match(**doc) for doc in docs]
