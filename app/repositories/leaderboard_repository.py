"""
🏆 LeaderboardRepository - snapshots cacheados de leaderboards

Un documento por partido, con _id = match_id. La escritura es condicional
(insert_one sobre el _id) para que haya un solo escritor ganador.
"""

from typing import Optional

from pymongo.errors import DuplicateKeyError

from app.models.leaderboard import LeaderboardSnapshot
from app.repositories.base import MongoRepository


class LeaderboardRepository(MongoRepository):
    collection_name = "leaderboards"

    # ============================================
    # 📌 READ
    # ============================================

    async def read(self, match_id: str) -> Optional[LeaderboardSnapshot]:
        """Obtiene el snapshot guardado de un partido, si existe"""
        doc = await self._run(self.collection.find_one({"_id": match_id}), "read")
        return LeaderboardSnapshot(**doc) if doc else None

    # ============================================
    # 📌 WRITE
    # ============================================

    async def write_if_absent(self, snapshot: LeaderboardSnapshot) -> bool:
        """
        Guarda el snapshot solo si no hay otro para el mismo partido

        Retorna True si se escribió, False si ya existía.
        """
        doc = snapshot.model_dump()
        doc["_id"] = snapshot.match_id

        try:
            await self._run(self.collection.insert_one(doc), "write_if_absent")
            return True
        except DuplicateKeyError:
            return False

    async def replace(self, snapshot: LeaderboardSnapshot) -> None:
        """
        Reemplaza (o crea) el snapshot de un partido en una sola escritura

        Lo usa el recálculo explícito: el snapshot viejo sigue ahí hasta que
        el nuevo lo sustituye.
        """
        doc = snapshot.model_dump()
        doc["_id"] = snapshot.match_id

        await self._run(
            self.collection.replace_one({"_id": snapshot.match_id}, doc, upsert=True),
            "replace",
        )

    # ============================================
    # 📌 DELETE
    # ============================================

    async def delete(self, match_id: str) -> bool:
        """Elimina el snapshot de un partido (para recalcularlo)"""
        result = await self._run(self.collection.delete_one({"_id": match_id}), "delete")
        return result.deleted_count > 0
