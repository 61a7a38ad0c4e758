"""
📊 PlayerTargetRepository - objetivos y resultados de jugadores por partido

IDs compuestos: player_id:match_id
"""

from app.models.player_target import PlayerMatchTarget
from app.repositories.base import MongoRepository


class PlayerTargetRepository(MongoRepository):
    collection_name = "player_targets"

    async def list_targets(self, match_id: str) -> dict[str, PlayerMatchTarget]:
        """
        🔥 Trae todos los objetivos de un partido en una sola query

        Retorna: {player_id: PlayerMatchTarget}
        """
        cursor = self.collection.find({"match_id": match_id})
        docs = await self._run(cursor.to_list(length=None), "list_targets")

        targets = {}
        for doc in docs:
            target = PlayerMatchTarget(**doc)
            targets[target.player_id] = target
        return targets
