"""
🎯 PredictionRepository - predicciones enviadas por los usuarios
"""

from app.models.prediction import Prediction
from app.repositories.base import MongoRepository


class PredictionRepository(MongoRepository):
    collection_name = "predictions"

    async def list_by_match(self, match_id: str) -> list[Prediction]:
        """
        Obtiene TODAS las predicciones de un partido en orden de envío

        El orden (created_at, id) es el desempate del ranking, tiene que ser estable.
        """
        cursor = self.collection.find({"match_id": match_id}).sort(
            [("created_at", 1), ("id", 1)]
        )
        docs = await self._run(cursor.to_list(length=None), "list_by_match")
        return [Prediction(**doc) for doc in docs]
