"""
Acceso común a Mongo para los repositorios del leaderboard

Cada llamada al store pasa por aquí: se le aplica un timeout y cualquier
fallo de pymongo se convierte en StorageUnavailableError.
"""

import asyncio
import logging
from typing import Awaitable, TypeVar

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError, PyMongoError

from app.core.errors import StorageUnavailableError

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_STORE_TIMEOUT = 5.0


class MongoRepository:
    collection_name: str = ""

    def __init__(self, db: AsyncIOMotorDatabase, timeout: float = DEFAULT_STORE_TIMEOUT):
        self.db = db
        self.collection = db[self.collection_name]
        self.timeout = timeout

    async def _run(self, operation: Awaitable[T], what: str) -> T:
        """Ejecuta una operación contra Mongo con timeout acotado"""
        try:
            return await asyncio.wait_for(operation, timeout=self.timeout)
        except asyncio.TimeoutError:
            logger.error(f"❌ Timeout ({self.timeout}s) on {self.collection_name}.{what}")
            raise StorageUnavailableError(
                f"{self.collection_name}.{what} timed out after {self.timeout}s"
            )
        except DuplicateKeyError:
            # Lo resuelve quien hace la escritura condicional
            raise
        except PyMongoError as exc:
            logger.error(f"❌ Mongo error on {self.collection_name}.{what}: {exc}")
            raise StorageUnavailableError(
                f"{self.collection_name}.{what} failed: {exc}"
            ) from exc
