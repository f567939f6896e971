# worktales/db/mongo.py
import logging
from typing import Any

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.server_api import ServerApi

from worktales.core.config import Settings

logger = logging.getLogger(__name__)

JOBS_COLLECTION = "jobs"
BIDS_COLLECTION = "bids"
TESTIMONIALS_COLLECTION = "testimonials"


class MongoStore:
    """
    Owns the Motor client and hands out the three collections.

    Built once at startup and closed at shutdown; routes receive it through
    ``get_store`` instead of importing a client.
    """

    def __init__(self, client: Any, db_name: str):
        self._client = client
        self._db = client[db_name]
        self.db_name = db_name

    @classmethod
    def from_settings(cls, settings: Settings) -> "MongoStore":
        client = AsyncIOMotorClient(
            settings.mongodb_uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
        )
        return cls(client, settings.MONGODB_DB)

    @property
    def jobs(self):
        return self._db[JOBS_COLLECTION]

    @property
    def bids(self):
        return self._db[BIDS_COLLECTION]

    @property
    def testimonials(self):
        return self._db[TESTIMONIALS_COLLECTION]

    async def ping(self) -> None:
        await self._client.admin.command("ping")
        logger.info("Pinged MongoDB deployment, database=%s", self.db_name)

    def close(self) -> None:
        self._client.close()
        logger.info("MongoDB client closed")


def get_store(request: Request) -> MongoStore:
    return request.app.state.store
