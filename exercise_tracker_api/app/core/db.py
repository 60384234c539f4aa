"""
MongoDB integration.

``MongoStore`` is the only object that talks to the database.  It is
constructed explicitly by ``create_app`` and handed to request
handlers through ``app.state``; the application lifespan calls
``connect`` on startup and ``close`` on shutdown.  Document mapping is
done by Beanie on top of PyMongo's asyncio client.

Write failures are re‑raised as ``StoreError`` so handlers can answer
with a plain‑text message.  Read failures propagate unchanged.
"""

import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional, Union

from beanie import PydanticObjectId, init_beanie
from beanie.odm.queries.find import FindMany
from bson import ObjectId
from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from ..models import Exercise, User
from .errors import StoreError

logger = logging.getLogger(__name__)


class MongoStore:
    """Record store backed by a MongoDB database."""

    def __init__(self, uri: str, database: str) -> None:
        self.uri = uri
        self.database = database
        self._client: Optional[AsyncMongoClient] = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    async def connect(self) -> None:
        """Open the client and register the document models."""
        if self._client is not None:
            return
        self._client = AsyncMongoClient(self.uri)
        await init_beanie(database=self._client[self.database], document_models=[User, Exercise])
        logger.info("Connected to MongoDB database %s", self.database)

    async def close(self) -> None:
        if self._client is None:
            return
        await self._client.close()
        self._client = None
        logger.info("MongoDB connection closed")

    async def create_user(self, username: str) -> User:
        user = User(username=username)
        try:
            await user.insert()
        except PyMongoError as e:
            raise StoreError(f"Could not save user {username!r}") from e
        return user

    async def list_users(self) -> List[User]:
        return await User.find_all().to_list()

    async def get_user(self, user_id: str) -> Optional[User]:
        """Return the user with ``user_id`` or ``None``.

        Ids that are not well‑formed ObjectIds cannot match any
        document and are reported as missing.
        """
        if not ObjectId.is_valid(user_id):
            return None
        return await User.get(PydanticObjectId(user_id))

    async def create_exercise(
        self,
        user_id: str,
        description: str,
        duration: Union[int, float],
        date: datetime,
    ) -> Exercise:
        exercise = Exercise(user_id=user_id, description=description, duration=duration, date=date)
        try:
            await exercise.insert()
        except PyMongoError as e:
            raise StoreError(f"Could not save exercise for user {user_id}") from e
        return exercise

    def exercise_query(self, query: Mapping[str, Any], limit: int) -> FindMany[Exercise]:
        """Build the lookup for at most ``limit`` exercises matching ``query``, oldest first."""
        return Exercise.find(dict(query)).sort("+date").limit(limit)

    async def find_exercises(self, query: Mapping[str, Any], limit: int) -> List[Exercise]:
        return await self.exercise_query(query, limit).to_list()


def get_store(request: Request) -> MongoStore:
    """FastAPI dependency returning the store attached to the application."""
    return request.app.state.store
