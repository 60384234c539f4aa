"""
Business logic for users.

``UserService`` is a thin layer over the record store: users are
created with a display name, listed, and looked up by id.  The store
is passed in explicitly by the request handlers.
"""

import logging
from typing import List

from ..core.db import MongoStore
from ..schemas.user import UserRead

logger = logging.getLogger(__name__)


class UserService:
    """Operations on the users collection."""

    @classmethod
    async def create_user(cls, store: MongoStore, username: str) -> UserRead:
        """Create a user and return it.

        ``StoreError`` from the store propagates to the caller.
        """
        user = await store.create_user(username)
        logger.info("Created user %s (%s)", user.id, username)
        return UserRead(id=str(user.id), username=user.username)

    @classmethod
    async def list_users(cls, store: MongoStore) -> List[UserRead]:
        users = await store.list_users()
        return [UserRead(id=str(user.id), username=user.username) for user in users]

    @classmethod
    async def get_user(cls, store: MongoStore, user_id: str):
        """Return the stored user document or ``None`` when it does not exist."""
        return await store.get_user(user_id)
