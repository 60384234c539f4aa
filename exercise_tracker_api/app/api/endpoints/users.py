"""
User and exercise endpoints.

All routes live under ``/api/users``: registering and listing users,
logging an exercise for a user and reading a user's exercise log.
Unknown users are answered with the plain‑text message
``Could not find user`` (status 200) rather than a coded error, which
is what existing clients of the service check for.
"""

import logging
from typing import List, Optional, Union

from fastapi import APIRouter, Depends, Form, Query, status
from fastapi.responses import PlainTextResponse

from ...core.db import MongoStore, get_store
from ...core.errors import ExerciseTrackerError, StoreError
from ...schemas.exercise import Duration, ExerciseLog, ExerciseRead
from ...schemas.user import UserRead
from ...services.exercise_service import ExerciseService
from ...services.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter()

USER_NOT_FOUND = "Could not find user"
USER_SAVE_FAILED = "There was an error saving the user"
EXERCISE_SAVE_FAILED = "There was an error saving the exercise"


@router.get("", response_model=List[UserRead])
async def list_users(store: MongoStore = Depends(get_store)) -> List[UserRead]:
    """Return every user as ``{_id, username}``."""
    return await UserService.list_users(store)


@router.post("", response_model=UserRead)
async def create_user(
    username: str = Form(...),
    store: MongoStore = Depends(get_store),
) -> Union[UserRead, PlainTextResponse]:
    """Register a new user."""
    try:
        return await UserService.create_user(store, username)
    except StoreError:
        logger.exception("Failed to create user %r", username)
        return PlainTextResponse(USER_SAVE_FAILED, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.post("/{user_id}/exercises", response_model=ExerciseRead)
async def log_exercise(
    user_id: str,
    description: str = Form(...),
    duration: Duration = Form(...),
    date: Optional[str] = Form(None),
    store: MongoStore = Depends(get_store),
) -> Union[ExerciseRead, PlainTextResponse]:
    """Log an exercise for a user.

    ``date`` is optional and expected as ``YYYY-MM-DD``; the current
    day is used when it is missing.  A missing ``description`` or a
    ``duration`` that is not a finite number is rejected by form
    validation with a 422 JSON error, not the plain‑text save error.
    """
    user = await UserService.get_user(store, user_id)
    if user is None:
        return PlainTextResponse(USER_NOT_FOUND)
    try:
        return await ExerciseService.log_exercise(store, user, description, duration, date)
    except ExerciseTrackerError:
        logger.exception("Failed to save exercise for user %s", user_id)
        return PlainTextResponse(EXERCISE_SAVE_FAILED)


@router.get("/{user_id}/logs", response_model=ExerciseLog)
async def get_logs(
    user_id: str,
    from_: Optional[str] = Query(None, alias="from"),
    to: Optional[str] = Query(None),
    limit: Optional[str] = Query(None),
    store: MongoStore = Depends(get_store),
) -> Union[ExerciseLog, PlainTextResponse]:
    """Return a user's exercise log.

    ``from`` and ``to`` bound the exercise date (inclusive) and
    ``limit`` caps the number of entries, 500 by default.
    """
    user = await UserService.get_user(store, user_id)
    if user is None:
        return PlainTextResponse(USER_NOT_FOUND)
    return await ExerciseService.get_log(store, user, from_, to, limit)
