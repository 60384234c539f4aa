"""
Business logic for exercises.

Exercises are written once and never changed.  The owning user must
have been resolved by the caller; its id is copied onto the exercise
and no link is kept between the two documents afterwards.
"""

import logging
from typing import Any, Optional, Union

from ..core.dates import format_date, parse_date, today
from ..core.db import MongoStore
from ..core.errors import InvalidDateError
from ..schemas.exercise import ExerciseLog, ExerciseRead
from .log_service import assemble_log, build_log_query

logger = logging.getLogger(__name__)


class ExerciseService:
    """Operations on the exercises collection."""

    @classmethod
    async def log_exercise(
        cls,
        store: MongoStore,
        user: Any,
        description: str,
        duration: Union[int, float],
        date: Optional[str] = None,
    ) -> ExerciseRead:
        """Save an exercise for ``user`` and return it merged with the user.

        ``date`` defaults to the current day.  Raises ``InvalidDateError``
        for a date that cannot be parsed and ``StoreError`` when the
        write fails.
        """
        if date:
            when = parse_date(date)
            if when is None:
                raise InvalidDateError(date)
        else:
            when = today()
        user_id = str(user.id)
        exercise = await store.create_exercise(user_id, description, duration, when)
        logger.info("Logged exercise %s for user %s", exercise.id, user_id)
        return ExerciseRead(
            id=user_id,
            username=user.username,
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(exercise.date),
        )

    @classmethod
    async def get_log(
        cls,
        store: MongoStore,
        user: Any,
        from_: Optional[str] = None,
        to: Optional[str] = None,
        limit: Optional[str] = None,
    ) -> ExerciseLog:
        """Return the exercise log of ``user`` filtered by date and capped."""
        query = build_log_query(str(user.id), from_, to, limit)
        exercises = await store.find_exercises(query.filter, query.limit)
        return assemble_log(user, exercises)
