"""
Exercise log queries and responses.

``build_log_query`` turns the optional ``from``/``to``/``limit`` query
parameters of the logs endpoint into a MongoDB filter document and a
row cap.  ``assemble_log`` shapes a user and their exercises into the
public log response.  Both are pure functions; the store and the
request handlers live elsewhere.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from ..core.dates import format_date, parse_date
from ..schemas.exercise import ExerciseLog, LogEntry

logger = logging.getLogger(__name__)

# Row cap applied when the client does not ask for a usable limit.
DEFAULT_LOG_LIMIT = 500

# Largest limit BSON can encode (signed 64-bit).
MAX_LOG_LIMIT = 2**63 - 1


@dataclass
class LogQuery:
    """Filter document and row cap for an exercise log lookup."""

    filter: Dict[str, Any]
    limit: int = DEFAULT_LOG_LIMIT


def parse_limit(value: Optional[str]) -> int:
    """Return the row cap requested by ``value``.

    Only positive integers that fit in a BSON 64-bit integer are honoured;
    anything else (missing, empty, not a number, zero, negative or too
    large) falls back to ``DEFAULT_LOG_LIMIT``.
    """
    if value is None:
        return DEFAULT_LOG_LIMIT
    try:
        limit = int(str(value).strip())
    except ValueError:
        return DEFAULT_LOG_LIMIT
    return limit if 0 < limit <= MAX_LOG_LIMIT else DEFAULT_LOG_LIMIT


def build_log_query(
    user_id: str,
    from_: Optional[str] = None,
    to: Optional[str] = None,
    limit: Optional[str] = None,
) -> LogQuery:
    """Build the exercise lookup for a user's log.

    The ``date`` clause is only added when at least one bound is given.
    A bound that cannot be parsed is kept as ``None``: MongoDB never
    matches a date against ``null`` in a range comparison, so the query
    runs and simply returns no exercises.
    """
    query: Dict[str, Any] = {"user_id": user_id}
    date_range: Dict[str, Any] = {}
    if from_:
        date_range["$gte"] = _parse_bound("from", from_)
    if to:
        date_range["$lte"] = _parse_bound("to", to)
    if date_range:
        query["date"] = date_range
    return LogQuery(filter=query, limit=parse_limit(limit))


def _parse_bound(name: str, value: str):
    parsed = parse_date(value)
    if parsed is None:
        logger.warning("Unparseable '%s' date %r in log query", name, value)
    return parsed


def assemble_log(user: Any, exercises: Iterable[Any]) -> ExerciseLog:
    """Shape ``user`` and ``exercises`` into the log response."""
    log = [
        LogEntry(
            description=exercise.description,
            duration=exercise.duration,
            date=format_date(exercise.date),
        )
        for exercise in exercises
    ]
    return ExerciseLog(username=user.username, count=len(log), id=str(user.id), log=log)
