"""Shared fixtures: an in-memory record store and an API test client."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Union

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from exercise_tracker_api.app.core.errors import StoreError
from exercise_tracker_api.app.main import create_app


@dataclass
class StoredUser:
    id: ObjectId
    username: str


@dataclass
class StoredExercise:
    id: ObjectId
    user_id: str
    description: str
    duration: Union[int, float]
    date: datetime


def _matches(exercise: StoredExercise, query: Mapping[str, Any]) -> bool:
    """Evaluate the subset of MongoDB filter syntax used for exercise logs."""
    if exercise.user_id != query["user_id"]:
        return False
    date_range = query.get("date")
    if date_range is None:
        return True
    for op, bound in date_range.items():
        # A range comparison against null never matches a date.
        if bound is None:
            return False
        if op == "$gte" and not exercise.date >= bound:
            return False
        if op == "$lte" and not exercise.date <= bound:
            return False
    return True


class InMemoryStore:
    """Record store keeping users and exercises in lists."""

    def __init__(self) -> None:
        self.users: Dict[str, StoredUser] = {}
        self.exercises: List[StoredExercise] = []
        self.connected = False
        self.connect_calls = 0
        self.close_calls = 0
        self.fail_writes = False
        self.queries: List[Dict[str, Any]] = []

    async def connect(self) -> None:
        self.connected = True
        self.connect_calls += 1

    async def close(self) -> None:
        self.connected = False
        self.close_calls += 1

    async def create_user(self, username: str) -> StoredUser:
        if self.fail_writes:
            raise StoreError("write refused")
        user = StoredUser(id=ObjectId(), username=username)
        self.users[str(user.id)] = user
        return user

    async def list_users(self) -> List[StoredUser]:
        return list(self.users.values())

    async def get_user(self, user_id: str) -> Optional[StoredUser]:
        return self.users.get(user_id)

    async def create_exercise(self, user_id, description, duration, date) -> StoredExercise:
        if self.fail_writes:
            raise StoreError("write refused")
        exercise = StoredExercise(
            id=ObjectId(), user_id=user_id, description=description, duration=duration, date=date
        )
        self.exercises.append(exercise)
        return exercise

    async def find_exercises(self, query: Mapping[str, Any], limit: int) -> List[StoredExercise]:
        self.queries.append({"filter": dict(query), "limit": limit})
        found = sorted((e for e in self.exercises if _matches(e, query)), key=lambda e: e.date)
        return found[:limit]


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(store):
    """Test client running the full application lifespan against ``store``."""
    app = create_app(store=store)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def user(client) -> Dict[str, str]:
    """A registered user as returned by ``POST /api/users``."""
    response = client.post("/api/users", data={"username": "fcc_test"})
    return response.json()
