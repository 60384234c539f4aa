"""Tests for ``MongoStore`` against Beanie bound to a mocked database.

Beanie is initialised with a ``MagicMock`` database so documents can be
built and written without a server; the collection's ``insert_one`` is
an ``AsyncMock`` whose behaviour each test chooses.
"""

import asyncio
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from beanie import init_beanie
from beanie.odm.enums import SortDirection
from bson import ObjectId
from pymongo.errors import PyMongoError

from exercise_tracker_api.app.core.db import MongoStore
from exercise_tracker_api.app.core.errors import StoreError
from exercise_tracker_api.app.models import Exercise, User
from exercise_tracker_api.app.services.log_service import build_log_query


@pytest.fixture
def collection():
    """Collection shared by both document models."""
    collection = MagicMock()
    collection.insert_one = AsyncMock(return_value=MagicMock(inserted_id=ObjectId()))
    database = MagicMock()
    database.command = AsyncMock(return_value={"version": "7.0.0"})
    database.list_collection_names = AsyncMock(return_value=[])
    database.__getitem__.return_value = collection
    asyncio.run(init_beanie(database=database, document_models=[User, Exercise], skip_indexes=True))
    return collection


@pytest.fixture
def store(collection):
    return MongoStore("mongodb://localhost:27017", "exercise_tracker_test")


class TestWrites:
    @pytest.mark.asyncio
    async def test_create_user(self, store, collection):
        user = await store.create_user("fcc_test")
        assert user.username == "fcc_test"
        assert user.id == collection.insert_one.return_value.inserted_id
        assert collection.insert_one.await_args.args[0]["username"] == "fcc_test"

    @pytest.mark.asyncio
    async def test_create_user_failure_raises_store_error(self, store, collection):
        collection.insert_one.side_effect = PyMongoError("connection refused")
        with pytest.raises(StoreError) as exc_info:
            await store.create_user("fcc_test")
        assert isinstance(exc_info.value.__cause__, PyMongoError)

    @pytest.mark.asyncio
    async def test_create_exercise(self, store, collection):
        exercise = await store.create_exercise("u1", "run", 30, datetime(2024, 1, 1))
        written = collection.insert_one.await_args.args[0]
        assert written["user_id"] == "u1"
        assert written["duration"] == 30
        assert written["date"] == datetime(2024, 1, 1)
        assert exercise.id is not None

    @pytest.mark.asyncio
    async def test_create_exercise_failure_raises_store_error(self, store, collection):
        collection.insert_one.side_effect = PyMongoError("not primary")
        with pytest.raises(StoreError):
            await store.create_exercise("u1", "run", 30, datetime(2024, 1, 1))


class TestExerciseQuery:
    def test_filter_sort_and_limit(self, store):
        query = build_log_query("u1", from_="2024-01-01", to="2024-02-01", limit="2")

        find = store.exercise_query(query.filter, query.limit)

        assert find.get_filter_query() == {
            "user_id": "u1",
            "date": {"$gte": datetime(2024, 1, 1), "$lte": datetime(2024, 2, 1)},
        }
        assert find.sort_expressions == [("date", SortDirection.ASCENDING)]
        assert find.limit_number == 2

    def test_unparseable_bound_sent_as_null(self, store):
        query = build_log_query("u1", to="whenever")
        find = store.exercise_query(query.filter, query.limit)
        assert find.get_filter_query()["date"] == {"$lte": None}

    def test_default_limit(self, store):
        query = build_log_query("u1")
        assert store.exercise_query(query.filter, query.limit).limit_number == 500

    @pytest.mark.asyncio
    async def test_find_exercises_runs_the_query(self, store, monkeypatch):
        seen = []

        async def to_list(find, length=None):
            seen.append(find)
            return []

        monkeypatch.setattr("beanie.odm.queries.find.FindMany.to_list", to_list)

        assert await store.find_exercises({"user_id": "u1"}, 3) == []
        assert seen[0].limit_number == 3
        assert seen[0].sort_expressions == [("date", SortDirection.ASCENDING)]


class TestUserLookup:
    @pytest.mark.asyncio
    async def test_malformed_id_is_missing(self, store):
        assert await store.get_user("not-an-object-id") is None


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_close_without_connect(self):
        store = MongoStore("mongodb://localhost:27017", "exercise_tracker_test")
        await store.close()
        assert not store.connected
