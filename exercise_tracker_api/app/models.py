"""
Document models for the two collections kept in MongoDB.

Users and exercises are independent documents.  An exercise carries a
copy of its owner's id as a plain string; there is no reference or
cascading between the collections.
"""

from datetime import datetime
from typing import Union

from beanie import Document


class User(Document):
    username: str

    class Settings:
        name = "users"


class Exercise(Document):
    user_id: str
    description: str
    duration: Union[int, float]
    date: datetime

    class Settings:
        name = "exercises"
        indexes = ["user_id"]
