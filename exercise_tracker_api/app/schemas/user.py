"""
Pydantic models for user data.

Users only have a display name; the ``_id`` assigned by the document
store is exposed under its MongoDB name so clients written against the
original service keep working.
"""

from pydantic import BaseModel, ConfigDict, Field


class UserRead(BaseModel):
    """Schema for reading a user from the API."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", examples=["65a1f0c2e4b0a1b2c3d4e5f6"])
    username: str = Field(..., examples=["fcc_test"])
