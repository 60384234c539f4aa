"""
Pydantic models for exercises and exercise logs.

Dates leave the API as human‑readable strings (``Mon Jan 01 2024``),
never as timestamps.
"""

from typing import Annotated, List, Union

from pydantic import AllowInfNan, BaseModel, ConfigDict, Field

# Minutes, as a whole or fractional number.  Infinity and NaN are refused
# because JSON cannot carry them back to the client.
Duration = Union[int, Annotated[float, AllowInfNan(False)]]


class ExerciseRead(BaseModel):
    """Response for a newly logged exercise, merged with its owner."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id")
    username: str
    description: str = Field(..., examples=["test run"])
    duration: Union[int, float] = Field(..., examples=[30])
    date: str = Field(..., examples=["Mon Jan 01 2024"])


class LogEntry(BaseModel):
    description: str
    duration: Union[int, float]
    date: str


class ExerciseLog(BaseModel):
    """A user's exercise history as returned by the logs endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    username: str
    count: int
    id: str = Field(..., alias="_id")
    log: List[LogEntry] = Field(default_factory=list)
