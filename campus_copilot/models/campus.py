# Role: Read-only domain records owned by the campus CRUD services. Accepts the camelCase keys the
# campus REST API emits as well as snake_case, so file seeds and HTTP payloads parse the same way.

from __future__ import annotations

import datetime as dt
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

MEALS = ("breakfast", "lunch", "dinner")


class _Record(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ScheduleEntry(_Record):
    class_name: str = Field(alias="className")
    day: str
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    location: str
    instructor: str
    degree: str


class BusRoute(_Record):
    route: str
    schedule: List[str] = Field(default_factory=list)
    duration: str = ""

    @field_validator("schedule", mode="before")
    @classmethod
    def _split_schedule(cls, value: Any) -> Any:
        # Older route records store departures as one comma-separated string.
        if isinstance(value, str):
            return [part.strip() for part in value.split(",") if part.strip()]
        return value


class Event(_Record):
    title: str
    date: dt.date
    time: str = ""
    location: str = ""
    description: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _date_only(cls, value: Any) -> Any:
        # The API serializes dates as full ISO timestamps ("2026-10-20T00:00:00.000Z").
        if isinstance(value, str) and "T" in value:
            return value.split("T", 1)[0]
        return value


class Meals(_Record):
    breakfast: List[str] = Field(default_factory=list)
    lunch: List[str] = Field(default_factory=list)
    dinner: List[str] = Field(default_factory=list)

    def for_meal(self, meal: str) -> List[str]:
        if meal not in MEALS:
            raise ValueError(f"unknown meal: {meal}")
        return list(getattr(self, meal))


class CanteenMenu(_Record):
    canteen_name: str = Field(alias="canteenName")
    meals: Meals = Field(default_factory=Meals)
