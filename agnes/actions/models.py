"""Typed records produced by action extraction."""

from __future__ import annotations

import uuid
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


def _new_id() -> str:
    return str(uuid.uuid4())


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self) -> dict[str, Any]:
        """camelCase dict without unset optionals, as handed to HTTP callers."""
        return self.model_dump(by_alias=True, exclude_none=True)


class _ActionRecord(_CamelModel):
    id: str = Field(default_factory=_new_id)
    title: str = Field(min_length=1)
    confidence: float = Field(ge=0.0, le=1.0)
    source: str | None = None


class ActionParseTodo(_ActionRecord):
    notes: str | None = None
    recurrence: list[str] | None = None
    confidence_reasons: list[str] | None = None


class ActionParseMeal(_ActionRecord):
    notes: str | None = None
    meal_type: MealType | None = None
    scheduled_for: str | None = None
    servings: int | float | None = None
    recipe_url: str | None = None


class EventTime(_CamelModel):
    date_time: str
    time_zone: str | None = None


class EventLocation(_CamelModel):
    name: str | None = None
    address: str | None = None
    meeting_url: str | None = None


class ActionParseEvent(_ActionRecord):
    description: str | None = None
    start: EventTime
    end: EventTime
    location: EventLocation | None = None
    recurrence: list[str] | None = None
    confidence_reasons: list[str] | None = None


class ActionParseResult(_CamelModel):
    todos: list[ActionParseTodo] = Field(default_factory=list)
    meals: list[ActionParseMeal] = Field(default_factory=list)
    events: list[ActionParseEvent] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.todos) + len(self.meals) + len(self.events)


class ActionParseFile(_CamelModel):
    """An attachment already validated by the caller (size, type, count)."""

    name: str
    mime_type: str
    data_url: str


class FamilyMemberContext(_CamelModel):
    name: str
    role: str | None = None
    age: int | None = None


class ActionParseContext(_CamelModel):
    """Optional hints that override what the parser derives on its own."""

    family_members: list[FamilyMemberContext] = Field(default_factory=list)
    current_date_time: str | None = None
    timezone: str | None = None
    week_number: int | None = None
    weekday: str | None = None
    locale: str | None = None
    source_metadata: dict[str, Any] | None = None


class ActionParseInput(_CamelModel):
    text: str = ""
    files: list[ActionParseFile] = Field(default_factory=list)
    timezone: str | None = None
    locale: str | None = None
    language: str | None = None
    context: ActionParseContext | None = None
