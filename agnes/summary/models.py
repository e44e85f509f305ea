"""Read-only views of family data consumed by the summary worker."""

from __future__ import annotations

from pydantic import BaseModel, Field


class FamilyMember(BaseModel):
    user_id: str
    display_name: str
    phone_number: str | None = None


class Family(BaseModel):
    id: str
    name: str
    members: list[FamilyMember] = Field(default_factory=list)


class SummaryEvent(BaseModel):
    title: str
    start: str


class SummaryTodo(BaseModel):
    title: str
    notes: str | None = None


class SummaryMeal(BaseModel):
    title: str
    meal_type: str
    scheduled_for: str | None = None


class SummaryShoppingItem(BaseModel):
    title: str
    quantity: float | None = None
    unit: str | None = None
    notes: str | None = None


class SummaryData(BaseModel):
    events: list[SummaryEvent] = Field(default_factory=list)
    todos: list[SummaryTodo] = Field(default_factory=list)
    meals: list[SummaryMeal] = Field(default_factory=list)
    shopping_list: list[SummaryShoppingItem] = Field(default_factory=list)
