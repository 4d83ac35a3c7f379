"""Схемы Pydantic для модели Intention."""

from datetime import datetime

from pydantic import Field, model_validator

from src.tracker.models import IntentionStatus

from .base_schema import BaseSchema


class IntentionSchemaCreate(BaseSchema):
    """Схема для создания нового намерения."""

    text: str = Field(..., min_length=1, description="Формулировка намерения")
    due_date: datetime | None = Field(None, description="Срок выполнения")
    is_life_goal: bool = Field(False, description="Цель 'на всю жизнь' (без срока)")
    tags: list[str] = Field(default_factory=list, description="Теги")

    @model_validator(mode="after")
    def drop_due_date_for_life_goal(self) -> "IntentionSchemaCreate":
        """У цели 'на всю жизнь' срока нет."""
        if self.is_life_goal:
            self.due_date = None

        return self


class IntentionSchemaRead(BaseSchema):
    """Схема для чтения данных намерения."""

    id: str = Field(..., description="ID намерения")
    text: str = Field(..., description="Формулировка намерения")
    status: IntentionStatus = Field(..., description="Статус намерения")
    due_date: datetime | None = Field(None, description="Срок выполнения")
    is_life_goal: bool = Field(..., description="Цель 'на всю жизнь'")
    tags: list[str] = Field(default_factory=list, description="Теги")
    completed_at: datetime | None = Field(None, description="Время выполнения")
    created_at: datetime = Field(..., description="Время создания намерения")
