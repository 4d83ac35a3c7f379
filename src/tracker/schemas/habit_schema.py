"""Схемы Pydantic для моделей Habit и CompletionLog."""

from datetime import datetime

from pydantic import Field

from src.tracker.models import Cadence, HabitCategory

from .base_schema import BaseSchema


class HabitSchemaBase(BaseSchema):
    """Базовая схема для привычки."""

    name: str = Field(..., min_length=1, max_length=255, description="Название привычки")
    emoji: str = Field(default="", description="Эмодзи привычки")
    category: HabitCategory = Field(default=HabitCategory.SYSTEM, description="Категория привычки")
    cadence: Cadence = Field(default=Cadence.DAILY, description="Периодичность привычки")


class HabitSchemaCreate(HabitSchemaBase):
    """Схема для создания новой привычки."""

    # current_streak и longest_streak будут 0 по умолчанию в модели


class HabitSchemaRead(HabitSchemaBase):
    """Схема для чтения данных привычки."""

    id: str = Field(..., description="ID привычки")
    current_streak: int = Field(..., description="Текущая серия выполнений")
    longest_streak: int = Field(..., description="Самая длинная серия выполнений")
    created_at: datetime = Field(..., description="Время создания привычки")


class CompletionLogSchemaRead(BaseSchema):
    """Схема для чтения отметки о выполнении привычки."""

    id: str = Field(..., description="ID отметки")
    habit_id: str = Field(..., description="ID привычки, к которой относится отметка")
    completed_at: datetime = Field(..., description="Момент выполнения")
