"""Доменные модели Habit (Привычка) и CompletionLog (Отметка выполнения)."""

from datetime import datetime

from pydantic import ConfigDict, Field, field_validator

from .base import Base
from .enums import Cadence, HabitCategory


class Habit(Base):
    """
    Представляет повторяющуюся привычку пользователя.

    Attributes:
        id: Идентификатор (унаследован от Base).
        name: Название привычки.
        emoji: Эмодзи привычки.
        category: Категория привычки.
        cadence: Периодичность (daily, weekly, monthly).
        current_streak: Текущая серия. Производное значение, всегда равно пересчету по журналу.
        longest_streak: Самая длинная серия за всю историю.
        created_at: Время создания записи (унаследовано от Base).
    """

    name: str = Field(..., min_length=1, max_length=255)
    emoji: str = Field(default="")
    category: HabitCategory = Field(default=HabitCategory.SYSTEM)
    cadence: Cadence = Field(default=Cadence.DAILY)
    current_streak: int = Field(default=0, ge=0)
    longest_streak: int = Field(default=0, ge=0)


class CompletionLog(Base):
    """
    Представляет факт выполнения привычки.

    Неизменяема после создания, допускается только удаление (снятие отметки).

    Attributes:
        id: Идентификатор (унаследован от Base).
        habit_id: Идентификатор привычки, к которой относится отметка.
        completed_at: Момент выполнения (с часовым поясом).
    """

    model_config = ConfigDict(frozen=True)

    habit_id: str = Field(...)
    completed_at: datetime = Field(...)

    @field_validator("completed_at")
    @classmethod
    def check_timezone_aware(cls, value: datetime) -> datetime:
        """Момент выполнения хранится только с часовым поясом."""
        if value.tzinfo is None or value.utcoffset() is None:
            raise ValueError("completed_at должен содержать часовой пояс")

        return value
