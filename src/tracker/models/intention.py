"""Доменная модель Intention (Намерение)."""

from datetime import datetime

from pydantic import Field

from .base import Base
from .enums import IntentionStatus


class Intention(Base):
    """
    Представляет цель пользователя с опциональным сроком.

    Attributes:
        id: Идентификатор (унаследован от Base).
        text: Формулировка намерения.
        status: Статус (pending, completed).
        due_date: Срок выполнения (может отсутствовать).
        is_life_goal: Флаг цели "на всю жизнь" (без срока).
        tags: Теги.
        completed_at: Время выполнения.
        created_at: Время создания записи (унаследовано от Base).
    """

    text: str = Field(..., min_length=1)
    status: IntentionStatus = Field(default=IntentionStatus.PENDING)
    due_date: datetime | None = Field(default=None)
    is_life_goal: bool = Field(default=False)
    tags: list[str] = Field(default_factory=list)
    completed_at: datetime | None = Field(default=None)
