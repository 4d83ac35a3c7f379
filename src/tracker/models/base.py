"""Базовое определение доменной модели."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field


def generate_id() -> str:
    """Генерирует строковый идентификатор записи."""
    return str(uuid4())


def utc_now() -> datetime:
    """Текущее время в UTC."""
    return datetime.now(timezone.utc)


class Base(BaseModel):
    """
    Базовый класс для доменных моделей, хранимых в репозиториях.

    Предоставляет:
    - Общий идентификатор 'id' (UUID-строка).
    - Поле created_at.
    - Валидацию при присваивании, чтобы изменение счетчиков не обходило проверки.
    - Стандартный __repr__.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    id: str = Field(default_factory=generate_id, description="Идентификатор записи")
    created_at: datetime = Field(default_factory=utc_now, description="Время создания записи")

    def __repr__(self) -> str:
        """
        Возвращает строковое представление объекта модели.

        Пример: <Habit(id='...')>
        """
        return f"<{self.__class__.__name__}(id={self.id!r})>"
