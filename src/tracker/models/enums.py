"""
Перечисления (Enums) предметной области.

Используются для избежания "магических строк" в расчетах и сервисах.
"""

from enum import StrEnum


class Cadence(StrEnum):
    """Периодичность привычки."""

    DAILY = "daily"  # Каждый день
    WEEKLY = "weekly"  # Каждую ISO-неделю
    MONTHLY = "monthly"  # Каждый календарный месяц


class HabitCategory(StrEnum):
    """Категории привычек."""

    HEALTH = "Health"
    GROWTH = "Growth"
    CAREER = "Career"
    FINANCE = "Finance"
    CONNECTION = "Connection"
    SYSTEM = "System"


class IntentionStatus(StrEnum):
    """Статусы намерения (цели)."""

    PENDING = "pending"  # В работе
    COMPLETED = "completed"  # Выполнено


class UrgencyCategory(StrEnum):
    """
    Категории срочности намерений.

    Порядок объявления совпадает с порядком вывода групп.
    """

    OVERDUE = "overdue"
    TODAY = "today"
    THIS_WEEK = "this_week"
    THIS_MONTH = "this_month"
    LATER = "later"
    LIFE = "life"


class ETAPreset(StrEnum):
    """Пресеты срока выполнения намерения."""

    TODAY = "today"
    TOMORROW = "tomorrow"
    THIS_WEEK = "this_week"
    NEXT_WEEK = "next_week"
    THIS_MONTH = "this_month"
    NEXT_MONTH = "next_month"
    THIS_YEAR = "this_year"
    NEXT_YEAR = "next_year"
    LIFE = "life"
    CUSTOM = "custom"


class LogAction(StrEnum):
    """Действие над журналом выполнений привычки."""

    CHECKED = "checked"  # Добавлена отметка
    UNCHECKED = "unchecked"  # Отметка снята
