"""Инициализация модуля доменных моделей."""

from .base import Base
from .enums import Cadence, ETAPreset, HabitCategory, IntentionStatus, LogAction, UrgencyCategory
from .habit import CompletionLog, Habit
from .intention import Intention

__all__ = [
    "Base",
    "Cadence",
    "CompletionLog",
    "ETAPreset",
    "Habit",
    "HabitCategory",
    "Intention",
    "IntentionStatus",
    "LogAction",
    "UrgencyCategory",
]
