"""Инициализация модуля репозиториев."""

from .base_repository import BaseRepository
from .habit_repository import CompletionLogRepository, HabitRepository
from .intention_repository import IntentionRepository

__all__ = [
    "BaseRepository",
    "CompletionLogRepository",
    "HabitRepository",
    "IntentionRepository",
]
