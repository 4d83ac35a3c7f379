"""Инициализация модуля сервисов."""

from .base_service import BaseService
from .habit_log_command import HabitLogCommand
from .habit_service import HabitService
from .intention_service import IntentionService

__all__ = [
    "BaseService",
    "HabitLogCommand",
    "HabitService",
    "IntentionService",
]
