"""Инициализация модуля схем Pydantic."""

from .base_schema import BaseSchema
from .habit_schema import CompletionLogSchemaRead, HabitSchemaBase, HabitSchemaCreate, HabitSchemaRead
from .intention_schema import IntentionSchemaCreate, IntentionSchemaRead

__all__ = [
    "BaseSchema",
    "CompletionLogSchemaRead",
    "HabitSchemaBase",
    "HabitSchemaCreate",
    "HabitSchemaRead",
    "IntentionSchemaCreate",
    "IntentionSchemaRead",
]
