"""
Команда изменения журнала отметок привычки с возможностью отмены.

Используется для оптимистичных обновлений: вызывающий код сразу применяет команду
к локальному состоянию и вызывает undo(), если синхронизация с удаленным хранилищем не удалась.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Sequence

from src.tracker.core.exceptions import BadRequestException
from src.tracker.core.logging import tracker_log as log
from src.tracker.models import CompletionLog, Habit, LogAction

if TYPE_CHECKING:  # pragma: no cover
    from .habit_service import HabitService


class HabitLogCommand:
    """
    Пара "применить/отменить" для изменения журнала отметок одной привычки.

    Отмена восстанавливает ровно те отметки, которые были удалены, и удаляет ровно те,
    которые были добавлены. После каждого шага счетчики серий пересчитываются.

    Attributes:
        habit_id (str): ID привычки.
        action (LogAction): Выполняемое действие (checked / unchecked).
        logs_to_add (tuple[CompletionLog, ...]): Отметки, добавляемые командой.
        logs_to_remove (tuple[CompletionLog, ...]): Отметки, удаляемые командой.
        applied (bool): Применена ли команда в данный момент.
    """

    def __init__(
        self,
        service: "HabitService",
        *,
        habit_id: str,
        action: LogAction,
        logs_to_add: Sequence[CompletionLog] = (),
        logs_to_remove: Sequence[CompletionLog] = (),
        now: datetime | None = None,
    ):
        self._service = service
        self.habit_id = habit_id
        self.action = action
        self.logs_to_add = tuple(logs_to_add)
        self.logs_to_remove = tuple(logs_to_remove)
        self.now = now
        self.applied = False

    @property
    def changed(self) -> bool:
        """Меняет ли команда журнал (повторная отметка периода - пустая команда)."""
        return bool(self.logs_to_add or self.logs_to_remove)

    @property
    def habit(self) -> Habit:
        """Привычка с актуальными счетчиками серий."""
        return self._service.get_by_id(self.habit_id)

    def apply(self) -> Habit:
        """
        Применяет изменение журнала и пересчитывает серии.

        Raises:
            BadRequestException: Если команда уже применена.
        """
        if self.applied:
            raise BadRequestException(message="Команда уже применена.", error_type="command_already_applied")

        log_repository = self._service.log_repository

        for item in self.logs_to_remove:
            log_repository.delete(item.id)

        for item in self.logs_to_add:
            log_repository.add(item)

        self.applied = True
        log.debug(f"Команда {self.action} для привычки ID {self.habit_id} применена.")

        return self._service.recalculate_streaks(self.habit_id, now=self.now)

    def undo(self) -> Habit:
        """
        Откатывает изменение журнала и пересчитывает серии.

        Raises:
            BadRequestException: Если команда не применена (или уже отменена).
        """
        if not self.applied:
            raise BadRequestException(message="Команда не применена, отменять нечего.", error_type="command_not_applied")

        log_repository = self._service.log_repository

        for item in self.logs_to_add:
            log_repository.delete(item.id)

        for item in self.logs_to_remove:
            log_repository.add(item)

        self.applied = False
        log.info(f"Команда {self.action} для привычки ID {self.habit_id} отменена.")

        return self._service.recalculate_streaks(self.habit_id, now=self.now)

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__}(habit_id={self.habit_id!r}, action={self.action.value!r}, "
            f"applied={self.applied!r})>"
        )
