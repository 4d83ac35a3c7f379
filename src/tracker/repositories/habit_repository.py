"""Репозитории для работы с моделями Habit и CompletionLog."""

from datetime import date

from src.tracker.core.logging import tracker_log as log
from src.tracker.models import Cadence, CompletionLog, Habit
from src.tracker.utils.date_utils import TimezoneInput, get_period_start

from .base_repository import BaseRepository


class HabitRepository(BaseRepository[Habit]):
    """Репозиторий для CRUD-операций с моделью Habit."""

    def __init__(self) -> None:
        super().__init__(Habit)


class CompletionLogRepository(BaseRepository[CompletionLog]):
    """
    Репозиторий для работы с журналом отметок о выполнении привычек.

    Наследует общие методы от BaseRepository и содержит специфичные для журнала методы.
    """

    def __init__(self) -> None:
        super().__init__(CompletionLog)

    def get_logs_for_habit(self, habit_id: str) -> list[CompletionLog]:
        """
        Получает все отметки привычки, отсортированные по моменту выполнения.

        Args:
            habit_id (str): ID привычки.

        Returns:
            list[CompletionLog]: Список отметок.
        """
        logs = self.get_by_filter(lambda item: item.habit_id == habit_id)
        logs.sort(key=lambda item: item.completed_at)

        log.debug(f"Найдено {len(logs)} отметок для привычки ID: {habit_id}.")
        return logs

    def get_logs_for_period(
        self,
        *,
        habit_id: str,
        period_start: date,
        cadence: Cadence,
        tz: TimezoneInput = None,
    ) -> list[CompletionLog]:
        """
        Получает отметки привычки, попадающие в период с заданным началом.

        Args:
            habit_id (str): ID привычки.
            period_start (date): Дата начала периода.
            cadence (Cadence): Периодичность привычки.
            tz (TimezoneInput): Часовой пояс пользователя.

        Returns:
            list[CompletionLog]: Список отметок периода.
        """
        return [
            item
            for item in self.get_logs_for_habit(habit_id)
            if get_period_start(item.completed_at, cadence, tz) == period_start
        ]

    def delete_logs_for_habit(self, habit_id: str) -> int:
        """
        Удаляет все отметки привычки.

        Returns:
            int: Количество удаленных отметок.
        """
        logs = self.get_by_filter(lambda item: item.habit_id == habit_id)

        for item in logs:
            self.delete(item.id)

        log.debug(f"Удалено {len(logs)} отметок для привычки ID: {habit_id}.")
        return len(logs)
