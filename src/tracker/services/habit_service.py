"""Сервис для работы с привычками и журналом их выполнений."""

from datetime import date, datetime, time

from src.tracker.core.exceptions import BadRequestException, InvalidDateException
from src.tracker.core.logging import tracker_log as log
from src.tracker.models import CompletionLog, Habit, LogAction
from src.tracker.repositories import CompletionLogRepository, HabitRepository
from src.tracker.schemas import HabitSchemaCreate
from src.tracker.utils.date_utils import get_now, get_period_key, get_period_start, parse_datetime
from src.tracker.utils.streak import calculate_longest_streak, calculate_streak

from .base_service import BaseService
from .habit_log_command import HabitLogCommand


class HabitService(BaseService[Habit, HabitRepository]):
    """
    Сервис для управления привычками (Habit) и отметками о выполнении (CompletionLog).

    Счетчики серий привычки - производные значения: после любого изменения журнала
    они пересчитываются по полному набору отметок, а не увеличиваются/уменьшаются на единицу.
    """

    def __init__(
        self,
        habit_repository: HabitRepository,
        log_repository: CompletionLogRepository,
        timezone_name: str | None = None,
    ):
        """
        Инициализирует сервис привычек.

        Args:
            habit_repository (HabitRepository): Репозиторий для работы с привычками.
            log_repository (CompletionLogRepository): Репозиторий для работы с отметками.
            timezone_name (str | None): IANA-имя часового пояса пользователя.
        """
        super().__init__(repository=habit_repository, timezone_name=timezone_name)
        self.log_repository = log_repository

    # --- Привычки ---

    def create_habit(self, habit_in: HabitSchemaCreate) -> Habit:
        """
        Создает новую привычку с нулевыми счетчиками серий.

        Args:
            habit_in (HabitSchemaCreate): Данные для создания привычки.

        Returns:
            Habit: Созданная привычка.
        """
        habit = self.repository.add(Habit(**habit_in.model_dump()))

        log.info(f"Привычка '{habit.name}' ({habit.cadence}) создана с ID: {habit.id}")
        return habit

    def get_habit(self, habit_id: str) -> Habit:
        """Получает привычку по ID или выбрасывает NotFoundException."""
        return self.get_by_id(habit_id)

    def delete_habit(self, habit_id: str) -> Habit:
        """Удаляет привычку вместе со всеми ее отметками."""
        habit = self.delete(habit_id)
        self.log_repository.delete_logs_for_habit(habit_id)
        return habit

    def get_logs(self, habit_id: str) -> list[CompletionLog]:
        """Получает журнал отметок привычки (отсортированный по времени выполнения)."""
        self.get_by_id(habit_id)
        return self.log_repository.get_logs_for_habit(habit_id)

    # --- Серии ---

    def recalculate_streaks(self, habit_id: str, *, now: datetime | None = None) -> Habit:
        """
        Пересчитывает текущую и самую длинную серии привычки по полному журналу отметок.

        Args:
            habit_id (str): ID привычки.
            now (datetime | None): Момент расчета. Если None, используется текущее время.

        Returns:
            Habit: Привычка с актуальными счетчиками.

        Raises:
            NotFoundException: Если привычка не найдена.
        """
        habit = self.get_by_id(habit_id)
        log_dates = [item.completed_at for item in self.log_repository.get_logs_for_habit(habit_id)]

        current_streak = calculate_streak(log_dates, habit.cadence, now=now, tz=self.timezone)
        longest_streak = calculate_longest_streak(log_dates, habit.cadence, tz=self.timezone)

        if (habit.current_streak, habit.longest_streak) != (current_streak, longest_streak):
            log.debug(
                f"Серии привычки ID {habit.id} обновлены: "
                f"текущая {habit.current_streak}->{current_streak}, рекорд {habit.longest_streak}->{longest_streak}"
            )

        habit.current_streak = current_streak
        habit.longest_streak = longest_streak
        return habit

    # --- Отметки ---

    def _resolve_completed_at(self, when: date | datetime | str | None, now: datetime | None) -> datetime:
        """
        Определяет момент выполнения для новой отметки (с часовым поясом).

        - None: "сейчас" пользователя;
        - дата: начало этого локального дня;
        - наивный datetime: локальное время пользователя.
        """
        if when is None:
            when = get_now(now, self.timezone)

        if isinstance(when, str):
            when = parse_datetime(when)

        if isinstance(when, datetime):
            if when.tzinfo is None or when.utcoffset() is None:
                return when.replace(tzinfo=self.timezone)
            return when

        if isinstance(when, date):
            return datetime.combine(when, time.min, tzinfo=self.timezone)

        raise InvalidDateException(message=f"Ожидалась дата отметки, получено: {type(when).__name__}")

    def _check_not_in_future(self, habit: Habit, period_start: date, now: datetime | None) -> None:
        """
        Проверяет, что период отметки не позже текущего.

        Raises:
            BadRequestException: Если отмечается будущий период.
        """
        current_period = get_period_start(get_now(now, self.timezone), habit.cadence, self.timezone)

        if period_start > current_period:
            log.warning(f"Попытка отметить будущий период {period_start} для привычки ID: {habit.id}")
            raise BadRequestException(
                message=f"Нельзя отметить привычку '{habit.name}' за будущий период.",
                error_type="habit_future_period",
            )

    def is_done_in_period(
        self,
        habit_id: str,
        *,
        when: date | datetime | str | None = None,
        now: datetime | None = None,
    ) -> bool:
        """Проверяет, есть ли отметка в периоде, содержащем `when` (по умолчанию - текущий период)."""
        habit = self.get_by_id(habit_id)
        period_start = get_period_start(self._resolve_completed_at(when, now), habit.cadence, self.timezone)

        return bool(
            self.log_repository.get_logs_for_period(
                habit_id=habit_id, period_start=period_start, cadence=habit.cadence, tz=self.timezone
            )
        )

    def check_habit(
        self,
        habit_id: str,
        *,
        when: date | datetime | str | None = None,
        now: datetime | None = None,
    ) -> HabitLogCommand:
        """
        Отмечает выполнение привычки в периоде, содержащем `when` (по умолчанию - сейчас).

        Повторная отметка того же периода ничего не меняет: серия не может вырасти дважды.

        Args:
            habit_id (str): ID привычки.
            when (date | datetime | str | None): Момент выполнения. Позволяет отмечать прошлые периоды.
            now (datetime | None): Момент расчета. Если None, используется текущее время.

        Returns:
            HabitLogCommand: Уже примененная команда, которую можно отменить (undo).

        Raises:
            NotFoundException: Если привычка не найдена.
            BadRequestException: Если отмечается будущий период.
        """
        habit = self.get_by_id(habit_id)
        completed_at = self._resolve_completed_at(when, now)
        period_start = get_period_start(completed_at, habit.cadence, self.timezone)

        self._check_not_in_future(habit, period_start, now)

        existing_logs = self.log_repository.get_logs_for_period(
            habit_id=habit_id, period_start=period_start, cadence=habit.cadence, tz=self.timezone
        )

        logs_to_add: list[CompletionLog] = []

        if existing_logs:
            log.debug(f"Привычка ID {habit_id} уже отмечена в периоде {period_start}, отметка не добавляется.")
        else:
            logs_to_add.append(CompletionLog(habit_id=habit_id, completed_at=completed_at))

        command = HabitLogCommand(
            self,
            habit_id=habit_id,
            action=LogAction.CHECKED,
            logs_to_add=logs_to_add,
            now=now,
        )
        command.apply()

        log.info(
            f"Привычка ID {habit_id} отмечена за период "
            f"{get_period_key(completed_at, habit.cadence, self.timezone)}. Серия: {habit.current_streak}"
        )
        return command

    def uncheck_habit(
        self,
        habit_id: str,
        *,
        when: date | datetime | str | None = None,
        now: datetime | None = None,
    ) -> HabitLogCommand:
        """
        Снимает отметку о выполнении: удаляет все отметки периода, содержащего `when`.

        Args:
            habit_id (str): ID привычки.
            when (date | datetime | str | None): Момент внутри периода (по умолчанию - сейчас).
            now (datetime | None): Момент расчета. Если None, используется текущее время.

        Returns:
            HabitLogCommand: Уже примененная команда, которую можно отменить (undo).

        Raises:
            NotFoundException: Если привычка не найдена.
        """
        habit = self.get_by_id(habit_id)
        period_start = get_period_start(self._resolve_completed_at(when, now), habit.cadence, self.timezone)

        logs_to_remove = self.log_repository.get_logs_for_period(
            habit_id=habit_id, period_start=period_start, cadence=habit.cadence, tz=self.timezone
        )

        command = HabitLogCommand(
            self,
            habit_id=habit_id,
            action=LogAction.UNCHECKED,
            logs_to_remove=logs_to_remove,
            now=now,
        )
        command.apply()

        log.info(
            f"Снято {len(logs_to_remove)} отметок привычки ID {habit_id} за период {period_start}. "
            f"Серия: {habit.current_streak}"
        )
        return command

    def toggle_habit(
        self,
        habit_id: str,
        *,
        when: date | datetime | str | None = None,
        now: datetime | None = None,
    ) -> HabitLogCommand:
        """
        Переключает отметку периода: снимает, если она есть, иначе ставит.

        Действие, которое было выполнено, доступно в `command.action`.
        """
        if self.is_done_in_period(habit_id, when=when, now=now):
            return self.uncheck_habit(habit_id, when=when, now=now)

        return self.check_habit(habit_id, when=when, now=now)
