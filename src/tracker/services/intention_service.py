"""Сервис для работы с намерениями (целями)."""

from datetime import date, datetime

from src.tracker.core.logging import tracker_log as log
from src.tracker.models import Intention, IntentionStatus, UrgencyCategory
from src.tracker.repositories import IntentionRepository
from src.tracker.schemas import IntentionSchemaCreate
from src.tracker.utils.date_utils import get_now, to_local_date
from src.tracker.utils.eta_calculator import get_urgency_category

from .base_service import BaseService


class IntentionService(BaseService[Intention, IntentionRepository]):
    """
    Сервис для управления намерениями (Intention).

    Отвечает за создание, выполнение и повторное открытие намерений,
    а также за их группировку по категориям срочности.
    """

    def __init__(self, intention_repository: IntentionRepository, timezone_name: str | None = None):
        super().__init__(repository=intention_repository, timezone_name=timezone_name)

    def create_intention(self, intention_in: IntentionSchemaCreate) -> Intention:
        """Создает новое намерение в статусе pending."""
        intention = self.repository.add(Intention(**intention_in.model_dump()))

        log.info(f"Намерение создано с ID: {intention.id} (life goal: {intention.is_life_goal})")
        return intention

    def get_intention(self, intention_id: str) -> Intention:
        """Получает намерение по ID или выбрасывает NotFoundException."""
        return self.get_by_id(intention_id)

    def delete_intention(self, intention_id: str) -> Intention:
        """Удаляет намерение."""
        return self.delete(intention_id)

    def complete_intention(self, intention_id: str, *, now: datetime | None = None) -> Intention:
        """
        Отмечает намерение выполненным.

        Если намерение уже выполнено, ничего не меняет.

        Args:
            intention_id (str): ID намерения.
            now (datetime | None): Момент выполнения. Если None, используется текущее время.

        Returns:
            Intention: Обновленное намерение.

        Raises:
            NotFoundException: Если намерение не найдено.
        """
        intention = self.get_by_id(intention_id)

        # Если статус не изменился, ничего не делаем
        if intention.status == IntentionStatus.COMPLETED:
            return intention

        intention.status = IntentionStatus.COMPLETED
        intention.completed_at = get_now(now, self.timezone)

        log.info(f"Намерение ID {intention_id} выполнено.")
        return intention

    def reopen_intention(self, intention_id: str) -> Intention:
        """Возвращает выполненное намерение в статус pending."""
        intention = self.get_by_id(intention_id)

        if intention.status == IntentionStatus.PENDING:
            return intention

        intention.status = IntentionStatus.PENDING
        intention.completed_at = None

        log.info(f"Намерение ID {intention_id} снова в работе.")
        return intention

    def get_pending(self) -> list[Intention]:
        """Получает намерения в работе в порядке создания."""
        return self.repository.get_by_status(IntentionStatus.PENDING)

    def get_urgency(self, intention: Intention, *, now: datetime | None = None) -> UrgencyCategory:
        """Определяет категорию срочности намерения в часовом поясе пользователя."""
        return get_urgency_category(intention.due_date, intention.is_life_goal, now=now, tz=self.timezone)

    def group_by_urgency(
        self,
        *,
        now: datetime | None = None,
        include_completed: bool = False,
    ) -> dict[UrgencyCategory, list[Intention]]:
        """
        Группирует намерения по категориям срочности.

        Ключи словаря идут в порядке категорий (overdue, today, this_week, this_month, later, life),
        присутствуют все категории (в том числе пустые).
        Внутри группы намерения отсортированы по сроку, затем по времени создания.

        Args:
            now (datetime | None): Момент расчета. Если None, используется текущее время.
            include_completed (bool): Включать ли выполненные намерения.

        Returns:
            dict[UrgencyCategory, list[Intention]]: Намерения по категориям.
        """
        if include_completed:
            intentions = list(self.get_list(limit=self.repository.count()))
        else:
            intentions = self.get_pending()

        groups: dict[UrgencyCategory, list[Intention]] = {category: [] for category in UrgencyCategory}

        for intention in intentions:
            groups[self.get_urgency(intention, now=now)].append(intention)

        def sort_key(item: Intention) -> tuple[date, datetime]:
            due_day = to_local_date(item.due_date, self.timezone) if item.due_date else date.max
            return due_day, item.created_at

        for items in groups.values():
            items.sort(key=sort_key)

        log.debug(
            "Группировка намерений по срочности: " + ", ".join(f"{key}={len(value)}" for key, value in groups.items())
        )
        return groups
