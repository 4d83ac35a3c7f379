"""Репозиторий для работы с моделью Intention."""

from src.tracker.models import Intention, IntentionStatus

from .base_repository import BaseRepository


class IntentionRepository(BaseRepository[Intention]):
    """Репозиторий для CRUD-операций с моделью Intention."""

    def __init__(self) -> None:
        super().__init__(Intention)

    def get_by_status(self, status: IntentionStatus) -> list[Intention]:
        """Получает намерения с указанным статусом в порядке создания."""
        intentions = self.get_by_filter(lambda item: item.status == status)
        intentions.sort(key=lambda item: item.created_at)
        return intentions
