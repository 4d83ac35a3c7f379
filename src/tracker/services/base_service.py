"""
Базовый класс для сервисов.

Реализует общую логику получения и удаления объектов поверх репозитория
и определяет часовой пояс пользователя, в котором сервис считает периоды.
"""

from typing import Generic, Sequence, TypeVar, cast

from src.tracker.core.exceptions import NotFoundException
from src.tracker.core.logging import tracker_log as log
from src.tracker.repositories import BaseRepository
from src.tracker.utils.date_utils import resolve_timezone

# Определяем обобщенные (Generic) типы для моделей и репозиториев
ModelType = TypeVar("ModelType")
RepositoryType = TypeVar("RepositoryType", bound=BaseRepository)


class BaseService(Generic[ModelType, RepositoryType]):
    """
    Базовый сервис с общими операциями.

    Этот класс предназначен для наследования конкретными сервисами.
    Зависимости (репозитории) передаются через конструктор, глобальных клиентов нет.

    Attributes:
        repository (RepositoryType): Экземпляр репозитория для работы с данными.
        timezone (ZoneInfo): Часовой пояс пользователя.
    """

    def __init__(self, repository: RepositoryType, timezone_name: str | None = None):
        """
        Инициализирует базовый сервис.

        Args:
            repository (RepositoryType): Репозиторий для работы с данными.
            timezone_name (str | None): IANA-имя часового пояса пользователя.
                                        Если None, используется DEFAULT_TIMEZONE из настроек.
        """
        self.repository = repository
        self.timezone = resolve_timezone(timezone_name)

    def get_by_id(self, obj_id: str) -> ModelType:
        """
        Получает объект по ID или выбрасывает исключение, если объект не найден.

        Raises:
            NotFoundException: Если объект с указанным ID не найден.
        """
        model_name = self.repository.model.__name__
        db_obj = self.repository.get_by_id(obj_id)

        # Если объект не найден, логируем и выбрасываем исключение
        if db_obj is None:
            log.warning(f"{model_name} с ID {obj_id} не найден.")
            raise NotFoundException(
                message=f"{model_name} с ID {obj_id} не найден.",
                error_type=f"{model_name.lower()}_not_found",
            )

        return cast(ModelType, db_obj)

    def get_list(self, *, skip: int = 0, limit: int = 100) -> Sequence[ModelType]:
        """Получает список объектов в порядке создания."""
        return cast(
            Sequence[ModelType],
            self.repository.get_multi(skip=skip, limit=limit, order_by=lambda item: item.created_at),
        )

    def delete(self, obj_id: str) -> ModelType:
        """
        Удаляет объект по ID.

        Raises:
            NotFoundException: Если объект с указанным ID не найден.
        """
        db_obj = self.get_by_id(obj_id)
        self.repository.delete(obj_id)

        log.info(f"{self.repository.model.__name__} с ID {obj_id} удален.")
        return db_obj
