"""Базовый репозиторий с общими CRUD-операциями над хранилищем в памяти."""

from typing import Callable, Generic, Sequence, TypeVar

from src.tracker.core.logging import tracker_log as log
from src.tracker.models import Base as DomainBaseModel

# Определяем обобщенный (Generic) тип для доменных моделей
ModelType = TypeVar("ModelType", bound=DomainBaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Базовый класс репозитория для CRUD-операций.

    Хранит записи в словаре по идентификатору. Каждый экземпляр репозитория
    владеет своим хранилищем, поэтому репозитории передаются в сервисы явно.

    Attributes:
        model: Класс доменной модели, с которым работает репозиторий.
    """

    def __init__(self, model: type[ModelType]):
        """
        Инициализирует базовый репозиторий.

        Args:
            model (type[ModelType]): Класс доменной модели.
        """
        self.model = model
        self._storage: dict[str, ModelType] = {}

    def add(self, obj: ModelType) -> ModelType:
        """
        Добавляет (или заменяет) запись.

        Args:
            obj (ModelType): Экземпляр модели.

        Returns:
            ModelType: Сохраненный экземпляр.
        """
        if not isinstance(obj, self.model):
            raise TypeError(f"Ожидался {self.model.__name__}, получено: {type(obj).__name__}")

        self._storage[obj.id] = obj
        log.debug(f"Запись {self.model.__name__} с ID {obj.id} сохранена.")
        return obj

    def get_by_id(self, obj_id: str) -> ModelType | None:
        """
        Получает одну запись по ее ID.

        Returns:
            ModelType | None: Экземпляр модели или None, если запись не найдена.
        """
        instance = self._storage.get(obj_id)

        status = "найдена" if instance else "не найдена"
        log.debug(f"Запись {self.model.__name__} с ID {obj_id} {status}.")

        return instance

    def get_by_filter(self, *filters: Callable[[ModelType], bool]) -> list[ModelType]:
        """
        Получает записи, удовлетворяющие всем переданным предикатам.

        Порядок записей совпадает с порядком добавления.
        """
        return [obj for obj in self._storage.values() if all(check(obj) for check in filters)]

    def get_multi(
        self,
        *,
        skip: int = 0,
        limit: int = 100,
        order_by: Callable[[ModelType], object] | None = None,
        descending: bool = False,
    ) -> Sequence[ModelType]:
        """
        Получает список записей с пагинацией и опциональной сортировкой.

        Args:
            skip (int): Количество записей, которое нужно пропустить.
            limit (int): Максимальное количество записей для возврата.
            order_by (Callable | None): Функция-ключ сортировки.
            descending (bool): Флаг направления сортировки.

        Returns:
            Sequence[ModelType]: Список экземпляров модели.
        """
        instances = list(self._storage.values())

        if order_by is not None:
            instances.sort(key=order_by, reverse=descending)

        return instances[skip : skip + limit]

    def delete(self, obj_id: str) -> ModelType | None:
        """
        Удаляет запись по ID.

        Returns:
            ModelType | None: Удаленный экземпляр или None, если записи не было.
        """
        instance = self._storage.pop(obj_id, None)

        if instance is not None:
            log.debug(f"Запись {self.model.__name__} с ID {obj_id} удалена.")

        return instance

    def count(self) -> int:
        """Количество записей в хранилище."""
        return len(self._storage)
