"""
Исключения библиотеки.

Все исключения наследуются от TrackerException и несут человекочитаемое сообщение
и машинно-читаемый тип ошибки (error_type). Дополнительно каждое исключение наследует
подходящее встроенное исключение (TypeError, ValueError, LookupError), чтобы вызывающий код
мог обрабатывать их привычным образом.
"""

from typing import Any


class TrackerException(Exception):
    """
    Базовое исключение библиотеки.

    Attributes:
        message (str): Сообщение об ошибке.
        error_type (str): Машинно-читаемый тип ошибки.
        details (dict[str, Any]): Дополнительные сведения (например, некорректное значение).
    """

    default_message: str = "Внутренняя ошибка библиотеки."
    default_error_type: str = "tracker_error"

    def __init__(
        self,
        message: str | None = None,
        error_type: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message or self.default_message
        self.error_type = error_type or self.default_error_type
        self.details = details or {}
        super().__init__(self.message)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(error_type={self.error_type!r}, message={self.message!r})>"


class InvalidDateException(TrackerException, TypeError):
    """Значение не является корректной датой/временем."""

    default_message = "Некорректная дата."
    default_error_type = "invalid_date"


class UnknownCadenceException(TrackerException, ValueError):
    """Неизвестная периодичность привычки."""

    default_message = "Неизвестная периодичность."
    default_error_type = "unknown_cadence"


class InvalidPeriodKeyException(TrackerException, ValueError):
    """Некорректный ключ периода (день/неделя/месяц)."""

    default_message = "Некорректный ключ периода."
    default_error_type = "invalid_period_key"


class UnknownPresetException(TrackerException, ValueError):
    """Неизвестный пресет срока выполнения."""

    default_message = "Неизвестный пресет срока."
    default_error_type = "unknown_preset"


class NotFoundException(TrackerException, LookupError):
    """Объект не найден."""

    default_message = "Объект не найден."
    default_error_type = "not_found"


class BadRequestException(TrackerException, ValueError):
    """Операция недопустима для текущего состояния объекта."""

    default_message = "Некорректный запрос."
    default_error_type = "bad_request"


__all__ = [
    "TrackerException",
    "InvalidDateException",
    "UnknownCadenceException",
    "InvalidPeriodKeyException",
    "UnknownPresetException",
    "NotFoundException",
    "BadRequestException",
]
