"""Конфигурация библиотеки расчета серий и сроков."""

from pydantic import Field, ValidationInfo, field_validator

from src.core_shared.config import AppSettings


class Settings(AppSettings):
    """Основные настройки библиотеки."""

    # Часовой пояс по умолчанию (IANA), если вызывающий код не передал свой
    DEFAULT_TIMEZONE: str = Field(default="UTC", description="Часовой пояс по умолчанию")

    # Бизнес-константы проекта
    STREAK_MAX_PERIODS: int = Field(
        default=3650,
        gt=0,
        description="Максимальное количество периодов, которое проходит расчет серии (10 лет для ежедневных)",
    )
    URGENCY_WEEK_DAYS: int = Field(default=7, gt=0, description="Граница категории 'this_week' в днях (включительно)")
    URGENCY_MONTH_DAYS: int = Field(
        default=30,
        gt=0,
        description="Граница категории 'this_month' в днях (включительно)",
    )

    # Настройки логирования
    LOG_LEVEL: str = Field(default="INFO", description="Уровень логирования")
    LOG_TO_FILE: bool = Field(default=False, description="Дублировать логи в файл")

    @field_validator("URGENCY_MONTH_DAYS")
    @classmethod
    def check_month_after_week(cls, value: int, info: ValidationInfo) -> int:
        """Граница месяца не может быть меньше границы недели."""
        week_days = info.data.get("URGENCY_WEEK_DAYS")

        if week_days is not None and value < week_days:
            raise ValueError("URGENCY_MONTH_DAYS должен быть не меньше URGENCY_WEEK_DAYS")

        return value


# Создаем глобальный экземпляр настроек
settings = Settings()
