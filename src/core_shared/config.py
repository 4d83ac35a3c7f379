"""Базовая конфигурация, общая для всех модулей проекта."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Базовые настройки приложения.

    Наследуется от Pydantic BaseSettings для автоматической валидации и загрузки переменных окружения.
    Содержит общие метаданные и флаг режима разработки.
    """

    # --- Общие метаданные ---
    PROJECT_NAME: str = "Mindstream Habit Core"
    VERSION: str = "0.1.0"

    # Настройки режима разработки/тестирования (для продакшен - False)
    DEVELOPMENT: bool = Field(default=False, description="Режим разработки/тестирования")

    # Продакшен режим
    @property
    def PRODUCTION(self) -> bool:
        """Определяет, запущен ли сервис в продакшене."""
        # Считаем режим продакшеном, если не DEVELOPMENT (разработка/тестирование)
        return not self.DEVELOPMENT

    # Базовая конфигурация Pydantic
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # Имена переменных окружения не чувствительны к регистру
        extra="ignore",  # Игнорировать лишние переменные .env
    )
