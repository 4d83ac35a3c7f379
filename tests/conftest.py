from datetime import datetime, timezone

import pytest

from src.tracker.core.config import settings
from src.tracker.repositories import CompletionLogRepository, HabitRepository, IntentionRepository
from src.tracker.services import HabitService, IntentionService

# Фиксированный момент расчета: среда, 17 июля 2024 года, 10:00 UTC (ISO-неделя 2024-W29)
FIXED_NOW = datetime(2024, 7, 17, 10, 0, tzinfo=timezone.utc)


# --- ФИКСТУРА БЕЗОПАСНОСТИ ---


@pytest.fixture(scope="session", autouse=True)
def verify_test_environment():
    """
    Проверяет, что тесты запускаются с корректными настройками окружения.

    Эта фикстура выполняется автоматически перед началом тестовой сессии.
    """
    assert settings.DEVELOPMENT is True, (
        "❌ ОШИБКА КОНФИГУРАЦИИ: Тесты должны запускаться в режиме разработки/тестирования (DEVELOPMENT=True). "
        "Проверьте настройки [tool.pytest.ini_options] в pyproject.toml"
    )

    assert settings.DEFAULT_TIMEZONE == "UTC", (
        f"❌ ОШИБКА КОНФИГУРАЦИИ: Ожидался часовой пояс UTC, но получен {settings.DEFAULT_TIMEZONE}."
    )


# --- ОБЩИЕ ФИКСТУРЫ ---


@pytest.fixture
def now() -> datetime:
    """Фиксированный момент расчета."""
    return FIXED_NOW


@pytest.fixture
def habit_repository() -> HabitRepository:
    return HabitRepository()


@pytest.fixture
def log_repository() -> CompletionLogRepository:
    return CompletionLogRepository()


@pytest.fixture
def habit_service(habit_repository: HabitRepository, log_repository: CompletionLogRepository) -> HabitService:
    """Сервис привычек с чистыми репозиториями в UTC."""
    return HabitService(habit_repository, log_repository, timezone_name="UTC")


@pytest.fixture
def intention_service() -> IntentionService:
    """Сервис намерений с чистым репозиторием в UTC."""
    return IntentionService(IntentionRepository(), timezone_name="UTC")
