"""Централизованная настройка логирования для всех модулей проекта."""

import os
import sys
from typing import TYPE_CHECKING

from loguru import logger as global_loguru_logger
from pydantic import BaseModel, Field

# Импортируем Logger только для проверки типов
if TYPE_CHECKING:
    from loguru import Logger


class LogConfig(BaseModel):
    """Конфигурация логирования."""

    level: str = Field(default="INFO", description="Уровень логирования")
    format: str = Field(
        default=(
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{extra[service_name]}</cyan> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        ),
        description="Формат лог сообщения",
    )
    rotation: str = Field(default="10 MB", description="Ротация лог-файлов по размеру")
    retention: str = Field(default="7 days", description="Время хранения лог-файлов")
    serialize: bool = Field(default=False, description="Сериализовать логи в JSON")
    enable_file_logging: bool = Field(default=False, description="Включить логирование в файл")
    log_file_path: str = Field(
        default="logs/{service_name}_{time:YYYY-MM-DD}.log",
        description="Путь к файлу логов",
    )


def _resolve_log_dir(log_file_path: str) -> str:
    """
    Вычисляет директорию для файла логов.

    Отсекает динамическую часть имени файла ("{time...}"), если она есть.
    """
    if "{time" in log_file_path:
        return os.path.dirname(log_file_path.split("{time")[0])

    return os.path.dirname(log_file_path)


def setup_logger(
    service_name: str,
    log_config: LogConfig | None = None,
    log_level_override: str | None = None,
) -> "Logger":
    """
    Настраивает Loguru логгер для указанного модуля и возвращает его экземпляр.

    Удаляет все предыдущие обработчики перед добавлением новых,
    чтобы избежать дублирования при повторных вызовах (например, в тестах).

    Args:
        service_name: Имя модуля (например, "Tracker").
        log_config: Объект конфигурации LogConfig. Если None, используются значения по умолчанию.
        log_level_override: Переопределяет уровень логирования из конфигурации.

    Returns:
        Сконфигурированный экземпляр логгера Loguru.
    """
    current_config = log_config.model_copy() if log_config is not None else LogConfig()

    # Применяем переопределение уровня, если оно есть
    current_config.level = (log_level_override or current_config.level).upper()

    # Удаляем все предыдущие обработчики, чтобы избежать дублирования
    global_loguru_logger.remove()

    # `bind` добавляет service_name в `extra` словарь логгера, что позволяет использовать {extra[service_name]}
    service_specific_logger = global_loguru_logger.bind(service_name=service_name)

    # Обработчик для вывода в консоль (stderr)
    service_specific_logger.add(
        sys.stderr,
        level=current_config.level,
        format=current_config.format,
        colorize=True,
        serialize=current_config.serialize,
    )

    # Обработчик для записи в файл (если включено)
    if current_config.enable_file_logging:
        log_file_path_formatted = current_config.log_file_path.replace("{service_name}", service_name.lower())
        log_dir = _resolve_log_dir(log_file_path_formatted)

        try:
            if log_dir:
                os.makedirs(log_dir, exist_ok=True)

        except OSError as exc:
            # Если не удалось создать директорию, пишем только в stderr
            service_specific_logger.warning(
                f"Не удалось создать директорию для логов '{log_dir}': {exc}. "
                f"Логирование в файл для '{service_name}' будет отключено."
            )

        else:
            service_specific_logger.add(
                log_file_path_formatted,
                level=current_config.level,
                format=current_config.format,
                rotation=current_config.rotation,
                retention=current_config.retention,
                serialize=current_config.serialize,
                encoding="utf-8",
            )

    service_specific_logger.debug(f"Loguru сконфигурирован для '{service_name}'. Уровень: {current_config.level}")
    return service_specific_logger


__all__ = ["setup_logger", "LogConfig"]
