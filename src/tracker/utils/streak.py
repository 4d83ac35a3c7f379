"""Расчет серий (стриков) выполнения привычек по журналу отметок."""

from datetime import date, datetime
from typing import Iterable

from src.tracker.core.config import settings
from src.tracker.core.logging import tracker_log as log
from src.tracker.models.enums import Cadence

from .date_utils import DateInput, TimezoneInput, get_now, get_period_start, parse_cadence, shift_period


def collect_period_starts(log_dates: Iterable[DateInput], cadence: Cadence, tz: TimezoneInput = None) -> set[date]:
    """
    Сводит журнал отметок к множеству уникальных периодов.

    Период представлен датой своего начала: она однозначно соответствует ключу периода
    и, в отличие от строки, допускает арифметику.
    """
    return {get_period_start(log_date, cadence, tz) for log_date in log_dates}


def calculate_streak(
    log_dates: Iterable[DateInput],
    cadence: Cadence | str,
    *,
    now: datetime | None = None,
    tz: TimezoneInput = None,
    max_periods: int | None = None,
) -> int:
    """
    Вычисляет текущую серию выполнений привычки.

    Серия "жива", если отметка есть в текущем периоде или в непосредственно предыдущем
    (один пропущенный период допускается: вчерашнее выполнение без сегодняшнего сохраняет серию).
    Если серия жива, счет идет назад от самого свежего из этих двух периодов
    и останавливается на первом пропуске. Отметки за пропуском не учитываются.

    Args:
        log_dates (Iterable[DateInput]): Моменты выполнения привычки.
        cadence (Cadence | str): Периодичность (daily, weekly, monthly).
        now (datetime | None): Момент расчета. Если None, используется текущее время.
        tz (TimezoneInput): Часовой пояс пользователя.
        max_periods (int | None): Ограничение длины обхода. По умолчанию STREAK_MAX_PERIODS из настроек.

    Returns:
        int: Длина текущей серии (0, если серии нет).

    Raises:
        InvalidDateException: Если в журнале есть некорректная дата.
        UnknownCadenceException: Если периодичность не распознана.
    """
    cadence = parse_cadence(cadence)
    limit = settings.STREAK_MAX_PERIODS if max_periods is None else max_periods

    if limit < 1:
        raise ValueError(f"max_periods должен быть положительным, получено: {limit}")

    # Сводим отметки к уникальным периодам
    completed_periods = collect_period_starts(log_dates, cadence, tz)

    if not completed_periods:
        return 0

    # Определяем текущий и предыдущий периоды относительно "сейчас" пользователя
    current_period = get_period_start(get_now(now, tz), cadence, tz)
    previous_period = shift_period(current_period, cadence, -1)

    # Серия жива, только если выполнено в текущем или в предыдущем периоде
    if current_period in completed_periods:
        anchor = current_period
    elif previous_period in completed_periods:
        anchor = previous_period
    else:
        log.debug(f"Серия ({cadence}) прервана: нет отметок за {current_period} и {previous_period}.")
        return 0

    # Идем назад от самого свежего выполненного периода до первого пропуска
    streak = 0
    period = anchor

    while streak < limit and period in completed_periods:
        streak += 1
        period = shift_period(period, cadence, -1)

    if streak == limit:
        log.debug(f"Расчет серии ({cadence}) остановлен на ограничении в {limit} периодов.")

    return streak


def calculate_longest_streak(
    log_dates: Iterable[DateInput],
    cadence: Cadence | str,
    *,
    tz: TimezoneInput = None,
) -> int:
    """
    Вычисляет самую длинную серию подряд идущих периодов за всю историю.

    Args:
        log_dates (Iterable[DateInput]): Моменты выполнения привычки.
        cadence (Cadence | str): Периодичность.
        tz (TimezoneInput): Часовой пояс пользователя.

    Returns:
        int: Длина самой длинной серии (0 для пустого журнала).
    """
    cadence = parse_cadence(cadence)
    completed_periods = collect_period_starts(log_dates, cadence, tz)

    longest = 0

    for period in completed_periods:
        # Считаем только от начала каждой серии, чтобы обход был линейным
        if shift_period(period, cadence, -1) in completed_periods:
            continue

        length = 1
        next_period = shift_period(period, cadence, 1)

        while next_period in completed_periods:
            length += 1
            next_period = shift_period(next_period, cadence, 1)

        longest = max(longest, length)

    return longest
