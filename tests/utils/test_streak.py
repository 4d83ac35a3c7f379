from datetime import date, datetime, timedelta, timezone

import pytest

from src.tracker.core.exceptions import InvalidDateException, UnknownCadenceException
from src.tracker.models import Cadence
from src.tracker.utils.streak import calculate_longest_streak, calculate_streak


def days_ago(now: datetime, days: int) -> datetime:
    return now - timedelta(days=days)


# --- Ежедневные привычки ---


@pytest.mark.parametrize("cadence", list(Cadence))
def test_empty_log_has_no_streak(now: datetime, cadence: Cadence):
    assert calculate_streak([], cadence, now=now) == 0


def test_completion_today(now: datetime):
    assert calculate_streak([now], Cadence.DAILY, now=now) == 1


def test_completion_yesterday_keeps_streak_alive(now: datetime):
    """Один пропущенный период допускается: вчерашнее выполнение без сегодняшнего сохраняет серию."""
    assert calculate_streak([days_ago(now, 1)], Cadence.DAILY, now=now) == 1


def test_two_missed_periods_break_streak(now: datetime):
    assert calculate_streak([days_ago(now, 2)], Cadence.DAILY, now=now) == 0


def test_consecutive_days(now: datetime):
    logs = [now, days_ago(now, 1), days_ago(now, 2)]

    assert calculate_streak(logs, Cadence.DAILY, now=now) == 3


def test_gap_is_not_bridged(now: datetime):
    """Отметки за пропуском не учитываются: серия не "воскресает" через пробел."""
    assert calculate_streak([now, days_ago(now, 2)], Cadence.DAILY, now=now) == 1
    assert calculate_streak([days_ago(now, 1), days_ago(now, 3), days_ago(now, 4)], Cadence.DAILY, now=now) == 1


def test_several_logs_in_one_day_count_once(now: datetime):
    logs = [now, now - timedelta(hours=1), now - timedelta(hours=2), days_ago(now, 1)]

    assert calculate_streak(logs, Cadence.DAILY, now=now) == 2


def test_log_order_does_not_matter(now: datetime):
    logs = [days_ago(now, 2), now, days_ago(now, 1)]

    assert calculate_streak(logs, Cadence.DAILY, now=now) == 3
    assert calculate_streak(iter(logs), Cadence.DAILY, now=now) == 3


def test_accepts_dates_and_iso_strings(now: datetime):
    logs = [date(2024, 7, 17), "2024-07-16", "2024-07-15T23:00:00+00:00"]

    assert calculate_streak(logs, "daily", now=now) == 3


def test_long_history_is_bounded(now: datetime):
    """Обход назад ограничен и не зацикливается на длинной истории."""
    logs = [days_ago(now, offset) for offset in range(5000)]

    assert calculate_streak(logs, Cadence.DAILY, now=now) == 3650
    assert calculate_streak(logs, Cadence.DAILY, now=now, max_periods=10) == 10


def test_max_periods_must_be_positive(now: datetime):
    with pytest.raises(ValueError):
        calculate_streak([now], Cadence.DAILY, now=now, max_periods=0)


def test_streak_uses_user_timezone(now: datetime):
    """Один и тот же журнал дает разные серии в разных часовых поясах."""
    logs = [
        datetime(2024, 7, 17, 2, 0, tzinfo=timezone.utc),  # В Нью-Йорке это 16.07, 22:00
        datetime(2024, 7, 16, 10, 0, tzinfo=timezone.utc),  # В Нью-Йорке это 16.07, 06:00
    ]

    assert calculate_streak(logs, Cadence.DAILY, now=now, tz="UTC") == 2
    assert calculate_streak(logs, Cadence.DAILY, now=now, tz="America/New_York") == 1


# --- Еженедельные привычки ---


def test_weekly_grace_period():
    """
    Сценарий:
    1. Отметки в неделе N и N-1, расчет в неделе N -> 2.
    2. Расчет в неделе N+1 без новых отметок -> 2 (льготный период).
    3. Расчет в неделе N+2 без новых отметок -> 0.
    """
    week_n = datetime(2024, 7, 17, 9, 0, tzinfo=timezone.utc)
    logs = [week_n, week_n - timedelta(weeks=1)]

    assert calculate_streak(logs, Cadence.WEEKLY, now=week_n) == 2
    assert calculate_streak(logs, Cadence.WEEKLY, now=week_n + timedelta(weeks=1)) == 2
    assert calculate_streak(logs, Cadence.WEEKLY, now=week_n + timedelta(weeks=2)) == 0


def test_weekly_streak_crosses_iso_year():
    logs = [date(2024, 12, 23), date(2024, 12, 30)]  # 2024-W52 и 2025-W01

    assert calculate_streak(logs, Cadence.WEEKLY, now=datetime(2025, 1, 2, tzinfo=timezone.utc)) == 2


def test_weekly_any_day_of_week_counts():
    """Неделя засчитывается отметкой в любой ее день (понедельник - воскресенье)."""
    logs = [date(2024, 7, 15), date(2024, 7, 14)]  # Понедельник 2024-W29 и воскресенье 2024-W28

    assert calculate_streak(logs, Cadence.WEEKLY, now=datetime(2024, 7, 21, tzinfo=timezone.utc)) == 2


# --- Ежемесячные привычки ---


def test_monthly_streak_does_not_skip_short_months():
    """Переход с 31 марта назад приходит в февраль, а не снова в март."""
    logs = [date(2024, 1, 31), date(2024, 2, 15), date(2024, 3, 31)]

    assert calculate_streak(logs, Cadence.MONTHLY, now=datetime(2024, 3, 31, 12, 0, tzinfo=timezone.utc)) == 3
    assert calculate_streak(logs, Cadence.MONTHLY, now=datetime(2024, 4, 10, tzinfo=timezone.utc)) == 3
    assert calculate_streak(logs, Cadence.MONTHLY, now=datetime(2024, 5, 1, tzinfo=timezone.utc)) == 0


def test_monthly_streak_crosses_year():
    logs = [date(2023, 11, 5), date(2023, 12, 20), date(2024, 1, 2)]

    assert calculate_streak(logs, Cadence.MONTHLY, now=datetime(2024, 1, 15, tzinfo=timezone.utc)) == 3


# --- Ошибки ---


def test_unknown_cadence(now: datetime):
    with pytest.raises(UnknownCadenceException):
        calculate_streak([now], "hourly", now=now)


def test_invalid_log_date(now: datetime):
    with pytest.raises(InvalidDateException):
        calculate_streak([now, "yesterday"], Cadence.DAILY, now=now)


# --- Самая длинная серия ---


def test_longest_streak():
    logs = [date(2024, 7, 1), date(2024, 7, 2), date(2024, 7, 3), date(2024, 7, 10), date(2024, 7, 11)]

    assert calculate_longest_streak(logs, Cadence.DAILY) == 3
    assert calculate_longest_streak([], Cadence.DAILY) == 0
    assert calculate_longest_streak(logs, Cadence.WEEKLY) == 2
    assert calculate_longest_streak(logs, Cadence.MONTHLY) == 1


def test_current_streak_never_exceeds_longest(now: datetime):
    logs = [days_ago(now, offset) for offset in (0, 1, 2, 5, 6, 7, 8, 20)]

    current = calculate_streak(logs, Cadence.DAILY, now=now)
    longest = calculate_longest_streak(logs, Cadence.DAILY)

    assert current == 3
    assert longest == 4
    assert current <= longest
