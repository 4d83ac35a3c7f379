from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from src.tracker.core.exceptions import InvalidDateException, InvalidPeriodKeyException, UnknownCadenceException
from src.tracker.models import Cadence
from src.tracker.utils.date_utils import (
    get_day_key,
    get_display_date,
    get_month_display,
    get_month_key,
    get_period_key,
    get_period_start,
    get_today_for_timezone,
    get_week_display,
    get_week_key,
    is_date_in_current_month,
    is_date_in_current_week,
    is_date_in_current_year,
    is_same_day,
    month_key_to_date,
    period_key_to_date,
    resolve_timezone,
    shift_period,
    to_local_date,
    week_key_to_date,
)

NEW_YORK = ZoneInfo("America/New_York")


# --- Ключи периодов ---


@pytest.mark.parametrize(
    "cadence, expected",
    [
        (Cadence.DAILY, "2024-07-17"),
        (Cadence.WEEKLY, "2024-W29"),
        (Cadence.MONTHLY, "2024-07"),
        ("weekly", "2024-W29"),
    ],
)
def test_period_key_formats(now: datetime, cadence, expected: str):
    """Ключи дня, ISO-недели и месяца имеют канонический формат."""
    assert get_period_key(now, cadence) == expected


def test_day_key_is_stable_within_local_day():
    """Любой момент одного локального дня дает один и тот же ключ."""
    morning = datetime(2024, 7, 17, 0, 5, tzinfo=NEW_YORK)
    night = datetime(2024, 7, 17, 23, 55, tzinfo=NEW_YORK)

    assert get_day_key(morning, NEW_YORK) == get_day_key(night, NEW_YORK) == "2024-07-17"


def test_day_key_uses_user_timezone():
    """Абсолютный момент переводится в часовой пояс пользователя до вычисления ключа."""
    moment = datetime(2024, 7, 17, 3, 0, tzinfo=timezone.utc)

    assert get_day_key(moment) == "2024-07-17"
    assert get_day_key(moment, "America/New_York") == "2024-07-16"
    assert get_day_key(datetime(2024, 7, 17, 23, 30, tzinfo=timezone.utc), "Europe/Moscow") == "2024-07-18"


def test_naive_datetime_is_local_wall_time():
    """Наивный datetime считается уже локальным и не сдвигается."""
    assert get_day_key(datetime(2024, 7, 17, 23, 30), "Asia/Tokyo") == "2024-07-17"


def test_iso_string_input():
    """Строки ISO-8601 (в том числе из БД в UTC) принимаются."""
    assert get_day_key("2024-07-17") == "2024-07-17"
    assert get_day_key("2024-07-17T02:00:00+00:00", "America/New_York") == "2024-07-16"
    assert get_month_key("2024-07-17T10:00:00Z") == "2024-07"


@pytest.mark.parametrize(
    "value, expected",
    [
        (date(2021, 1, 3), "2020-W53"),  # Воскресенье относится к последней неделе прошлого ISO-года
        (date(2024, 12, 30), "2025-W01"),  # Понедельник уже в первой неделе следующего ISO-года
        (date(2024, 1, 1), "2024-W01"),
    ],
)
def test_week_key_uses_iso_year(value: date, expected: str):
    """Ключ недели строится по ISO-году, а не по календарному."""
    assert get_week_key(value) == expected


# --- Обратное преобразование ---


@pytest.mark.parametrize(
    "week_key, expected",
    [
        ("2024-W29", date(2024, 7, 15)),
        ("2020-W53", date(2020, 12, 28)),
        ("2025-W01", date(2024, 12, 30)),
    ],
)
def test_week_key_to_date_returns_monday(week_key: str, expected: date):
    """Ключ недели преобразуется в понедельник этой недели."""
    assert week_key_to_date(week_key) == expected


def test_week_key_round_trip_stays_in_same_week():
    """week_key_to_date(get_week_key(d)) попадает в ту же ISO-неделю, что и d."""
    day = date(2019, 12, 20)

    while day < date(2026, 1, 10):
        week_start = week_key_to_date(get_week_key(day))

        assert week_start <= day < week_start + timedelta(days=7)
        assert get_week_key(week_start) == get_week_key(day)

        day += timedelta(days=1)


def test_month_and_day_keys_round_trip():
    assert month_key_to_date(get_month_key(date(2024, 2, 29))) == date(2024, 2, 1)
    assert period_key_to_date("2024-02-29", Cadence.DAILY) == date(2024, 2, 29)
    assert period_key_to_date("2024-W09", Cadence.WEEKLY) == date(2024, 2, 26)
    assert period_key_to_date("2024-02", Cadence.MONTHLY) == date(2024, 2, 1)


@pytest.mark.parametrize(
    "key, cadence",
    [
        ("2021-W53", Cadence.WEEKLY),  # В 2021 ISO-году 52 недели
        ("2024-W00", Cadence.WEEKLY),
        ("2024-29", Cadence.WEEKLY),
        ("2024-13", Cadence.MONTHLY),
        ("July 2024", Cadence.MONTHLY),
        ("2024-02-30", Cadence.DAILY),
        ("", Cadence.DAILY),
    ],
)
def test_invalid_period_key_raises(key: str, cadence: Cadence):
    """Некорректный ключ периода - ошибка, а не молчаливое исправление."""
    with pytest.raises(InvalidPeriodKeyException):
        period_key_to_date(key, cadence)


# --- Ошибки входных данных ---


@pytest.mark.parametrize("cadence", ["yearly", "Daily", "", None, 1])
def test_unknown_cadence_raises(now: datetime, cadence):
    with pytest.raises(UnknownCadenceException) as exc_info:
        get_period_key(now, cadence)

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.error_type == "unknown_cadence"


@pytest.mark.parametrize("value", [12345, None, "not-a-date", "2024-13-01", 1.5])
def test_invalid_date_raises(value):
    with pytest.raises(InvalidDateException) as exc_info:
        to_local_date(value)

    assert isinstance(exc_info.value, TypeError)


# --- Арифметика периодов ---


@pytest.mark.parametrize(
    "value, cadence, expected",
    [
        (date(2024, 7, 17), Cadence.DAILY, date(2024, 7, 17)),
        (date(2024, 7, 21), Cadence.WEEKLY, date(2024, 7, 15)),
        (date(2024, 3, 31), Cadence.MONTHLY, date(2024, 3, 1)),
    ],
)
def test_period_start(value: date, cadence: Cadence, expected: date):
    assert get_period_start(value, cadence) == expected


@pytest.mark.parametrize(
    "start, cadence, periods, expected",
    [
        (date(2024, 3, 1), Cadence.DAILY, -1, date(2024, 2, 29)),
        (date(2024, 1, 1), Cadence.WEEKLY, -1, date(2023, 12, 25)),
        (date(2024, 1, 1), Cadence.MONTHLY, -1, date(2023, 12, 1)),
        (date(2024, 3, 1), Cadence.MONTHLY, -1, date(2024, 2, 1)),
        (date(2024, 12, 1), Cadence.MONTHLY, 2, date(2025, 2, 1)),
    ],
)
def test_shift_period(start: date, cadence: Cadence, periods: int, expected: date):
    """Сдвиг месяцев идет от 1-го числа и не пропускает короткие месяцы."""
    assert shift_period(start, cadence, periods) == expected


# --- Таймзоны ---


def test_resolve_timezone_falls_back_to_utc():
    """Опечатка в часовом поясе пользователя не роняет расчет."""
    assert resolve_timezone("Mars/Olympus_Mons") == ZoneInfo("UTC")
    assert resolve_timezone(None) == ZoneInfo("UTC")
    assert resolve_timezone("Europe/Moscow") == ZoneInfo("Europe/Moscow")


def test_get_today_for_timezone():
    moment = datetime(2024, 7, 17, 20, 0, tzinfo=timezone.utc)

    assert get_today_for_timezone("Asia/Tokyo", now=moment) == date(2024, 7, 18)
    assert get_today_for_timezone("America/New_York", now=moment) == date(2024, 7, 17)
    assert get_today_for_timezone("Invalid/Zone", now=moment) == date(2024, 7, 17)


# --- Отображение ---


def test_display_date(now: datetime):
    assert get_display_date("2024-07-17T08:00:00+00:00", now=now) == "Today"
    assert get_display_date(datetime(2024, 7, 16, 23, 59, tzinfo=timezone.utc), now=now) == "Yesterday"
    assert get_display_date(date(2024, 7, 1), now=now) == "July 1, 2024"


def test_week_and_month_display():
    assert get_week_display("2024-W29") == "Week of July 15, 2024"
    assert get_month_display("2024-07") == "July 2024"


def test_is_same_day_respects_timezone():
    first = datetime(2024, 7, 17, 2, 0, tzinfo=timezone.utc)
    second = datetime(2024, 7, 16, 20, 0, tzinfo=timezone.utc)

    assert not is_same_day(first, second)
    assert is_same_day(first, second, "America/New_York")


def test_current_period_checks(now: datetime):
    # Текущая ISO-неделя: понедельник 15.07 - воскресенье 21.07
    assert is_date_in_current_week(date(2024, 7, 21), now=now)
    assert is_date_in_current_week(date(2024, 7, 15), now=now)
    assert not is_date_in_current_week(date(2024, 7, 14), now=now)

    assert is_date_in_current_month(date(2024, 7, 1), now=now)
    assert not is_date_in_current_month(date(2023, 7, 17), now=now)

    assert is_date_in_current_year(date(2024, 1, 1), now=now)
    assert not is_date_in_current_year(date(2025, 1, 1), now=now)
