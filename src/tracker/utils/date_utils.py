"""
Модуль вспомогательных утилит для работы с датами, периодами и таймзонами.

Все ключи периодов вычисляются по локальной (для пользователя) календарной дате:
- день: "YYYY-MM-DD";
- ISO-неделя: "YYYY-Www" (год ISO-недели, а не календарный год);
- месяц: "YYYY-MM".
"""

import re
from datetime import date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from src.tracker.core.config import settings
from src.tracker.core.exceptions import InvalidDateException, InvalidPeriodKeyException, UnknownCadenceException
from src.tracker.core.logging import tracker_log as log
from src.tracker.models.enums import Cadence

# Допустимые представления момента времени
DateInput = date | datetime | str
# Допустимые представления часового пояса
TimezoneInput = tzinfo | str | None

# Названия месяцев для отображения (не зависят от локали процесса)
MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_KEY_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
WEEK_KEY_RE = re.compile(r"^(\d{4})-W(\d{2})$")
MONTH_KEY_RE = re.compile(r"^(\d{4})-(\d{2})$")


# --- Таймзоны ---


def resolve_timezone(timezone_name: str | None) -> ZoneInfo:
    """
    Возвращает объект часового пояса по его IANA-имени.

    Если имя не задано, используется DEFAULT_TIMEZONE из настроек.
    Если имя некорректно (например, опечатка в профиле пользователя), используется UTC.

    Args:
        timezone_name (str | None): IANA-имя часового пояса (например, "Europe/Moscow").

    Returns:
        ZoneInfo: Объект часового пояса.
    """
    # Если поле пустое или None, используем таймзону из настроек
    name = timezone_name or settings.DEFAULT_TIMEZONE

    if not isinstance(name, str):
        raise TypeError(f"Имя часового пояса должно быть строкой, получено: {type(name).__name__}")

    try:
        return ZoneInfo(name)

    except (ZoneInfoNotFoundError, ValueError):
        # Несуществующая таймзона не должна ронять расчет: логируем и откатываемся к UTC
        log.warning(f"Некорректный часовой пояс '{name}'. Используется UTC по умолчанию.")
        return ZoneInfo("UTC")


def coerce_timezone(tz: TimezoneInput) -> tzinfo:
    """Приводит переданный часовой пояс к объекту tzinfo."""
    if isinstance(tz, tzinfo):
        return tz

    return resolve_timezone(tz)


def get_now(now: datetime | None = None, tz: TimezoneInput = None) -> datetime:
    """
    Возвращает "сейчас" в часовом поясе пользователя.

    Переданный `now` используется как есть (наивный считается локальным временем),
    что позволяет тестам и вызывающему коду фиксировать момент расчета.
    """
    if now is None:
        return datetime.now(timezone.utc).astimezone(coerce_timezone(tz))

    if not isinstance(now, datetime):
        raise InvalidDateException(
            message=f"'now' должен быть datetime, получено: {type(now).__name__}",
            details={"value": repr(now)},
        )

    if now.tzinfo is None:
        return now

    return now.astimezone(coerce_timezone(tz))


def get_today_for_timezone(timezone_name: str | None, now: datetime | None = None) -> date:
    """
    Вычисляет текущую дату ("сегодня") с учетом часового пояса пользователя.

    Если часовой пояс некорректен, используется UTC.

    Args:
        timezone_name (str | None): IANA-имя часового пояса пользователя.
        now (datetime | None): Момент расчета. Если None, используется текущее время.

    Returns:
        date: Объект даты (YYYY-MM-DD), соответствующий "сегодня" для пользователя.
    """
    user_timezone = resolve_timezone(timezone_name)

    # Конвертируем абсолютный момент во время пользователя и извлекаем дату
    return get_now(now, user_timezone).date()


# --- Приведение к локальной дате ---


def parse_datetime(value: str) -> datetime:
    """
    Разбирает строку ISO-8601 (дата или дата-время) в datetime.

    Raises:
        InvalidDateException: Если строка не является корректной датой.
    """
    try:
        return datetime.fromisoformat(value.strip())

    except ValueError as exc:
        raise InvalidDateException(
            message=f"Не удалось разобрать дату '{value}'.",
            details={"value": value},
        ) from exc


def to_local_date(value: DateInput, tz: TimezoneInput = None) -> date:
    """
    Приводит момент времени к календарной дате в часовом поясе пользователя.

    - date: используется как есть;
    - datetime с часовым поясом: переводится в `tz`;
    - наивный datetime: считается уже локальным временем;
    - строка ISO-8601: разбирается и обрабатывается по правилам выше.

    Args:
        value (DateInput): Момент времени.
        tz (TimezoneInput): Часовой пояс пользователя (по умолчанию из настроек).

    Returns:
        date: Локальная календарная дата.

    Raises:
        InvalidDateException: Если значение не является датой.
    """
    if isinstance(value, str):
        value = parse_datetime(value)

    # datetime наследуется от date, поэтому проверяем его первым
    if isinstance(value, datetime):
        if value.tzinfo is None or value.utcoffset() is None:
            return value.date()

        return value.astimezone(coerce_timezone(tz)).date()

    if isinstance(value, date):
        return value

    raise InvalidDateException(
        message=f"Ожидалась дата, получено: {type(value).__name__}",
        details={"value": repr(value)},
    )


def parse_cadence(cadence: Cadence | str) -> Cadence:
    """
    Проверяет и нормализует периодичность.

    Raises:
        UnknownCadenceException: Если периодичность не распознана.
    """
    if isinstance(cadence, Cadence):
        return cadence

    if isinstance(cadence, str):
        try:
            return Cadence(cadence)
        except ValueError:
            pass

    raise UnknownCadenceException(
        message=f"Неизвестная периодичность: {cadence!r}. Допустимые: {[item.value for item in Cadence]}",
        details={"value": repr(cadence)},
    )


# --- Ключи периодов ---


def get_day_key(value: DateInput, tz: TimezoneInput = None) -> str:
    """Возвращает ключ дня, например "2024-07-15"."""
    return to_local_date(value, tz).isoformat()


def get_week_key(value: DateInput, tz: TimezoneInput = None) -> str:
    """Возвращает ключ ISO-недели, например "2024-W29"."""
    iso_year, iso_week, _ = to_local_date(value, tz).isocalendar()
    return f"{iso_year}-W{iso_week:02d}"


def get_month_key(value: DateInput, tz: TimezoneInput = None) -> str:
    """Возвращает ключ месяца, например "2024-07"."""
    local_date = to_local_date(value, tz)
    return f"{local_date.year}-{local_date.month:02d}"


def get_period_key(value: DateInput, cadence: Cadence | str, tz: TimezoneInput = None) -> str:
    """
    Возвращает ключ периода, в который попадает момент времени, для заданной периодичности.

    Args:
        value (DateInput): Момент времени.
        cadence (Cadence | str): Периодичность (daily, weekly, monthly).
        tz (TimezoneInput): Часовой пояс пользователя.

    Returns:
        str: Ключ дня, недели или месяца.

    Raises:
        InvalidDateException: Если значение не является датой.
        UnknownCadenceException: Если периодичность не распознана.
    """
    cadence = parse_cadence(cadence)

    if cadence == Cadence.DAILY:
        return get_day_key(value, tz)

    if cadence == Cadence.WEEKLY:
        return get_week_key(value, tz)

    return get_month_key(value, tz)


def day_key_to_date(day_key: str) -> date:
    """Преобразует ключ дня обратно в дату."""
    match = DAY_KEY_RE.match(day_key) if isinstance(day_key, str) else None

    try:
        if match is None:
            raise ValueError(day_key)
        return date(int(match[1]), int(match[2]), int(match[3]))

    except ValueError as exc:
        raise InvalidPeriodKeyException(message=f"Некорректный ключ дня: {day_key!r}") from exc


def week_key_to_date(week_key: str) -> date:
    """
    Преобразует ключ ISO-недели обратно в дату начала недели (понедельник).

    Используется для отображения и для хранения записей уровня недели.

    Raises:
        InvalidPeriodKeyException: Если ключ некорректен (в том числе 53-я неделя в году без нее).
    """
    match = WEEK_KEY_RE.match(week_key) if isinstance(week_key, str) else None

    try:
        if match is None:
            raise ValueError(week_key)
        return date.fromisocalendar(int(match[1]), int(match[2]), 1)

    except ValueError as exc:
        raise InvalidPeriodKeyException(message=f"Некорректный ключ недели: {week_key!r}") from exc


def month_key_to_date(month_key: str) -> date:
    """Преобразует ключ месяца обратно в дату первого дня месяца."""
    match = MONTH_KEY_RE.match(month_key) if isinstance(month_key, str) else None

    try:
        if match is None:
            raise ValueError(month_key)
        return date(int(match[1]), int(match[2]), 1)

    except ValueError as exc:
        raise InvalidPeriodKeyException(message=f"Некорректный ключ месяца: {month_key!r}") from exc


def period_key_to_date(period_key: str, cadence: Cadence | str) -> date:
    """Преобразует ключ периода обратно в дату начала периода."""
    cadence = parse_cadence(cadence)

    if cadence == Cadence.DAILY:
        return day_key_to_date(period_key)

    if cadence == Cadence.WEEKLY:
        return week_key_to_date(period_key)

    return month_key_to_date(period_key)


# --- Арифметика периодов ---


def get_period_start(value: DateInput, cadence: Cadence | str, tz: TimezoneInput = None) -> date:
    """Возвращает дату начала периода (день, понедельник ISO-недели или 1-е число месяца)."""
    cadence = parse_cadence(cadence)
    local_date = to_local_date(value, tz)

    if cadence == Cadence.DAILY:
        return local_date

    if cadence == Cadence.WEEKLY:
        return local_date - timedelta(days=local_date.weekday())

    return local_date.replace(day=1)


def shift_period(period_start: date, cadence: Cadence | str, periods: int) -> date:
    """
    Сдвигает начало периода на `periods` периодов (отрицательное значение - назад).

    Для месяцев сдвиг выполняется от 1-го числа, поэтому месяц не может быть пропущен или повторен
    (в отличие от сдвига "того же числа" с 31 марта на 31 февраля).
    """
    cadence = parse_cadence(cadence)

    if cadence == Cadence.DAILY:
        return period_start + timedelta(days=periods)

    if cadence == Cadence.WEEKLY:
        return period_start + timedelta(weeks=periods)

    month_index = period_start.year * 12 + (period_start.month - 1) + periods
    return date(month_index // 12, month_index % 12 + 1, 1)


# --- Отображение ---


def format_long_date(value: date) -> str:
    """Форматирует дату в вид "July 15, 2024"."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year}"


def format_short_date(value: date, with_year: bool = False) -> str:
    """Форматирует дату в вид "Jul 15" (или "Jul 15, 2024")."""
    text = f"{MONTH_NAMES[value.month - 1][:3]} {value.day}"
    return f"{text}, {value.year}" if with_year else text


def get_display_date(value: DateInput, now: datetime | None = None, tz: TimezoneInput = None) -> str:
    """
    Возвращает дружелюбное представление даты: "Today", "Yesterday" или "July 15, 2024".

    Момент в UTC переводится в локальное время пользователя перед сравнением.
    """
    local_date = to_local_date(value, tz)
    today = get_now(now, tz).date()

    if local_date == today:
        return "Today"

    if local_date == today - timedelta(days=1):
        return "Yesterday"

    return format_long_date(local_date)


def get_week_display(week_key: str) -> str:
    """Возвращает представление недели, например "Week of July 15, 2024"."""
    return f"Week of {format_long_date(week_key_to_date(week_key))}"


def get_month_display(month_key: str) -> str:
    """Возвращает представление месяца, например "July 2024"."""
    month_start = month_key_to_date(month_key)
    return f"{MONTH_NAMES[month_start.month - 1]} {month_start.year}"


def is_same_day(first: DateInput, second: DateInput, tz: TimezoneInput = None) -> bool:
    """Проверяет, попадают ли два момента в один локальный календарный день."""
    return to_local_date(first, tz) == to_local_date(second, tz)


def is_date_in_current_week(value: DateInput, now: datetime | None = None, tz: TimezoneInput = None) -> bool:
    """Проверяет, попадает ли дата в текущую ISO-неделю."""
    return get_week_key(value, tz) == get_week_key(get_now(now, tz), tz)


def is_date_in_current_month(value: DateInput, now: datetime | None = None, tz: TimezoneInput = None) -> bool:
    """Проверяет, попадает ли дата в текущий календарный месяц."""
    return get_month_key(value, tz) == get_month_key(get_now(now, tz), tz)


def is_date_in_current_year(value: DateInput, now: datetime | None = None, tz: TimezoneInput = None) -> bool:
    """Проверяет, попадает ли дата в текущий календарный год."""
    return to_local_date(value, tz).year == get_now(now, tz).year
