"""
Расчет сроков выполнения намерений и категорий срочности.

Пресеты ("сегодня", "на этой неделе", ...) переводятся в точный срок:
конец соответствующего локального дня (23:59:59.999999).
Разница со сроком всегда считается в локальных календарных днях пользователя.
"""

import math
from datetime import date, datetime, time, timedelta

from pydantic import BaseModel, Field

from src.tracker.core.config import settings
from src.tracker.core.exceptions import UnknownPresetException
from src.tracker.models.enums import Cadence, ETAPreset, UrgencyCategory

from .date_utils import DateInput, TimezoneInput, format_short_date, get_now, shift_period, to_local_date


class ETAOption(BaseModel):
    """Описание пресета срока для выбора в интерфейсе."""

    id: ETAPreset = Field(..., description="Идентификатор пресета")
    label: str = Field(..., description="Название пресета")
    description: str | None = Field(None, description="Пояснение к пресету")


ETA_PRESETS: list[ETAOption] = [
    ETAOption(id=ETAPreset.TODAY, label="Today", description="By end of day"),
    ETAOption(id=ETAPreset.TOMORROW, label="Tomorrow", description="By tomorrow night"),
    ETAOption(id=ETAPreset.THIS_WEEK, label="This Week", description="By this Sunday"),
    ETAOption(id=ETAPreset.NEXT_WEEK, label="Next Week", description="By next Sunday"),
    ETAOption(id=ETAPreset.THIS_MONTH, label="This Month", description="By end of month"),
    ETAOption(id=ETAPreset.NEXT_MONTH, label="Next Month", description="By end of next month"),
    ETAOption(id=ETAPreset.THIS_YEAR, label="This Year", description="By Dec 31"),
    ETAOption(id=ETAPreset.NEXT_YEAR, label="Next Year", description="By next Dec 31"),
    ETAOption(id=ETAPreset.LIFE, label="Life Goal", description="Ongoing, no deadline"),
    ETAOption(id=ETAPreset.CUSTOM, label="Custom Date", description="Pick a specific date"),
]

URGENCY_CATEGORY_LABELS: dict[UrgencyCategory, str] = {
    UrgencyCategory.OVERDUE: "Overdue",
    UrgencyCategory.TODAY: "Today",
    UrgencyCategory.THIS_WEEK: "This Week",
    UrgencyCategory.THIS_MONTH: "This Month",
    UrgencyCategory.LATER: "Later",
    UrgencyCategory.LIFE: "Life Goals",
}


def _end_of_day(day: date, reference: datetime) -> datetime:
    """Конец локального дня в часовом поясе `reference` (наивный, если `reference` наивный)."""
    return datetime.combine(day, time.max, tzinfo=reference.tzinfo)


def _end_of_month(month_start: date, months_ahead: int = 0) -> date:
    """Последний день месяца, отстоящего на `months_ahead` месяцев от `month_start`."""
    return shift_period(month_start, Cadence.MONTHLY, months_ahead + 1) - timedelta(days=1)


def parse_preset(preset: ETAPreset | str) -> ETAPreset:
    """
    Проверяет и нормализует пресет срока.

    Raises:
        UnknownPresetException: Если пресет не распознан.
    """
    if isinstance(preset, ETAPreset):
        return preset

    if isinstance(preset, str):
        try:
            return ETAPreset(preset)
        except ValueError:
            pass

    raise UnknownPresetException(message=f"Неизвестный пресет срока: {preset!r}", details={"value": repr(preset)})


def calculate_due_date(
    preset: ETAPreset | str,
    custom_date: DateInput | None = None,
    *,
    now: datetime | None = None,
    tz: TimezoneInput = None,
) -> datetime | None:
    """
    Переводит пресет срока в точный срок выполнения.

    Все сроки устанавливаются на конец локального дня. Неделя заканчивается в воскресенье.

    Args:
        preset (ETAPreset | str): Пресет срока.
        custom_date (DateInput | None): Дата для пресета "custom".
        now (datetime | None): Момент расчета. Если None, используется текущее время.
        tz (TimezoneInput): Часовой пояс пользователя.

    Returns:
        datetime | None: Срок выполнения или None (цель "на всю жизнь" или "custom" без даты).

    Raises:
        UnknownPresetException: Если пресет не распознан.
        InvalidDateException: Если custom_date не является датой.
    """
    preset = parse_preset(preset)
    local_now = get_now(now, tz)
    today = local_now.date()
    month_start = today.replace(day=1)

    # Дней до воскресенья текущей недели (в воскресенье - 0)
    days_until_sunday = 6 - today.weekday()

    match preset:
        case ETAPreset.TODAY:
            due_day = today
        case ETAPreset.TOMORROW:
            due_day = today + timedelta(days=1)
        case ETAPreset.THIS_WEEK:
            due_day = today + timedelta(days=days_until_sunday)
        case ETAPreset.NEXT_WEEK:
            due_day = today + timedelta(days=days_until_sunday + 7)
        case ETAPreset.THIS_MONTH:
            due_day = _end_of_month(month_start)
        case ETAPreset.NEXT_MONTH:
            due_day = _end_of_month(month_start, months_ahead=1)
        case ETAPreset.THIS_YEAR:
            due_day = date(today.year, 12, 31)
        case ETAPreset.NEXT_YEAR:
            due_day = date(today.year + 1, 12, 31)
        case ETAPreset.CUSTOM if custom_date is not None:
            due_day = to_local_date(custom_date, tz)
        case _:
            # Для целей "на всю жизнь" и "custom" без даты срока нет
            return None

    return _end_of_day(due_day, local_now)


def get_days_until(due_date: DateInput, *, now: datetime | None = None, tz: TimezoneInput = None) -> int:
    """
    Разница в локальных календарных днях между сроком и "сегодня".

    Отрицательное значение - срок прошел, 0 - срок сегодня.

    Raises:
        InvalidDateException: Если срок не является датой.
    """
    today = get_now(now, tz).date()
    return (to_local_date(due_date, tz) - today).days


def get_urgency_category(
    due_date: DateInput | None,
    is_life_goal: bool,
    *,
    now: datetime | None = None,
    tz: TimezoneInput = None,
) -> UrgencyCategory:
    """
    Определяет категорию срочности намерения для сортировки и группировки.

    Правила:
    - флаг цели "на всю жизнь" имеет приоритет (life);
    - без срока - later;
    - иначе по разнице в днях: <0 overdue, 0 today, <=7 this_week, <=30 this_month, иначе later.

    Границы включительные: 7-й день - еще this_week, 8-й - уже this_month.

    Args:
        due_date (DateInput | None): Срок выполнения.
        is_life_goal (bool): Флаг цели "на всю жизнь".
        now (datetime | None): Момент расчета. Если None, используется текущее время.
        tz (TimezoneInput): Часовой пояс пользователя.

    Returns:
        UrgencyCategory: Категория срочности.

    Raises:
        InvalidDateException: Если срок не является датой.
    """
    if not isinstance(is_life_goal, bool):
        raise TypeError(f"is_life_goal должен быть bool, получено: {type(is_life_goal).__name__}")

    if is_life_goal:
        return UrgencyCategory.LIFE

    if due_date is None:
        return UrgencyCategory.LATER

    diff_days = get_days_until(due_date, now=now, tz=tz)

    if diff_days < 0:
        return UrgencyCategory.OVERDUE
    if diff_days == 0:
        return UrgencyCategory.TODAY
    if diff_days <= settings.URGENCY_WEEK_DAYS:
        return UrgencyCategory.THIS_WEEK
    if diff_days <= settings.URGENCY_MONTH_DAYS:
        return UrgencyCategory.THIS_MONTH
    return UrgencyCategory.LATER


def get_urgency_category_label(category: UrgencyCategory | str) -> str:
    """Возвращает отображаемое название категории срочности."""
    try:
        return URGENCY_CATEGORY_LABELS[UrgencyCategory(category)]
    except ValueError as exc:
        raise ValueError(f"Неизвестная категория срочности: {category!r}") from exc


def format_due_date(
    due_date: DateInput | None,
    is_life_goal: bool,
    *,
    now: datetime | None = None,
    tz: TimezoneInput = None,
) -> str:
    """
    Возвращает человекочитаемое представление срока.

    Например: "Life Goal", "No deadline", "Overdue", "Today", "Tomorrow", "5 days", "3 weeks", "4 months"
    или "Mar 3" / "Mar 3, 2027" для сроков дальше года.
    """
    if is_life_goal:
        return "Life Goal"

    if due_date is None:
        return "No deadline"

    today = get_now(now, tz).date()
    due_day = to_local_date(due_date, tz)
    diff_days = (due_day - today).days

    if diff_days < 0:
        return "Overdue"
    if diff_days == 0:
        return "Today"
    if diff_days == 1:
        return "Tomorrow"
    if diff_days <= 7:
        return f"{diff_days} days"
    if diff_days <= 30:
        return f"{math.ceil(diff_days / 7)} weeks"
    if diff_days <= 365:
        return f"{math.ceil(diff_days / 30)} months"

    return format_short_date(due_day, with_year=due_day.year != today.year)


def get_preset_display_date(preset: ETAPreset | str, *, now: datetime | None = None, tz: TimezoneInput = None) -> str:
    """Возвращает дату, в которую выливается пресет, например "Jul 21" (пустая строка, если срока нет)."""
    due_date = calculate_due_date(preset, now=now, tz=tz)

    if due_date is None:
        return ""

    return format_short_date(due_date.date())
