"""Чистые функции расчета периодов, серий и сроков."""

from .date_utils import (
    day_key_to_date,
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
    parse_cadence,
    period_key_to_date,
    resolve_timezone,
    shift_period,
    to_local_date,
    week_key_to_date,
)
from .eta_calculator import (
    ETA_PRESETS,
    ETAOption,
    calculate_due_date,
    format_due_date,
    get_days_until,
    get_preset_display_date,
    get_urgency_category,
    get_urgency_category_label,
)
from .streak import calculate_longest_streak, calculate_streak

__all__ = [
    "ETA_PRESETS",
    "ETAOption",
    "calculate_due_date",
    "calculate_longest_streak",
    "calculate_streak",
    "day_key_to_date",
    "format_due_date",
    "get_day_key",
    "get_days_until",
    "get_display_date",
    "get_month_display",
    "get_month_key",
    "get_period_key",
    "get_period_start",
    "get_preset_display_date",
    "get_today_for_timezone",
    "get_urgency_category",
    "get_urgency_category_label",
    "get_week_display",
    "get_week_key",
    "is_date_in_current_month",
    "is_date_in_current_week",
    "is_date_in_current_year",
    "is_same_day",
    "month_key_to_date",
    "parse_cadence",
    "period_key_to_date",
    "resolve_timezone",
    "shift_period",
    "to_local_date",
    "week_key_to_date",
]
