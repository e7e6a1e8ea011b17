# frontend/app/datetime_picker.py
# Composition logic behind the deadline picker: a calendar day plus a separate "HH:MM" text field.

import datetime

import pytz

DEFAULT_TIME = "12:00"
PLACEHOLDER = "選擇日期時間"


def _to_date(day) -> datetime.date | None:
    """Accepts whatever the calendar widget hands over: date, datetime, timestamp or ISO string."""
    if day is None or day == "":
        return None
    if isinstance(day, datetime.datetime):
        return day.date()
    if isinstance(day, datetime.date):
        return day
    if isinstance(day, (int, float)):
        return datetime.datetime.fromtimestamp(day).date()
    try:
        return datetime.date.fromisoformat(str(day).strip()[:10])
    except ValueError:
        return None


def parse_time(time_text) -> tuple[int, int] | None:
    """'HH:MM' -> (hour, minute). Anything but two numeric colon-separated parts is rejected."""
    parts = (time_text or "").strip().split(":")
    if len(parts) != 2 or not all(p.strip().isdigit() for p in parts):
        return None
    hour, minute = int(parts[0]), int(parts[1])
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        return None
    return hour, minute


def compose_deadline(day, time_text, tz_name: str) -> datetime.datetime | None:
    """
    Combines the selected day and time into an aware datetime in `tz_name`.
    Returns None when either part is missing or incomplete, never a partial value.
    """
    date_part = _to_date(day)
    time_part = parse_time(time_text)
    if date_part is None or time_part is None:
        return None
    naive = datetime.datetime.combine(date_part, datetime.time(*time_part))
    return pytz.timezone(tz_name).localize(naive)


def format_deadline(value: datetime.datetime | None) -> str:
    return value.strftime("%Y/%m/%d %H:%M") if value else PLACEHOLDER
