# flowplanr/utils/dates.py
from datetime import date, datetime, timedelta
from typing import Optional

WEEKDAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]
MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


def date_key(day: Optional[date] = None) -> str:
    """YYYY-MM-DD key for a calendar day (today by default)."""
    return (day or date.today()).isoformat()


def parse_date_key(key: str) -> date:
    # raises ValueError on anything that isn't a zero-padded YYYY-MM-DD
    day = datetime.strptime(key, "%Y-%m-%d").date()
    if day.isoformat() != key:
        raise ValueError(f"not a canonical date key: {key!r}")
    return day


def weekday_name(day: date) -> str:
    return WEEKDAYS[day.weekday()]


def format_day(day: date) -> str:
    """e.g. "January 5, 2024"."""
    return f"{MONTHS[day.month - 1]} {day.day}, {day.year}"


def format_date(day: date) -> str:
    """e.g. "Friday, January 5, 2024"."""
    return f"{weekday_name(day)}, {format_day(day)}"


def week_start(today: date) -> date:
    """Monday of the week containing ``today``."""
    return today - timedelta(days=today.weekday())


def month_start(today: date) -> date:
    return today.replace(day=1)
