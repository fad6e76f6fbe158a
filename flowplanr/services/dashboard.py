from datetime import date
from typing import Optional, Sequence
from flowplanr.models.entry import JournalEntry
from flowplanr.schemas.dashboard import DashboardStats
from flowplanr.services.stats import calculate_streak, completion_rate
from flowplanr.utils.dates import date_key, parse_date_key, week_start


def count_this_week(entries: Sequence[JournalEntry], today: date) -> int:
    """Entries dated on or after Monday of the current week"""
    monday = week_start(today)
    return sum(1 for entry in entries if parse_date_key(entry.date) >= monday)


def compute_dashboard(entries: Sequence[JournalEntry], today: Optional[date] = None) -> DashboardStats:
    today = today or date.today()
    if not entries:
        return DashboardStats()

    today_key = date_key(today)
    return DashboardStats(
        total_entries=len(entries),
        streak=calculate_streak([e.date for e in entries], today),
        this_week_entries=count_this_week(entries, today),
        avg_completion_rate=completion_rate(entries),
        has_today_entry=any(e.date == today_key for e in entries),
    )
