from datetime import date, timedelta
from typing import Optional, Sequence
from flowplanr.models.entry import JournalEntry
from flowplanr.schemas.export import UserStats
from flowplanr.utils.dates import format_date, parse_date_key
from flowplanr.utils.text import count_lines, round_half_up

STREAK_WINDOW_DAYS = 30


def completion_rate(entries: Sequence[JournalEntry]) -> int:
    """% of task lines marked completed across all entries (0 when there are no tasks, max 100%)"""
    total_tasks = sum(count_lines(entry.daily_tasks) for entry in entries)
    total_completed = sum(count_lines(entry.completed) for entry in entries)
    if total_tasks == 0:
        return 0
    return min(round_half_up(total_completed / total_tasks * 100), 100)


def calculate_streak(dates: Sequence[str], today: date) -> int:
    """Consecutive days with an entry, scanning back from today.

    A missing entry for today does not end the scan; the first missing day
    after that does.
    """
    present = set(dates)
    streak = 0
    for offset in range(STREAK_WINDOW_DAYS):
        key = (today - timedelta(days=offset)).isoformat()
        if key in present:
            streak += 1
        elif offset > 0:
            break
    return streak


def compute_stats(entries: Sequence[JournalEntry], today: Optional[date] = None) -> UserStats:
    if not entries:
        return UserStats()

    today = today or date.today()
    ordered = sorted(entries, key=lambda e: e.date)
    first = parse_date_key(ordered[0].date)
    last = parse_date_key(ordered[-1].date)

    total_tasks = sum(count_lines(entry.daily_tasks) for entry in entries)

    return UserStats(
        total_entries=len(entries),
        date_range=f"{format_date(first)} - {format_date(last)}",
        streak_days=calculate_streak([e.date for e in entries], today),
        avg_tasks_per_day=round_half_up(total_tasks / len(entries)),
        completion_rate=completion_rate(entries),
    )
