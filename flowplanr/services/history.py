from datetime import date, timedelta
from typing import List, Optional, Sequence
from flowplanr.models.entry import JournalEntry, TEXT_FIELDS
from flowplanr.schemas.entry import HistoryPeriod
from flowplanr.utils.dates import month_start, parse_date_key, week_start
from flowplanr.utils.text import count_lines, round_half_up

PREVIEW_LENGTH = 150
RECENT_DAYS = 3


def _matches(entry: JournalEntry, needle: str) -> bool:
    values = [entry.date] + [getattr(entry, field) for field in TEXT_FIELDS]
    return any(value and needle in value.lower() for value in values)


def _period_start(period: HistoryPeriod, today: date) -> Optional[date]:
    if period == HistoryPeriod.recent:
        return today - timedelta(days=RECENT_DAYS - 1)
    if period == HistoryPeriod.this_week:
        return week_start(today)
    if period == HistoryPeriod.this_month:
        return month_start(today)
    return None


def filter_entries(
    entries: Sequence[JournalEntry],
    search: Optional[str] = None,
    period: HistoryPeriod = HistoryPeriod.all,
    today: Optional[date] = None,
) -> List[JournalEntry]:
    """Search and period filter, newest first."""
    today = today or date.today()
    start = _period_start(period, today)
    needle = (search or "").strip().lower()

    result = []
    for entry in entries:
        if needle and not _matches(entry, needle):
            continue
        if start and parse_date_key(entry.date) < start:
            continue
        result.append(entry)

    result.sort(key=lambda e: e.date, reverse=True)
    return result


def entry_task_stats(entry: JournalEntry):
    tasks = count_lines(entry.daily_tasks)
    completed = count_lines(entry.completed)
    rate = round_half_up(completed / tasks * 100) if tasks > 0 else 0
    return tasks, completed, rate


def entry_preview(entry: JournalEntry) -> str:
    fields = [entry.priority_a, entry.daily_tasks, entry.completed, entry.insights]
    preview = " ".join(f for f in fields if f)[:PREVIEW_LENGTH]
    return preview or "Empty entry"
