"""Heuristic text analysis over a user's journal entries.

Every function here is pure: same entries in, same result out. Keyword
extraction is deliberately crude (word frequency with fixed length cut-offs)
and the cut-offs are part of the observable behaviour of the exports.
"""
import re
from collections import Counter, defaultdict
from typing import Dict, List, Sequence
from flowplanr.models.entry import JournalEntry
from flowplanr.schemas.export import AnalysisData
from flowplanr.services.stats import completion_rate
from flowplanr.utils.dates import parse_date_key, weekday_name
from flowplanr.utils.text import count_lines, tokenize

NO_DATA = "Not enough data for analysis"
NO_TREND_DATA = "Not enough data for trend analysis"
TREND_IMPROVING = "Positive trend: productivity is growing"
TREND_DECLINING = "Productivity is declining: worth a closer look"
TREND_STABLE = "Stable productivity"

CHALLENGE_MIN_LENGTH = 3
INSIGHT_MIN_LENGTH = 4
PATTERN_MIN_LENGTH = 10
PATTERN_KEY_LENGTH = 50
TREND_WINDOW = 7
TREND_THRESHOLD = 10

_SENTENCE_END = re.compile(r"[.!?]")


def _top(counts: Counter, limit: int) -> List[str]:
    # most_common keeps first-seen order among equal counts
    return [key for key, _ in counts.most_common(limit)]


def extract_top_challenges(entries: Sequence[JournalEntry], limit: int = 5) -> List[str]:
    counts: Counter = Counter()
    for entry in entries:
        text = f"{entry.difficulties or ''} {entry.blockers or ''}".lower()
        counts.update(tokenize(text, CHALLENGE_MIN_LENGTH))
    return _top(counts, limit)


def entry_productivity(entry: JournalEntry) -> float:
    completed = count_lines(entry.completed)
    if completed == 0:
        return 0.0
    return completed / max(count_lines(entry.daily_tasks), 1) * 100


def find_productive_days(entries: Sequence[JournalEntry], limit: int = 3) -> List[str]:
    scores: Dict[str, List[float]] = defaultdict(list)
    for entry in entries:
        day = weekday_name(parse_date_key(entry.date))
        scores[day].append(entry_productivity(entry))

    averages = [(day, sum(values) / len(values)) for day, values in scores.items()]
    averages.sort(key=lambda item: item[1], reverse=True)
    return [day for day, _ in averages[:limit]]


def extract_blocker_patterns(entries: Sequence[JournalEntry], limit: int = 3) -> List[str]:
    counts: Counter = Counter()
    for entry in entries:
        blockers = (entry.blockers or "").lower()
        if not blockers.strip():
            continue
        for sentence in _SENTENCE_END.split(blockers):
            sentence = sentence.strip()
            if len(sentence) > PATTERN_MIN_LENGTH:
                counts[sentence[:PATTERN_KEY_LENGTH]] += 1
    return _top(counts, limit)


def extract_insight_keywords(entries: Sequence[JournalEntry], limit: int = 7) -> List[str]:
    counts: Counter = Counter()
    for entry in entries:
        counts.update(tokenize((entry.insights or "").lower(), INSIGHT_MIN_LENGTH))
    return _top(counts, limit)


def analyze_trend(entries: Sequence[JournalEntry]) -> str:
    """Compare the completion rate of the last 7 entries with the earliest ones.

    The windows follow list order, not dates, and overlap when there are
    fewer than 7 entries.
    """
    if len(entries) < 3:
        return NO_TREND_DATA

    recent = completion_rate(entries[-TREND_WINDOW:])
    older = completion_rate(entries[:min(TREND_WINDOW, len(entries) - TREND_WINDOW)])

    if recent > older + TREND_THRESHOLD:
        return TREND_IMPROVING
    elif recent < older - TREND_THRESHOLD:
        return TREND_DECLINING
    else:
        return TREND_STABLE


def compute_analysis(entries: Sequence[JournalEntry]) -> AnalysisData:
    if not entries:
        return AnalysisData(trend_analysis=NO_DATA)

    entries = list(entries)
    return AnalysisData(
        completion_rate=completion_rate(entries),
        top_challenges=extract_top_challenges(entries),
        most_productive_days=find_productive_days(entries),
        blocker_patterns=extract_blocker_patterns(entries),
        insight_keywords=extract_insight_keywords(entries),
        trend_analysis=analyze_trend(entries),
    )
