"""Smart export: turns stats, analysis and raw entries into text reports.

Each report kind has a fixed layout. The only branching is dropping fields
an entry does not have.
"""
import logging
from datetime import date
from typing import Dict, Optional, Sequence
from flowplanr.config import settings
from flowplanr.models.entry import JournalEntry
from flowplanr.schemas.export import AnalysisData, ReportKind, UserStats
from flowplanr.services.analysis import compute_analysis
from flowplanr.services.history import entry_task_stats
from flowplanr.services.stats import compute_stats
from flowplanr.utils.dates import date_key, format_day, parse_date_key

logger = logging.getLogger(__name__)

NOT_ENOUGH_DATA = (
    "Not enough data to export. Keep your journal for a few days "
    "to get a meaningful analysis."
)


def generate_prompts(stats: UserStats, analysis: AnalysisData) -> Dict[ReportKind, str]:
    return {
        ReportKind.productivity: (
            f"Analyze my productivity for {stats.date_range}. I have {stats.total_entries} entries, "
            f"a task completion rate of {analysis.completion_rate}% and a journaling streak of "
            f"{stats.streak_days} days. Main challenges: {', '.join(analysis.top_challenges)}. "
            f"What can I improve?"
        ),
        ReportKind.blockers: (
            f"Help me work through the blockers in my work. Recurring patterns: "
            f"{'; '.join(analysis.blocker_patterns)}. How can I turn these obstacles into opportunities?"
        ),
        ReportKind.insights: (
            f"Turn my insights into concrete actions. Key themes: {', '.join(analysis.insight_keywords)}. "
            f"How can I apply these realizations to grow?"
        ),
        ReportKind.planning: (
            f"Optimize my planning. Most productive days: {', '.join(analysis.most_productive_days)}. "
            f"Average tasks per day: {stats.avg_tasks_per_day}. How should I structure my work week?"
        ),
        ReportKind.trends: (
            f"{analysis.trend_analysis}. Analyze the dynamics and give recommendations for the next period."
        ),
    }


def _entry_day(entry: JournalEntry) -> str:
    return format_day(parse_date_key(entry.date))


def _blocker_excerpt(entry: JournalEntry) -> str:
    text = f"📅 {_entry_day(entry)}\n"
    if entry.difficulties:
        text += f"🚧 Difficulties: {entry.difficulties}\n"
    if entry.blockers:
        text += f"🔧 Blockers: {entry.blockers}\n"
    return text


def _insight_excerpt(entry: JournalEntry) -> str:
    return f"📅 {_entry_day(entry)}\n💡 {entry.insights}"


def _planning_excerpt(entry: JournalEntry) -> str:
    text = f"📅 {_entry_day(entry)}\n"
    if entry.priority_a:
        text += f"🚀 Priorities: {entry.priority_a}\n"
    if entry.daily_tasks:
        text += f"📋 Tasks: {entry.daily_tasks}\n"
    if entry.completed:
        text += f"✅ Completed: {entry.completed}\n"
    if entry.tomorrow_focus:
        text += f"🎯 Tomorrow: {entry.tomorrow_focus}\n"
    return text


def _trend_line(entry: JournalEntry) -> str:
    tasks, completed, rate = entry_task_stats(entry)
    return f"📅 {_entry_day(entry)} | Tasks: {tasks} | Completed: {completed} | {rate}%"


def _bullets(items: Sequence[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


def generate_reports(
    stats: UserStats,
    analysis: AnalysisData,
    entries: Sequence[JournalEntry],
    assistant: str = "Claude",
) -> Dict[ReportKind, str]:
    """Render every report kind. Excerpts are taken from the front of ``entries``."""
    if not entries:
        return {kind: NOT_ENOUGH_DATA for kind in ReportKind}

    prompts = generate_prompts(stats, analysis)
    prompt_header = f"=== PROMPT FOR {assistant.upper()} ==="

    blocker_notes = "\n---\n".join(_blocker_excerpt(e) for e in entries[:5])
    with_insights = [e for e in entries if e.insights][:10]
    insight_notes = "\n\n---\n\n".join(_insight_excerpt(e) for e in with_insights)
    planning_notes = "\n---\n".join(_planning_excerpt(e) for e in entries[:3])
    timeline = "\n".join(_trend_line(e) for e in entries[:7])

    productivity = f"""=== PRODUCTIVITY ANALYSIS ===

Analysis period: {stats.date_range}
Total entries: {stats.total_entries}
Journaling streak: {stats.streak_days} days
Average tasks per day: {stats.avg_tasks_per_day}
Completion rate: {analysis.completion_rate}%

Most productive days: {', '.join(analysis.most_productive_days)}
Main challenges: {', '.join(analysis.top_challenges)}
Trend: {analysis.trend_analysis}

{prompt_header}

{prompts[ReportKind.productivity]}

=== INSTRUCTIONS ===
Copy the prompt above and send it to {assistant} for a personal productivity analysis."""

    blockers = f"""=== BLOCKER ANALYSIS ===

Analysis period: {stats.date_range}
Recurring blocker patterns:
{_bullets(analysis.blocker_patterns)}

Main difficulties:
{_bullets(analysis.top_challenges)}

{prompt_header}

{prompts[ReportKind.blockers]}

=== DETAILED DIFFICULTY NOTES ===

{blocker_notes}

=== INSTRUCTIONS ===
Copy the prompt and send it to {assistant} to analyze your blockers and get advice on overcoming them."""

    insights = f"""=== INSIGHT DEVELOPMENT ===

Analysis period: {stats.date_range}
Key insight themes: {', '.join(analysis.insight_keywords)}

{prompt_header}

{prompts[ReportKind.insights]}

=== INSIGHT COLLECTION ===

{insight_notes}

=== INSTRUCTIONS ===
Send the prompt to {assistant} to deepen your insights and get practical recommendations."""

    planning = f"""=== PLANNING OPTIMIZATION ===

Planning statistics:
• Average tasks per day: {stats.avg_tasks_per_day}
• Completion rate: {analysis.completion_rate}%
• Most productive days: {', '.join(analysis.most_productive_days)}
• Journaling streak: {stats.streak_days} days

{prompt_header}

{prompts[ReportKind.planning]}

=== PLANNING EXAMPLES ===

{planning_notes}

=== INSTRUCTIONS ===
Use the prompt to get recommendations on improving your planning and the structure of your work."""

    trends = f"""=== TREND ANALYSIS ===

Analysis period: {stats.date_range}
Dynamics: {analysis.trend_analysis}
Completion rate: {analysis.completion_rate}%

{prompt_header}

{prompts[ReportKind.trends]}

=== ENTRY TIMELINE ===

{timeline}

=== INSTRUCTIONS ===
Send the prompt to {assistant} to analyze your trends and get strategic recommendations."""

    return {
        ReportKind.productivity: productivity,
        ReportKind.blockers: blockers,
        ReportKind.insights: insights,
        ReportKind.planning: planning,
        ReportKind.trends: trends,
    }


def build_export(
    entries: Sequence[JournalEntry],
    today: Optional[date] = None,
    assistant: Optional[str] = None,
):
    """Stats, analysis and every report for one user's entries.

    Stats and analysis see the entries oldest first, so the trend compares the
    latest week against the earliest one. Excerpts are taken newest first.
    """
    chronological = sorted(entries, key=lambda e: e.date)
    newest_first = list(reversed(chronological))

    stats = compute_stats(chronological, today=today)
    analysis = compute_analysis(chronological)
    reports = generate_reports(
        stats, analysis, newest_first, assistant=assistant or settings.ASSISTANT_NAME
    )
    logger.debug("Built %d reports from %d entries", len(reports), len(entries))
    return stats, analysis, reports


def export_filename(kind: ReportKind, today: Optional[date] = None) -> str:
    return f"flowplanr-{kind.value}-{date_key(today)}.txt"
