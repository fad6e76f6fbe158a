"""Tests for the smart export report and prompt generator."""

from datetime import date

from flowplanr.schemas.export import AnalysisData, ReportKind, UserStats
from flowplanr.services.analysis import compute_analysis
from flowplanr.services.export import (
    NOT_ENOUGH_DATA,
    build_export,
    export_filename,
    generate_prompts,
    generate_reports,
)
from flowplanr.services.stats import compute_stats
from tests.factories import make_entry

TODAY = date(2024, 1, 20)


def _reports(entries):
    stats = compute_stats(entries, today=TODAY)
    analysis = compute_analysis(entries)
    return generate_reports(stats, analysis, entries)


class TestEmptyExport:
    def test_every_kind_is_placeholder(self):
        stats = UserStats(total_entries=9, date_range="whatever", streak_days=4)
        analysis = AnalysisData(completion_rate=80, top_challenges=["meetings"], trend_analysis="x")
        reports = generate_reports(stats, analysis, [])
        assert set(reports) == set(ReportKind)
        assert all(text == NOT_ENOUGH_DATA for text in reports.values())


class TestPrompts:
    def test_prompts_embed_metrics(self):
        stats = UserStats(total_entries=4, date_range="A - B", streak_days=2, avg_tasks_per_day=5)
        analysis = AnalysisData(
            completion_rate=75,
            top_challenges=["meetings", "review"],
            most_productive_days=["Monday"],
            blocker_patterns=["waiting for approval", "slow builds everywhere"],
            insight_keywords=["focus"],
            trend_analysis="Stable productivity",
        )
        prompts = generate_prompts(stats, analysis)

        assert set(prompts) == set(ReportKind)
        assert "A - B" in prompts[ReportKind.productivity]
        assert "75%" in prompts[ReportKind.productivity]
        assert "meetings, review" in prompts[ReportKind.productivity]
        assert "waiting for approval; slow builds everywhere" in prompts[ReportKind.blockers]
        assert "focus" in prompts[ReportKind.insights]
        assert "Average tasks per day: 5" in prompts[ReportKind.planning]
        assert prompts[ReportKind.trends].startswith("Stable productivity.")


class TestReportLayouts:
    def test_sections_and_prompt_header(self):
        entries = [make_entry("2024-01-01", daily_tasks="a", completed="a")]
        reports = _reports(entries)
        assert reports[ReportKind.productivity].startswith("=== PRODUCTIVITY ANALYSIS ===")
        assert reports[ReportKind.blockers].startswith("=== BLOCKER ANALYSIS ===")
        assert reports[ReportKind.insights].startswith("=== INSIGHT DEVELOPMENT ===")
        assert reports[ReportKind.planning].startswith("=== PLANNING OPTIMIZATION ===")
        assert reports[ReportKind.trends].startswith("=== TREND ANALYSIS ===")
        for text in reports.values():
            assert "=== PROMPT FOR CLAUDE ===" in text
            assert "=== INSTRUCTIONS ===" in text

    def test_assistant_name_is_configurable(self):
        entries = [make_entry("2024-01-01", daily_tasks="a")]
        stats = compute_stats(entries, today=TODAY)
        reports = generate_reports(stats, compute_analysis(entries), entries, assistant="Helper")
        assert "=== PROMPT FOR HELPER ===" in reports[ReportKind.trends]

    def test_blocker_excerpt_limited_to_five(self):
        entries = [make_entry(f"2024-01-0{d}", blockers="stuck on deploys") for d in range(1, 7)]
        assert _reports(entries)[ReportKind.blockers].count("🔧 Blockers:") == 5

    def test_insight_excerpt_skips_empty_and_limits_to_ten(self):
        entries = [make_entry(f"2024-01-{d:02d}", insights="write things down") for d in range(1, 13)]
        entries.insert(0, make_entry("2024-01-15", notes="no insight"))
        assert _reports(entries)[ReportKind.insights].count("💡") == 10

    def test_planning_excerpt_limited_to_three(self):
        entries = [make_entry(f"2024-01-0{d}", daily_tasks="a") for d in range(1, 6)]
        assert _reports(entries)[ReportKind.planning].count("📅") == 3

    def test_trend_timeline_limited_to_seven(self):
        entries = [make_entry(f"2024-01-0{d}", daily_tasks="a\nb", completed="a") for d in range(1, 10)]
        text = _reports(entries)[ReportKind.trends]
        assert text.count("📅") == 7
        assert "📅 January 1, 2024 | Tasks: 2 | Completed: 1 | 50%" in text

    def test_absent_fields_are_omitted(self):
        entries = [make_entry("2024-01-01", daily_tasks="write report")]
        planning = _reports(entries)[ReportKind.planning]
        assert "📋 Tasks: write report" in planning
        assert "🚀 Priorities" not in planning
        assert "✅ Completed" not in planning
        assert "🎯 Tomorrow" not in planning

    def test_excerpt_dates_use_long_format(self):
        entries = [make_entry("2024-01-05", difficulties="too many pings")]
        blockers = _reports(entries)[ReportKind.blockers]
        assert "📅 January 5, 2024\n🚧 Difficulties: too many pings" in blockers


class TestBuildExport:
    def test_orders_entries_for_analysis_and_excerpts(self):
        entries = [
            make_entry("2024-01-02", daily_tasks="a"),
            make_entry("2024-01-03", daily_tasks="a"),
            make_entry("2024-01-01", daily_tasks="a"),
        ]
        stats, analysis, reports = build_export(entries, today=TODAY, assistant="Claude")

        assert stats.date_range.startswith("Monday, January 1, 2024")
        timeline = reports[ReportKind.trends].split("=== ENTRY TIMELINE ===")[1]
        assert timeline.index("January 3, 2024") < timeline.index("January 1, 2024")
        assert [e.date for e in entries] == ["2024-01-02", "2024-01-03", "2024-01-01"]

    def test_empty(self):
        stats, analysis, reports = build_export([], today=TODAY)
        assert stats.date_range == "No data"
        assert reports[ReportKind.productivity] == NOT_ENOUGH_DATA


class TestFilename:
    def test_named_by_kind_and_date(self):
        assert export_filename(ReportKind.trends, date(2024, 5, 6)) == "flowplanr-trends-2024-05-06.txt"
