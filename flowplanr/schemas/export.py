from enum import Enum
from pydantic import BaseModel, Field
from typing import Dict, List

class ReportKind(str, Enum):
    productivity = "productivity"
    blockers = "blockers"
    insights = "insights"
    planning = "planning"
    trends = "trends"

class UserStats(BaseModel):
    total_entries: int = 0
    date_range: str = "No data"
    streak_days: int = 0
    avg_tasks_per_day: int = 0
    completion_rate: int = Field(0, ge=0, le=100)

class AnalysisData(BaseModel):
    completion_rate: int = Field(0, ge=0, le=100)
    top_challenges: List[str] = []
    most_productive_days: List[str] = []
    blocker_patterns: List[str] = []
    insight_keywords: List[str] = []
    trend_analysis: str

class ExportStatsResponse(BaseModel):
    stats: UserStats
    analysis: AnalysisData

class ReportResponse(BaseModel):
    kind: ReportKind
    content: str
    filename: str

class PromptsResponse(BaseModel):
    prompts: Dict[ReportKind, str]
