from pydantic import BaseModel

class DashboardStats(BaseModel):
    total_entries: int = 0
    streak: int = 0
    this_week_entries: int = 0
    avg_completion_rate: int = 0
    has_today_entry: bool = False

class DashboardResponse(BaseModel):
    greeting_name: str
    email: str
    stats: DashboardStats
