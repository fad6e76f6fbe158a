from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import List, Optional

# JSON uses the camelCase names of the original entry shape (priorityA, dailyTasks, ...)
camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class HistoryPeriod(str, Enum):
    all = "all"
    recent = "recent"
    this_week = "this_week"
    this_month = "this_month"

class EntryFields(BaseModel):
    model_config = camel_config

    priority_a: Optional[str] = None
    daily_tasks: Optional[str] = Field(None, description="One task per line")
    completed: Optional[str] = Field(None, description="One completed task per line")
    postponed: Optional[str] = None
    waiting_for: Optional[str] = None
    difficulties: Optional[str] = None
    blockers: Optional[str] = None
    insights: Optional[str] = None
    tomorrow_focus: Optional[str] = None
    notes: Optional[str] = None

class EntryUpsert(EntryFields):
    pass

class EntryResponse(EntryFields):
    id: str
    date: str
    user_id: str
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

class HistoryItem(EntryResponse):
    total_tasks: int
    completed_tasks: int
    completion_rate: int
    preview: str

class HistoryResponse(BaseModel):
    total: int
    shown: int
    entries: List[HistoryItem]
