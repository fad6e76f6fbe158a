import uuid
from sqlalchemy import Column, String, Text, DateTime, ForeignKey, UniqueConstraint, func
from flowplanr.database import Base

# Free-text columns in the order the entry form shows them
TEXT_FIELDS = (
    "priority_a",
    "daily_tasks",
    "completed",
    "postponed",
    "waiting_for",
    "difficulties",
    "blockers",
    "insights",
    "tomorrow_focus",
    "notes",
)

class JournalEntry(Base):
    __tablename__ = "journal_entries"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    date = Column(String(10), nullable=False)  # YYYY-MM-DD

    priority_a = Column(Text, nullable=True)
    daily_tasks = Column(Text, nullable=True)  # one task per line
    completed = Column(Text, nullable=True)    # one task per line
    postponed = Column(Text, nullable=True)
    waiting_for = Column(Text, nullable=True)
    difficulties = Column(Text, nullable=True)
    blockers = Column(Text, nullable=True)
    insights = Column(Text, nullable=True)
    tomorrow_focus = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "date", name="uq_user_entry_date"),
    )
