import logging
from datetime import datetime, timezone
from typing import List, Optional
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from flowplanr.models.entry import JournalEntry

logger = logging.getLogger(__name__)

class EntryRepository:
    """CRUD over journal entries.

    ``save`` upserts by id only; finding an existing entry for the same date
    (and reusing it) is the caller's job.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list(self, user_id: str) -> List[JournalEntry]:
        result = await self.db.execute(
            select(JournalEntry).where(JournalEntry.user_id == user_id)
        )
        return list(result.scalars().all())

    async def get(self, user_id: str, entry_id: str) -> Optional[JournalEntry]:
        result = await self.db.execute(
            select(JournalEntry)
            .where(JournalEntry.id == entry_id)
            .where(JournalEntry.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def get_by_date(self, user_id: str, date_key: str) -> Optional[JournalEntry]:
        result = await self.db.execute(
            select(JournalEntry)
            .where(JournalEntry.user_id == user_id)
            .where(JournalEntry.date == date_key)
        )
        return result.scalar_one_or_none()

    async def save(self, entry: JournalEntry) -> JournalEntry:
        now = datetime.now(timezone.utc)
        if entry.created_at is None:
            entry.created_at = now
        entry.updated_at = now

        self.db.add(entry)
        await self.db.commit()
        await self.db.refresh(entry)
        logger.info("Saved entry %s (%s) for user %s", entry.id, entry.date, entry.user_id)
        return entry

    async def delete(self, entry: JournalEntry) -> None:
        await self.db.delete(entry)
        await self.db.commit()
        logger.info("Deleted entry %s for user %s", entry.id, entry.user_id)
