import uuid
from typing import Optional
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession
from flowplanr.database import get_db
from flowplanr.core.auth import get_current_user
from flowplanr.models.entry import JournalEntry, TEXT_FIELDS
from flowplanr.repositories.entries import EntryRepository
from flowplanr.schemas.entry import EntryUpsert, EntryResponse, HistoryItem, HistoryPeriod, HistoryResponse
from flowplanr.services.history import entry_preview, entry_task_stats, filter_entries
from flowplanr.utils.dates import date_key, parse_date_key
from flowplanr.utils.text import clean_field

router = APIRouter(prefix="/entries", tags=["entries"])


def _validate_date_key(key: str) -> str:
    try:
        parse_date_key(key)
    except ValueError:
        raise HTTPException(422, "Date must be in YYYY-MM-DD format")
    return key


def _history_item(entry: JournalEntry) -> HistoryItem:
    total, completed, rate = entry_task_stats(entry)
    return HistoryItem(
        **EntryResponse.model_validate(entry).model_dump(),
        total_tasks=total,
        completed_tasks=completed,
        completion_rate=rate,
        preview=entry_preview(entry)
    )


@router.get("", response_model=HistoryResponse)
async def get_history(
    search: Optional[str] = None,
    period: HistoryPeriod = HistoryPeriod.all,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    entries = await EntryRepository(db).list(current_user.id)
    shown = filter_entries(entries, search=search, period=period)
    return HistoryResponse(
        total=len(entries),
        shown=len(shown),
        entries=[_history_item(e) for e in shown]
    )


@router.get("/today", response_model=Optional[EntryResponse])
async def get_today_entry(
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    return await EntryRepository(db).get_by_date(current_user.id, date_key())


@router.get("/{entry_date}", response_model=EntryResponse)
async def get_entry(
    entry_date: str,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    entry = await EntryRepository(db).get_by_date(current_user.id, _validate_date_key(entry_date))
    if not entry:
        raise HTTPException(404, "No entry for this date")
    return entry


@router.put("/{entry_date}", response_model=EntryResponse)
async def save_entry(
    entry_date: str,
    entry_in: EntryUpsert,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    key = _validate_date_key(entry_date)
    values = {field: clean_field(getattr(entry_in, field)) for field in TEXT_FIELDS}
    if not any(values.values()):
        raise HTTPException(400, "Entry is empty")

    repo = EntryRepository(db)
    # One entry per user per date: reuse the existing one if there is one
    entry = await repo.get_by_date(current_user.id, key)
    if entry is None:
        entry = JournalEntry(id=str(uuid.uuid4()), user_id=current_user.id, date=key)

    for field, value in values.items():
        setattr(entry, field, value)

    return await repo.save(entry)


@router.delete("/{entry_id}")
async def delete_entry(
    entry_id: str,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    repo = EntryRepository(db)
    entry = await repo.get(current_user.id, entry_id)
    if not entry:
        raise HTTPException(404, "Entry not found or access denied.")

    await repo.delete(entry)
    return {"deleted": True}
