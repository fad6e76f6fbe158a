from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession
from flowplanr.database import get_db
from flowplanr.core.auth import get_current_user
from flowplanr.repositories.entries import EntryRepository
from flowplanr.schemas.dashboard import DashboardResponse
from flowplanr.services.dashboard import compute_dashboard

router = APIRouter(prefix="/dashboard", tags=["dashboard"])

@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    entries = await EntryRepository(db).list(current_user.id)

    return DashboardResponse(
        greeting_name=current_user.name or current_user.email.split("@")[0],
        email=current_user.email,
        stats=compute_dashboard(entries)
    )
