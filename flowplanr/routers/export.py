import logging
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession
from flowplanr.database import get_db
from flowplanr.core.auth import get_current_user
from flowplanr.repositories.entries import EntryRepository
from flowplanr.schemas.export import ExportStatsResponse, PromptsResponse, ReportKind, ReportResponse
from flowplanr.services.export import build_export, export_filename, generate_prompts

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/export", tags=["export"])


async def _export_for(db: AsyncSession, user_id: str):
    entries = await EntryRepository(db).list(user_id)
    return build_export(entries)


@router.get("/stats", response_model=ExportStatsResponse)
async def get_export_stats(
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    stats, analysis, _ = await _export_for(db, current_user.id)
    return ExportStatsResponse(stats=stats, analysis=analysis)


@router.get("/prompts", response_model=PromptsResponse)
async def get_prompts(
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    stats, analysis, _ = await _export_for(db, current_user.id)
    return PromptsResponse(prompts=generate_prompts(stats, analysis))


@router.get("/{kind}", response_model=ReportResponse)
async def get_report(
    kind: ReportKind,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    _, _, reports = await _export_for(db, current_user.id)
    logger.info("Generated %s export for user %s", kind.value, current_user.id)
    return ReportResponse(kind=kind, content=reports[kind], filename=export_filename(kind))


@router.get("/{kind}/download", response_class=PlainTextResponse)
async def download_report(
    kind: ReportKind,
    db: AsyncSession = Depends(get_db),
    current_user = Depends(get_current_user)
):
    _, _, reports = await _export_for(db, current_user.id)
    filename = export_filename(kind)
    logger.info("Downloaded %s export for user %s", kind.value, current_user.id)
    return PlainTextResponse(
        reports[kind],
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
