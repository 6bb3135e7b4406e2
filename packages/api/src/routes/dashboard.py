# This project was developed with assistance from AI tools.
"""Dashboard endpoint."""

from db import get_db
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..middleware.auth import get_current_user
from ..schemas.dashboard import DashboardSummary
from ..services.dashboard import get_dashboard
from ._common import ReferenceDate

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=DashboardSummary)
async def dashboard(
    today: ReferenceDate,
    session: AsyncSession = Depends(get_db),
) -> DashboardSummary:
    """Bid counters, status chart data and upcoming deadlines."""
    return await get_dashboard(session, today)
