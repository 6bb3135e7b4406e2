# This project was developed with assistance from AI tools.
"""Dependencies shared by the deadline-aware routers."""

from datetime import date
from typing import Annotated

from fastapi import Depends, Query

from ..core.config import settings
from ..services.date_math import today_in


async def resolve_today(
    today: date | None = Query(
        default=None,
        description="Reference date (YYYY-MM-DD). Defaults to the current date in TIMEZONE.",
    ),
) -> date:
    return today or today_in(settings.TIMEZONE)


ReferenceDate = Annotated[date, Depends(resolve_today)]
