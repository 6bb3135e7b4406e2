# This project was developed with assistance from AI tools.
"""Deadline status listings for documents, certidões, contracts, bids and receivables."""

from db import get_db
from db.enums import SubjectKind, UrgencyState
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..middleware.auth import get_current_user
from ..schemas import Pagination
from ..schemas.deadline import DeadlineListResponse
from ..services.classifier import classify_many, summarize
from ..services.subjects import list_subjects
from ._common import ReferenceDate

router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("/{kind}", response_model=DeadlineListResponse)
async def list_deadlines(
    kind: SubjectKind,
    today: ReferenceDate,
    state: UrgencyState | None = Query(default=None, description="Only return this state"),
    session: AsyncSession = Depends(get_db),
) -> DeadlineListResponse:
    """Classified subjects of one kind, most urgent first.

    Totals always cover the whole kind, independent of the ``state`` filter.
    """
    subjects = await list_subjects(session, kind)
    classified = classify_many(subjects, today)
    totals = summarize(item.classification for item in classified)
    if state is not None:
        classified = [item for item in classified if item.classification.state == state]

    return DeadlineListResponse(
        kind=kind,
        reference_date=today,
        totals=totals,
        data=classified,
        pagination=Pagination.single_page(len(classified)),
    )
