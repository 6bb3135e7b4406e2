# This project was developed with assistance from AI tools.
"""Kanban board over licitação status labels."""

import uuid

from db import get_db
from db.enums import SubjectKind
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..middleware.auth import get_current_user
from ..schemas.pipeline import (
    BoardCard,
    BoardColumn,
    KanbanBoard,
    StatusUpdateRequest,
    StatusUpdateResponse,
)
from ..services.classifier import classify
from ..services.pipeline import column_labels, group_into_columns, normalize_label
from ..services.subjects import (
    distinct_bid_statuses,
    list_bids,
    to_subject,
    update_bid_status,
)
from ._common import ReferenceDate

router = APIRouter(dependencies=[Depends(get_current_user)])


def _card(bid, today) -> BoardCard:
    subject = to_subject(SubjectKind.LICITACAO, bid)
    return BoardCard(
        id=subject.id,
        identificacao=subject.label,
        orgao=bid.orgao.razao_social if bid.orgao is not None else None,
        valor_estimado=bid.valor_estimado,
        data_limite_participacao=subject.target_date,
        classification=classify(subject, today),
    )


@router.get("", response_model=KanbanBoard)
async def get_board(
    today: ReferenceDate,
    session: AsyncSession = Depends(get_db),
) -> KanbanBoard:
    """All licitações grouped into ordered columns; empty canonical stages included."""
    bids = await list_bids(session)
    grouped = group_into_columns(bids, settings.PIPELINE_STAGES)
    canonical = {normalize_label(s) for s in settings.PIPELINE_STAGES}

    columns = [
        BoardColumn(
            label=label,
            position=position,
            canonical=normalize_label(label) in canonical,
            count=len(members),
            cards=[_card(bid, today) for bid in members],
        )
        for position, (label, members) in enumerate(grouped.items())
    ]
    return KanbanBoard(reference_date=today, columns=columns)


@router.get("/columns", response_model=list[str])
async def get_columns(session: AsyncSession = Depends(get_db)) -> list[str]:
    """Column order only: the same columns the board renders, without cards."""
    observed = await distinct_bid_statuses(session)
    return column_labels(observed, settings.PIPELINE_STAGES)


@router.patch("/{bid_id}", response_model=StatusUpdateResponse)
async def move_card(
    bid_id: uuid.UUID,
    body: StatusUpdateRequest,
    session: AsyncSession = Depends(get_db),
) -> StatusUpdateResponse:
    """Move a licitação to another column by changing its status label."""
    if not body.status.strip():
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Status must not be blank",
        )
    bid = await update_bid_status(session, str(bid_id), body.status)
    if bid is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Licitação not found",
        )
    return StatusUpdateResponse(id=str(bid.id), status=bid.status)
