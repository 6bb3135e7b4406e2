# This project was developed with assistance from AI tools.
"""Imminent bid-deadline notifications and their acknowledgment."""

import uuid

from db import get_db
from db.enums import AcknowledgeResult
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..middleware.auth import CurrentUser
from ..schemas.notification import (
    AcknowledgeResponse,
    PendingNotification,
    PendingNotificationsResponse,
)
from ..services.classifier import classify
from ..services.notifications import AcknowledgmentStore, get_pending_notifications
from ..services.subjects import get_bid
from ._common import ReferenceDate

router = APIRouter()


@router.get("/pending", response_model=PendingNotificationsResponse)
async def pending_notifications(
    user: CurrentUser,
    today: ReferenceDate,
    session: AsyncSession = Depends(get_db),
) -> PendingNotificationsResponse:
    """Bid deadlines due within the lookahead window that this user has not dismissed."""
    pending = await get_pending_notifications(session, user.user_id, today)
    return PendingNotificationsResponse(
        reference_date=today,
        lookahead_days=settings.NOTIFICATION_LOOKAHEAD_DAYS,
        data=[
            PendingNotification(
                id=subject.id,
                identificacao=subject.label,
                data_limite_participacao=subject.target_date,
                classification=classify(subject, today),
            )
            for subject in pending
        ],
    )


@router.post("/{bid_id}/ack", response_model=AcknowledgeResponse)
async def acknowledge_notification(
    bid_id: uuid.UUID,
    user: CurrentUser,
    session: AsyncSession = Depends(get_db),
) -> AcknowledgeResponse:
    """Dismiss a notification for the current user. Repeating the call is harmless."""
    if await get_bid(session, str(bid_id)) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Licitação not found",
        )

    result = await AcknowledgmentStore(session).acknowledge(user.user_id, str(bid_id))
    if result == AcknowledgeResult.NOT_FOUND:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Licitação not found",
        )
    if result == AcknowledgeResult.FAILED:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Could not record the acknowledgment. Please try again.",
        )
    return AcknowledgeResponse(licitacao_id=str(bid_id), result=result)
