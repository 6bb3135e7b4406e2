# This project was developed with assistance from AI tools.
"""Notification schemas."""

from datetime import date

from db.enums import AcknowledgeResult
from pydantic import BaseModel

from .deadline import Classification


class PendingNotification(BaseModel):
    id: str
    identificacao: str
    data_limite_participacao: date
    classification: Classification


class PendingNotificationsResponse(BaseModel):
    """Response for GET /api/notifications/pending."""

    reference_date: date
    lookahead_days: int
    data: list[PendingNotification]


class AcknowledgeResponse(BaseModel):
    """Response for POST /api/notifications/{id}/ack."""

    licitacao_id: str
    result: AcknowledgeResult
