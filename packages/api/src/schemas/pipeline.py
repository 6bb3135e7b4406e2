# This project was developed with assistance from AI tools.
"""Kanban board schemas."""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from .deadline import Classification


class BoardCard(BaseModel):
    id: str
    identificacao: str
    orgao: str | None = None
    valor_estimado: Decimal | None = None
    data_limite_participacao: date | None = None
    classification: Classification


class BoardColumn(BaseModel):
    label: str
    position: int
    canonical: bool
    count: int
    cards: list[BoardCard]


class KanbanBoard(BaseModel):
    """Response for GET /api/kanban."""

    reference_date: date
    columns: list[BoardColumn]


class StatusUpdateRequest(BaseModel):
    status: str = Field(min_length=1, max_length=100)


class StatusUpdateResponse(BaseModel):
    id: str
    status: str
