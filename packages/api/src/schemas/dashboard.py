# This project was developed with assistance from AI tools.
"""Dashboard response schemas."""

from datetime import date
from decimal import Decimal

from db.enums import UrgencyBand
from pydantic import BaseModel, Field


class StatusCount(BaseModel):
    status: str
    count: int


class MonthlyCount(BaseModel):
    month: str
    created: int
    won: int


class UpcomingBid(BaseModel):
    id: str
    identificacao: str
    data_limite_participacao: date
    days_remaining: int
    band: UrgencyBand


class ExpiringCertidao(BaseModel):
    id: str
    nome: str
    vencimento: date
    days_remaining: int


class DashboardSummary(BaseModel):
    """Response for GET /api/dashboard."""

    reference_date: date
    total_bids: int
    won: int
    lost: int
    declined: int
    in_analysis: int
    total_won_value: Decimal
    average_won_value: Decimal
    conversion_rate: float = Field(
        description="Won / (won + lost) as a percentage, 0 when no bid is finished.",
    )
    total_contracts: int
    total_contract_value: Decimal
    status_distribution: list[StatusCount]
    monthly: list[MonthlyCount]
    upcoming_bids: list[UpcomingBid]
    expiring_certidoes: list[ExpiringCertidao]
