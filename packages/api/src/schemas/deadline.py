# This project was developed with assistance from AI tools.
"""Deadline classification schemas."""

from datetime import date

from db.enums import SubjectKind, UrgencyBand, UrgencyState
from pydantic import BaseModel, ConfigDict, Field, model_validator

from . import Pagination


class ThresholdConfig(BaseModel):
    """Per-kind day thresholds.

    ``critical_days`` decides the critical state (inclusive bound).
    ``urgent_days`` / ``warning_days`` only drive the red/amber display band.
    """

    model_config = ConfigDict(frozen=True)

    critical_days: int = Field(ge=0)
    urgent_days: int = Field(ge=0)
    warning_days: int = Field(ge=0)

    @model_validator(mode="after")
    def _warning_covers_urgent(self) -> "ThresholdConfig":
        if self.warning_days < self.urgent_days:
            raise ValueError("warning_days must be >= urgent_days")
        return self


class DeadlineSubject(BaseModel):
    """Any record whose lifecycle is tied to a date."""

    model_config = ConfigDict(frozen=True)

    id: str
    kind: SubjectKind
    target_date: date | None = None
    no_expiration: bool = False
    label: str = ""
    status: str | None = None


class Classification(BaseModel):
    """Result of classifying one subject against a reference date."""

    model_config = ConfigDict(frozen=True)

    state: UrgencyState
    days_remaining: int | None = None
    band: UrgencyBand = UrgencyBand.NONE
    reason: str
    display: str

    @property
    def severity(self) -> int:
        return self.state.severity


class ClassifiedSubject(BaseModel):
    subject: DeadlineSubject
    classification: Classification


class StateTotals(BaseModel):
    """Counts per urgency state, used for the KPI cards above each table."""

    expired: int = 0
    critical: int = 0
    valid: int = 0
    indeterminate: int = 0


class DeadlineListResponse(BaseModel):
    """Response for GET /api/deadlines/{kind}."""

    kind: SubjectKind
    reference_date: date
    totals: StateTotals
    data: list[ClassifiedSubject]
    pagination: Pagination
