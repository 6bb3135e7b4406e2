# This project was developed with assistance from AI tools.
"""Deadline status classifier.

Maps a dated subject to an urgency state against an explicit reference
date. Thresholds come from a ThresholdConfig so the same banding logic
serves documents, certidões, bid deadlines, contracts and receivables.
"""

import logging
from collections.abc import Iterable
from datetime import date

from db.enums import SubjectKind, UrgencyBand, UrgencyState

from ..core.config import settings
from ..schemas.deadline import (
    Classification,
    ClassifiedSubject,
    DeadlineSubject,
    StateTotals,
    ThresholdConfig,
)
from .date_math import days_until, format_br

logger = logging.getLogger(__name__)

# Free-text contract statuses that close a contract regardless of its dates
_CLOSED_CONTRACT_MARKERS = ("vencido", "encerrado")

# Kinds whose date records something that already happened, not a due date
_NO_DEADLINE_KINDS = frozenset({SubjectKind.RECEBIMENTO})


def threshold_for(kind: SubjectKind) -> ThresholdConfig:
    """Configured thresholds for a subject kind."""
    if kind == SubjectKind.LICITACAO:
        return ThresholdConfig(
            critical_days=settings.BID_URGENT_DAYS,
            urgent_days=settings.BID_URGENT_DAYS,
            warning_days=settings.BID_WARNING_DAYS,
        )
    if kind == SubjectKind.CONTRATO:
        return ThresholdConfig(
            critical_days=settings.CONTRACT_URGENT_DAYS,
            urgent_days=settings.CONTRACT_URGENT_DAYS,
            warning_days=settings.CONTRACT_WARNING_DAYS,
        )
    # documentos and certidões share the same window
    return ThresholdConfig(
        critical_days=settings.DOCUMENT_CRITICAL_DAYS,
        urgent_days=0,
        warning_days=settings.DOCUMENT_CRITICAL_DAYS,
    )


def band(days_remaining: int | None, config: ThresholdConfig) -> UrgencyBand:
    """Kind-specific red/amber banding from the raw day count."""
    if days_remaining is None:
        return UrgencyBand.NONE
    if days_remaining < 0 or days_remaining <= config.urgent_days:
        return UrgencyBand.RED
    if days_remaining <= config.warning_days:
        return UrgencyBand.AMBER
    return UrgencyBand.NONE


def _plural_days(n: int) -> str:
    return f"{n} dia" if n == 1 else f"{n} dias"


def _display(state: UrgencyState, days_remaining: int) -> str:
    if state == UrgencyState.EXPIRED:
        return f"Vencido há {_plural_days(abs(days_remaining))}"
    if days_remaining == 0:
        return "Vence hoje"
    if state == UrgencyState.CRITICAL:
        return f"Vence em {_plural_days(days_remaining)}"
    return f"{_plural_days(days_remaining)} restantes"


def classify(
    subject: DeadlineSubject,
    today: date,
    config: ThresholdConfig | None = None,
) -> Classification:
    """Classify one subject.

    ``no_expiration`` wins over any date. Receivables carry a payment date,
    not a deadline, and are always indeterminate. A missing date is
    indeterminate. A target equal to ``today`` is always critical, and the
    critical bound is inclusive.
    """
    if subject.no_expiration:
        return Classification(
            state=UrgencyState.INDETERMINATE,
            reason="no_expiration",
            display="Sem validade",
        )
    if subject.kind in _NO_DEADLINE_KINDS:
        received = format_br(subject.target_date)
        return Classification(
            state=UrgencyState.INDETERMINATE,
            reason="no_deadline",
            display=f"Recebido em {received}" if received else "Sem data",
        )
    if subject.target_date is None:
        return Classification(
            state=UrgencyState.INDETERMINATE,
            reason="not_set",
            display="Sem data",
        )

    config = config or threshold_for(subject.kind)
    d = days_until(subject.target_date, today)

    if d < 0:
        state, reason = UrgencyState.EXPIRED, "overdue"
    elif d == 0:
        state, reason = UrgencyState.CRITICAL, "due_today"
    elif d <= config.critical_days:
        state, reason = UrgencyState.CRITICAL, "within_threshold"
    else:
        state, reason = UrgencyState.VALID, "beyond_threshold"

    return Classification(
        state=state,
        days_remaining=d,
        band=band(d, config),
        reason=reason,
        display=_display(state, d),
    )


def classify_contract(
    subject: DeadlineSubject,
    today: date,
    config: ThresholdConfig | None = None,
) -> Classification:
    """Classify a contract, honouring a free-text closed status.

    A contract written down as "vencido" or "encerrado" is expired even when
    its vigência end date is still ahead.
    """
    result = classify(subject, today, config)
    status = (subject.status or "").lower()
    if result.state != UrgencyState.EXPIRED and any(m in status for m in _CLOSED_CONTRACT_MARKERS):
        return Classification(
            state=UrgencyState.EXPIRED,
            days_remaining=result.days_remaining,
            band=UrgencyBand.RED,
            reason="status_closed",
            display="Vencido / Encerrado",
        )
    return result


def classify_many(
    subjects: Iterable[DeadlineSubject],
    today: date,
    config: ThresholdConfig | None = None,
) -> list[ClassifiedSubject]:
    """Classify a batch, most severe first, then soonest, then by id."""
    classified = []
    for subject in subjects:
        if subject.kind == SubjectKind.CONTRATO:
            result = classify_contract(subject, today, config)
        else:
            result = classify(subject, today, config)
        classified.append(ClassifiedSubject(subject=subject, classification=result))

    def _sort_key(item: ClassifiedSubject) -> tuple:
        c = item.classification
        days = c.days_remaining if c.days_remaining is not None else float("inf")
        return (c.severity, days, item.subject.id)

    classified.sort(key=_sort_key)
    return classified


def summarize(classifications: Iterable[Classification]) -> StateTotals:
    """Per-state totals; every state is present, zero when unused."""
    counts = {state.value: 0 for state in UrgencyState}
    for c in classifications:
        counts[c.state.value] += 1
    return StateTotals(**counts)
