# This project was developed with assistance from AI tools.
"""Dashboard aggregates over licitações and certidões.

``build_dashboard`` is a pure function over already-fetched rows;
``get_dashboard`` only fetches them.
"""

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import date, timedelta
from decimal import Decimal

from db.enums import SubjectKind
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..schemas.dashboard import (
    DashboardSummary,
    ExpiringCertidao,
    MonthlyCount,
    StatusCount,
    UpcomingBid,
)
from ..schemas.deadline import DeadlineSubject
from .classifier import band, threshold_for
from .date_math import days_until, to_calendar_date
from .subjects import list_bids, list_contracts, list_subjects

logger = logging.getLogger(__name__)

STATUS_WON = "Ganha"
STATUS_LOST = "Perdida"
STATUS_DECLINED = "Declinada"
STATUS_MISSING = "Não informado"

# Statuses counted as "under analysis" on the dashboard card
ANALYSIS_STATUSES = frozenset(
    {
        "Edital em Análise",
        "Em precificação",
        "Aguardando Cadastramento da Proposta",
        "Aguardando Sessão",
    }
)

_CENTS = Decimal("0.01")

_MONTHS = ["Jan", "Fev", "Mar", "Abr", "Mai", "Jun", "Jul", "Ago", "Set", "Out", "Nov", "Dez"]


def _monthly(bids: Sequence) -> list[MonthlyCount]:
    created = [0] * 12
    won = [0] * 12
    for bid in bids:
        when = to_calendar_date(bid.data_limite_participacao) or to_calendar_date(bid.created_at)
        if when is None:
            continue
        created[when.month - 1] += 1
        if bid.status == STATUS_WON:
            won[when.month - 1] += 1
    return [
        MonthlyCount(month=name, created=created[i], won=won[i]) for i, name in enumerate(_MONTHS)
    ]


def _upcoming_bids(bids: Sequence, today: date) -> list[UpcomingBid]:
    end = today + timedelta(days=settings.DASHBOARD_BID_WINDOW_DAYS)
    config = threshold_for(SubjectKind.LICITACAO)
    upcoming = []
    for bid in bids:
        deadline = to_calendar_date(bid.data_limite_participacao)
        if deadline is None or not today <= deadline <= end:
            continue
        d = days_until(deadline, today)
        upcoming.append(
            UpcomingBid(
                id=str(bid.id),
                identificacao=bid.identificacao or "",
                data_limite_participacao=deadline,
                days_remaining=d,
                band=band(d, config),
            )
        )
    upcoming.sort(key=lambda u: (u.data_limite_participacao, u.id))
    return upcoming[: settings.DASHBOARD_UPCOMING_LIMIT]


def _expiring_certidoes(certidoes: Sequence[DeadlineSubject], today: date) -> list[ExpiringCertidao]:
    end = today + timedelta(days=settings.DASHBOARD_CERTIDAO_WINDOW_DAYS)
    expiring = [
        ExpiringCertidao(
            id=c.id,
            nome=c.label,
            vencimento=c.target_date,
            days_remaining=days_until(c.target_date, today),
        )
        for c in certidoes
        if c.target_date is not None and today <= c.target_date <= end
    ]
    expiring.sort(key=lambda e: (e.vencimento, e.id))
    return expiring


def _money(value) -> Decimal:
    return Decimal(str(value or 0))


def _conversion_rate(won: int, lost: int) -> float:
    finished = won + lost
    if finished == 0:
        return 0.0
    return round(won / finished * 100, 1)


def build_dashboard(
    bids: Sequence,
    certidoes: Sequence[DeadlineSubject],
    today: date,
    contracts: Sequence = (),
) -> DashboardSummary:
    """Aggregate dashboard cards, charts and upcoming-deadline lists."""
    statuses = Counter(bid.status or STATUS_MISSING for bid in bids)
    won = statuses.get(STATUS_WON, 0)
    lost = statuses.get(STATUS_LOST, 0)
    total_won = sum(
        (_money(bid.valor_final) for bid in bids if bid.status == STATUS_WON),
        Decimal("0"),
    )
    average_won = (total_won / won).quantize(_CENTS) if won else Decimal("0")

    return DashboardSummary(
        reference_date=today,
        total_bids=len(bids),
        won=won,
        lost=lost,
        declined=statuses.get(STATUS_DECLINED, 0),
        in_analysis=sum(statuses.get(s, 0) for s in ANALYSIS_STATUSES),
        total_won_value=total_won,
        average_won_value=average_won,
        conversion_rate=_conversion_rate(won, lost),
        total_contracts=len(contracts),
        total_contract_value=sum((_money(c.valor) for c in contracts), Decimal("0")),
        status_distribution=[
            StatusCount(status=s, count=n)
            for s, n in sorted(statuses.items(), key=lambda kv: (-kv[1], kv[0]))
        ],
        monthly=_monthly(bids),
        upcoming_bids=_upcoming_bids(bids, today),
        expiring_certidoes=_expiring_certidoes(certidoes, today),
    )


async def get_dashboard(session: AsyncSession, today: date) -> DashboardSummary:
    bids = await list_bids(session)
    certidoes = await list_subjects(session, SubjectKind.CERTIDAO)
    contracts = await list_contracts(session)
    logger.debug(
        "Dashboard: %d licitacoes, %d certidoes, %d contratos",
        len(bids),
        len(certidoes),
        len(contracts),
    )
    return build_dashboard(bids, certidoes, today, contracts)
