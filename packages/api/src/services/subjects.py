# This project was developed with assistance from AI tools.
"""Database reads and writes feeding the deadline engine.

Turns ORM rows of every dated entity into DeadlineSubject values. Dates go
through ``to_calendar_date`` so a malformed value degrades to "no date"
instead of raising.
"""

import logging
from datetime import date

from db import Certidao, Contrato, Documento, Licitacao, Recebimento
from db.enums import SubjectKind
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ..schemas.deadline import DeadlineSubject
from .date_math import expiry_from_validity, to_calendar_date

logger = logging.getLogger(__name__)

# kind -> (model, date column used for ordering and range filters)
_KIND_SOURCES = {
    SubjectKind.DOCUMENTO: (Documento, Documento.vencimento),
    SubjectKind.CERTIDAO: (Certidao, Certidao.vencimento),
    SubjectKind.CONTRATO: (Contrato, Contrato.vigencia_fim),
    SubjectKind.LICITACAO: (Licitacao, Licitacao.data_limite_participacao),
    SubjectKind.RECEBIMENTO: (Recebimento, Recebimento.data_pagamento),
}


def to_subject(kind: SubjectKind, row) -> DeadlineSubject:
    """Build a DeadlineSubject from an ORM row of the given kind."""
    if kind == SubjectKind.DOCUMENTO:
        return DeadlineSubject(
            id=str(row.id),
            kind=kind,
            target_date=to_calendar_date(row.vencimento),
            no_expiration=bool(row.sem_validade),
            label=row.nome or "",
            status=row.tipo,
        )
    if kind == SubjectKind.CERTIDAO:
        target = to_calendar_date(row.vencimento) or expiry_from_validity(
            row.data_emissao, row.validade_dias
        )
        return DeadlineSubject(
            id=str(row.id), kind=kind, target_date=target, label=row.nome_certidao or ""
        )
    if kind == SubjectKind.CONTRATO:
        return DeadlineSubject(
            id=str(row.id),
            kind=kind,
            target_date=to_calendar_date(row.vigencia_fim),
            label=row.numero_contrato or "",
            status=row.status,
        )
    if kind == SubjectKind.LICITACAO:
        return DeadlineSubject(
            id=str(row.id),
            kind=kind,
            target_date=to_calendar_date(row.data_limite_participacao),
            label=row.identificacao or "",
            status=row.status,
        )
    return DeadlineSubject(
        id=str(row.id),
        kind=kind,
        target_date=to_calendar_date(row.data_pagamento),
        label=row.nota_fiscal or "",
    )


async def list_subjects(
    session: AsyncSession,
    kind: SubjectKind,
    start: date | None = None,
    end: date | None = None,
) -> list[DeadlineSubject]:
    """All subjects of a kind, optionally limited to a target-date range (inclusive).

    Certidões without a stored ``vencimento`` get one derived from their
    emission date, so their range filter runs after mapping.
    """
    model, date_column = _KIND_SOURCES[kind]
    stmt = select(model).order_by(date_column.asc().nulls_last())
    if kind != SubjectKind.CERTIDAO:
        if start is not None:
            stmt = stmt.where(date_column >= start)
        if end is not None:
            stmt = stmt.where(date_column <= end)

    result = await session.execute(stmt)
    subjects = [to_subject(kind, row) for row in result.scalars().all()]

    if kind == SubjectKind.CERTIDAO and (start is not None or end is not None):
        subjects = [s for s in subjects if _in_range(s.target_date, start, end)]
    return subjects


def _in_range(value: date | None, start: date | None, end: date | None) -> bool:
    if value is None:
        return False
    if start is not None and value < start:
        return False
    return end is None or value <= end


async def distinct_bid_statuses(session: AsyncSession) -> set[str | None]:
    """Distinct raw status labels on licitações, blank and missing ones included."""
    stmt = select(Licitacao.status).distinct()
    result = await session.execute(stmt)
    return set(result.scalars().all())


async def list_bids(session: AsyncSession) -> list[Licitacao]:
    """Licitações with their órgão loaded, latest deadline first."""
    stmt = (
        select(Licitacao)
        .options(selectinload(Licitacao.orgao))
        .order_by(Licitacao.data_limite_participacao.desc().nulls_last())
    )
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def list_contracts(session: AsyncSession) -> list[Contrato]:
    """Every contract row, for dashboard totals."""
    result = await session.execute(select(Contrato))
    return list(result.scalars().all())


async def get_bid(session: AsyncSession, bid_id: str) -> Licitacao | None:
    stmt = select(Licitacao).where(Licitacao.id == bid_id)
    result = await session.execute(stmt)
    return result.scalar_one_or_none()


async def update_bid_status(
    session: AsyncSession,
    bid_id: str,
    status: str,
) -> Licitacao | None:
    """Move a licitação to another kanban column. None when it does not exist."""
    bid = await get_bid(session, bid_id)
    if bid is None:
        return None

    previous = bid.status
    bid.status = status.strip()
    await session.commit()
    logger.info("Licitacao %s status changed: '%s' -> '%s'", bid_id, previous, bid.status)
    return bid
