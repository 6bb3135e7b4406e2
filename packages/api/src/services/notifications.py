# This project was developed with assistance from AI tools.
"""Bid-deadline notification suppression.

A user acknowledges ("Estou ciente") an imminent bid deadline once; from
then on that deadline is filtered out of the user's pending notifications.
Acknowledgments are insert-only rows in ``notificacoes_lidas`` and there is
no way back to the unacknowledged state.
"""

import logging
from collections.abc import Collection, Iterable, Sequence
from datetime import date, timedelta

from db import NotificacaoLida
from db.enums import AcknowledgeResult, SubjectKind
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.config import settings
from ..schemas.deadline import DeadlineSubject
from .subjects import list_subjects

logger = logging.getLogger(__name__)

_UNIQUE_CONSTRAINT = "uq_notificacao_usuario_licitacao"
_FOREIGN_KEY_VIOLATION = "foreign key constraint"


def within_lookahead(
    subjects: Iterable[DeadlineSubject],
    today: date,
    lookahead_days: int | None = None,
) -> list[DeadlineSubject]:
    """Subjects due from ``today`` through ``today + lookahead_days``, soonest first."""
    if lookahead_days is None:
        lookahead_days = settings.NOTIFICATION_LOOKAHEAD_DAYS
    end = today + timedelta(days=lookahead_days)
    selected = [
        s
        for s in subjects
        if not s.no_expiration and s.target_date is not None and today <= s.target_date <= end
    ]
    return sorted(selected, key=lambda s: s.target_date)


def pending_for(
    user_id: str,
    candidates: Sequence[DeadlineSubject],
    acknowledged: Collection[str],
) -> list[DeadlineSubject]:
    """Candidates the user has not acknowledged yet, in input order."""
    acknowledged = set(acknowledged)
    pending = [c for c in candidates if c.id not in acknowledged]
    logger.debug(
        "user=%s candidates=%d pending=%d", user_id, len(candidates), len(pending)
    )
    return pending


class AcknowledgmentStore:
    """Reads and writes acknowledgment records through an async session."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def acknowledged_ids(self, user_id: str) -> set[str]:
        stmt = select(NotificacaoLida.licitacao_id).where(NotificacaoLida.usuario_id == user_id)
        result = await self._session.execute(stmt)
        return {str(subject_id) for subject_id in result.scalars().all()}

    async def acknowledge(self, user_id: str, subject_id: str) -> AcknowledgeResult:
        """Record that ``user_id`` dismissed the notification for ``subject_id``.

        A duplicate (including two racing requests) counts as success. A
        licitação deleted before the insert is NOT_FOUND. Any other database
        error is rolled back and reported as FAILED so the caller can retry;
        the notification simply shows up again.
        """
        self._session.add(NotificacaoLida(usuario_id=user_id, licitacao_id=subject_id))
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            if _UNIQUE_CONSTRAINT in str(exc.orig):
                logger.info(
                    "Notification already acknowledged: user=%s licitacao=%s",
                    user_id,
                    subject_id,
                )
                return AcknowledgeResult.ALREADY_ACKNOWLEDGED
            if _FOREIGN_KEY_VIOLATION in str(exc.orig).lower():
                logger.warning(
                    "Acknowledged licitacao no longer exists: user=%s licitacao=%s",
                    user_id,
                    subject_id,
                )
                return AcknowledgeResult.NOT_FOUND
            logger.error(
                "Acknowledgment rejected by constraint: user=%s licitacao=%s: %s",
                user_id,
                subject_id,
                exc.orig,
            )
            return AcknowledgeResult.FAILED
        except SQLAlchemyError:
            await self._session.rollback()
            logger.exception(
                "Failed to record acknowledgment: user=%s licitacao=%s", user_id, subject_id
            )
            return AcknowledgeResult.FAILED

        logger.info("Notification acknowledged: user=%s licitacao=%s", user_id, subject_id)
        return AcknowledgeResult.ACKNOWLEDGED


async def get_pending_notifications(
    session: AsyncSession,
    user_id: str,
    today: date,
) -> list[DeadlineSubject]:
    """Unacknowledged bid deadlines inside the notification lookahead window."""
    end = today + timedelta(days=settings.NOTIFICATION_LOOKAHEAD_DAYS)
    bids = await list_subjects(session, SubjectKind.LICITACAO, start=today, end=end)
    candidates = within_lookahead(bids, today)
    acknowledged = await AcknowledgmentStore(session).acknowledged_ids(user_id)
    return pending_for(user_id, candidates, acknowledged)
