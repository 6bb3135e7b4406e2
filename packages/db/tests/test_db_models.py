# This project was developed with assistance from AI tools.
"""Schema and connection-helper tests that need no running PostgreSQL."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

from sqlalchemy import UniqueConstraint
from sqlalchemy.exc import OperationalError

from db import Base, DatabaseService, NotificacaoLida
from db.enums import AcknowledgeResult, UrgencyState


def _factory(session):
    @asynccontextmanager
    async def _session():
        yield session

    return _session


def test_all_tables_registered():
    assert set(Base.metadata.tables) == {
        "orgaos",
        "unidades",
        "licitacoes",
        "certidoes",
        "documentos",
        "contratos",
        "recebimentos",
        "notificacoes_lidas",
    }


def test_acknowledgment_is_unique_per_user_and_bid():
    table = NotificacaoLida.__table__
    uniques = [c for c in table.constraints if isinstance(c, UniqueConstraint)]
    assert len(uniques) == 1
    assert uniques[0].name == "uq_notificacao_usuario_licitacao"
    assert {col.name for col in uniques[0].columns} == {"usuario_id", "licitacao_id"}


def test_acknowledgment_cascades_with_bid():
    [fk] = NotificacaoLida.__table__.c.licitacao_id.foreign_keys
    assert fk.target_fullname == "licitacoes.id"
    assert fk.ondelete == "CASCADE"


def test_urgency_severity_order():
    assert sorted(UrgencyState, key=lambda s: s.severity) == [
        UrgencyState.EXPIRED,
        UrgencyState.CRITICAL,
        UrgencyState.VALID,
        UrgencyState.INDETERMINATE,
    ]


def test_only_recorded_acknowledgments_are_successful():
    assert [r for r in AcknowledgeResult if r.is_success] == [
        AcknowledgeResult.ACKNOWLEDGED,
        AcknowledgeResult.ALREADY_ACKNOWLEDGED,
    ]


async def test_health_check_ok():
    session = AsyncMock()
    assert await DatabaseService(_factory(session)).health_check() is True
    session.execute.assert_awaited_once()


async def test_health_check_reports_failure():
    session = AsyncMock()
    session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
    assert await DatabaseService(_factory(session)).health_check() is False
