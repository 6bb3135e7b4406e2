# This project was developed with assistance from AI tools.
"""Route tests with a mocked database session."""

from datetime import date, timedelta
from unittest.mock import AsyncMock, MagicMock

from db import get_db_service
from sqlalchemy.exc import IntegrityError, OperationalError

from src.core.config import settings
from src.main import app

from .factories import (
    TODAY,
    make_mock_contrato,
    make_mock_documento,
    make_mock_licitacao,
    make_mock_result,
    make_mock_session,
)

BID_ID = "7f1c2a64-1d7e-4a8e-9a55-0b0c3f6d1a01"
TODAY_QS = f"today={TODAY.isoformat()}"


# ---------------------------------------------------------------------------
# Health
# ---------------------------------------------------------------------------


def _db_service(healthy):
    service = MagicMock()
    service.health_check = AsyncMock(return_value=healthy)
    return service


def test_health_ok(make_client):
    app.dependency_overrides[get_db_service] = lambda: _db_service(True)
    resp = make_client(make_mock_session()).get("/health/")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "database": True}


def test_health_degraded_when_database_down(make_client):
    app.dependency_overrides[get_db_service] = lambda: _db_service(False)
    resp = make_client(make_mock_session()).get("/health/")
    assert resp.status_code == 503
    assert resp.json()["status"] == "degraded"


# ---------------------------------------------------------------------------
# Deadlines
# ---------------------------------------------------------------------------


def _documents():
    return [
        make_mock_documento(id="valid", vencimento=TODAY + timedelta(days=40)),
        make_mock_documento(id="expired", vencimento=TODAY - timedelta(days=2)),
        make_mock_documento(id="forever", vencimento=TODAY - timedelta(days=2), sem_validade=True),
        make_mock_documento(id="critical", vencimento=TODAY + timedelta(days=15)),
    ]


def test_deadlines_sorted_with_totals(make_client):
    client = make_client(make_mock_session(items=_documents()))
    resp = client.get(f"/api/deadlines/documento?{TODAY_QS}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["reference_date"] == "2026-03-10"
    assert [item["subject"]["id"] for item in body["data"]] == [
        "expired",
        "critical",
        "valid",
        "forever",
    ]
    assert body["totals"] == {"expired": 1, "critical": 1, "valid": 1, "indeterminate": 1}
    assert body["data"][0]["classification"]["days_remaining"] == -2
    assert body["data"][1]["classification"]["display"] == "Vence em 15 dias"
    assert body["pagination"]["total"] == 4


def test_deadlines_state_filter_keeps_full_totals(make_client):
    client = make_client(make_mock_session(items=_documents()))
    resp = client.get(f"/api/deadlines/documento?{TODAY_QS}&state=expired")

    body = resp.json()
    assert [item["subject"]["id"] for item in body["data"]] == ["expired"]
    assert body["totals"]["valid"] == 1
    assert body["pagination"]["total"] == 1


def test_deadlines_malformed_date_is_listed_as_indeterminate(make_client):
    rows = [make_mock_documento(id="bad", vencimento="31/02/2026")]
    resp = make_client(make_mock_session(items=rows)).get(f"/api/deadlines/documento?{TODAY_QS}")

    assert resp.status_code == 200
    [item] = resp.json()["data"]
    assert item["classification"]["state"] == "indeterminate"
    assert item["classification"]["display"] == "Sem data"


def test_deadlines_unknown_kind_is_422(make_client):
    resp = make_client(make_mock_session()).get("/api/deadlines/boleto")
    assert resp.status_code == 422
    assert resp.json()["title"] == "Unprocessable Entity"


# ---------------------------------------------------------------------------
# Kanban
# ---------------------------------------------------------------------------


def test_board_has_every_canonical_column(make_client):
    bids = [
        make_mock_licitacao(id="1", status="ganha", orgao="Prefeitura de Campinas"),
        make_mock_licitacao(
            id="2", status="Suspensa", data_limite_participacao=TODAY + timedelta(days=3)
        ),
    ]
    client = make_client(make_mock_session(items=bids))
    resp = client.get(f"/api/kanban?{TODAY_QS}")

    assert resp.status_code == 200
    columns = resp.json()["columns"]
    labels = [c["label"] for c in columns]
    assert labels[: len(settings.PIPELINE_STAGES)] == settings.PIPELINE_STAGES
    assert labels[-1] == "Suspensa"
    assert [c["position"] for c in columns] == list(range(len(columns)))

    won = columns[labels.index("Ganha")]
    assert won["canonical"] is True
    assert won["count"] == 1
    assert won["cards"][0]["orgao"] == "Prefeitura de Campinas"

    suspended = columns[-1]
    assert suspended["canonical"] is False
    assert suspended["cards"][0]["classification"]["state"] == "critical"


def test_column_order_endpoint(make_client):
    client = make_client(make_mock_session(items=["Suspensa", "em precificação"]))
    resp = client.get("/api/kanban/columns")
    assert resp.status_code == 200
    assert resp.json() == settings.PIPELINE_STAGES + ["Suspensa"]


def test_column_order_matches_board(make_client):
    bids = [
        make_mock_licitacao(id="1", status=None),
        make_mock_licitacao(id="2", status="Suspensa"),
    ]
    board = make_client(make_mock_session(items=bids)).get(f"/api/kanban?{TODAY_QS}")
    columns = make_client(make_mock_session(items=[None, "Suspensa"])).get("/api/kanban/columns")

    board_labels = [c["label"] for c in board.json()["columns"]]
    assert columns.json() == board_labels
    assert board_labels[-2:] == [settings.UNLABELLED_COLUMN, "Suspensa"]


def test_move_card(make_client):
    bid = make_mock_licitacao(id=BID_ID, status="Em precificação")
    session = make_mock_session(single=bid)
    resp = make_client(session).patch(f"/api/kanban/{BID_ID}", json={"status": "Aguardando Sessão"})

    assert resp.status_code == 200
    assert resp.json() == {"id": BID_ID, "status": "Aguardando Sessão"}
    session.commit.assert_awaited_once()


def test_move_card_blank_status_is_422(make_client):
    resp = make_client(make_mock_session()).patch(f"/api/kanban/{BID_ID}", json={"status": "   "})
    assert resp.status_code == 422


def test_move_unknown_card_is_404(make_client):
    resp = make_client(make_mock_session(single=None)).patch(
        f"/api/kanban/{BID_ID}", json={"status": "Ganha"}
    )
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Licitação not found"


# ---------------------------------------------------------------------------
# Notifications
# ---------------------------------------------------------------------------


def test_pending_notifications_excludes_acknowledged(make_client):
    bids = [
        make_mock_licitacao(id="x", identificacao="PE 1", data_limite_participacao=TODAY),
        make_mock_licitacao(
            id="y", identificacao="PE 2", data_limite_participacao=TODAY + timedelta(days=2)
        ),
    ]
    session = make_mock_session(results=[make_mock_result(bids), make_mock_result(["x"])])
    resp = make_client(session).get(f"/api/notifications/pending?{TODAY_QS}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["lookahead_days"] == settings.NOTIFICATION_LOOKAHEAD_DAYS
    assert [n["id"] for n in body["data"]] == ["y"]
    assert body["data"][0]["data_limite_participacao"] == str(date(2026, 3, 12))


def test_acknowledge(make_client):
    session = make_mock_session(single=make_mock_licitacao(id=BID_ID))
    resp = make_client(session).post(f"/api/notifications/{BID_ID}/ack")

    assert resp.status_code == 200
    assert resp.json() == {"licitacao_id": BID_ID, "result": "acknowledged"}


def test_acknowledge_failure_is_retryable_503(make_client):
    session = make_mock_session(single=make_mock_licitacao(id=BID_ID))
    session.commit = AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception("down")))
    resp = make_client(session).post(f"/api/notifications/{BID_ID}/ack")

    assert resp.status_code == 503
    body = resp.json()
    assert body["retryable"] is True
    assert "try again" in body["detail"]


def test_acknowledge_unknown_bid_is_404(make_client):
    resp = make_client(make_mock_session(single=None)).post(f"/api/notifications/{BID_ID}/ack")
    assert resp.status_code == 404


def test_acknowledge_bid_deleted_meanwhile_is_404(make_client):
    session = make_mock_session(single=make_mock_licitacao(id=BID_ID))
    session.commit = AsyncMock(
        side_effect=IntegrityError(
            "INSERT", {}, Exception('violates foreign key constraint "notificacoes_lidas_fkey"')
        )
    )
    resp = make_client(session).post(f"/api/notifications/{BID_ID}/ack")

    assert resp.status_code == 404
    assert resp.json()["retryable"] is False


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------


def test_dashboard(make_client):
    bids = [
        make_mock_licitacao(id="1", status="Ganha", valor_final=2500),
        make_mock_licitacao(id="2", data_limite_participacao=TODAY + timedelta(days=1)),
    ]
    contracts = [make_mock_contrato(id="c1", valor=100), make_mock_contrato(id="c2", valor=50)]
    session = make_mock_session(
        results=[make_mock_result(bids), make_mock_result([]), make_mock_result(contracts)]
    )
    resp = make_client(session).get(f"/api/dashboard?{TODAY_QS}")

    assert resp.status_code == 200
    body = resp.json()
    assert body["total_bids"] == 2
    assert body["won"] == 1
    assert [u["id"] for u in body["upcoming_bids"]] == ["2"]
    assert body["expiring_certidoes"] == []
    assert body["conversion_rate"] == 100.0
    assert body["total_contracts"] == 2
    assert float(body["total_contract_value"]) == 150
