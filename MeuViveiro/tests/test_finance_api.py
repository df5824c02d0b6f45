from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from services import finance_service
from utils.datetime_utils import today_local


ENTRIES = [
    {"data": "2024-01-05", "valor": 1000.0, "categoria": "venda", "tipo": "entrada"},
    {"data": "2024-01-10", "valor": 200.0, "categoria": "ração", "tipo": "saida"},
    {"data": "2024-02-03", "valor": 500.0, "categoria": "venda", "tipo": "entrada"},
    {"data": "2024-02-03", "valor": 80.0, "categoria": "energia", "tipo": "saida"},
    {"data": "2024-02-20", "valor": 120.0, "categoria": "ração", "tipo": "saida"},
]


@pytest.fixture()
def seeded(client: TestClient) -> None:
    for entry in ENTRIES:
        resp = client.post("/finance", json=entry)
        assert resp.status_code == 201, resp.text


def test_create_entry_rejects_unknown_direction(client: TestClient) -> None:
    resp = client.post("/finance", json={**ENTRIES[0], "tipo": "transferencia"})
    assert resp.status_code == 422


def test_list_entries_filters(client: TestClient, seeded: None) -> None:
    rows = client.get("/finance", params={"start_date": "2024-02-01", "categoria": "ração"}).json()
    assert [(r["data"], r["valor"]) for r in rows] == [("2024-02-20", 120.0)]


def test_by_month(client: TestClient, seeded: None) -> None:
    rows = client.get("/finance/by-month", params={"tipo": "saida"}).json()
    assert rows == [{"mes": "2024-01", "total": 200.0}, {"mes": "2024-02", "total": 200.0}]


def test_by_category(client: TestClient, seeded: None) -> None:
    rows = client.get("/finance/by-category", params={"tipo": "saida"}).json()
    assert {r["categoria"]: r["total"] for r in rows} == {"ração": 320.0, "energia": 80.0}


def test_daily_series(client: TestClient, seeded: None) -> None:
    body = client.get("/finance/daily", params={"start_date": "2024-02-01", "end_date": "2024-02-29"}).json()

    assert len(body["dias"]) == 29
    assert body["dias"][2] == {"dia": "2024-02-03", "entradas": 500.0, "saidas": 80.0}
    assert body["dias"][0] == {"dia": "2024-02-01", "entradas": 0.0, "saidas": 0.0}


def test_daily_series_inverted_range(client: TestClient) -> None:
    resp = client.get("/finance/daily", params={"start_date": "2024-02-10", "end_date": "2024-02-01"})
    assert resp.status_code == 422
    assert resp.json()["error"] == "invalid_input"


def test_summary_endpoint_uses_current_period(client: TestClient) -> None:
    today = today_local().isoformat()
    client.post("/finance", json={"data": today, "valor": 300.0, "categoria": "venda", "tipo": "entrada"})
    client.post("/finance", json={"data": today, "valor": 120.0, "categoria": "ração", "tipo": "saida"})

    body = client.get("/finance/summary", params={"periodo": "dia"}).json()

    assert body["periodo"] == "dia"
    assert body["faturamento"] == pytest.approx(300.0)
    assert body["despesas"] == pytest.approx(120.0)
    assert body["saldo"] == pytest.approx(180.0)


def test_summary_service_with_fixed_date(client: TestClient, seeded: None, db_session: Session) -> None:
    summary = finance_service.summary(db_session, "mes", today=date(2024, 1, 31))
    assert summary["faturamento"] == Decimal("1000.00")
    assert summary["despesas"] == Decimal("200.00")
    assert summary["saldo"] == Decimal("800.00")
