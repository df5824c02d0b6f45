from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from enums.enums import TipoFinanceiroEnum
from services.reporting_service import (
    cycle_comparison_rows,
    cycle_comparison_summary,
    daily_series,
    finance_summary,
    group_by_category,
    group_by_month,
    normalize_direction,
    period_window,
)


@pytest.fixture()
def records() -> list[dict]:
    return [
        {"data": date(2024, 1, 5), "valor": 1000.0, "categoria": "venda", "tipo": "entrada"},
        {"data": date(2024, 1, 10), "valor": 200.0, "categoria": "ração", "tipo": "saida"},
        {"data": date(2024, 2, 3), "valor": 500.0, "categoria": "venda", "tipo": "entrada"},
        {"data": date(2024, 2, 3), "valor": 80.0, "categoria": "energia", "tipo": "saida"},
        {"data": date(2024, 2, 20), "valor": 120.0, "categoria": "ração", "tipo": "saida"},
    ]


def test_normalize_direction_accepts_aliases() -> None:
    assert normalize_direction("inflow") == TipoFinanceiroEnum.entrada
    assert normalize_direction("SAIDA") == TipoFinanceiroEnum.saida
    with pytest.raises(ValueError):
        normalize_direction("transferencia")


def test_group_by_month(records: list[dict]) -> None:
    assert group_by_month(records, "saida") == [("2024-01", 200.0), ("2024-02", 200.0)]
    assert group_by_month(records, "entrada") == [("2024-01", 1000.0), ("2024-02", 500.0)]
    assert group_by_month([], "entrada") == []


def test_group_by_category(records: list[dict]) -> None:
    assert group_by_category(records, "outflow") == {"ração": 320.0, "energia": 80.0}


def test_every_view_conserves_the_direction_total(records: list[dict]) -> None:
    for tipo in ("entrada", "saida"):
        expected = sum(Decimal(str(r["valor"])) for r in records if r["tipo"] == tipo)
        by_month = sum(total for _, total in group_by_month(records, tipo))
        by_category = sum(group_by_category(records, tipo).values())
        column = 1 if tipo == "entrada" else 2
        by_day = sum(row[column] for row in daily_series(records, date(2024, 1, 1), date(2024, 2, 29)))
        assert by_month == expected
        assert by_category == expected
        assert by_day == expected


def test_daily_series_fills_every_day(records: list[dict]) -> None:
    rows = daily_series(records, date(2024, 2, 1), date(2024, 2, 29))

    assert len(rows) == 29
    assert rows[0] == (date(2024, 2, 1), 0.0, 0.0)
    assert rows[2] == (date(2024, 2, 3), 500.0, 80.0)
    assert rows[19] == (date(2024, 2, 20), 0.0, 120.0)
    assert sum(r[1] for r in rows) == Decimal("500.0")


def test_daily_series_single_day() -> None:
    assert daily_series([], date(2024, 2, 1), date(2024, 2, 1)) == [(date(2024, 2, 1), 0.0, 0.0)]


def test_daily_series_rejects_inverted_range() -> None:
    with pytest.raises(ValueError):
        daily_series([], date(2024, 2, 10), date(2024, 2, 1))


def test_period_window() -> None:
    today = date(2024, 12, 15)
    assert period_window("dia", today) == (date(2024, 12, 15), date(2024, 12, 16))
    assert period_window("mes", today) == (date(2024, 12, 1), date(2025, 1, 1))
    assert period_window("ano", today) == (date(2024, 1, 1), date(2025, 1, 1))


def test_finance_summary_for_current_month(records: list[dict]) -> None:
    summary = finance_summary(records, "mes", today=date(2024, 2, 25))

    assert summary["faturamento"] == Decimal("500.0")
    assert summary["despesas"] == Decimal("200.0")
    assert summary["saldo"] == Decimal("300.0")
    assert summary["inicio"] == date(2024, 2, 1)


def test_cycle_comparison() -> None:
    cycles = [
        {
            "nome_ciclo": "C1",
            "status": "finalizado",
            "data_povoamento": date(2024, 1, 1),
            "data_despesca": date(2024, 4, 10),
            "fca_final": 1.5,
            "sobrevivencia_final": 80.0,
            "peso_final_despesca": 500.0,
            "receita_total": 9250.0,
        },
        {
            "nome_ciclo": "C2",
            "status": "ativo",
            "data_povoamento": date(2024, 5, 1),
            "data_despesca": None,
        },
    ]

    rows = cycle_comparison_rows(cycles, today=date(2024, 5, 31))

    assert rows[0]["dias_cultivo"] == 100
    assert rows[0]["periodo"] == "2024-01-01 - 2024-04-10"
    assert rows[0]["finalizado"] is True
    assert rows[1]["periodo"] == "2024-05-01 - em andamento"
    assert rows[1]["dias_cultivo"] == 30
    assert rows[1]["fca_final"] is None

    summary = cycle_comparison_summary(rows)
    assert summary["total_ciclos"] == 2
    assert summary["media_fca"] == Decimal("0.75")
    assert summary["media_sobrevivencia"] == Decimal("40.0")
    assert summary["receita_total"] == Decimal("9250.0")


def test_cycle_comparison_summary_empty() -> None:
    assert cycle_comparison_summary([]) == {
        "total_ciclos": 0,
        "media_fca": None,
        "media_sobrevivencia": None,
        "receita_total": 0.0,
    }


def test_untyped_records_are_left_out_of_every_view() -> None:
    day = date(2024, 2, 1)
    untyped = [{"data": day, "valor": 50.0, "categoria": "ração", "tipo": None}]

    assert daily_series(untyped, day, day) == [(day, Decimal("0"), Decimal("0"))]
    assert group_by_category(untyped, "saida") == {}
    assert group_by_month(untyped, "saida") == []
