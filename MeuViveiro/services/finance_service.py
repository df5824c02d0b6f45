from __future__ import annotations

from datetime import date
from typing import Any

import structlog
from sqlalchemy.orm import Session

from enums.enums import PeriodoEnum, TipoFinanceiroEnum
from models.financeiro import Financeiro
from schemas.financeiro import FinanceiroCreate
from services import reporting_service
from utils.datetime_utils import today_local

logger = structlog.get_logger(__name__)


def create_entry(db: Session, payload: FinanceiroCreate) -> Financeiro:
    entry = Financeiro(
        data=payload.data,
        valor=payload.valor,
        categoria=payload.categoria,
        tipo=payload.tipo.value,
        descricao=payload.descricao,
    )
    db.add(entry)
    db.commit()
    db.refresh(entry)
    logger.info("finance_entry_created", financeiro_id=entry.financeiro_id, tipo=entry.tipo, valor=payload.valor)
    return entry


def list_entries(
    db: Session,
    start_date: date | None = None,
    end_date: date | None = None,
    categoria: str | None = None,
) -> list[Financeiro]:
    """
    Lançamentos filtrados (intervalo inclusivo), mais recentes primeiro.
    """
    q = db.query(Financeiro)
    if start_date is not None:
        q = q.filter(Financeiro.data >= start_date)
    if end_date is not None:
        q = q.filter(Financeiro.data <= end_date)
    if categoria:
        q = q.filter(Financeiro.categoria == categoria)
    return q.order_by(Financeiro.data.desc(), Financeiro.financeiro_id.desc()).all()


def _entries_ascending(db: Session, start_date: date | None, end_date: date | None) -> list[Financeiro]:
    # Ordem cronológica => meses saem em ordem no agrupamento
    return list(reversed(list_entries(db, start_date, end_date)))


def summary(db: Session, periodo: PeriodoEnum, today: date | None = None) -> dict[str, Any]:
    today = today or today_local()
    start, end = reporting_service.period_window(periodo, today)
    records = list_entries(db, start, end)
    return reporting_service.finance_summary(records, periodo, today)


def by_month(
    db: Session, tipo: TipoFinanceiroEnum, start_date: date | None = None, end_date: date | None = None
) -> list[dict[str, Any]]:
    records = _entries_ascending(db, start_date, end_date)
    return [{"mes": mes, "total": total} for mes, total in reporting_service.group_by_month(records, tipo)]


def by_category(
    db: Session, tipo: TipoFinanceiroEnum, start_date: date | None = None, end_date: date | None = None
) -> list[dict[str, Any]]:
    records = _entries_ascending(db, start_date, end_date)
    totals = reporting_service.group_by_category(records, tipo)
    return [{"categoria": cat, "total": total} for cat, total in totals.items()]


def daily(db: Session, start_date: date, end_date: date) -> dict[str, Any]:
    records = list_entries(db, start_date, end_date)
    rows = reporting_service.daily_series(records, start_date, end_date)
    return {
        "inicio": start_date,
        "fim": end_date,
        "dias": [{"dia": d, "entradas": e, "saidas": s} for d, e, s in rows],
    }
