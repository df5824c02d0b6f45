"""
Endpoints do financeiro: lançamentos e agregações para gráficos/exportação.
"""
from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from utils.db import get_db
from enums.enums import PeriodoEnum, TipoFinanceiroEnum
from schemas.financeiro import (
    CategoryTotalOut,
    DailySeriesOut,
    FinanceiroCreate,
    FinanceiroOut,
    FinanceiroSummaryOut,
    MonthTotalOut,
)
from services import finance_service

router = APIRouter(prefix="/finance", tags=["Financeiro"])


@router.post("", response_model=FinanceiroOut, status_code=201, summary="Criar lançamento")
def post_entry(payload: FinanceiroCreate, db: Session = Depends(get_db)):
    return finance_service.create_entry(db, payload)


@router.get("", response_model=list[FinanceiroOut], summary="Listar lançamentos")
def get_entries(
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    categoria: str | None = Query(None),
    db: Session = Depends(get_db),
):
    return finance_service.list_entries(db, start_date, end_date, categoria)


@router.get(
    "/summary",
    response_model=FinanceiroSummaryOut,
    summary="Resumo do período",
    description="Faturamento, despesas e saldo do dia, mês ou ano corrente.",
)
def get_summary(periodo: PeriodoEnum = Query(PeriodoEnum.mes), db: Session = Depends(get_db)):
    return finance_service.summary(db, periodo)


@router.get("/by-month", response_model=list[MonthTotalOut], summary="Totais por mês")
def get_by_month(
    tipo: TipoFinanceiroEnum = Query(...),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    db: Session = Depends(get_db),
):
    return finance_service.by_month(db, tipo, start_date, end_date)


@router.get("/by-category", response_model=list[CategoryTotalOut], summary="Totais por categoria")
def get_by_category(
    tipo: TipoFinanceiroEnum = Query(...),
    start_date: date | None = Query(None),
    end_date: date | None = Query(None),
    db: Session = Depends(get_db),
):
    return finance_service.by_category(db, tipo, start_date, end_date)


@router.get(
    "/daily",
    response_model=DailySeriesOut,
    summary="Série diária",
    description="Uma linha por dia do intervalo (inclusivo), zerada nos dias sem lançamentos.",
)
def get_daily(
    start_date: date = Query(...),
    end_date: date = Query(...),
    db: Session = Depends(get_db),
):
    return finance_service.daily(db, start_date, end_date)
