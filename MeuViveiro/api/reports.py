from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from utils.db import get_db
from schemas.reports import CycleComparisonOut
from services import cycle_service, reporting_service

router = APIRouter(prefix="/reports", tags=["Relatórios"])


@router.get(
    "/cycles",
    response_model=CycleComparisonOut,
    summary="Comparativo de ciclos",
    description=(
        "Linhas numéricas por ciclo + resumo (médias de FCA e sobrevivência, "
        "receita total). Insumo para exportação PDF/Excel/CSV."
    ),
)
def get_cycle_comparison(
    viveiro_id: int | None = Query(None, gt=0),
    db: Session = Depends(get_db),
):
    cycles = cycle_service.list_cycles(db, viveiro_id)
    rows = reporting_service.cycle_comparison_rows(cycles)
    return {"ciclos": rows, "resumo": reporting_service.cycle_comparison_summary(rows)}
