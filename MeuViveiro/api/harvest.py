from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from utils.db import get_db
from schemas.cycle import CycleOut
from schemas.harvest import HarvestFinalizeIn
from services.harvest_service import finalize_cycle

router = APIRouter(prefix="/cycles", tags=["Despesca"])


@router.post(
    "/{ciclo_id}/harvest",
    response_model=CycleOut,
    summary="Finalizar ciclo (despesca)",
    description=(
        "Registra a despesca e finaliza o ciclo.\n\n"
        "**Cálculos gravados:**\n"
        "- ganho_de_peso = peso_final - peso_inicial_total\n"
        "- fca_final = ração_total / ganho (0 se ganho <= 0)\n"
        "- receita_total = peso_final × preço_kg\n"
        "- lucro_total = receita - ração_total × custo_racao_kg - custo_despesca\n\n"
        "**Restrição:** só uma vez por ciclo (409 se já finalizado)."
    ),
)
def post_harvest(
    payload: HarvestFinalizeIn,
    ciclo_id: int = Path(..., gt=0, description="ID do ciclo"),
    db: Session = Depends(get_db),
):
    return finalize_cycle(db, ciclo_id, payload)
