from __future__ import annotations

import structlog
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from enums.enums import CicloStatusEnum
from models.cycle import CicloCultivo
from schemas.harvest import HarvestFinalizeIn
from services.calculation_service import (
    FEED_COST_PER_KG,
    feed_conversion_ratio,
    harvest_profit,
    harvest_revenue,
    survival_rate,
    total_feed_consumed,
    total_mortality,
    weight_gain,
)
from services.cycle_service import get_cycle, list_feedings
from utils.datetime_utils import today_local

logger = structlog.get_logger(__name__)


def finalize_cycle(db: Session, ciclo_id: int, payload: HarvestFinalizeIn) -> CicloCultivo:
    """
    Finaliza o ciclo com os dados da despesca.

    Efeitos:
    - status 'ativo' → 'finalizado'
    - grava peso final, preço, custo e data da despesca
    - grava os derivados: ganho de peso, FCA, receita, lucro, sobrevivência
    - é irreversível: uma segunda finalização responde 409
    """
    cycle = get_cycle(db, ciclo_id)
    if cycle.status == CicloStatusEnum.finalizado.value:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="O ciclo já está finalizado")

    feedings = list_feedings(db, ciclo_id)
    racao = total_feed_consumed(feedings)
    custo_kg = payload.custo_racao_kg if payload.custo_racao_kg is not None else FEED_COST_PER_KG
    data_despesca = payload.data_despesca or today_local()

    if data_despesca < cycle.data_povoamento:
        raise HTTPException(status_code=422, detail="data_despesca anterior à data de povoamento")

    ganho = weight_gain(cycle.peso_inicial_total, payload.peso_final_despesca)

    cycle.data_despesca = data_despesca
    cycle.peso_final_despesca = payload.peso_final_despesca
    cycle.preco_venda_kg = payload.preco_venda_kg
    cycle.custo_despesca = payload.custo_despesca
    cycle.ganho_de_peso = ganho
    cycle.fca_final = feed_conversion_ratio(racao, ganho)
    cycle.receita_total = harvest_revenue(payload.peso_final_despesca, payload.preco_venda_kg)
    cycle.lucro_total = harvest_profit(
        payload.peso_final_despesca,
        payload.preco_venda_kg,
        payload.custo_despesca,
        custo_kg,
        racao,
    )
    cycle.sobrevivencia_final = survival_rate(cycle.quantidade_povoada, total_mortality(feedings))
    cycle.status = CicloStatusEnum.finalizado.value

    db.add(cycle)
    db.commit()
    db.refresh(cycle)
    logger.info(
        "cycle_finalized",
        ciclo_id=ciclo_id,
        ganho_de_peso=float(ganho),
        fca_final=float(cycle.fca_final),
        lucro_total=float(cycle.lucro_total),
    )
    return cycle
