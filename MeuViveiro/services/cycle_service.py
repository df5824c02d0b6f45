from __future__ import annotations

from datetime import date
from typing import Any

import structlog
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from enums.enums import CicloStatusEnum
from models.alimentacao import AlimentacaoDiaria
from models.biometria import Biometria
from models.cycle import CicloCultivo
from models.qualidade_agua import QualidadeAgua
from schemas.alimentacao import AlimentacaoCreate
from schemas.biometria import BiometriaCreate
from schemas.cycle import CycleCreate
from schemas.qualidade_agua import QualidadeAguaCreate
from services import alert_service
from services.calculation_service import cycle_metrics
from services.farm_service import get_pond

logger = structlog.get_logger(__name__)


# ==========================================
# Ciclos
# ==========================================

def create_cycle(db: Session, payload: CycleCreate) -> CicloCultivo:
    """
    Cria um ciclo no povoamento. Campos de despesca ficam nulos até a
    finalização.

    Raises:
        HTTPException 404: se o viveiro não existe
    """
    get_pond(db, payload.viveiro_id)
    cycle = CicloCultivo(
        viveiro_id=payload.viveiro_id,
        nome_ciclo=payload.nome_ciclo,
        data_povoamento=payload.data_povoamento,
        biomassa_inicial=payload.biomassa_inicial,
        peso_inicial_total=payload.peso_inicial_total,
        quantidade_povoada=payload.quantidade_povoada,
        observacoes=payload.observacoes,
        status=CicloStatusEnum.ativo.value,
    )
    db.add(cycle)
    db.commit()
    db.refresh(cycle)
    logger.info("cycle_created", ciclo_id=cycle.ciclo_id, viveiro_id=cycle.viveiro_id)
    return cycle


def list_cycles(
    db: Session,
    viveiro_id: int | None = None,
    status_filter: CicloStatusEnum | None = None,
) -> list[CicloCultivo]:
    """
    Lista ciclos, mais recentes primeiro.
    """
    q = db.query(CicloCultivo)
    if viveiro_id is not None:
        q = q.filter(CicloCultivo.viveiro_id == viveiro_id)
    if status_filter is not None:
        q = q.filter(CicloCultivo.status == status_filter.value)
    return q.order_by(CicloCultivo.data_povoamento.desc(), CicloCultivo.ciclo_id.desc()).all()


def get_cycle(db: Session, ciclo_id: int) -> CicloCultivo:
    """
    Raises:
        HTTPException 404: se o ciclo não existe
    """
    cycle = db.get(CicloCultivo, ciclo_id)
    if not cycle:
        raise HTTPException(status_code=404, detail="Ciclo não encontrado")
    return cycle


def _get_active_cycle(db: Session, ciclo_id: int) -> CicloCultivo:
    cycle = get_cycle(db, ciclo_id)
    if cycle.status != CicloStatusEnum.ativo.value:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Ciclo finalizado não aceita novos registros",
        )
    return cycle


# ==========================================
# Registros filhos
# ==========================================

def add_biometric(db: Session, ciclo_id: int, payload: BiometriaCreate) -> Biometria:
    _get_active_cycle(db, ciclo_id)
    bio = Biometria(ciclo_id=ciclo_id, **payload.model_dump())
    db.add(bio)
    db.commit()
    db.refresh(bio)
    logger.info("biometric_recorded", ciclo_id=ciclo_id, biometria_id=bio.biometria_id)
    return bio


def add_feeding(db: Session, ciclo_id: int, payload: AlimentacaoCreate) -> AlimentacaoDiaria:
    _get_active_cycle(db, ciclo_id)
    feeding = AlimentacaoDiaria(ciclo_id=ciclo_id, **payload.model_dump())
    db.add(feeding)
    db.commit()
    db.refresh(feeding)
    logger.info("feeding_recorded", ciclo_id=ciclo_id, alimentacao_id=feeding.alimentacao_id)
    return feeding


def add_water_quality(db: Session, ciclo_id: int, payload: QualidadeAguaCreate) -> QualidadeAgua:
    _get_active_cycle(db, ciclo_id)
    reading = QualidadeAgua(ciclo_id=ciclo_id, **payload.model_dump())
    db.add(reading)
    db.commit()
    db.refresh(reading)
    logger.info("water_quality_recorded", ciclo_id=ciclo_id, qualidade_agua_id=reading.qualidade_agua_id)
    return reading


def list_biometrics(db: Session, ciclo_id: int) -> list[Biometria]:
    get_cycle(db, ciclo_id)
    return (
        db.query(Biometria)
        .filter(Biometria.ciclo_id == ciclo_id)
        .order_by(Biometria.data_coleta.desc(), Biometria.biometria_id.desc())
        .all()
    )


def list_feedings(db: Session, ciclo_id: int) -> list[AlimentacaoDiaria]:
    get_cycle(db, ciclo_id)
    return (
        db.query(AlimentacaoDiaria)
        .filter(AlimentacaoDiaria.ciclo_id == ciclo_id)
        .order_by(AlimentacaoDiaria.data_alimentacao.desc(), AlimentacaoDiaria.alimentacao_id.desc())
        .all()
    )


def list_water_quality(db: Session, ciclo_id: int) -> list[QualidadeAgua]:
    get_cycle(db, ciclo_id)
    return (
        db.query(QualidadeAgua)
        .filter(QualidadeAgua.ciclo_id == ciclo_id)
        .order_by(QualidadeAgua.data_coleta.desc(), QualidadeAgua.qualidade_agua_id.desc())
        .all()
    )


# ==========================================
# Snapshot + indicadores
# ==========================================

def load_snapshot(
    db: Session, ciclo_id: int
) -> tuple[CicloCultivo, list[Biometria], list[AlimentacaoDiaria], list[QualidadeAgua]]:
    """Carrega o ciclo e todo o histórico filho em memória: (ciclo, biometrias, alimentações, água)."""
    return (
        get_cycle(db, ciclo_id),
        list_biometrics(db, ciclo_id),
        list_feedings(db, ciclo_id),
        list_water_quality(db, ciclo_id),
    )


def get_cycle_metrics(db: Session, ciclo_id: int, today: date | None = None) -> dict[str, Any]:
    cycle, biometrias, alimentacoes, _ = load_snapshot(db, ciclo_id)
    metrics = cycle_metrics(cycle, alimentacoes, biometrias, today)
    metrics["ciclo_id"] = ciclo_id
    return metrics


def get_cycle_alert_level(db: Session, ciclo_id: int) -> dict[str, Any]:
    cycle, biometrias, alimentacoes, agua = load_snapshot(db, ciclo_id)
    nivel = alert_service.evaluate_risk_level(agua, alimentacoes, biometrias, cycle.peso_inicial_total)
    return {"ciclo_id": ciclo_id, "nivel": nivel}


def get_cycle_alerts(db: Session, ciclo_id: int) -> dict[str, Any]:
    cycle, biometrias, alimentacoes, agua = load_snapshot(db, ciclo_id)
    args = (agua, alimentacoes, biometrias, cycle.peso_inicial_total)
    return {
        "ciclo_id": ciclo_id,
        "nivel": alert_service.evaluate_risk_level(*args),
        "alertas": alert_service.generate_alerts(*args),
    }
