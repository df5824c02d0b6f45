from __future__ import annotations

import structlog
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from models.fazenda import Fazenda
from models.viveiro import Viveiro
from schemas.fazenda import FazendaCreate
from schemas.viveiro import ViveiroCreate

logger = structlog.get_logger(__name__)


# ==========================================
# Fazendas
# ==========================================

def create_farm(db: Session, payload: FazendaCreate) -> Fazenda:
    farm = Fazenda(nome=payload.nome, localizacao=payload.localizacao)
    db.add(farm)
    db.commit()
    db.refresh(farm)
    logger.info("farm_created", fazenda_id=farm.fazenda_id)
    return farm


def list_farms(db: Session) -> list[Fazenda]:
    return db.query(Fazenda).order_by(Fazenda.created_at.desc(), Fazenda.fazenda_id.desc()).all()


def get_farm(db: Session, fazenda_id: int) -> Fazenda:
    farm = db.get(Fazenda, fazenda_id)
    if not farm:
        raise HTTPException(status_code=404, detail="Fazenda não encontrada")
    return farm


def delete_farm(db: Session, fazenda_id: int) -> None:
    """
    Raises:
        HTTPException 409: se a fazenda ainda tem viveiros
    """
    farm = get_farm(db, fazenda_id)
    if farm.viveiros:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="A fazenda possui viveiros; remova-os antes",
        )
    db.delete(farm)
    db.commit()
    logger.info("farm_deleted", fazenda_id=fazenda_id)


# ==========================================
# Viveiros
# ==========================================

def create_pond(db: Session, payload: ViveiroCreate) -> Viveiro:
    if payload.fazenda_id is not None:
        get_farm(db, payload.fazenda_id)
    pond = Viveiro(nome=payload.nome, fazenda_id=payload.fazenda_id, area_m2=payload.area_m2)
    db.add(pond)
    db.commit()
    db.refresh(pond)
    logger.info("pond_created", viveiro_id=pond.viveiro_id, fazenda_id=pond.fazenda_id)
    return pond


def list_ponds(db: Session, fazenda_id: int | None = None) -> list[Viveiro]:
    q = db.query(Viveiro)
    if fazenda_id is not None:
        q = q.filter(Viveiro.fazenda_id == fazenda_id)
    return q.order_by(Viveiro.created_at.desc(), Viveiro.viveiro_id.desc()).all()


def get_pond(db: Session, viveiro_id: int) -> Viveiro:
    pond = db.get(Viveiro, viveiro_id)
    if not pond:
        raise HTTPException(status_code=404, detail="Viveiro não encontrado")
    return pond


def delete_pond(db: Session, viveiro_id: int) -> None:
    """
    Raises:
        HTTPException 409: se o viveiro tem ciclos (o histórico é preservado)
    """
    pond = get_pond(db, viveiro_id)
    if pond.ciclos:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="O viveiro possui ciclos registrados e não pode ser removido",
        )
    db.delete(pond)
    db.commit()
    logger.info("pond_deleted", viveiro_id=viveiro_id)
