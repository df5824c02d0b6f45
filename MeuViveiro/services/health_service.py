from __future__ import annotations

import structlog
from fastapi import HTTPException
from sqlalchemy.orm import Session

from models.registro_sanitario import RegistroSanitario
from schemas.registro_sanitario import RegistroSanitarioCreate, RegistroSanitarioUpdate
from services.cycle_service import get_cycle

logger = structlog.get_logger(__name__)


def add_health_record(db: Session, ciclo_id: int, payload: RegistroSanitarioCreate) -> RegistroSanitario:
    get_cycle(db, ciclo_id)
    record = RegistroSanitario(ciclo_id=ciclo_id, **payload.model_dump())
    db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("health_record_created", ciclo_id=ciclo_id, registro_id=record.registro_id)
    return record


def list_health_records(db: Session, ciclo_id: int) -> list[RegistroSanitario]:
    get_cycle(db, ciclo_id)
    return (
        db.query(RegistroSanitario)
        .filter(RegistroSanitario.ciclo_id == ciclo_id)
        .order_by(RegistroSanitario.data.desc(), RegistroSanitario.registro_id.desc())
        .all()
    )


def _get_record(db: Session, ciclo_id: int, registro_id: int) -> RegistroSanitario:
    record = db.get(RegistroSanitario, registro_id)
    if not record or record.ciclo_id != ciclo_id:
        raise HTTPException(status_code=404, detail="Registro sanitário não encontrado")
    return record


def update_health_record(
    db: Session, ciclo_id: int, registro_id: int, payload: RegistroSanitarioUpdate
) -> RegistroSanitario:
    record = _get_record(db, ciclo_id, registro_id)
    changes = payload.model_dump(exclude_unset=True)
    if changes.get("data", record.data) is None:
        raise HTTPException(status_code=422, detail="data não pode ser nula")
    for field, value in changes.items():
        setattr(record, field, value)
    db.commit()
    db.refresh(record)
    logger.info("health_record_updated", ciclo_id=ciclo_id, registro_id=registro_id, campos=sorted(changes))
    return record


def delete_health_record(db: Session, ciclo_id: int, registro_id: int) -> None:
    record = _get_record(db, ciclo_id, registro_id)
    db.delete(record)
    db.commit()
    logger.info("health_record_deleted", ciclo_id=ciclo_id, registro_id=registro_id)
