"""
Endpoints de ciclos de cultivo e seus registros (biometria, alimentação,
qualidade da água), indicadores e alertas.
"""
from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session

from utils.db import get_db
from enums.enums import CicloStatusEnum
from schemas.cycle import CycleCreate, CycleOut, CycleMetricsOut
from schemas.biometria import BiometriaCreate, BiometriaOut
from schemas.alimentacao import AlimentacaoCreate, AlimentacaoOut
from schemas.qualidade_agua import QualidadeAguaCreate, QualidadeAguaOut
from schemas.alerts import AlertLevelOut, AlertListOut
from schemas.registro_sanitario import (
    RegistroSanitarioCreate,
    RegistroSanitarioOut,
    RegistroSanitarioUpdate,
)
from services import cycle_service, health_service

router = APIRouter(prefix="/cycles", tags=["Ciclos"])


# ==========================================
# Ciclos
# ==========================================

@router.post(
    "",
    response_model=CycleOut,
    status_code=201,
    summary="Criar ciclo (povoamento)",
)
def post_cycle(payload: CycleCreate, db: Session = Depends(get_db)):
    return cycle_service.create_cycle(db, payload)


@router.get(
    "",
    response_model=list[CycleOut],
    summary="Listar ciclos",
    description="Filtra por viveiro e/ou status; mais recentes primeiro.",
)
def get_cycles(
    viveiro_id: int | None = Query(None, gt=0),
    status: CicloStatusEnum | None = Query(None),
    db: Session = Depends(get_db),
):
    return cycle_service.list_cycles(db, viveiro_id, status)


@router.get("/{ciclo_id}", response_model=CycleOut, summary="Obter ciclo")
def get_cycle(ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.get_cycle(db, ciclo_id)


# ==========================================
# Registros do ciclo
# ==========================================

@router.post("/{ciclo_id}/biometrics", response_model=BiometriaOut, status_code=201, summary="Registrar biometria")
def post_biometric(payload: BiometriaCreate, ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.add_biometric(db, ciclo_id, payload)


@router.get("/{ciclo_id}/biometrics", response_model=list[BiometriaOut], summary="Listar biometrias")
def get_biometrics(ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.list_biometrics(db, ciclo_id)


@router.post("/{ciclo_id}/feedings", response_model=AlimentacaoOut, status_code=201, summary="Registrar alimentação")
def post_feeding(payload: AlimentacaoCreate, ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.add_feeding(db, ciclo_id, payload)


@router.get("/{ciclo_id}/feedings", response_model=list[AlimentacaoOut], summary="Listar alimentações")
def get_feedings(ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.list_feedings(db, ciclo_id)


@router.post(
    "/{ciclo_id}/water-quality",
    response_model=QualidadeAguaOut,
    status_code=201,
    summary="Registrar qualidade da água",
)
def post_water_quality(payload: QualidadeAguaCreate, ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.add_water_quality(db, ciclo_id, payload)


@router.get("/{ciclo_id}/water-quality", response_model=list[QualidadeAguaOut], summary="Listar qualidade da água")
def get_water_quality(ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.list_water_quality(db, ciclo_id)


# ==========================================
# Registros sanitários
# ==========================================

@router.post(
    "/{ciclo_id}/health-records",
    response_model=RegistroSanitarioOut,
    status_code=201,
    summary="Registrar ocorrência sanitária",
)
def post_health_record(
    payload: RegistroSanitarioCreate, ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)
):
    return health_service.add_health_record(db, ciclo_id, payload)


@router.get(
    "/{ciclo_id}/health-records", response_model=list[RegistroSanitarioOut], summary="Listar registros sanitários"
)
def get_health_records(ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return health_service.list_health_records(db, ciclo_id)


@router.patch(
    "/{ciclo_id}/health-records/{registro_id}",
    response_model=RegistroSanitarioOut,
    summary="Atualizar registro sanitário",
)
def patch_health_record(
    payload: RegistroSanitarioUpdate,
    ciclo_id: int = Path(..., gt=0),
    registro_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    return health_service.update_health_record(db, ciclo_id, registro_id, payload)


@router.delete("/{ciclo_id}/health-records/{registro_id}", status_code=204, summary="Remover registro sanitário")
def delete_health_record(
    ciclo_id: int = Path(..., gt=0),
    registro_id: int = Path(..., gt=0),
    db: Session = Depends(get_db),
):
    health_service.delete_health_record(db, ciclo_id, registro_id)
    return Response(status_code=204)


# ==========================================
# Indicadores e alertas
# ==========================================

@router.get(
    "/{ciclo_id}/metrics",
    response_model=CycleMetricsOut,
    summary="Indicadores do ciclo",
    description=(
        "Dias de cultivo, ração total, mortalidade, biomassa atual, ganho de peso, "
        "FCA e sobrevivência.\n\n"
        "**FCA = 0** significa não computável (ganho de peso <= 0 ou sem biomassa)."
    ),
)
def get_metrics(ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.get_cycle_metrics(db, ciclo_id)


@router.get(
    "/{ciclo_id}/alert-level",
    response_model=AlertLevelOut,
    summary="Nível de risco do ciclo",
    description="normal | warning | critical",
)
def get_alert_level(ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.get_cycle_alert_level(db, ciclo_id)


@router.get("/{ciclo_id}/alerts", response_model=AlertListOut, summary="Alertas ativos do ciclo")
def get_alerts(ciclo_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return cycle_service.get_cycle_alerts(db, ciclo_id)
