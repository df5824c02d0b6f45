from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session

from utils.db import get_db
from schemas.fazenda import FazendaCreate, FazendaOut
from services import farm_service

router = APIRouter(prefix="/farms", tags=["Fazendas"])


@router.post("", response_model=FazendaOut, status_code=201, summary="Criar fazenda")
def post_farm(payload: FazendaCreate, db: Session = Depends(get_db)):
    return farm_service.create_farm(db, payload)


@router.get("", response_model=list[FazendaOut], summary="Listar fazendas")
def get_farms(db: Session = Depends(get_db)):
    return farm_service.list_farms(db)


@router.get("/{fazenda_id}", response_model=FazendaOut, summary="Obter fazenda")
def get_farm(fazenda_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return farm_service.get_farm(db, fazenda_id)


@router.delete(
    "/{fazenda_id}",
    status_code=204,
    summary="Remover fazenda",
    description="Só é permitido para fazendas sem viveiros (409 caso contrário).",
)
def delete_farm(fazenda_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    farm_service.delete_farm(db, fazenda_id)
    return Response(status_code=204)
