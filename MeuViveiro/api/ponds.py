from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session

from utils.db import get_db
from schemas.viveiro import ViveiroCreate, ViveiroOut
from services import farm_service

router = APIRouter(prefix="/ponds", tags=["Viveiros"])


@router.post(
    "",
    response_model=ViveiroOut,
    status_code=201,
    summary="Criar viveiro",
    description="`fazenda_id` é opcional; se informado, a fazenda precisa existir (404).",
)
def post_pond(payload: ViveiroCreate, db: Session = Depends(get_db)):
    return farm_service.create_pond(db, payload)


@router.get("", response_model=list[ViveiroOut], summary="Listar viveiros")
def get_ponds(
    fazenda_id: int | None = Query(None, gt=0),
    db: Session = Depends(get_db),
):
    return farm_service.list_ponds(db, fazenda_id)


@router.get("/{viveiro_id}", response_model=ViveiroOut, summary="Obter viveiro")
def get_pond(viveiro_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    return farm_service.get_pond(db, viveiro_id)


@router.delete(
    "/{viveiro_id}",
    status_code=204,
    summary="Remover viveiro",
    description="Viveiros com ciclos registrados não podem ser removidos (409).",
)
def delete_pond(viveiro_id: int = Path(..., gt=0), db: Session = Depends(get_db)):
    farm_service.delete_pond(db, viveiro_id)
    return Response(status_code=204)
