from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field


class AlimentacaoCreate(BaseModel):
    data_alimentacao: date
    quantidade_racao: float = Field(..., ge=0, description="Ração fornecida no dia (kg)")
    mortalidade_observada: Optional[int] = Field(None, ge=0)
    tipo_racao: Optional[str] = Field(None, max_length=100)
    lote_racao: Optional[str] = Field(None, max_length=100)
    fornecedor: Optional[str] = Field(None, max_length=150)
    observacoes: Optional[str] = Field(None, max_length=255)


class AlimentacaoOut(BaseModel):
    alimentacao_id: int
    ciclo_id: int
    data_alimentacao: date
    quantidade_racao: float
    mortalidade_observada: Optional[int] = None
    tipo_racao: Optional[str] = None
    lote_racao: Optional[str] = None
    fornecedor: Optional[str] = None
    observacoes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
