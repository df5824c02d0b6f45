from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field


class QualidadeAguaCreate(BaseModel):
    """Leituras ausentes ficam None e não disparam alertas."""
    data_coleta: date
    ph: Optional[float] = Field(None, ge=0, le=14)
    oxigenio_dissolvido: Optional[float] = Field(None, ge=0, description="mg/L")
    temperatura: Optional[float] = None
    salinidade: Optional[float] = Field(None, ge=0)
    turbidez: Optional[float] = Field(None, ge=0)
    alcalinidade: Optional[float] = Field(None, ge=0)
    cor_agua: Optional[str] = Field(None, max_length=50)
    observacoes: Optional[str] = Field(None, max_length=255)


class QualidadeAguaOut(BaseModel):
    qualidade_agua_id: int
    ciclo_id: int
    data_coleta: date
    ph: Optional[float] = None
    oxigenio_dissolvido: Optional[float] = None
    temperatura: Optional[float] = None
    salinidade: Optional[float] = None
    turbidez: Optional[float] = None
    alcalinidade: Optional[float] = None
    cor_agua: Optional[str] = None
    observacoes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
