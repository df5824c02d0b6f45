from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel, Field


class BiometriaCreate(BaseModel):
    """Schema para registrar uma nova biometria"""
    data_coleta: date
    peso_medio_amostra: float = Field(..., ge=0, description="Peso médio da amostra (g)")
    quantidade_amostra: Optional[int] = Field(None, gt=0, description="Número de animais na amostra")
    biomassa_estimada: Optional[float] = Field(None, ge=0, description="Biomassa estimada do viveiro (kg)")
    observacoes: Optional[str] = Field(None, max_length=255)


class BiometriaOut(BaseModel):
    biometria_id: int
    ciclo_id: int
    data_coleta: date
    peso_medio_amostra: float
    quantidade_amostra: Optional[int] = None
    biomassa_estimada: Optional[float] = None
    observacoes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
