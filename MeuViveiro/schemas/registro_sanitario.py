from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from pydantic import BaseModel


class RegistroSanitarioCreate(BaseModel):
    data: date
    sintomas: Optional[str] = None
    diagnostico: Optional[str] = None
    tratamento: Optional[str] = None


class RegistroSanitarioUpdate(BaseModel):
    """Atualização parcial: só os campos enviados são alterados."""
    data: Optional[date] = None
    sintomas: Optional[str] = None
    diagnostico: Optional[str] = None
    tratamento: Optional[str] = None


class RegistroSanitarioOut(BaseModel):
    registro_id: int
    ciclo_id: int
    data: date
    sintomas: Optional[str] = None
    diagnostico: Optional[str] = None
    tratamento: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
