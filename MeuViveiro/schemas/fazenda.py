from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class FazendaCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=150)
    localizacao: Optional[str] = Field(None, max_length=200)


class FazendaOut(BaseModel):
    fazenda_id: int
    nome: str
    localizacao: Optional[str] = None
    created_at: datetime

    model_config = {"from_attributes": True}
