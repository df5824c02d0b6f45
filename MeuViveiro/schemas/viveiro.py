from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ViveiroCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=120)
    fazenda_id: Optional[int] = Field(None, gt=0, description="Fazenda à qual o viveiro pertence")
    area_m2: Optional[float] = Field(None, gt=0, description="Área do viveiro (m²)")


class ViveiroOut(BaseModel):
    viveiro_id: int
    fazenda_id: Optional[int] = None
    nome: str
    area_m2: Optional[float] = None
    created_at: datetime

    model_config = {"from_attributes": True}
