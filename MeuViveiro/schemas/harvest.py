from __future__ import annotations

from datetime import date
from typing import Optional
from pydantic import BaseModel, Field


class HarvestFinalizeIn(BaseModel):
    """Dados da despesca para finalizar o ciclo."""
    peso_final_despesca: float = Field(..., ge=0.1, description="Peso final da despesca (kg)")
    preco_venda_kg: float = Field(..., ge=0.01, description="Preço de venda por kg (R$)")
    custo_despesca: Optional[float] = Field(None, ge=0, description="Custo da despesca (R$), opcional")
    data_despesca: Optional[date] = Field(None, description="Se omitida, usa a data de hoje")
    custo_racao_kg: Optional[float] = Field(
        None, ge=0, description="Custo da ração por kg; se omitido usa o valor padrão (R$ 5)"
    )
