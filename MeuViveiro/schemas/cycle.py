from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional


class CycleCreate(BaseModel):
    viveiro_id: int = Field(..., gt=0, description="Viveiro (pond) dono do ciclo")
    nome_ciclo: str = Field(..., min_length=1, max_length=150)
    data_povoamento: date = Field(..., description="Data de povoamento (início do ciclo)")
    biomassa_inicial: Optional[float] = Field(None, ge=0)
    peso_inicial_total: Optional[float] = Field(None, ge=0, description="Peso inicial total (kg)")
    quantidade_povoada: Optional[int] = Field(None, ge=0, description="Animais povoados (para sobrevivência)")
    observacoes: str | None = None


class CycleOut(BaseModel):
    ciclo_id: int
    viveiro_id: int
    nome_ciclo: str
    data_povoamento: date
    biomassa_inicial: Optional[float] = None
    peso_inicial_total: Optional[float] = None
    quantidade_povoada: Optional[int] = None
    status: str  # 'ativo' | 'finalizado'
    observacoes: str | None = None

    data_despesca: date | None = None
    peso_final_despesca: Optional[float] = None
    preco_venda_kg: Optional[float] = None
    custo_despesca: Optional[float] = None
    ganho_de_peso: Optional[float] = None
    fca_final: Optional[float] = None
    receita_total: Optional[float] = None
    lucro_total: Optional[float] = None
    sobrevivencia_final: Optional[float] = None

    created_at: datetime

    class Config:
        from_attributes = True


class CycleMetricsOut(BaseModel):
    """
    Indicadores do ciclo. `fca` = 0 significa "não computável"
    (ver `fca_computavel`).
    """
    ciclo_id: int
    dias_cultivo: int
    total_racao_kg: float
    total_mortalidade: int
    peso_inicial_kg: Optional[float] = None
    biomassa_atual_kg: Optional[float] = None
    ganho_de_peso_kg: Optional[float] = None
    fca: float
    fca_computavel: bool
    sobrevivencia_pct: Optional[float] = None
