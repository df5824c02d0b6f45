from pydantic import BaseModel
from typing import Optional, List


class CycleComparisonRowOut(BaseModel):
    nome_ciclo: str
    periodo: str
    dias_cultivo: int
    fca_final: Optional[float] = None
    sobrevivencia_final: Optional[float] = None
    peso_final_despesca: Optional[float] = None
    receita_total: Optional[float] = None
    finalizado: bool


class CycleComparisonSummaryOut(BaseModel):
    total_ciclos: int
    media_fca: Optional[float] = None
    media_sobrevivencia: Optional[float] = None
    receita_total: float


class CycleComparisonOut(BaseModel):
    ciclos: List[CycleComparisonRowOut]
    resumo: CycleComparisonSummaryOut
