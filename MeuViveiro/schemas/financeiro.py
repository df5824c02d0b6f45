from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from enums.enums import PeriodoEnum, TipoFinanceiroEnum


class FinanceiroCreate(BaseModel):
    data: date
    valor: float = Field(..., ge=0)
    categoria: str = Field(..., min_length=1, max_length=100)
    tipo: TipoFinanceiroEnum
    descricao: Optional[str] = Field(None, max_length=255)


class FinanceiroOut(BaseModel):
    financeiro_id: int
    data: date
    valor: float
    categoria: str
    tipo: str
    descricao: Optional[str] = None
    criado_em: datetime

    class Config:
        from_attributes = True


class FinanceiroSummaryOut(BaseModel):
    periodo: PeriodoEnum
    inicio: date
    fim: date  # exclusivo
    faturamento: float
    despesas: float
    saldo: float


class MonthTotalOut(BaseModel):
    mes: str  # 'YYYY-MM'
    total: float


class CategoryTotalOut(BaseModel):
    categoria: str
    total: float


class DailyRowOut(BaseModel):
    dia: date
    entradas: float
    saidas: float


class DailySeriesOut(BaseModel):
    inicio: date
    fim: date
    dias: List[DailyRowOut]
