from datetime import date
from typing import List, Optional
from pydantic import BaseModel

from enums.enums import AlertLevelEnum


class AlertaOut(BaseModel):
    severity: str  # 'critical' | 'warning'
    code: str
    valor: Optional[float] = None
    data: Optional[date] = None
    msg: str


class AlertLevelOut(BaseModel):
    ciclo_id: int
    nivel: AlertLevelEnum


class AlertListOut(BaseModel):
    ciclo_id: int
    nivel: AlertLevelEnum
    alertas: List[AlertaOut]
