from __future__ import annotations

from datetime import date, datetime
from sqlalchemy import Date, DateTime, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class Financeiro(Base):
    __tablename__ = "financeiro"

    financeiro_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    data: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    valor: Mapped[float] = mapped_column(Numeric(14, 2), nullable=False)
    categoria: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    tipo: Mapped[str] = mapped_column(String(10), nullable=False)  # entrada/saida
    descricao: Mapped[str | None] = mapped_column(String(255))

    criado_em: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
