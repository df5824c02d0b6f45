from __future__ import annotations

from datetime import date, datetime
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class QualidadeAgua(Base):
    __tablename__ = "qualidade_agua"

    qualidade_agua_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    ciclo_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("ciclo_cultivo.ciclo_id", ondelete="CASCADE"), nullable=False, index=True
    )

    data_coleta: Mapped[date] = mapped_column(Date, nullable=False)
    ph: Mapped[float | None] = mapped_column(Numeric(4, 2))
    oxigenio_dissolvido: Mapped[float | None] = mapped_column(Numeric(6, 2))  # mg/L
    temperatura: Mapped[float | None] = mapped_column(Numeric(5, 2))
    salinidade: Mapped[float | None] = mapped_column(Numeric(6, 2))
    turbidez: Mapped[float | None] = mapped_column(Numeric(8, 2))
    alcalinidade: Mapped[float | None] = mapped_column(Numeric(8, 2))
    cor_agua: Mapped[str | None] = mapped_column(String(50))
    observacoes: Mapped[str | None] = mapped_column(String(255))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)

    ciclo: Mapped["CicloCultivo"] = relationship("CicloCultivo", back_populates="qualidade_agua")
