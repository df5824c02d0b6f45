from __future__ import annotations

from datetime import date, datetime
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class AlimentacaoDiaria(Base):
    __tablename__ = "alimentacao_diaria"

    alimentacao_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    ciclo_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("ciclo_cultivo.ciclo_id", ondelete="CASCADE"), nullable=False, index=True
    )

    data_alimentacao: Mapped[date] = mapped_column(Date, nullable=False)
    quantidade_racao: Mapped[float] = mapped_column(Numeric(10, 3), nullable=False)  # kg
    mortalidade_observada: Mapped[int | None] = mapped_column(Integer)
    tipo_racao: Mapped[str | None] = mapped_column(String(100))
    lote_racao: Mapped[str | None] = mapped_column(String(100))
    fornecedor: Mapped[str | None] = mapped_column(String(150))
    observacoes: Mapped[str | None] = mapped_column(String(255))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)

    ciclo: Mapped["CicloCultivo"] = relationship("CicloCultivo", back_populates="alimentacoes")
