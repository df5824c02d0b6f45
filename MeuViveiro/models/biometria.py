from __future__ import annotations

from datetime import date, datetime
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class Biometria(Base):
    __tablename__ = "biometria"

    biometria_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    ciclo_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("ciclo_cultivo.ciclo_id", ondelete="CASCADE"), nullable=False, index=True
    )

    data_coleta: Mapped[date] = mapped_column(Date, nullable=False)
    peso_medio_amostra: Mapped[float] = mapped_column(Numeric(10, 3), nullable=False)  # g
    quantidade_amostra: Mapped[int | None] = mapped_column(Integer)
    biomassa_estimada: Mapped[float | None] = mapped_column(Numeric(14, 3))  # kg
    observacoes: Mapped[str | None] = mapped_column(String(255))

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)

    ciclo: Mapped["CicloCultivo"] = relationship("CicloCultivo", back_populates="biometrias")
