from __future__ import annotations

from datetime import date, datetime
from sqlalchemy import BigInteger, Date, DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class RegistroSanitario(Base):
    """Ocorrência de saúde do ciclo: sintomas, diagnóstico e tratamento aplicado."""
    __tablename__ = "registro_sanitario"

    registro_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    ciclo_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("ciclo_cultivo.ciclo_id", ondelete="CASCADE"), nullable=False, index=True
    )
    data: Mapped[date] = mapped_column(Date, nullable=False)
    sintomas: Mapped[str | None] = mapped_column(Text)
    diagnostico: Mapped[str | None] = mapped_column(Text)
    tratamento: Mapped[str | None] = mapped_column(Text)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)

    ciclo: Mapped["CicloCultivo"] = relationship("CicloCultivo", back_populates="registros_sanitarios")
