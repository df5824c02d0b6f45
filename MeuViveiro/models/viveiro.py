from __future__ import annotations

from datetime import datetime
from sqlalchemy import BigInteger, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class Viveiro(Base):
    __tablename__ = "viveiro"

    viveiro_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    fazenda_id: Mapped[int | None] = mapped_column(
        BigInteger, ForeignKey("fazenda.fazenda_id", ondelete="RESTRICT"), index=True
    )
    nome: Mapped[str] = mapped_column(String(120), nullable=False)
    area_m2: Mapped[float | None] = mapped_column(Numeric(14, 2))
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)

    fazenda: Mapped["Fazenda"] = relationship("Fazenda", back_populates="viveiros")
    ciclos: Mapped[list["CicloCultivo"]] = relationship("CicloCultivo", back_populates="viveiro")
