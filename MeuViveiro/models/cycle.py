from __future__ import annotations
from datetime import datetime, date
from sqlalchemy import String, BigInteger, Text, DateTime, Date, Numeric, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from utils.db import Base, BigIntPK
from utils.datetime_utils import now_local


class CicloCultivo(Base):
    __tablename__ = "ciclo_cultivo"

    ciclo_id: Mapped[int] = mapped_column(BigIntPK, primary_key=True, autoincrement=True)
    viveiro_id: Mapped[int] = mapped_column(
        BigInteger, ForeignKey("viveiro.viveiro_id", ondelete="RESTRICT"), nullable=False, index=True
    )
    nome_ciclo: Mapped[str] = mapped_column(String(150), nullable=False)
    data_povoamento: Mapped[date] = mapped_column(Date, nullable=False)
    biomassa_inicial: Mapped[float | None] = mapped_column(Numeric(14, 3))
    peso_inicial_total: Mapped[float | None] = mapped_column(Numeric(14, 3))
    quantidade_povoada: Mapped[int | None] = mapped_column(Integer)
    status: Mapped[str] = mapped_column(String(12), default="ativo", nullable=False)  # ativo/finalizado
    observacoes: Mapped[str | None] = mapped_column(Text)

    # Despesca (null enquanto ativo)
    data_despesca: Mapped[date | None] = mapped_column(Date)
    peso_final_despesca: Mapped[float | None] = mapped_column(Numeric(14, 3))
    preco_venda_kg: Mapped[float | None] = mapped_column(Numeric(10, 2))
    custo_despesca: Mapped[float | None] = mapped_column(Numeric(14, 2))

    # Derivados gravados na despesca
    ganho_de_peso: Mapped[float | None] = mapped_column(Numeric(14, 3))
    fca_final: Mapped[float | None] = mapped_column(Numeric(14, 4))
    receita_total: Mapped[float | None] = mapped_column(Numeric(14, 2))
    lucro_total: Mapped[float | None] = mapped_column(Numeric(14, 2))
    sobrevivencia_final: Mapped[float | None] = mapped_column(Numeric(14, 2))  # não truncada: pode ser negativa

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=False), default=now_local, onupdate=now_local, nullable=False)

    # Relationships
    viveiro: Mapped["Viveiro"] = relationship("Viveiro", back_populates="ciclos")
    biometrias: Mapped[list["Biometria"]] = relationship(
        "Biometria", back_populates="ciclo", cascade="all, delete-orphan"
    )
    alimentacoes: Mapped[list["AlimentacaoDiaria"]] = relationship(
        "AlimentacaoDiaria", back_populates="ciclo", cascade="all, delete-orphan"
    )
    qualidade_agua: Mapped[list["QualidadeAgua"]] = relationship(
        "QualidadeAgua", back_populates="ciclo", cascade="all, delete-orphan"
    )
    registros_sanitarios: Mapped[list["RegistroSanitario"]] = relationship(
        "RegistroSanitario", back_populates="ciclo", cascade="all, delete-orphan"
    )
