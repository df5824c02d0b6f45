"""
Utilidades centralizadas para datas e timestamps.
Todas as operações usam o fuso configurado em settings.TIMEZONE
(America/Sao_Paulo por padrão) como referência.

Convenção do sistema:
- Um datetime **naive** (sem tzinfo) é interpretado como hora local.
- Um datetime **aware** é convertido para o fuso local e persistido como naive.
"""
from datetime import datetime, date, timedelta
from typing import Optional
from zoneinfo import ZoneInfo

from config.settings import settings


def _local_tz() -> ZoneInfo:
    return ZoneInfo(settings.TIMEZONE)


def now_local() -> datetime:
    """
    Retorna o datetime atual no fuso local (naive, sem microssegundos).
    """
    return datetime.now(_local_tz()).replace(tzinfo=None, microsecond=0)


def today_local() -> date:
    """
    Retorna a data atual no fuso local.
    """
    return datetime.now(_local_tz()).date()


def to_local_naive(dt: datetime) -> datetime:
    """
    Normaliza um datetime para hora local SEM tzinfo.

    Regra:
    - NAIVE => já é hora local, só limpa microssegundos.
    - AWARE => converte para o fuso local e remove tzinfo.
    """
    if dt.tzinfo is None:
        return dt.replace(microsecond=0)
    return dt.astimezone(_local_tz()).replace(tzinfo=None, microsecond=0)


def as_date(value: date | datetime | str | None) -> Optional[date]:
    """
    Converte datetime/ISO string em date (datetimes aware passam pelo fuso local).
    """
    if value is None:
        return None
    if isinstance(value, str):
        value = datetime.fromisoformat(value) if "T" in value or " " in value else date.fromisoformat(value)
    if isinstance(value, datetime):
        return to_local_naive(value).date()
    return value


def month_label(d: date) -> str:
    """Rótulo de mês ordenável: 'YYYY-MM'."""
    return f"{d.year:04d}-{d.month:02d}"


def iter_days(start: date, end: date):
    """Itera os dias do intervalo fechado [start, end]."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)
