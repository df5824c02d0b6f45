from __future__ import annotations
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional, Tuple

from enums.enums import CicloStatusEnum, PeriodoEnum, TipoFinanceiroEnum
from services.calculation_service import (
    MONEY,
    PCT,
    RATIO,
    ZERO,
    cycle_cultivation_days,
    get_field,
    to_decimal,
)
from utils.datetime_utils import as_date, iter_days, month_label, today_local


_DIRECTION_ALIASES = {
    "entrada": TipoFinanceiroEnum.entrada,
    "inflow": TipoFinanceiroEnum.entrada,
    "saida": TipoFinanceiroEnum.saida,
    "outflow": TipoFinanceiroEnum.saida,
}


# -------- helpers --------

def normalize_direction(value: str | TipoFinanceiroEnum) -> TipoFinanceiroEnum:
    """Aceita entrada/saida e os aliases inflow/outflow."""
    if isinstance(value, TipoFinanceiroEnum):
        return value
    try:
        return _DIRECTION_ALIASES[str(value).lower()]
    except KeyError:
        raise ValueError(f"tipo financeiro inválido: {value!r}")


def _direction_of(record: Any) -> Optional[TipoFinanceiroEnum]:
    tipo = get_field(record, "tipo")
    if tipo is None:
        return None
    return normalize_direction(tipo)


def _filtered(records: Iterable[Any], direction: str | TipoFinanceiroEnum) -> List[Any]:
    wanted = normalize_direction(direction)
    return [r for r in records if _direction_of(r) == wanted]


# -------- agrupamentos para gráficos --------

def group_by_month(
    records: Iterable[Any], direction: str | TipoFinanceiroEnum
) -> List[Tuple[str, Decimal]]:
    """
    Soma `valor` por mês ('YYYY-MM') para a direção pedida.
    A ordem é a do primeiro aparecimento de cada mês na entrada.
    """
    totals: Dict[str, Decimal] = {}
    for rec in _filtered(records, direction):
        label = month_label(as_date(get_field(rec, "data")))
        totals[label] = totals.get(label, ZERO) + to_decimal(get_field(rec, "valor"), ZERO)
    return list(totals.items())


def group_by_category(
    records: Iterable[Any], direction: str | TipoFinanceiroEnum
) -> Dict[str, Decimal]:
    """Soma `valor` por `categoria` para a direção pedida."""
    totals: Dict[str, Decimal] = {}
    for rec in _filtered(records, direction):
        categoria = get_field(rec, "categoria")
        totals[categoria] = totals.get(categoria, ZERO) + to_decimal(get_field(rec, "valor"), ZERO)
    return totals


def daily_series(
    records: Iterable[Any], month_start: date, month_end: date
) -> List[Tuple[date, Decimal, Decimal]]:
    """
    Uma linha (dia, entradas, saídas) por dia do intervalo fechado,
    zerada nos dias sem lançamentos. Registros fora do intervalo ou sem
    `tipo` são ignorados, como nos agrupamentos por mês e categoria.
    """
    start, end = as_date(month_start), as_date(month_end)
    if start > end:
        raise ValueError("month_start não pode ser maior que month_end")

    inflow: Dict[date, Decimal] = {}
    outflow: Dict[date, Decimal] = {}
    for rec in records:
        day = as_date(get_field(rec, "data"))
        if day is None or day < start or day > end:
            continue
        direction = _direction_of(rec)
        if direction is None:
            continue
        bucket = inflow if direction == TipoFinanceiroEnum.entrada else outflow
        bucket[day] = bucket.get(day, ZERO) + to_decimal(get_field(rec, "valor"), ZERO)

    return [(d, inflow.get(d, ZERO), outflow.get(d, ZERO)) for d in iter_days(start, end)]


# -------- resumo financeiro --------

def _total(records: Iterable[Any]) -> Decimal:
    return sum((to_decimal(get_field(r, "valor"), ZERO) for r in records), ZERO).quantize(MONEY)


def period_window(periodo: str | PeriodoEnum, today: Optional[date] = None) -> Tuple[date, date]:
    """
    Janela [início, fim) do período corrente: dia, mês ou ano.
    """
    today = today or today_local()
    periodo = PeriodoEnum(periodo)
    if periodo == PeriodoEnum.dia:
        return today, date.fromordinal(today.toordinal() + 1)
    if periodo == PeriodoEnum.ano:
        return date(today.year, 1, 1), date(today.year + 1, 1, 1)
    start = date(today.year, today.month, 1)
    end = date(today.year + 1, 1, 1) if today.month == 12 else date(today.year, today.month + 1, 1)
    return start, end


def finance_summary(
    records: Iterable[Any],
    periodo: str | PeriodoEnum = PeriodoEnum.mes,
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """faturamento (entradas), despesas (saídas) e saldo do período corrente."""
    start, end = period_window(periodo, today)
    in_window = [r for r in records if start <= as_date(get_field(r, "data")) < end]

    faturamento = _total(_filtered(in_window, TipoFinanceiroEnum.entrada))
    despesas = _total(_filtered(in_window, TipoFinanceiroEnum.saida))
    return {
        "periodo": PeriodoEnum(periodo).value,
        "inicio": start,
        "fim": end,
        "faturamento": faturamento,
        "despesas": despesas,
        "saldo": faturamento - despesas,
    }


# -------- comparativo de ciclos (insumo dos exportadores) --------

def _periodo_label(cycle: Any) -> str:
    inicio = as_date(get_field(cycle, "data_povoamento"))
    fim = as_date(get_field(cycle, "data_despesca"))
    return f"{inicio.isoformat()} - {fim.isoformat() if fim else 'em andamento'}"


def cycle_comparison_rows(cycles: Iterable[Any], today: Optional[date] = None) -> List[Dict[str, Any]]:
    """
    Uma linha por ciclo, com ordem de campos estável e valores numéricos
    crus (a formatação fica com o exportador).
    """
    rows = []
    for cycle in cycles:
        rows.append({
            "nome_ciclo": get_field(cycle, "nome_ciclo"),
            "periodo": _periodo_label(cycle),
            "dias_cultivo": cycle_cultivation_days(cycle, today),
            "fca_final": to_decimal(get_field(cycle, "fca_final")),
            "sobrevivencia_final": to_decimal(get_field(cycle, "sobrevivencia_final")),
            "peso_final_despesca": to_decimal(get_field(cycle, "peso_final_despesca")),
            "receita_total": to_decimal(get_field(cycle, "receita_total")),
            "finalizado": get_field(cycle, "status") == CicloStatusEnum.finalizado.value,
        })
    return rows


def cycle_comparison_summary(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Folha de resumo: médias de FCA e sobrevivência (ausentes contam 0,
    como na planilha exportada) e receita total.
    """
    n = len(rows)
    if n == 0:
        return {"total_ciclos": 0, "media_fca": None, "media_sobrevivencia": None, "receita_total": ZERO.quantize(MONEY)}
    return {
        "total_ciclos": n,
        "media_fca": (sum((r["fca_final"] or ZERO for r in rows), ZERO) / n).quantize(RATIO),
        "media_sobrevivencia": (sum((r["sobrevivencia_final"] or ZERO for r in rows), ZERO) / n).quantize(PCT),
        "receita_total": sum((r["receita_total"] or ZERO for r in rows), ZERO).quantize(MONEY),
    }
