"""
Serviço de cálculos para métricas do ciclo de cultivo.

Funções puras: recebem snapshots já materializados (dicts, linhas ORM ou
schemas) e devolvem Decimal quantizado. Nenhuma consulta ao banco acontece aqui.

Convenção para campos ausentes (None):
- quantidades/custos ausentes somam como 0
- peso inicial ausente conta como 0
- FCA não computável => 0 (sentinela, NÃO é um FCA real de zero)
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, Mapping, Optional

from enums.enums import CicloStatusEnum
from utils.datetime_utils import as_date, today_local


# Custo estimado da ração (R$/kg). Sem cotação de mercado.
FEED_COST_PER_KG = Decimal("5.00")

KG = Decimal("0.001")
MONEY = Decimal("0.01")
RATIO = Decimal("0.0001")
PCT = Decimal("0.01")
ZERO = Decimal("0")


# ==================== ACESSO A CAMPOS ====================

def get_field(record: Any, name: str) -> Any:
    """Lê um campo de um dict ou de um objeto com atributos."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


def to_decimal(value: Any, default: Optional[Decimal] = None) -> Optional[Decimal]:
    """Converte float/int/str para Decimal; None vira `default`."""
    if value is None:
        return default
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


# ==================== CÁLCULOS BÁSICOS ====================

def weight_gain(initial_weight: Optional[Decimal], final_weight: Decimal) -> Decimal:
    """
    Ganho de peso do ciclo.

    Fórmula:
    ganho = peso_final - peso_inicial

    Pode ser negativo (provável erro de digitação): é devolvido como está,
    sem truncar, para que apareça no painel.
    """
    gain = to_decimal(final_weight, ZERO) - to_decimal(initial_weight, ZERO)
    return gain.quantize(KG)


def feed_conversion_ratio(total_feed: Decimal, gain: Decimal) -> Decimal:
    """
    Fator de conversão alimentar (FCA).

    Fórmula:
    FCA = ração_total / ganho_de_peso   (se ganho > 0)
    FCA = 0                              (se ganho <= 0, não computável)
    """
    gain = to_decimal(gain, ZERO)
    if gain <= ZERO:
        return ZERO.quantize(RATIO)
    return (to_decimal(total_feed, ZERO) / gain).quantize(RATIO)


def total_feed_consumed(feeding_records: Iterable[Any]) -> Decimal:
    """Soma de `quantidade_racao` (kg). Lista vazia => 0."""
    total = ZERO
    for rec in feeding_records:
        total += to_decimal(get_field(rec, "quantidade_racao"), ZERO)
    return total.quantize(KG)


def total_mortality(feeding_records: Iterable[Any]) -> int:
    """Soma de `mortalidade_observada`."""
    total = 0
    for rec in feeding_records:
        value = get_field(rec, "mortalidade_observada")
        if value is not None:
            total += int(value)
    return total


# ==================== DESPESCA ====================

def harvest_revenue(final_weight: Decimal, price_per_kg: Decimal) -> Decimal:
    """receita = peso_final × preço_kg"""
    revenue = to_decimal(final_weight, ZERO) * to_decimal(price_per_kg, ZERO)
    return revenue.quantize(MONEY)


def feed_cost(total_feed: Decimal, feed_cost_per_kg: Decimal = FEED_COST_PER_KG) -> Decimal:
    """custo_ração = ração_total × custo_kg"""
    cost = to_decimal(total_feed, ZERO) * to_decimal(feed_cost_per_kg, ZERO)
    return cost.quantize(MONEY)


def harvest_profit(
    final_weight: Decimal,
    price_per_kg: Decimal,
    harvest_cost: Optional[Decimal],
    feed_cost_per_kg: Decimal = FEED_COST_PER_KG,
    total_feed: Decimal = ZERO,
) -> Decimal:
    """
    Lucro da despesca.

    Fórmula:
    receita = peso_final × preço_kg
    custo_ração = ração_total × custo_kg
    lucro = receita - custo_ração - custo_despesca
    """
    revenue = harvest_revenue(final_weight, price_per_kg)
    profit = revenue - feed_cost(total_feed, feed_cost_per_kg) - to_decimal(harvest_cost, ZERO)
    return profit.quantize(MONEY)


# ==================== TEMPO ====================

def cultivation_days(
    stock_date: date | datetime | str,
    reference_date: date | datetime | str | None = None,
) -> int:
    """
    Dias inteiros entre o povoamento e a data de referência (hoje por padrão).
    """
    start = as_date(stock_date)
    ref = as_date(reference_date) if reference_date is not None else today_local()
    return (ref - start).days


def cycle_cultivation_days(cycle: Any, today: Optional[date] = None) -> int:
    """
    Dias de cultivo de um ciclo: até a despesca se finalizado, até hoje se ativo.
    """
    reference = None
    if _status_value(get_field(cycle, "status")) == CicloStatusEnum.finalizado.value:
        reference = get_field(cycle, "data_despesca")
    if reference is None:
        reference = today if today is not None else today_local()
    return cultivation_days(get_field(cycle, "data_povoamento"), reference)


def _status_value(status: Any) -> Any:
    return status.value if isinstance(status, CicloStatusEnum) else status


# ==================== BIOMETRIA / SOBREVIVÊNCIA ====================

def _biometric_key(sample: Any) -> tuple:
    # Mesmo dia: o registro mais novo (maior id) vence; sem id conta como o mais antigo
    biometria_id = get_field(sample, "biometria_id")
    return as_date(get_field(sample, "data_coleta")), -1 if biometria_id is None else biometria_id


def latest_biometric(samples: Iterable[Any]) -> Optional[Any]:
    """
    Amostra mais recente por (`data_coleta`, `biometria_id`), ou None.
    Empates sem id ficam com a primeira amostra da entrada.
    """
    latest = None
    latest_key = None
    for sample in samples:
        if get_field(sample, "data_coleta") is None:
            continue
        key = _biometric_key(sample)
        if latest_key is None or key > latest_key:
            latest, latest_key = sample, key
    return latest


def current_biomass(samples: Iterable[Any]) -> Optional[Decimal]:
    """`biomassa_estimada` da última biometria, ou None."""
    latest = latest_biometric(samples)
    if latest is None:
        return None
    return to_decimal(get_field(latest, "biomassa_estimada"))


def survival_rate(stocked_count: Optional[int], mortality: int) -> Optional[Decimal]:
    """
    Sobrevivência (%).

    Fórmula:
    sobrevivência = (povoados - mortalidade) / povoados × 100

    Sem contagem de povoamento (ou <= 0) => None.
    """
    stocked = to_decimal(stocked_count)
    if stocked is None or stocked <= ZERO:
        return None
    rate = (stocked - to_decimal(mortality, ZERO)) / stocked * Decimal("100")
    return rate.quantize(PCT)


# ==================== INDICADORES DO CICLO ====================

def cycle_metrics(
    cycle: Any,
    feeding_records: Iterable[Any],
    biometric_records: Iterable[Any],
    today: Optional[date] = None,
) -> Dict[str, Any]:
    """
    Indicadores do painel do ciclo.

    Peso atual: peso final da despesca se finalizado; senão a biomassa da
    última biometria. Sem peso atual => ganho None e FCA 0.
    """
    feedings = list(feeding_records)
    biometrics = list(biometric_records)

    racao = total_feed_consumed(feedings)
    mortalidade = total_mortality(feedings)
    initial = to_decimal(get_field(cycle, "peso_inicial_total"))

    final = to_decimal(get_field(cycle, "peso_final_despesca"))
    current = final if final is not None else current_biomass(biometrics)

    gain = weight_gain(initial, current) if current is not None else None
    fca = feed_conversion_ratio(racao, gain) if gain is not None else ZERO.quantize(RATIO)

    return {
        "dias_cultivo": cycle_cultivation_days(cycle, today),
        "total_racao_kg": racao,
        "total_mortalidade": mortalidade,
        "peso_inicial_kg": initial,
        "biomassa_atual_kg": current,
        "ganho_de_peso_kg": gain,
        "fca": fca,
        "fca_computavel": fca > ZERO,
        "sobrevivencia_pct": survival_rate(get_field(cycle, "quantidade_povoada"), mortalidade),
    }
