"""
Classificação de risco do ciclo a partir das leituras de água e alimentação.

Regras (a primeira que casar vence):
1. critical: oxigênio dissolvido < 3 mg/L em qualquer leitura,
   ou mortalidade média > 5
2. warning: pH < 6.5 ou pH > 9.0 em qualquer leitura
3. warning: FCA do histórico completo > 2.0 (só se computável)
4. normal

Os limites são política fixa, não parâmetros por chamada.
Leituras None nunca disparam a regra correspondente.
"""
from decimal import Decimal
from typing import Any, Dict, Iterable, List, Optional

from enums.enums import AlertCodeEnum, AlertLevelEnum
from services.calculation_service import (
    current_biomass,
    feed_conversion_ratio,
    get_field,
    to_decimal,
    total_feed_consumed,
    weight_gain,
)
from utils.datetime_utils import as_date


OXYGEN_CRITICAL_MG_L = Decimal("3.0")
MORTALITY_AVG_CRITICAL = Decimal("5.0")
PH_MIN = Decimal("6.5")
PH_MAX = Decimal("9.0")
FCA_WARNING = Decimal("2.0")


# ==================== REGRAS ====================

def _low_oxygen(record: Any) -> bool:
    oxygen = to_decimal(get_field(record, "oxigenio_dissolvido"))
    return oxygen is not None and oxygen < OXYGEN_CRITICAL_MG_L


def _ph_out_of_range(record: Any) -> bool:
    ph = to_decimal(get_field(record, "ph"))
    return ph is not None and (ph < PH_MIN or ph > PH_MAX)


def average_mortality(feeding_records: Iterable[Any]) -> Optional[Decimal]:
    """
    Média de `mortalidade_observada` entre os registros que têm valor.
    Sem nenhum valor => None (sem evidência).
    """
    values = [
        to_decimal(get_field(rec, "mortalidade_observada"))
        for rec in feeding_records
        if get_field(rec, "mortalidade_observada") is not None
    ]
    if not values:
        return None
    return sum(values, Decimal("0")) / len(values)


def history_fca(
    feeding_records: Iterable[Any],
    biometric_records: Iterable[Any],
    initial_weight: Optional[Decimal] = None,
) -> Decimal:
    """
    FCA do histórico completo: ração total / (biomassa atual - peso inicial).
    Sem biomassa de biometria => 0 (sentinela).
    """
    current = current_biomass(biometric_records)
    if current is None:
        return Decimal("0")
    return feed_conversion_ratio(
        total_feed_consumed(feeding_records),
        weight_gain(initial_weight, current),
    )


# ==================== CLASSIFICAÇÃO ====================

def evaluate_risk_level(
    water_records: Iterable[Any],
    feeding_records: Iterable[Any],
    biometric_records: Iterable[Any] = (),
    initial_weight: Optional[Decimal] = None,
) -> AlertLevelEnum:
    water = list(water_records)
    feedings = list(feeding_records)

    avg_mortality = average_mortality(feedings)
    if any(_low_oxygen(r) for r in water) or (
        avg_mortality is not None and avg_mortality > MORTALITY_AVG_CRITICAL
    ):
        return AlertLevelEnum.critical

    if any(_ph_out_of_range(r) for r in water):
        return AlertLevelEnum.warning

    # Sentinela 0 nunca passa do limite
    fca = history_fca(feedings, biometric_records, initial_weight)
    if fca > FCA_WARNING:
        return AlertLevelEnum.warning

    return AlertLevelEnum.normal


def generate_alerts(
    water_records: Iterable[Any],
    feeding_records: Iterable[Any],
    biometric_records: Iterable[Any] = (),
    initial_weight: Optional[Decimal] = None,
) -> List[Dict[str, Any]]:
    """
    Lista de alertas ativos (uma entrada por leitura problemática),
    mais recentes primeiro. Alertas agregados (mortalidade, FCA) usam a
    data do último registro de alimentação.
    """
    water = list(water_records)
    feedings = list(feeding_records)
    biometrics = list(biometric_records)
    alerts: List[Dict[str, Any]] = []

    for wq in water:
        collected = as_date(get_field(wq, "data_coleta"))
        if _low_oxygen(wq):
            oxygen = to_decimal(get_field(wq, "oxigenio_dissolvido"))
            alerts.append({
                "severity": AlertLevelEnum.critical.value,
                "code": AlertCodeEnum.OXIGENIO_CRITICO.value,
                "valor": oxygen,
                "data": collected,
                "msg": f"Oxigênio dissolvido crítico: {oxygen} mg/L",
            })
        if _ph_out_of_range(wq):
            ph = to_decimal(get_field(wq, "ph"))
            alerts.append({
                "severity": AlertLevelEnum.warning.value,
                "code": AlertCodeEnum.PH_FORA_FAIXA.value,
                "valor": ph,
                "data": collected,
                "msg": f"pH fora do ideal: {ph}",
            })

    last_feeding = max(
        (d for d in (as_date(get_field(f, "data_alimentacao")) for f in feedings) if d is not None),
        default=None,
    )

    avg_mortality = average_mortality(feedings)
    if avg_mortality is not None and avg_mortality > MORTALITY_AVG_CRITICAL:
        alerts.append({
            "severity": AlertLevelEnum.critical.value,
            "code": AlertCodeEnum.MORTALIDADE_ALTA.value,
            "valor": avg_mortality,
            "data": last_feeding,
            "msg": f"Mortalidade média alta: {avg_mortality:.1f}",
        })

    fca = history_fca(feedings, biometrics, initial_weight)
    if fca > FCA_WARNING:
        alerts.append({
            "severity": AlertLevelEnum.warning.value,
            "code": AlertCodeEnum.FCA_ALTO.value,
            "valor": fca,
            "data": last_feeding,
            "msg": f"FCA acima de {FCA_WARNING}: {fca:.2f}",
        })

    # Sem data vão para o fim
    alerts.sort(key=lambda a: (a["data"] is not None, a["data"]), reverse=True)
    return alerts
