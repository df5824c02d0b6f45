from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from enums.enums import AlertCodeEnum, AlertLevelEnum
from services.alert_service import (
    average_mortality,
    evaluate_risk_level,
    generate_alerts,
    history_fca,
)


def _water(day: int, ph: float | None = 7.5, oxygen: float | None = 5.0) -> dict:
    return {"data_coleta": date(2024, 3, day), "ph": ph, "oxigenio_dissolvido": oxygen}


def _feeding(day: int, racao: float = 10.0, mortalidade: int | None = 0) -> dict:
    return {"data_alimentacao": date(2024, 3, day), "quantidade_racao": racao, "mortalidade_observada": mortalidade}


def test_empty_history_is_normal() -> None:
    assert evaluate_risk_level([], []) == AlertLevelEnum.normal
    assert generate_alerts([], []) == []


def test_low_oxygen_is_critical() -> None:
    assert evaluate_risk_level([_water(1, ph=7.0, oxygen=2.5)], []) == AlertLevelEnum.critical


def test_zero_oxygen_reading_still_triggers() -> None:
    assert evaluate_risk_level([_water(1, oxygen=0.0)], []) == AlertLevelEnum.critical


def test_oxygen_exactly_at_threshold_is_not_critical() -> None:
    assert evaluate_risk_level([_water(1, oxygen=3.0)], []) == AlertLevelEnum.normal


def test_high_average_mortality_is_critical() -> None:
    feedings = [_feeding(1, mortalidade=4), _feeding(2, mortalidade=8)]
    assert evaluate_risk_level([_water(1)], feedings) == AlertLevelEnum.critical


def test_average_mortality_ignores_missing_values() -> None:
    feedings = [_feeding(1, mortalidade=6), _feeding(2, mortalidade=None)]
    assert average_mortality(feedings) == Decimal("6")
    assert average_mortality([_feeding(1, mortalidade=None)]) is None


@pytest.mark.parametrize("ph", [6.4, 9.1])
def test_ph_out_of_range_is_warning(ph: float) -> None:
    assert evaluate_risk_level([_water(1, ph=ph)], []) == AlertLevelEnum.warning


@pytest.mark.parametrize("ph", [6.5, 9.0])
def test_ph_bounds_are_inclusive(ph: float) -> None:
    assert evaluate_risk_level([_water(1, ph=ph)], []) == AlertLevelEnum.normal


def test_missing_readings_never_trigger() -> None:
    water = [_water(1, ph=None, oxygen=None)]
    feedings = [_feeding(1, mortalidade=None)]
    assert evaluate_risk_level(water, feedings) == AlertLevelEnum.normal


def test_critical_wins_over_warning() -> None:
    water = [_water(1, ph=5.0), _water(2, oxygen=1.0)]
    assert evaluate_risk_level(water, []) == AlertLevelEnum.critical


def test_high_fca_is_warning() -> None:
    feedings = [_feeding(1, racao=200.0), _feeding(2, racao=150.0)]
    biometrics = [{"data_coleta": date(2024, 3, 2), "biomassa_estimada": 250.0}]
    # 350 / (250 - 100)
    assert history_fca(feedings, biometrics, 100.0) == Decimal("2.3333")
    assert evaluate_risk_level([_water(1)], feedings, biometrics, 100.0) == AlertLevelEnum.warning


def test_fca_rule_skipped_without_biomass() -> None:
    feedings = [_feeding(1, racao=1000.0)]
    assert history_fca(feedings, [], 100.0) == 0.0
    assert evaluate_risk_level([], feedings, [], 100.0) == AlertLevelEnum.normal


def test_generate_alerts_lists_each_problem_most_recent_first() -> None:
    water = [_water(1, ph=9.5), _water(3, oxygen=2.0)]
    feedings = [_feeding(2, mortalidade=12)]

    alerts = generate_alerts(water, feedings)

    assert [a["code"] for a in alerts] == [
        AlertCodeEnum.OXIGENIO_CRITICO.value,
        AlertCodeEnum.MORTALIDADE_ALTA.value,
        AlertCodeEnum.PH_FORA_FAIXA.value,
    ]
    assert alerts[0]["severity"] == "critical"
    assert alerts[0]["valor"] == Decimal("2.0")
    assert alerts[1]["data"] == date(2024, 3, 2)
    assert alerts[2]["severity"] == "warning"


def test_average_mortality_counts_only_recorded_values() -> None:
    # Dias sem contagem não diluem a média: 10 / 1, não 10 / 3
    feedings = [_feeding(1, mortalidade=10), _feeding(2, mortalidade=None), _feeding(3, mortalidade=None)]
    assert average_mortality(feedings) == Decimal("10")
    assert evaluate_risk_level([], feedings) == AlertLevelEnum.critical


def test_high_fca_alert_uses_newest_same_day_biometric() -> None:
    feedings = [_feeding(1, racao=330.0)]
    biometrics = [
        {"biometria_id": 2, "data_coleta": date(2024, 3, 2), "biomassa_estimada": 300.0},
        {"biometria_id": 1, "data_coleta": date(2024, 3, 2), "biomassa_estimada": 200.0},
    ]
    # 330 / (300 - 100) = 1.65; com a amostra antiga seria 3.3
    assert evaluate_risk_level([], feedings, biometrics, 100.0) == AlertLevelEnum.normal
