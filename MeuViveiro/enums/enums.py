from enum import Enum

# =====================================================
# 🔁 CICLOS
# =====================================================
class CicloStatusEnum(str, Enum):
    ativo = "ativo"
    finalizado = "finalizado"


# =====================================================
# 🚨 ALERTAS
# =====================================================
class AlertLevelEnum(str, Enum):
    normal = "normal"
    warning = "warning"
    critical = "critical"


class AlertCodeEnum(str, Enum):
    OXIGENIO_CRITICO = "OXIGENIO_CRITICO"
    MORTALIDADE_ALTA = "MORTALIDADE_ALTA"
    PH_FORA_FAIXA = "PH_FORA_FAIXA"
    FCA_ALTO = "FCA_ALTO"


# =====================================================
# 💰 FINANCEIRO
# =====================================================
class TipoFinanceiroEnum(str, Enum):
    entrada = "entrada"  # Receita (inflow)
    saida = "saida"      # Despesa (outflow)


class PeriodoEnum(str, Enum):
    dia = "dia"
    mes = "mes"
    ano = "ano"
