# models/__init__.py
from utils.db import Base  # re-export
from .fazenda import Fazenda
from .viveiro import Viveiro
from .cycle import CicloCultivo
from .biometria import Biometria
from .alimentacao import AlimentacaoDiaria
from .qualidade_agua import QualidadeAgua
from .registro_sanitario import RegistroSanitario
from .financeiro import Financeiro
