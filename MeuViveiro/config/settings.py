# config/settings.py
"""
Configuração centralizada da aplicação usando Pydantic Settings.
As variáveis são carregadas do arquivo .env
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


class Settings(BaseSettings):
    """Configuração da aplicação"""

    # Banco de dados
    DATABASE_URL: str = "sqlite:///./meu_viveiro.db"

    # CORS
    CORS_ALLOW_ORIGINS: List[str] = ["http://localhost:5173"]

    # Fuso horário de referência para "hoje" (dias de cultivo, resumos)
    TIMEZONE: str = "America/Sao_Paulo"

    # Logging
    LOG_LEVEL: str = "info"
    LOG_FORMAT: str = "json"  # json | console

    @field_validator("TIMEZONE")
    @classmethod
    def check_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"TIMEZONE inválido: {value!r}") from exc
        return value

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
