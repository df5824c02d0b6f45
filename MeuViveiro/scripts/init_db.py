# Executa a partir de MeuViveiro/:
#   python -m scripts.init_db            # cria as tabelas que faltam
#   python -m scripts.init_db --drop     # recria tudo (apaga os dados!)
#
# Usa DATABASE_URL do .env (SQLite local por padrão).

from argparse import ArgumentParser

from config.settings import settings
from models import Base
from utils.db import engine


def init_db(drop: bool = False) -> None:
    if drop:
        Base.metadata.drop_all(bind=engine)
        print("[OK] Tabelas removidas")
    Base.metadata.create_all(bind=engine)
    print(f"[OK] Tabelas criadas em {settings.DATABASE_URL}: {', '.join(sorted(Base.metadata.tables))}")


if __name__ == "__main__":
    parser = ArgumentParser(description="Cria o schema do banco do Meu Viveiro")
    parser.add_argument("--drop", action="store_true", help="Remove as tabelas antes de criar")
    args = parser.parse_args()
    init_db(drop=args.drop)
