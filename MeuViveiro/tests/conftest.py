"""Fixtures compartilhadas: banco SQLite em memória e TestClient com get_db sobrescrito."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from main import app
from models import Base
from utils.db import get_db


@pytest.fixture()
def db_session() -> Generator[Session, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def client(db_session: Session) -> Generator[TestClient, None, None]:
    def _override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture()
def viveiro_id(client: TestClient) -> int:
    resp = client.post("/ponds", json={"nome": "Viveiro 1", "area_m2": 5000})
    assert resp.status_code == 201, resp.text
    return resp.json()["viveiro_id"]


@pytest.fixture()
def cycle_payload(viveiro_id: int) -> dict:
    return {
        "viveiro_id": viveiro_id,
        "nome_ciclo": "Ciclo Verão 2024",
        "data_povoamento": "2024-01-01",
        "peso_inicial_total": 100.0,
        "quantidade_povoada": 10000,
    }


@pytest.fixture()
def cycle_id(client: TestClient, cycle_payload: dict) -> int:
    resp = client.post("/cycles", json=cycle_payload)
    assert resp.status_code == 201, resp.text
    return resp.json()["ciclo_id"]
