import os

# Antes de importar la app: el engine global no debe apuntar a PostgreSQL
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_SCHEMA_ON_STARTUP", "false")

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config.database import get_db
from app.main import app
from app.shared.database.models import AccountEntity, Base, PocketEntity


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def accounts(db):
    """Tres cuentas ACTIVE con saldo 1000.0; devuelve sus ids"""
    entities = [
        AccountEntity(
            account_number=f"ACC-{i:04d}",
            owner_name=f"Titular {i}",
            status="ACTIVE",
            balance=Decimal("1000.00"),
        )
        for i in range(3)
    ]
    db.add_all(entities)
    db.commit()
    return [entity.id for entity in entities]


@pytest.fixture
def pockets(db, accounts):
    """Un bolsillo vacío para cada una de las dos primeras cuentas"""
    entities = [
        PocketEntity(name="Ahorro", balance=Decimal("0.00"), account_id=accounts[0]),
        PocketEntity(name="Viajes", balance=Decimal("0.00"), account_id=accounts[1]),
    ]
    db.add_all(entities)
    db.commit()
    return [entity.id for entity in entities]


@pytest.fixture
def update_account(db):
    def _update(account_id, **fields):
        entity = db.get(AccountEntity, account_id)
        for key, value in fields.items():
            setattr(entity, key, value)
        db.commit()
    return _update


@pytest.fixture
def balances(session_factory):
    """Leer saldos persistidos desde una sesión nueva"""
    def _read(model, *ids):
        session = session_factory()
        try:
            return [session.get(model, entity_id).balance for entity_id in ids]
        finally:
            session.close()
    return _read


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
