"""Fixtures pytest: SQLite en memoria y TestClient con get_db sobreescrito."""
import os

# Antes de importar la app: el engine global se crea al importar app.core.db
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("APP_ENV", "test")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.core.db import Base, build_engine, get_db
from app.main import app
from app.models.categoria import Categoria
from app.models.estado import Estado
from app.models.historial import Historial


@pytest.fixture(scope="function")
def db():
    """Sesión DB en memoria para tests (FKs activas)."""
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    Session = sessionmaker(bind=engine, autoflush=False, autocommit=False)
    session = Session()

    yield session

    session.close()
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture(scope="function")
def client(db):
    def _get_db_override():
        yield db

    app.dependency_overrides[get_db] = _get_db_override
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def estado_activo(db):
    estado = Estado(nombre="Activo", descripcion="El usuario está activo en el sistema.")
    db.add(estado)
    db.commit()
    db.refresh(estado)
    return estado


@pytest.fixture
def categoria_sistema(db):
    categoria = Categoria(nombre="Sistema")
    db.add(categoria)
    db.commit()
    db.refresh(categoria)
    return categoria


@pytest.fixture
def historial(db, estado_activo, categoria_sistema):
    h = Historial(
        estado=estado_activo,
        categoria=categoria_sistema,
        fecha_historial=datetime(2025, 9, 9, 10, 30),
        detalle="Se envió un mensaje de alerta por un incidente.",
        id_envio_mensaje=10,
    )
    db.add(h)
    db.commit()
    db.refresh(h)
    return h
