from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.core.log import get_logger
from app.models.estado import Estado
from app.models.historial import Historial
from app.schemas.estado import EstadoIn
from app.services.utils import commit_o_invalid, validar_texto

logger = get_logger("estados")

NOMBRE_MAX = 50
DESCRIPCION_MAX = 100


# =====================================================
# Validación
# =====================================================

def validar_atributos_estado(payload: EstadoIn | None) -> dict:
    if payload is None:
        raise InvalidArgumentError("El estado no puede ser nulo.")

    return {
        "nombre": validar_texto(
            payload.nombre,
            campo="El nombre del estado",
            max_len=NOMBRE_MAX,
            obligatorio=True,
        ),
        "descripcion": validar_texto(
            payload.descripcion,
            campo="La descripción del estado",
            max_len=DESCRIPCION_MAX,
        ),
    }


# =====================================================
# Consultas
# =====================================================

def find_all(db: Session) -> List[Estado]:
    return db.query(Estado).order_by(Estado.id_estado.asc()).all()


def find_by_id(db: Session, estado_id: int) -> Estado:
    estado = db.get(Estado, estado_id)
    if not estado:
        raise NotFoundError(f"Estado no encontrado con ID: {estado_id}")
    return estado


def find_by_nombre(db: Session, nombre: str) -> List[Estado]:
    return (
        db.query(Estado)
        .filter(Estado.nombre == (nombre or "").strip())
        .order_by(Estado.id_estado.asc())
        .all()
    )


# =====================================================
# Escritura
# =====================================================

def save(db: Session, payload: EstadoIn) -> Estado:
    data = validar_atributos_estado(payload)

    estado = Estado(**data)
    db.add(estado)
    commit_o_invalid(
        db,
        "Error de integridad de datos. El nombre del estado ya existe o los datos son inválidos.",
    )
    db.refresh(estado)

    logger.info("Estado creado id=%s nombre=%s", estado.id_estado, estado.nombre)
    return estado


def update(db: Session, payload: EstadoIn, estado_id: int) -> Estado:
    estado = find_by_id(db, estado_id)
    data = validar_atributos_estado(payload)

    estado.nombre = data["nombre"]
    estado.descripcion = data["descripcion"]

    commit_o_invalid(db, "Error de integridad de datos. El nombre del estado ya existe.")
    db.refresh(estado)

    logger.info("Estado actualizado id=%s", estado_id)
    return estado


def delete(db: Session, estado_id: int) -> None:
    estado = find_by_id(db, estado_id)

    en_uso = (
        db.query(Historial.id_historial)
        .filter(Historial.id_estado == estado_id)
        .first()
    )
    if en_uso:
        logger.warning("Estado id=%s en uso, no se elimina", estado_id)
        raise InvalidArgumentError(
            "No se puede eliminar el estado. Está siendo utilizado por otros registros."
        )

    db.delete(estado)
    commit_o_invalid(
        db,
        "No se puede eliminar el estado. Está siendo utilizado por otros registros.",
    )
    logger.info("Estado eliminado id=%s", estado_id)
