from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.core.log import get_logger
from app.models.categoria import Categoria
from app.models.historial import Historial
from app.schemas.categoria import CategoriaIn
from app.services.utils import commit_o_invalid, validar_texto

logger = get_logger("categorias")

NOMBRE_MAX = 50
DESCRIPCION_MAX = 100


# =====================================================
# Validación
# =====================================================

def validar_atributos_categoria(payload: CategoriaIn | None) -> dict:
    if payload is None:
        raise InvalidArgumentError("La categoría no puede ser nula.")

    return {
        "nombre": validar_texto(
            payload.nombre,
            campo="El nombre de la categoría",
            max_len=NOMBRE_MAX,
            obligatorio=True,
        ),
        "descripcion": validar_texto(
            payload.descripcion,
            campo="La descripción de la categoría",
            max_len=DESCRIPCION_MAX,
        ),
    }


# =====================================================
# Consultas
# =====================================================

def find_all(db: Session) -> List[Categoria]:
    return db.query(Categoria).order_by(Categoria.id_categoria.asc()).all()


def find_by_id(db: Session, categoria_id: int) -> Categoria:
    categoria = db.get(Categoria, categoria_id)
    if not categoria:
        raise NotFoundError(f"Categoría no encontrada con ID: {categoria_id}")
    return categoria


def find_by_nombre(db: Session, nombre: str) -> List[Categoria]:
    return (
        db.query(Categoria)
        .filter(Categoria.nombre == (nombre or "").strip())
        .order_by(Categoria.id_categoria.asc())
        .all()
    )


# =====================================================
# Escritura
# =====================================================

def save(db: Session, payload: CategoriaIn) -> Categoria:
    data = validar_atributos_categoria(payload)

    categoria = Categoria(**data)
    db.add(categoria)
    commit_o_invalid(
        db,
        "Error de integridad de datos. El nombre de la categoría ya existe o los datos son inválidos.",
    )
    db.refresh(categoria)

    logger.info("Categoria creada id=%s nombre=%s", categoria.id_categoria, categoria.nombre)
    return categoria


def update(db: Session, payload: CategoriaIn, categoria_id: int) -> Categoria:
    categoria = find_by_id(db, categoria_id)
    data = validar_atributos_categoria(payload)

    categoria.nombre = data["nombre"]
    categoria.descripcion = data["descripcion"]

    commit_o_invalid(db, "Error de integridad de datos. El nombre de la categoría ya existe.")
    db.refresh(categoria)

    logger.info("Categoria actualizada id=%s", categoria_id)
    return categoria


def delete(db: Session, categoria_id: int) -> None:
    categoria = find_by_id(db, categoria_id)

    en_uso = (
        db.query(Historial.id_historial)
        .filter(Historial.id_categoria == categoria_id)
        .first()
    )
    if en_uso:
        logger.warning("Categoria id=%s en uso, no se elimina", categoria_id)
        raise InvalidArgumentError(
            "No se puede eliminar la categoría. Está siendo utilizada por otros registros."
        )

    db.delete(categoria)
    commit_o_invalid(
        db,
        "No se puede eliminar la categoría. Está siendo utilizada por otros registros.",
    )
    logger.info("Categoria eliminada id=%s", categoria_id)
