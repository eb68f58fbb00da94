from __future__ import annotations

from typing import List, Optional

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.core.log import get_logger
from app.models.categoria import Categoria
from app.models.estado import Estado
from app.models.foto import Foto
from app.models.historial import REFERENCIAS_EXTERNAS, Historial
from app.schemas.historial import HistorialIn
from app.services import estados_service
from app.services.utils import commit_o_invalid, fecha_naive_utc, validar_texto

logger = get_logger("historiales")

DETALLE_MAX = 250


# =====================================================
# Validación
# =====================================================

def _resolver(db: Session, model, pk: Optional[int], etiqueta: str, obligatorio: bool):
    if pk is None:
        if obligatorio:
            raise InvalidArgumentError(f"{etiqueta} del historial es un campo obligatorio.")
        return None

    obj = db.get(model, pk)
    if obj is None:
        raise InvalidArgumentError(f"{etiqueta} con ID {pk} no existe.")
    return obj


def validar_atributos_historial(db: Session, payload: HistorialIn | None) -> dict:
    """
    Valida el payload y resuelve las relaciones.

    Devuelve un dict listo para asignar sobre un Historial:
    detalle normalizado, fecha, estado/categoria/foto como entidades y las
    referencias externas tal cual (no se validan: pertenecen a otros servicios).
    """
    if payload is None:
        raise InvalidArgumentError("El historial no puede ser nulo.")

    detalle = validar_texto(
        payload.detalle,
        campo="El detalle del historial",
        max_len=DETALLE_MAX,
        obligatorio=True,
    )

    if payload.fecha_historial is None:
        raise InvalidArgumentError("La fecha del historial es un campo obligatorio.")

    data = {
        "detalle": detalle,
        "fecha_historial": fecha_naive_utc(payload.fecha_historial),
        "estado": _resolver(db, Estado, payload.estado_id(), "El estado", True),
        "categoria": _resolver(db, Categoria, payload.categoria_id(), "La categoría", True),
        "foto": _resolver(db, Foto, payload.foto_id(), "La foto", False),
    }

    for campo in REFERENCIAS_EXTERNAS:
        data[campo] = getattr(payload, campo)

    return data


# =====================================================
# Consultas
# =====================================================

def find_all(db: Session) -> List[Historial]:
    return db.query(Historial).order_by(Historial.fecha_historial.desc(), Historial.id_historial.desc()).all()


def find_by_id(db: Session, historial_id: int) -> Historial:
    historial = db.get(Historial, historial_id)
    if not historial:
        raise NotFoundError(f"Historial no encontrado con ID: {historial_id}")
    return historial


def find_by_estado_id(
    db: Session,
    estado_id: int,
    categoria_id: Optional[int] = None,
) -> List[Historial]:
    # 404 si el estado mismo no existe
    estados_service.find_by_id(db, estado_id)

    q = db.query(Historial).filter(Historial.id_estado == estado_id)
    if categoria_id is not None:
        q = q.filter(Historial.id_categoria == categoria_id)

    return q.order_by(Historial.fecha_historial.desc(), Historial.id_historial.desc()).all()


# =====================================================
# Escritura
# =====================================================

def save(db: Session, payload: HistorialIn) -> Historial:
    data = validar_atributos_historial(db, payload)

    historial = Historial(**data)
    db.add(historial)
    commit_o_invalid(db, "Error de integridad de datos. No se pudo realizar la operación.")
    db.refresh(historial)

    logger.info(
        "Historial creado id=%s estado=%s categoria=%s",
        historial.id_historial,
        historial.id_estado,
        historial.id_categoria,
    )
    return historial


def update(
    db: Session,
    payload: HistorialIn,
    historial_id: int,
    permitir_actualizacion: Optional[bool] = None,
) -> Historial:
    """
    Reemplaza todos los campos del registro.
    Con HISTORIAL_PERMITIR_ACTUALIZACION=false el historial es inmutable
    y cualquier actualización se rechaza.
    """
    if permitir_actualizacion is None:
        permitir_actualizacion = settings.HISTORIAL_PERMITIR_ACTUALIZACION

    historial = find_by_id(db, historial_id)

    if not permitir_actualizacion:
        logger.warning("Actualización de historial id=%s rechazada (inmutable)", historial_id)
        raise InvalidArgumentError("El historial es inmutable: no se permiten actualizaciones.")

    data = validar_atributos_historial(db, payload)
    for campo, valor in data.items():
        setattr(historial, campo, valor)

    commit_o_invalid(db, "Error de integridad de datos. No se pudo actualizar el historial.")
    db.refresh(historial)

    logger.info("Historial actualizado id=%s", historial_id)
    return historial


def delete(db: Session, historial_id: int) -> None:
    historial = find_by_id(db, historial_id)

    db.delete(historial)
    commit_o_invalid(db, "No se puede eliminar el historial.")
    logger.info("Historial eliminado id=%s", historial_id)
