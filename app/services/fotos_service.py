from __future__ import annotations

from typing import List

from sqlalchemy.orm import Session

from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.core.log import get_logger
from app.models.foto import Foto
from app.models.historial import Historial
from app.schemas.foto import FotoIn
from app.services.utils import commit_o_invalid, fecha_naive_utc, validar_texto

logger = get_logger("fotos")

URL_MAX = 255
DESCRIPCION_MAX = 100


def validar_atributos_foto(payload: FotoIn | None) -> dict:
    """
    URL y fecha de subida son obligatorias; la descripción es opcional
    y solo se valida su longitud.
    """
    if payload is None:
        raise InvalidArgumentError("La foto no puede ser nula.")

    url = validar_texto(
        payload.url,
        campo="La URL de la foto",
        max_len=URL_MAX,
        obligatorio=True,
    )

    if payload.fecha_subida is None:
        raise InvalidArgumentError("La fecha de subida de la foto es un campo obligatorio.")

    descripcion = validar_texto(
        payload.descripcion,
        campo="La descripción de la foto",
        max_len=DESCRIPCION_MAX,
    )

    return {"url": url, "fecha_subida": fecha_naive_utc(payload.fecha_subida), "descripcion": descripcion}


def find_all(db: Session) -> List[Foto]:
    return db.query(Foto).order_by(Foto.id_foto.asc()).all()


def find_by_id(db: Session, foto_id: int) -> Foto:
    foto = db.get(Foto, foto_id)
    if not foto:
        raise NotFoundError(f"Foto no encontrada con ID: {foto_id}")
    return foto


def find_by_url(db: Session, url: str) -> List[Foto]:
    return db.query(Foto).filter(Foto.url == url).all()


def save(db: Session, payload: FotoIn) -> Foto:
    data = validar_atributos_foto(payload)

    foto = Foto(**data)
    db.add(foto)
    commit_o_invalid(db, "Error de integridad de datos.")
    db.refresh(foto)

    logger.info("Foto creada id=%s", foto.id_foto)
    return foto


def update(db: Session, payload: FotoIn, foto_id: int) -> Foto:
    foto = find_by_id(db, foto_id)
    data = validar_atributos_foto(payload)

    foto.url = data["url"]
    foto.fecha_subida = data["fecha_subida"]
    foto.descripcion = data["descripcion"]

    commit_o_invalid(db, "Error de integridad de datos.")
    db.refresh(foto)

    logger.info("Foto actualizada id=%s", foto_id)
    return foto


def delete(db: Session, foto_id: int) -> None:
    foto = find_by_id(db, foto_id)

    en_uso = (
        db.query(Historial.id_historial)
        .filter(Historial.id_foto == foto_id)
        .first()
    )
    if en_uso:
        logger.warning("Foto id=%s en uso, no se elimina", foto_id)
        raise InvalidArgumentError("No se puede eliminar la foto, está siendo utilizada por otros registros.")

    db.delete(foto)
    commit_o_invalid(db, "No se puede eliminar la foto, está siendo utilizada por otros registros.")
    logger.info("Foto eliminada id=%s", foto_id)
