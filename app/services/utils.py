from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import InvalidArgumentError


def norm_str(v):
    if v is None:
        return None
    s = str(v).strip()
    return s if s != "" else None


def validar_texto(
    valor: Optional[str],
    *,
    campo: str,
    max_len: int,
    obligatorio: bool = False,
) -> Optional[str]:
    """
    Valida un campo de texto y lo devuelve normalizado (strip, "" -> None).
    `campo` es el texto usado en el mensaje, ej: "El nombre del estado".
    """
    s = norm_str(valor)

    if s is None:
        if obligatorio:
            raise InvalidArgumentError(f"{campo} es un campo obligatorio.")
        return None

    if len(s) > max_len:
        raise InvalidArgumentError(f"{campo} no puede exceder los {max_len} caracteres.")

    return s


def fecha_naive_utc(valor: Optional[datetime]) -> Optional[datetime]:
    """
    Las columnas de fecha no guardan zona horaria: una fecha con offset
    se pasa a UTC antes de guardarla. Las fechas sin offset se dejan igual.
    """
    if valor is None or valor.tzinfo is None:
        return valor
    return valor.astimezone(timezone.utc).replace(tzinfo=None)


def commit_o_invalid(db: Session, mensaje: str) -> None:
    """
    Commit de la sesión. Cualquier IntegrityError se revierte y se
    relanza como InvalidArgumentError(mensaje).
    """
    try:
        db.commit()
    except IntegrityError as ie:
        db.rollback()
        raise InvalidArgumentError(mensaje) from ie
