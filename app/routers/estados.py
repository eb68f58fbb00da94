from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import INT_MAX, get_db
from app.core.exceptions import RegistrosError, http_error
from app.schemas.estado import EstadoIn, EstadoOut
from app.services import estados_service

router = APIRouter(prefix=f"{settings.API_REGISTROS_PREFIX}/estados", tags=["Estados"])


@router.get(
    "",
    response_model=list[EstadoOut],
    summary="Obtener todos los estados",
    responses={204: {"description": "No hay estados registrados."}},
)
def listar_estados(db: Session = Depends(get_db)):
    estados = estados_service.find_all(db)
    if not estados:
        return Response(status_code=204)
    return estados


@router.get(
    "/buscar",
    response_model=list[EstadoOut],
    summary="Buscar estados por nombre",
    responses={204: {"description": "Ningún estado coincide con el nombre."}},
)
def buscar_estados_por_nombre(
    nombre: str = Query(..., description="Nombre del estado a buscar"),
    db: Session = Depends(get_db),
):
    estados = estados_service.find_by_nombre(db, nombre)
    if not estados:
        return Response(status_code=204)
    return estados


@router.get(
    "/{estado_id}",
    response_model=EstadoOut,
    summary="Obtener un estado por su ID",
    responses={404: {"description": "Estado no encontrado."}},
)
def buscar_estado(estado_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        return estados_service.find_by_id(db, estado_id)
    except RegistrosError as e:
        raise http_error(e)


@router.post(
    "",
    response_model=EstadoOut,
    status_code=201,
    summary="Crear un nuevo estado",
    responses={
        400: {"description": "El nombre ya existe o los datos son inválidos."},
        500: {"description": "Error interno del servidor."},
    },
)
def agregar_estado(payload: EstadoIn, db: Session = Depends(get_db)):
    try:
        return estados_service.save(db, payload)
    except RegistrosError as e:
        raise http_error(e)


@router.put(
    "/{estado_id}",
    response_model=EstadoOut,
    summary="Actualizar un estado existente",
    responses={
        400: {"description": "El nombre ya existe o los datos son inválidos."},
        404: {"description": "Estado no encontrado."},
    },
)
def actualizar_estado(payload: EstadoIn, estado_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        return estados_service.update(db, payload, estado_id)
    except RegistrosError as e:
        raise http_error(e)


@router.delete(
    "/{estado_id}",
    summary="Eliminar un estado",
    responses={
        400: {"description": "No se puede eliminar un estado en uso."},
        404: {"description": "Estado no encontrado."},
    },
)
def eliminar_estado(estado_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        estados_service.delete(db, estado_id)
    except RegistrosError as e:
        raise http_error(e)
    return {"detail": "Estado eliminado con éxito."}
