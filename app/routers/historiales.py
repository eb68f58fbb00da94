from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import INT_MAX, get_db
from app.core.exceptions import RegistrosError, http_error
from app.schemas.historial import HistorialIn, HistorialOut
from app.services import historiales_service

router = APIRouter(prefix=f"{settings.API_REGISTROS_PREFIX}/historiales", tags=["Historial"])


@router.get(
    "",
    response_model=list[HistorialOut],
    summary="Obtener todos los registros de historial",
    responses={204: {"description": "No hay registros de historial."}},
)
def listar_historiales(db: Session = Depends(get_db)):
    historiales = historiales_service.find_all(db)
    if not historiales:
        return Response(status_code=204)
    return historiales


@router.get(
    "/buscar",
    response_model=list[HistorialOut],
    summary="Buscar historiales por su estado",
    responses={
        204: {"description": "No hay historiales con ese estado."},
        404: {"description": "Estado no encontrado."},
    },
)
def buscar_historial_por_estado(
    estado_id: int = Query(..., alias="estadoId", ge=1, le=INT_MAX, description="ID del estado"),
    categoria_id: Optional[int] = Query(None, alias="categoriaId", ge=1, le=INT_MAX, description="ID de la categoría (opcional)"),
    db: Session = Depends(get_db),
):
    try:
        historiales = historiales_service.find_by_estado_id(db, estado_id, categoria_id)
    except RegistrosError as e:
        raise http_error(e)

    if not historiales:
        return Response(status_code=204)
    return historiales


@router.get(
    "/{historial_id}",
    response_model=HistorialOut,
    summary="Obtener un registro de historial por su ID",
    responses={404: {"description": "Historial no encontrado."}},
)
def buscar_historial(historial_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        return historiales_service.find_by_id(db, historial_id)
    except RegistrosError as e:
        raise http_error(e)


@router.post(
    "",
    response_model=HistorialOut,
    status_code=201,
    summary="Crear un nuevo registro de historial",
    responses={400: {"description": "Datos inválidos o referencias inexistentes."}},
)
def crear_historial(payload: HistorialIn, db: Session = Depends(get_db)):
    try:
        return historiales_service.save(db, payload)
    except RegistrosError as e:
        raise http_error(e)


@router.put(
    "/{historial_id}",
    response_model=HistorialOut,
    summary="Actualizar un registro de historial",
    description="Puede estar deshabilitado (HISTORIAL_PERMITIR_ACTUALIZACION=false): el historial es de auditoría.",
    responses={
        400: {"description": "Datos inválidos o historial inmutable."},
        404: {"description": "Historial no encontrado."},
    },
)
def actualizar_historial(payload: HistorialIn, historial_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        return historiales_service.update(db, payload, historial_id)
    except RegistrosError as e:
        raise http_error(e)


@router.delete(
    "/{historial_id}",
    status_code=204,
    summary="Eliminar un registro de historial",
    responses={404: {"description": "Historial no encontrado."}},
)
def eliminar_historial(historial_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        historiales_service.delete(db, historial_id)
    except RegistrosError as e:
        raise http_error(e)
    return Response(status_code=204)
