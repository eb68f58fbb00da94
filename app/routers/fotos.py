from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import INT_MAX, get_db
from app.core.exceptions import RegistrosError, http_error
from app.schemas.foto import FotoIn, FotoOut
from app.services import fotos_service

# Las fotos de perfil se publican bajo el prefijo de perfiles
router = APIRouter(prefix=f"{settings.API_PERFILES_PREFIX}/fotos", tags=["Fotos"])


@router.get(
    "",
    response_model=list[FotoOut],
    summary="Obtener todas las fotos",
    responses={204: {"description": "No hay fotos registradas."}},
)
def listar_fotos(db: Session = Depends(get_db)):
    fotos = fotos_service.find_all(db)
    if not fotos:
        return Response(status_code=204)
    return fotos


@router.get(
    "/{foto_id}",
    response_model=FotoOut,
    summary="Obtener una foto por su ID",
    responses={404: {"description": "Foto no encontrada."}},
)
def buscar_foto(foto_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        return fotos_service.find_by_id(db, foto_id)
    except RegistrosError as e:
        raise http_error(e)


@router.post(
    "",
    response_model=FotoOut,
    status_code=201,
    summary="Crear una nueva foto",
    responses={400: {"description": "Datos inválidos."}},
)
def agregar_foto(payload: FotoIn, db: Session = Depends(get_db)):
    try:
        return fotos_service.save(db, payload)
    except RegistrosError as e:
        raise http_error(e)


@router.put(
    "/{foto_id}",
    response_model=FotoOut,
    summary="Actualizar una foto existente",
    responses={
        400: {"description": "Datos inválidos."},
        404: {"description": "Foto no encontrada."},
    },
)
def actualizar_foto(payload: FotoIn, foto_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        return fotos_service.update(db, payload, foto_id)
    except RegistrosError as e:
        raise http_error(e)


@router.delete(
    "/{foto_id}",
    summary="Eliminar una foto",
    responses={
        400: {"description": "No se puede eliminar una foto en uso."},
        404: {"description": "Foto no encontrada."},
    },
)
def eliminar_foto(foto_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        fotos_service.delete(db, foto_id)
    except RegistrosError as e:
        raise http_error(e)
    return {"detail": "Foto eliminada con éxito."}
