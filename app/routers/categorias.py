from fastapi import APIRouter, Depends, Path, Query, Response
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import INT_MAX, get_db
from app.core.exceptions import RegistrosError, http_error
from app.schemas.categoria import CategoriaIn, CategoriaOut
from app.services import categorias_service

router = APIRouter(prefix=f"{settings.API_REGISTROS_PREFIX}/categorias", tags=["Categorías"])


@router.get(
    "",
    response_model=list[CategoriaOut],
    summary="Obtener todas las categorías",
    responses={204: {"description": "No hay categorías registradas."}},
)
def listar_categorias(db: Session = Depends(get_db)):
    categorias = categorias_service.find_all(db)
    if not categorias:
        return Response(status_code=204)
    return categorias


@router.get(
    "/buscar",
    response_model=list[CategoriaOut],
    summary="Buscar categorías por nombre",
    responses={204: {"description": "Ninguna categoría coincide con el nombre."}},
)
def buscar_categorias_por_nombre(
    nombre: str = Query(..., description="Nombre de la categoría a buscar"),
    db: Session = Depends(get_db),
):
    categorias = categorias_service.find_by_nombre(db, nombre)
    if not categorias:
        return Response(status_code=204)
    return categorias


@router.get(
    "/{categoria_id}",
    response_model=CategoriaOut,
    summary="Obtener una categoría por su ID",
    responses={404: {"description": "Categoría no encontrada."}},
)
def buscar_categoria(categoria_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        return categorias_service.find_by_id(db, categoria_id)
    except RegistrosError as e:
        raise http_error(e)


@router.post(
    "",
    response_model=CategoriaOut,
    status_code=201,
    summary="Crear una nueva categoría",
    responses={
        400: {"description": "El nombre ya existe o los datos son inválidos."},
        500: {"description": "Error interno del servidor."},
    },
)
def agregar_categoria(payload: CategoriaIn, db: Session = Depends(get_db)):
    try:
        return categorias_service.save(db, payload)
    except RegistrosError as e:
        raise http_error(e)


@router.put(
    "/{categoria_id}",
    response_model=CategoriaOut,
    summary="Actualizar una categoría existente",
    responses={
        400: {"description": "El nombre ya existe o los datos son inválidos."},
        404: {"description": "Categoría no encontrada."},
    },
)
def actualizar_categoria(payload: CategoriaIn, categoria_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        return categorias_service.update(db, payload, categoria_id)
    except RegistrosError as e:
        raise http_error(e)


@router.delete(
    "/{categoria_id}",
    summary="Eliminar una categoría",
    responses={
        400: {"description": "No se puede eliminar una categoría en uso."},
        404: {"description": "Categoría no encontrada."},
    },
)
def eliminar_categoria(categoria_id: int = Path(..., ge=1, le=INT_MAX), db: Session = Depends(get_db)):
    try:
        categorias_service.delete(db, categoria_id)
    except RegistrosError as e:
        raise http_error(e)
    return {"detail": "Categoría eliminada con éxito."}
