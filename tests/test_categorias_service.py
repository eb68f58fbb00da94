"""
Tests del servicio de categorías.
"""
import pytest

from app.core.exceptions import InvalidArgumentError, NotFoundError
from app.schemas.categoria import CategoriaIn
from app.services import categorias_service, historiales_service


def test_save_categoria_valida(db):
    categoria = categorias_service.save(db, CategoriaIn(nombre="Incidente", descripcion="Emergencias"))

    assert categoria.id_categoria is not None
    assert categoria.nombre == "Incidente"


def test_save_categoria_sin_nombre(db):
    with pytest.raises(InvalidArgumentError, match="obligatorio"):
        categorias_service.save(db, CategoriaIn(nombre=" "))


def test_save_categoria_nombre_largo(db):
    with pytest.raises(InvalidArgumentError, match="50 caracteres"):
        categorias_service.save(db, CategoriaIn(nombre="c" * 51))


def test_save_categoria_duplicada(db, categoria_sistema):
    with pytest.raises(InvalidArgumentError, match="ya existe"):
        categorias_service.save(db, CategoriaIn(nombre="Sistema"))


def test_find_by_id_inexistente(db):
    with pytest.raises(NotFoundError):
        categorias_service.find_by_id(db, 42)


def test_find_by_nombre_sin_coincidencias(db, categoria_sistema):
    assert categorias_service.find_by_nombre(db, "Curso") == []


def test_delete_categoria_en_uso_y_luego_libre(db, historial):
    """Test: Rechazado mientras existe la referencia; permitido al desaparecer."""
    categoria_id = historial.id_categoria

    with pytest.raises(InvalidArgumentError, match="utilizada"):
        categorias_service.delete(db, categoria_id)

    historiales_service.delete(db, historial.id_historial)
    categorias_service.delete(db, categoria_id)

    with pytest.raises(NotFoundError):
        categorias_service.find_by_id(db, categoria_id)
