"""
Tests HTTP de /api-registros/v1/categorias.
"""
import pytest

BASE = "/api-registros/v1/categorias"


def test_crud_categoria(client):
    resp = client.get(BASE)
    assert resp.status_code == 204

    resp = client.post(BASE, json={"nombre": "Incidente", "descripcion": "Emergencias"})
    assert resp.status_code == 201
    categoria_id = resp.json()["idCategoria"]

    resp = client.post(BASE, json={"nombre": "Incidente"})
    assert resp.status_code == 400

    resp = client.put(f"{BASE}/{categoria_id}", json={"nombre": "Curso"})
    assert resp.status_code == 200
    assert resp.json() == {"idCategoria": categoria_id, "nombre": "Curso", "descripcion": None}

    resp = client.get(BASE)
    assert resp.status_code == 200
    assert len(resp.json()) == 1

    resp = client.delete(f"{BASE}/{categoria_id}")
    assert resp.status_code == 200

    resp = client.get(f"{BASE}/{categoria_id}")
    assert resp.status_code == 404


def test_buscar_por_nombre(client, categoria_sistema):
    resp = client.get(f"{BASE}/buscar", params={"nombre": "Sistema"})
    assert resp.status_code == 200
    assert resp.json()[0]["nombre"] == "Sistema"

    resp = client.get(f"{BASE}/buscar", params={"nombre": "Reporte"})
    assert resp.status_code == 204


def test_eliminar_categoria_en_uso_400(client, historial):
    resp = client.delete(f"{BASE}/{historial.id_categoria}")
    assert resp.status_code == 400
    assert resp.json()["detail"] == "No se puede eliminar la categoría. Está siendo utilizada por otros registros."


@pytest.mark.parametrize("categoria_id", [0, 2**31, 2**70])
def test_id_fuera_de_rango_400(client, categoria_id):
    """Test: Un ID fuera del rango de la columna se rechaza como solicitud inválida."""
    assert client.get(f"{BASE}/{categoria_id}").status_code == 400
    assert client.put(f"{BASE}/{categoria_id}", json={"nombre": "Curso"}).status_code == 400
    assert client.delete(f"{BASE}/{categoria_id}").status_code == 400
