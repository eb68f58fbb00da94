"""
Tests HTTP de /api-registros/v1/estados.
"""
import pytest

from app.models.historial import Historial

BASE = "/api-registros/v1/estados"


def test_listar_vacio_204(client):
    resp = client.get(BASE)
    assert resp.status_code == 204
    assert resp.content == b""


def test_flujo_crear_duplicar_buscar_eliminar_en_uso(client, db, categoria_sistema):
    """Test: POST 201, POST duplicado 400, GET 200, DELETE en uso 400."""
    resp = client.post(BASE, json={"nombre": "Activo"})
    assert resp.status_code == 201
    creado = resp.json()
    assert creado["nombre"] == "Activo"
    estado_id = creado["idEstado"]

    resp = client.post(BASE, json={"nombre": "Activo"})
    assert resp.status_code == 400
    assert "ya existe" in resp.json()["detail"]

    resp = client.get(f"{BASE}/{estado_id}")
    assert resp.status_code == 200
    assert resp.json()["nombre"] == "Activo"

    resp = client.post(
        "/api-registros/v1/historiales",
        json={
            "estado": {"idEstado": estado_id},
            "categoria": {"idCategoria": categoria_sistema.id_categoria},
            "fechaHistorial": "2025-09-09T10:30:00",
            "detalle": "Cambio de estado.",
        },
    )
    assert resp.status_code == 201

    resp = client.delete(f"{BASE}/{estado_id}")
    assert resp.status_code == 400

    db.query(Historial).delete()
    db.commit()

    resp = client.delete(f"{BASE}/{estado_id}")
    assert resp.status_code == 200
    assert resp.json()["detail"] == "Estado eliminado con éxito."


def test_listar_con_datos(client, estado_activo):
    resp = client.get(BASE)
    assert resp.status_code == 200
    assert resp.json() == [
        {
            "idEstado": estado_activo.id_estado,
            "nombre": "Activo",
            "descripcion": "El usuario está activo en el sistema.",
        }
    ]


def test_obtener_inexistente_404(client):
    resp = client.get(f"{BASE}/999")
    assert resp.status_code == 404
    assert "no encontrado" in resp.json()["detail"]


def test_crear_sin_nombre_400(client):
    resp = client.post(BASE, json={"descripcion": "Sin nombre"})
    assert resp.status_code == 400


def test_crear_nombre_largo_400(client):
    resp = client.post(BASE, json={"nombre": "n" * 51})
    assert resp.status_code == 400
    assert "50 caracteres" in resp.json()["detail"]


def test_crear_cuerpo_mal_formado_400(client):
    resp = client.post(BASE, json={"nombre": ["no", "es", "texto"]})
    assert resp.status_code == 400


def test_buscar_por_nombre(client, estado_activo):
    resp = client.get(f"{BASE}/buscar", params={"nombre": "Activo"})
    assert resp.status_code == 200
    assert [e["idEstado"] for e in resp.json()] == [estado_activo.id_estado]


def test_buscar_por_nombre_sin_coincidencias_204(client, estado_activo):
    resp = client.get(f"{BASE}/buscar", params={"nombre": "Baneado"})
    assert resp.status_code == 204


def test_actualizar(client, estado_activo):
    resp = client.put(f"{BASE}/{estado_activo.id_estado}", json={"nombre": "Inactivo"})
    assert resp.status_code == 200
    assert resp.json()["nombre"] == "Inactivo"


def test_actualizar_inexistente_404(client):
    resp = client.put(f"{BASE}/999", json={"nombre": "Inactivo"})
    assert resp.status_code == 404


def test_actualizar_invalido_400(client, estado_activo):
    resp = client.put(f"{BASE}/{estado_activo.id_estado}", json={"nombre": ""})
    assert resp.status_code == 400


def test_eliminar_inexistente_404(client):
    resp = client.delete(f"{BASE}/999")
    assert resp.status_code == 404


def test_error_inesperado_500(client, monkeypatch):
    from app.services import estados_service

    def _falla(db, payload):
        raise RuntimeError("conexión perdida")

    monkeypatch.setattr(estados_service, "save", _falla)

    resp = client.post(BASE, json={"nombre": "Activo"})
    assert resp.status_code == 500
    assert resp.json() == {"detail": "Error interno del servidor."}


@pytest.mark.parametrize("estado_id", [-1, 2**31, 2**70])
def test_id_fuera_de_rango_400(client, estado_id):
    """Test: Un ID que no cabe en la columna INTEGER responde 400 y no 500."""
    resp = client.get(f"{BASE}/{estado_id}")
    assert resp.status_code == 400
    assert resp.json()["detail"].startswith("Solicitud inválida.")

    assert client.put(f"{BASE}/{estado_id}", json={"nombre": "Activo"}).status_code == 400
    assert client.delete(f"{BASE}/{estado_id}").status_code == 400


def test_id_maximo_en_rango_404(client):
    resp = client.get(f"{BASE}/{2**31 - 1}")
    assert resp.status_code == 404
