from fastapi.testclient import TestClient


def test_api_health_smoke():
    from app.main import app

    client = TestClient(app)
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json().get("status") == "ok"


def test_openapi_expone_recursos(client):
    paths = client.get("/openapi.json").json()["paths"]

    assert "/api-registros/v1/estados" in paths
    assert "/api-registros/v1/categorias/buscar" in paths
    assert "/api-registros/v1/historiales/{historial_id}" in paths
    assert "/api-perfiles/v1/fotos" in paths


def test_run_arranca_uvicorn(monkeypatch):
    import app.main as main

    llamadas = []
    monkeypatch.setattr(main.uvicorn, "run", lambda *args, **kwargs: llamadas.append((args, kwargs)))

    main.run()

    assert llamadas == [
        (("app.main:app",), {"host": main.settings.HOST, "port": main.settings.PORT}),
    ]
