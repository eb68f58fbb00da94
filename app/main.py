from dotenv import load_dotenv
from pathlib import Path

# =====================================================
# Cargar variables de entorno (.env)
# =====================================================
# main.py está en /app
# .env está en la raíz del proyecto
env_path = Path(__file__).resolve().parents[1] / ".env"
load_dotenv(dotenv_path=env_path)

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Depends, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.db import Base, SessionLocal, engine, get_db
from app.core.log import configure_logging, get_logger

# Modelos: deben estar importados antes de create_all
from app.models.estado import Estado  # noqa: F401
from app.models.categoria import Categoria  # noqa: F401
from app.models.foto import Foto  # noqa: F401
from app.models.historial import Historial  # noqa: F401

from app.routers.estados import router as estados_router
from app.routers.categorias import router as categorias_router
from app.routers.fotos import router as fotos_router
from app.routers.historiales import router as historiales_router

from app.services.seed_service import cargar_datos_iniciales

configure_logging(settings.LOG_LEVEL)
logger = get_logger("api")


# =====================================================
# Arranque
# =====================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.CREATE_TABLES:
        Base.metadata.create_all(bind=engine)

    # Solo en desarrollo
    if settings.is_dev:
        db = SessionLocal()
        try:
            cargar_datos_iniciales(db)
        finally:
            db.close()

    yield


# =====================================================
# App
# =====================================================
app = FastAPI(title="SAFE Rescue - API Registros", lifespan=lifespan)


# =====================================================
# Errores
# =====================================================
@app.middleware("http")
async def unexpected_error_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception:
        logger.exception("Error no controlado en %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={"detail": "Error interno del servidor."},
        )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Cuerpo mal formado (tipos, fechas) -> 400, igual que el resto de errores de datos
    errores = [
        f"{'.'.join(str(p) for p in err.get('loc', []))}: {err.get('msg')}"
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=400,
        content={"detail": "Solicitud inválida. " + "; ".join(errores)},
    )


# =====================================================
# CORS
# =====================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =====================================================
# Routers
# =====================================================
app.include_router(estados_router)
app.include_router(categorias_router)
app.include_router(fotos_router)
app.include_router(historiales_router)

# =====================================================
# Endpoints base
# =====================================================
@app.get("/")
def root():
    return {"service": "SAFE Rescue - API Registros"}

@app.get("/health")
def health():
    return {"status": "ok"}

@app.get("/db-check")
def db_check(db: Session = Depends(get_db)):
    result = db.execute(text("SELECT 1")).scalar()
    return {"db": "ok", "result": result}


# =====================================================
# Servidor
# =====================================================
def run():
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
