from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy.orm import Session

from app.core.log import get_logger
from app.models.categoria import Categoria
from app.models.estado import Estado
from app.models.foto import Foto
from app.models.historial import Historial
from app.services import categorias_service, estados_service, fotos_service

logger = get_logger("seed")

CATEGORIAS_INICIALES = ["Sistema", "Incidente", "Usuario", "Mensaje", "Ubicación", "Reporte", "Curso"]

ESTADOS_INICIALES = [
    "Activo",
    "Baneado",
    "Inactivo",
    "En Proceso",
    "Localizado",
    "Cerrado",
    "Enviado",
    "Recibido",
    "Visto",
]

FOTOS_EJEMPLO = [
    "http://api.ejemplo.com/fotos/1.jpg",
    "http://api.ejemplo.com/fotos/2.jpg",
    "http://api.ejemplo.com/fotos/3.jpg",
]


def crear_categorias(db: Session) -> int:
    creadas = 0
    for nombre in CATEGORIAS_INICIALES:
        if not categorias_service.find_by_nombre(db, nombre):
            db.add(Categoria(nombre=nombre))
            creadas += 1
    db.commit()
    return creadas


def crear_estados(db: Session) -> int:
    creados = 0
    for nombre in ESTADOS_INICIALES:
        if not estados_service.find_by_nombre(db, nombre):
            db.add(Estado(nombre=nombre))
            creados += 1
    db.commit()
    return creados


def crear_fotos_de_ejemplo(db: Session) -> int:
    creadas = 0
    for url in FOTOS_EJEMPLO:
        if not fotos_service.find_by_url(db, url):
            db.add(
                Foto(
                    url=url,
                    descripcion="Foto de ejemplo para carga inicial",
                    fecha_subida=datetime.now(),
                )
            )
            creadas += 1
    db.commit()
    return creadas


def crear_historial(
    db: Session,
    estado: Estado,
    categoria: Categoria,
    foto: Optional[Foto] = None,
) -> int:
    if db.query(Historial.id_historial).first():
        return 0

    ahora = datetime.now()
    registros = [
        Historial(
            estado=estado,
            categoria=categoria,
            fecha_historial=ahora - timedelta(days=10),
            detalle="Usuario 'admin' cambió el estado de un perfil a 'Activo'.",
            id_asignacion_usuario=25,
        ),
        Historial(
            estado=estado,
            categoria=categoria,
            foto=foto,
            fecha_historial=ahora - timedelta(days=5),
            detalle="Se creó un nuevo reporte de bombero.",
            id_usuario_reporte=1,
        ),
        Historial(
            estado=estado,
            categoria=categoria,
            fecha_historial=ahora,
            detalle="Se envió un mensaje de alerta por un incidente.",
            id_envio_mensaje=10,
            id_incidente=20,
        ),
    ]
    db.add_all(registros)
    db.commit()
    return len(registros)


def cargar_datos_iniciales(db: Session) -> dict:
    """
    Carga de datos para desarrollo (APP_ENV=dev).
    Idempotente: estados, categorías y fotos se buscan antes de crearse y el
    historial solo se carga si la tabla está vacía.
    """
    logger.info("Cargando datos de registros iniciales...")

    resumen = {
        "categorias": crear_categorias(db),
        "estados": crear_estados(db),
        "fotos": 0,
        "historiales": 0,
    }

    estados_activos = estados_service.find_by_nombre(db, "Activo")
    categorias_sistema = categorias_service.find_by_nombre(db, "Sistema")

    if estados_activos and categorias_sistema:
        resumen["fotos"] = crear_fotos_de_ejemplo(db)
        fotos = fotos_service.find_by_url(db, FOTOS_EJEMPLO[0])
        resumen["historiales"] = crear_historial(
            db,
            estados_activos[0],
            categorias_sistema[0],
            fotos[0] if fotos else None,
        )
    else:
        logger.error(
            "No se encontraron las entidades 'Activo' o 'Sistema' después de la creación. "
            "Historial no cargado."
        )

    logger.info("Carga de datos de registros finalizada: %s", resumen)
    return resumen


if __name__ == "__main__":
    from app.core.config import settings
    from app.core.db import Base, SessionLocal, engine
    from app.core.log import configure_logging

    configure_logging(settings.LOG_LEVEL)
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        cargar_datos_iniciales(db)
    finally:
        db.close()
