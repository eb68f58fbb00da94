from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.core.db import Base
from app.models.categoria import Categoria
from app.models.estado import Estado
from app.models.foto import Foto


class Historial(Base):
    """
    Registro de auditoría de eventos del sistema.
    Las FK a estado/categoria/foto no tienen ON DELETE: borrar una fila
    referenciada falla y el servicio lo traduce a "en uso".
    """

    __tablename__ = "historial"

    id_historial: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    id_estado: Mapped[int] = mapped_column(
        Integer, ForeignKey("estado.id_estado"), nullable=False, index=True
    )
    id_categoria: Mapped[int] = mapped_column(
        Integer, ForeignKey("categoria.id_categoria"), nullable=False, index=True
    )
    id_foto: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("foto.id_foto"), nullable=True, index=True
    )

    fecha_historial: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    detalle: Mapped[str] = mapped_column(String(250), nullable=False)

    # ✅ Referencias opacas a entidades de otros servicios (sin FK)
    id_asignacion_incidente: Mapped[Optional[int]] = mapped_column(Integer)
    id_asignacion_usuario: Mapped[Optional[int]] = mapped_column(Integer)
    id_envio_mensaje: Mapped[Optional[int]] = mapped_column(Integer)
    id_incidente: Mapped[Optional[int]] = mapped_column(Integer)
    id_direccion: Mapped[Optional[int]] = mapped_column(Integer)
    id_usuario_reporte: Mapped[Optional[int]] = mapped_column(Integer)
    id_asignacion_curso: Mapped[Optional[int]] = mapped_column(Integer)

    estado: Mapped[Estado] = relationship(Estado, lazy="joined")
    categoria: Mapped[Categoria] = relationship(Categoria, lazy="joined")
    foto: Mapped[Optional[Foto]] = relationship(Foto, lazy="joined")


REFERENCIAS_EXTERNAS = (
    "id_asignacion_incidente",
    "id_asignacion_usuario",
    "id_envio_mensaje",
    "id_incidente",
    "id_direccion",
    "id_usuario_reporte",
    "id_asignacion_curso",
)
