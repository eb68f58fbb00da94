from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from app.core.db import INT_MAX, INT_MIN
from app.schemas.categoria import CategoriaOut
from app.schemas.estado import EstadoOut
from app.schemas.foto import FotoOut


# =====================================================
# Referencias anidadas: {"estado": {"idEstado": 1}}
# =====================================================
class EstadoRef(BaseModel):
    id_estado: Optional[int] = Field(default=None, alias="idEstado", ge=1, le=INT_MAX)
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CategoriaRef(BaseModel):
    id_categoria: Optional[int] = Field(default=None, alias="idCategoria", ge=1, le=INT_MAX)
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FotoRef(BaseModel):
    id_foto: Optional[int] = Field(default=None, alias="idFoto", ge=1, le=INT_MAX)
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class HistorialIn(BaseModel):
    """
    Las relaciones se aceptan anidadas ({"estado": {"idEstado": 1}})
    o planas ("idEstado": 1). Si vienen ambas, manda la plana.
    """

    estado: Optional[EstadoRef] = None
    categoria: Optional[CategoriaRef] = None
    foto: Optional[FotoRef] = None

    id_estado: Optional[int] = Field(default=None, alias="idEstado", ge=1, le=INT_MAX)
    id_categoria: Optional[int] = Field(default=None, alias="idCategoria", ge=1, le=INT_MAX)
    id_foto: Optional[int] = Field(default=None, alias="idFoto", ge=1, le=INT_MAX)

    fecha_historial: Optional[datetime] = Field(default=None, alias="fechaHistorial", examples=["2025-09-09T10:30:00"])
    detalle: Optional[str] = Field(default=None, examples=["El usuario 'juan_perez' cambió su estado a 'Activo'"])

    # Identificadores opacos de otros servicios
    id_asignacion_incidente: Optional[int] = Field(default=None, alias="idAsignacionIncidente", ge=INT_MIN, le=INT_MAX)
    id_asignacion_usuario: Optional[int] = Field(default=None, alias="idAsignacionUsuario", ge=INT_MIN, le=INT_MAX)
    id_envio_mensaje: Optional[int] = Field(default=None, alias="idEnvioMensaje", ge=INT_MIN, le=INT_MAX)
    id_incidente: Optional[int] = Field(default=None, alias="idIncidente", ge=INT_MIN, le=INT_MAX)
    id_direccion: Optional[int] = Field(default=None, alias="idDireccion", ge=INT_MIN, le=INT_MAX)
    id_usuario_reporte: Optional[int] = Field(default=None, alias="idUsuarioReporte", ge=INT_MIN, le=INT_MAX)
    id_asignacion_curso: Optional[int] = Field(default=None, alias="idAsignacionCurso", ge=INT_MIN, le=INT_MAX)

    model_config = ConfigDict(populate_by_name=True)

    def estado_id(self) -> Optional[int]:
        if self.id_estado is not None:
            return self.id_estado
        return self.estado.id_estado if self.estado else None

    def categoria_id(self) -> Optional[int]:
        if self.id_categoria is not None:
            return self.id_categoria
        return self.categoria.id_categoria if self.categoria else None

    def foto_id(self) -> Optional[int]:
        if self.id_foto is not None:
            return self.id_foto
        return self.foto.id_foto if self.foto else None


class HistorialOut(BaseModel):
    id_historial: int = Field(..., alias="idHistorial")

    estado: EstadoOut
    categoria: CategoriaOut
    foto: Optional[FotoOut] = None

    fecha_historial: datetime = Field(..., alias="fechaHistorial")
    detalle: str

    id_asignacion_incidente: Optional[int] = Field(default=None, alias="idAsignacionIncidente")
    id_asignacion_usuario: Optional[int] = Field(default=None, alias="idAsignacionUsuario")
    id_envio_mensaje: Optional[int] = Field(default=None, alias="idEnvioMensaje")
    id_incidente: Optional[int] = Field(default=None, alias="idIncidente")
    id_direccion: Optional[int] = Field(default=None, alias="idDireccion")
    id_usuario_reporte: Optional[int] = Field(default=None, alias="idUsuarioReporte")
    id_asignacion_curso: Optional[int] = Field(default=None, alias="idAsignacionCurso")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
