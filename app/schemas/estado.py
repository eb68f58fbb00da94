from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EstadoIn(BaseModel):
    # Sin restricciones aquí: las valida estados_service (400 con mensaje de negocio)
    nombre: Optional[str] = Field(default=None, examples=["Activo"])
    descripcion: Optional[str] = Field(default=None, examples=["El usuario está activo en el sistema."])


class EstadoOut(BaseModel):
    id_estado: int = Field(..., alias="idEstado")
    nombre: str
    descripcion: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
