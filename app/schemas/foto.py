from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FotoIn(BaseModel):
    url: Optional[str] = Field(default=None, examples=["http://api-fotos.com/fotos/user123.jpg"])
    fecha_subida: Optional[datetime] = Field(default=None, alias="fechaSubida", examples=["2025-09-09T10:30:00"])
    descripcion: Optional[str] = None

    model_config = ConfigDict(populate_by_name=True)


class FotoOut(BaseModel):
    id_foto: int = Field(..., alias="idFoto")
    url: str
    fecha_subida: datetime = Field(..., alias="fechaSubida")
    descripcion: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
