from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoriaIn(BaseModel):
    nombre: Optional[str] = Field(default=None, examples=["Incidente"])
    descripcion: Optional[str] = Field(default=None, examples=["La categoría representa un incidente."])


class CategoriaOut(BaseModel):
    id_categoria: int = Field(..., alias="idCategoria")
    nombre: str
    descripcion: Optional[str] = None

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
