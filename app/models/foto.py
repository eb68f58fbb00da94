from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.core.db import Base


class Foto(Base):
    __tablename__ = "foto"

    id_foto: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # URL externa (CDN / almacenamiento en la nube)
    url: Mapped[str] = mapped_column(String(255), nullable=False)

    fecha_subida: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    descripcion: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
