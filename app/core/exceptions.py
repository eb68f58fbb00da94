"""
Excepciones de negocio de la API de registros.

Los servicios lanzan estas excepciones; los routers las traducen con
http_error() a la respuesta HTTP correspondiente:

- NotFoundError          -> 404
- InvalidArgumentError   -> 400 (validación, duplicado, registro en uso)
"""
from fastapi import HTTPException


class RegistrosError(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class NotFoundError(RegistrosError):
    status_code = 404


class InvalidArgumentError(RegistrosError):
    status_code = 400


def http_error(exc: RegistrosError) -> HTTPException:
    return HTTPException(status_code=exc.status_code, detail=exc.message)
