"""Traducción del resultado de la pipeline a status HTTP + cuerpo."""

from __future__ import annotations

from typing import Generic, TypeVar

from core.errors import MissingHandler, UpstreamServerError
from core.interfaces.serializer import ResponseSerializer

T = TypeVar("T")

STATUS_OK = 200
STATUS_BAD_REQUEST = 400
STATUS_NOT_FOUND = 404
STATUS_NOT_ACCEPTABLE = 406
STATUS_SERVER_ERROR = 500

NOT_FOUND_MESSAGE = "Not found"


def message(text: str) -> dict[str, str]:
    return {"message": text}


def status_for_upstream_error(exc: Exception) -> int:
    return STATUS_SERVER_ERROR if isinstance(exc, UpstreamServerError) else STATUS_BAD_REQUEST


class ResponseEmitter(Generic[T]):
    """Delega la serialización en un `ResponseSerializer` inyectado.

    Sin serializador, `emit` lanza `MissingHandler`: es un error de cableado,
    no un error del request, y no se convierte en 4xx/5xx.
    """

    def __init__(self, serializer: ResponseSerializer[T]) -> None:
        self._serializer = serializer

    def emit(self, data: dict[str, str], status: int) -> T:
        if self._serializer is None:
            raise MissingHandler("Can't handle response object without a serializer")
        return self._serializer(data, status)

    def emit_result(self, result: dict[str, str]) -> T:
        if result:
            return self.emit(result, STATUS_OK)
        return self.emit(message(NOT_FOUND_MESSAGE), STATUS_NOT_FOUND)

    def emit_rejected(self, exc: Exception) -> T:
        return self.emit(message(str(exc)), STATUS_NOT_ACCEPTABLE)

    def emit_upstream_error(self, exc: Exception) -> T:
        return self.emit(message(str(exc)), status_for_upstream_error(exc))
