"""Contrato del serializador de respuestas."""

from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)


class ResponseSerializer(Protocol[T_co]):
    """Convierte `(data, status)` en la respuesta final del transporte.

    La API construye un `JSONResponse`; la CLI un `LookupResponse`.
    """

    def __call__(self, data: dict[str, str], status: int) -> T_co:
        ...
