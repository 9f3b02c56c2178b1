"""Contrato del cliente upstream (formulario de KPU)."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import Nik, UpstreamResponse


@runtime_checkable
class UpstreamCaller(Protocol):
    """Envía el formulario de búsqueda para un `Nik` ya validado.

    Raises:
        UpstreamTransportError: fallo de red, timeout o 4xx.
        UpstreamServerError: el upstream respondió 5xx.
    """

    async def call(self, nik: Nik, *, timeout: float | None = None) -> UpstreamResponse:
        ...
