"""Cliente del formulario de búsqueda de KPU (`ss8.php`).

Una sola POST por lookup, sin reintentos. Los fallos se separan en dos clases
porque se traducen a status distintos: 5xx del upstream -> `UpstreamServerError`;
red, timeout o 4xx -> `UpstreamTransportError`.
"""

from __future__ import annotations

import httpx
import structlog
from pydantic import BaseModel, Field

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.models import Nik, UpstreamFormPayload, UpstreamResponse
from core.errors import UpstreamServerError, UpstreamTransportError

logger = structlog.get_logger(__name__)


class UpstreamConfig(BaseModel):
    """Endpoint y timeout del upstream; explícitos para poder usar un stub en tests."""

    url: str = Field(..., min_length=8)
    timeout_seconds: float = Field(default=20.0, gt=0)

    @classmethod
    def from_settings(cls, settings: AppSettings) -> "UpstreamConfig":
        return cls(url=settings.upstream_url, timeout_seconds=settings.http_timeout_seconds)


def mask_nik(nik: Nik) -> str:
    return "*" * 12 + nik.value[-4:]


class KpuUpstreamCaller:
    """Implementación httpx de `core.interfaces.upstream.UpstreamCaller`.

    Si se pasa `client`, se reutiliza (y lo cierra quien lo creó); si no, se
    abre uno por llamada con `build_async_client`.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        config: UpstreamConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._config = config or UpstreamConfig.from_settings(self._settings)
        self._client = client

    @property
    def url(self) -> str:
        return self._config.url

    async def call(self, nik: Nik, *, timeout: float | None = None) -> UpstreamResponse:
        form = UpstreamFormPayload.for_nik(nik).to_form()
        effective_timeout = timeout if timeout is not None else self._config.timeout_seconds
        logger.info("upstream_request", url=self.url, nik=mask_nik(nik), timeout=effective_timeout)

        try:
            if self._client is not None:
                response = await self._client.post(self.url, data=form, timeout=effective_timeout)
            else:
                async with build_async_client(self._settings) as client:
                    response = await client.post(self.url, data=form, timeout=effective_timeout)
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UpstreamTransportError(str(exc) or type(exc).__name__) from exc

        status = response.status_code
        if status >= 500:
            raise UpstreamServerError(
                f"Server error '{status} {response.reason_phrase}' for url '{self.url}'",
                status_code=status,
            )
        if status >= 400:
            raise UpstreamTransportError(
                f"Client error '{status} {response.reason_phrase}' for url '{self.url}'",
                status_code=status,
            )

        return UpstreamResponse(status_code=status, body=response.text)
