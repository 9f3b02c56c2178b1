"""NIK lookup orchestration.

This module wires the four stages together: the request gate, the upstream
caller, the result extractor and the response emitter. Entry points (the
FastAPI app, the CLI) only build an `InboundRequest` and hand it to
`LookupPipeline.run`; every request-scoped error is converted here into a
`{message}` body with its status code, so nothing partial ever leaves the
pipeline.
"""

from __future__ import annotations

from typing import Generic, TypeVar

import structlog

from core.domain.models import InboundRequest
from core.errors import InvalidInput, UpstreamError
from core.interfaces.upstream import UpstreamCaller
from core.services import request_gate
from core.services.response_emitter import ResponseEmitter
from core.services.result_extractor import ResultExtractor

T = TypeVar("T")

logger = structlog.get_logger(__name__)


class LookupPipeline(Generic[T]):
    """One inbound request -> one upstream call -> one serialized response."""

    def __init__(
        self,
        *,
        upstream: UpstreamCaller,
        extractor: ResultExtractor,
        emitter: ResponseEmitter[T],
        timeout: float | None = None,
    ) -> None:
        self._upstream = upstream
        self._extractor = extractor
        self._emitter = emitter
        self._timeout = timeout

    async def run(self, request: InboundRequest) -> T:
        try:
            lookup = request_gate.validate(request)
            response = await self._upstream.call(lookup.nik, timeout=self._timeout)
        except InvalidInput as exc:
            return self._emitter.emit_rejected(exc)
        except UpstreamError as exc:
            logger.warning(
                "upstream_failed",
                error=str(exc),
                error_type=type(exc).__name__,
                upstream_status=exc.status_code,
            )
            return self._emitter.emit_upstream_error(exc)

        result = self._extractor.extract(response.body)
        logger.info("lookup_completed", found=bool(result), fields=len(result))
        return self._emitter.emit_result(result)
