"""NIK lookup proxy - FastAPI application.

A single endpoint: `GET /?nik=<16 digits>` with `Accept: application/json`
(or `X-Requested-With: XMLHttpRequest`). The request is handed as-is to
`LookupPipeline`, which decides both the body and the status code.

Run with `nik-proxy serve`, or `uvicorn api.app:create_app --factory`.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.html_scraper import BeautifulSoupFieldScraper
from adapters.http_client import build_async_client
from adapters.kpu_client import KpuUpstreamCaller
from core.config import AppSettings
from core.domain.models import InboundRequest
from core.services.lookup_pipeline import LookupPipeline
from core.services.response_emitter import ResponseEmitter
from core.services.result_extractor import ResultExtractor


def json_response(data: dict[str, str], status: int) -> JSONResponse:
    return JSONResponse(content=data, status_code=status)


def build_pipeline(
    settings: AppSettings, client: httpx.AsyncClient
) -> LookupPipeline[JSONResponse]:
    return LookupPipeline(
        upstream=KpuUpstreamCaller(settings, client=client),
        extractor=ResultExtractor(BeautifulSoupFieldScraper()),
        emitter=ResponseEmitter(json_response),
    )


def create_app(
    settings: AppSettings | None = None,
    *,
    transport: httpx.AsyncBaseTransport | None = None,
) -> FastAPI:
    """Build the app. `transport` replaces the network in tests."""

    settings = settings or AppSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Open the shared upstream client on startup, close it on shutdown."""
        async with build_async_client(settings, transport=transport) as client:
            app.state.pipeline = build_pipeline(settings, client)
            yield

    app = FastAPI(
        lifespan=lifespan,
        title="NIK lookup proxy",
        description="Looks up a 16-digit NIK on the KPU voter search form and returns the fields as JSON.",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
    )

    @app.api_route("/", methods=["GET", "POST"])
    async def lookup(request: Request) -> JSONResponse:
        inbound = InboundRequest(
            headers=dict(request.headers),
            query=dict(request.query_params),
        )
        return await request.app.state.pipeline.run(inbound)

    return app
