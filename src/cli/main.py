"""CLI de nik-proxy (Typer).

Comandos:
- `lookup`: ejecuta la pipeline en proceso, sin servidor HTTP.
- `serve`: levanta la API FastAPI con uvicorn.
- `doctor`: diagnóstico de configuración y conectividad.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import typer
import uvicorn
from rich.console import Console

from adapters.html_scraper import BeautifulSoupFieldScraper
from adapters.http_client import build_async_client
from adapters.json_exporter import export_lookup_json
from adapters.kpu_client import KpuUpstreamCaller
from cli import doctor
from cli.ui_components import build_error_panel, build_result_table, print_banner
from core.config import AppSettings
from core.domain.models import InboundRequest, LookupResponse
from core.log import configure_logging
from core.services.lookup_pipeline import LookupPipeline
from core.services.response_emitter import ResponseEmitter
from core.services.result_extractor import ResultExtractor

app = typer.Typer(no_args_is_help=True, help="Look up a NIK on the KPU voter search form.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def lookup_response(data: dict[str, str], status: int) -> LookupResponse:
    return LookupResponse(body=data, status_code=status)


async def _run_lookup(settings: AppSettings, nik: str, timeout: float | None) -> LookupResponse:
    # Same negotiation as an API client asking for JSON.
    inbound = InboundRequest(headers={"Accept": "application/json"}, query={"nik": nik})
    async with build_async_client(settings) as client:
        pipeline = LookupPipeline(
            upstream=KpuUpstreamCaller(settings, client=client),
            extractor=ResultExtractor(BeautifulSoupFieldScraper()),
            emitter=ResponseEmitter(lookup_response),
            timeout=timeout,
        )
        return await pipeline.run(inbound)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show pipeline logs on stderr."),
) -> None:
    settings = AppSettings()
    level = settings.log_level if verbose else "WARNING"
    configure_logging(settings.model_copy(update={"log_level": level, "log_json": False}))


@app.command()
def lookup(
    nik: str = typer.Argument(..., help="16-digit NIK."),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON body."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Also write the result to a JSON file."),
    timeout: float | None = typer.Option(None, "--timeout", min=0.1, help="Upstream timeout in seconds."),
) -> None:
    """Look up NIK and print the normalized fields."""

    settings = AppSettings()
    response = asyncio.run(_run_lookup(settings, nik, timeout))

    if as_json:
        typer.echo(json.dumps(response.body, ensure_ascii=False, indent=2))
    else:
        print_banner(_console)
        if response.ok:
            _console.print(build_result_table(response))
        else:
            _console.print(build_error_panel(response))

    if output is not None and response.ok:
        path = export_lookup_json(response=response, output_path=output)
        if not as_json:
            _console.print(f"[green]Saved result to:[/green] {path}")

    if not response.ok:
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind host (default from settings)."),
    port: int | None = typer.Option(None, "--port", help="Bind port (default from settings)."),
) -> None:
    """Run the HTTP proxy."""

    settings = AppSettings()
    configure_logging(settings)
    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=host or settings.host,
        port=port or settings.port,
        log_level=settings.log_level.lower(),
    )


def run() -> None:
    app()
