"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from adapters.http_client import build_async_client
from core.config import AppSettings, get_user_env_file

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: AppSettings) -> tuple[bool, str]:
    """Reachability only: any HTTP answer counts, even an error page."""
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.upstream_url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Show the effective configuration and check the upstream endpoint."""

    settings = AppSettings()

    table = Table(title="NIK-PROXY Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User config", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Upstream URL", "OK", settings.upstream_url)
    table.add_row("HTTP timeout", "OK", f"{settings.http_timeout_seconds:g}s")
    table.add_row("Listen", "OK", f"{settings.host}:{settings.port}")

    # Connectivity (best-effort)
    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("Upstream connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not ok_http:
        raise typer.Exit(code=1)
