"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI ni la API.
- Permite que adaptadores (HTTP/scraper) lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_UPSTREAM_URL = "http://data.kpu.go.id/ss8.php"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "nik-proxy"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "nik-proxy"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "nik-proxy"
    return Path.home() / ".config" / "nik-proxy"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/API/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="NIK_PROXY_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    upstream_url: str = Field(
        default=DEFAULT_UPSTREAM_URL,
        min_length=8,
        description="Endpoint del formulario de búsqueda de KPU.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout por request al endpoint upstream (segundos).",
    )
    user_agent: str = Field(
        default="nik-proxy/0.1 (+https://local)",
        min_length=1,
        description="User-Agent para peticiones upstream.",
    )

    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    )
    log_json: bool = Field(
        default=True,
        description="Renderizar logs como JSON (False = salida legible en consola).",
    )

    host: str = Field(
        default="127.0.0.1",
        min_length=1,
        description="Host de escucha para `nik-proxy serve`.",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Puerto de escucha para `nik-proxy serve`.",
    )
