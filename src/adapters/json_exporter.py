"""Exportación JSON del resultado de un lookup.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines.
- El mismo formato que devuelve la API.
"""

from __future__ import annotations

import json
from pathlib import Path

from core.domain.models import LookupResponse


def export_lookup_json(*, response: LookupResponse, output_path: Path) -> Path:
    """Exporta el cuerpo de `LookupResponse` a JSON UTF-8 (orden de la página)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(
        json.dumps(response.body, ensure_ascii=False, indent=2) + "\n",
        encoding="utf-8",
    )
    return output_path
