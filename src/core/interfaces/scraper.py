"""Contrato del scraper HTML.

Por qué Protocol:
- La extracción depende de la estructura de la página upstream (clases CSS).
  Aislarla detrás de un método permite cambiar de parser sin tocar la pipeline.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HtmlFieldScraper(Protocol):
    """Extrae pares (label, valor) de un documento HTML.

    Reglas de diseño:
    - Devuelve los textos tal cual (sin normalizar), en orden de documento.
    - Nunca falla por ausencia de datos: sin bloques, lista vacía.
    """

    def extract_labeled_pairs(self, html: str) -> list[tuple[str, str]]:
        ...
