"""Extracción y normalización de los campos de la página de resultados.

La página de KPU muestra un bloque `.form` por campo, con un `.label` y un
`.field`. Algunos bloques son separadores visuales cuyo label es un `&nbsp;`.
"""

from __future__ import annotations

import html
import re

import structlog

from core.domain.models import ExtractedField
from core.interfaces.scraper import HtmlFieldScraper

logger = structlog.get_logger(__name__)

NBSP = "\xa0"
# Espacios ASCII que recorta PHP trim(); el NBSP no está incluido.
_ASCII_WS = " \t\n\r\x00\x0b"
_LABEL_STRIP = re.compile(r"\s|:")


def is_spacer(label: str) -> bool:
    return html.unescape(label.strip(_ASCII_WS)) == NBSP


def normalize_label(label: str) -> str:
    """`"tempat/tgl lahir:"` -> `"tempat_tgl_lahir"`."""

    label = html.unescape(label.strip(_ASCII_WS))
    label = label.replace(" ", "_").replace("/", "_")
    return _LABEL_STRIP.sub("", label)


def normalize_value(value: str) -> str:
    return value.replace("&nbsp;", " ").replace(NBSP, " ").strip()


def collect_fields(pairs: list[tuple[str, str]]) -> list[ExtractedField]:
    """Descarta separadores y pasa los labels a minúsculas."""

    return [
        ExtractedField(label=label.lower(), value=value)
        for label, value in pairs
        if not is_spacer(label)
    ]


def normalize_result(fields: list[ExtractedField]) -> dict[str, str]:
    """Aplana los campos en un dict; un label repetido sobrescribe al anterior."""

    merged: dict[str, str] = {}
    for item in fields:
        merged[item.label] = item.value

    normalized: dict[str, str] = {}
    for label, value in merged.items():
        normalized[normalize_label(label)] = normalize_value(value)
    return normalized


class ResultExtractor:
    """HTML de upstream -> mapping plano. Nunca falla: sin datos, `{}`."""

    def __init__(self, scraper: HtmlFieldScraper) -> None:
        self._scraper = scraper

    def extract(self, body: str) -> dict[str, str]:
        fields = collect_fields(self._scraper.extract_labeled_pairs(body))
        result = normalize_result(fields) if fields else {}
        logger.debug("fields_extracted", count=len(result))
        return result
