"""Scraper BeautifulSoup para la página de resultados de KPU."""

from __future__ import annotations

import structlog
from bs4 import BeautifulSoup
from bs4.exceptions import ParserRejectedMarkup

logger = structlog.get_logger(__name__)

FORM_BLOCK_SELECTOR = "div.form"
LABEL_SELECTOR = ".label"
FIELD_SELECTOR = ".field"


class BeautifulSoupFieldScraper:
    """Implementación de `core.interfaces.scraper.HtmlFieldScraper`.

    Cada `div.form` es un campo: su `.label` y su `.field`. Un bloque sin
    `.label` no es un campo y se ignora; un `.field` ausente cuenta como "".
    Una página que el parser rechaza se trata como página sin campos.
    """

    def __init__(
        self,
        *,
        block_selector: str = FORM_BLOCK_SELECTOR,
        label_selector: str = LABEL_SELECTOR,
        field_selector: str = FIELD_SELECTOR,
    ) -> None:
        self._block_selector = block_selector
        self._label_selector = label_selector
        self._field_selector = field_selector

    def extract_labeled_pairs(self, html: str) -> list[tuple[str, str]]:
        if not html:
            return []

        try:
            soup = BeautifulSoup(html, "html.parser")
        except ParserRejectedMarkup as exc:
            logger.warning("markup_rejected", error=str(exc), size=len(html))
            return []

        pairs: list[tuple[str, str]] = []
        for block in soup.select(self._block_selector):
            label = block.select_one(self._label_selector)
            if label is None:
                continue
            field = block.select_one(self._field_selector)
            pairs.append((label.get_text(), field.get_text() if field is not None else ""))
        return pairs
