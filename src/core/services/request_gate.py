"""Validación del request entrante, antes de cualquier llamada de red."""

from __future__ import annotations

import structlog

from core.domain.models import XHR_HEADER, XHR_VALUE, InboundRequest, LookupRequest, Nik
from core.errors import InvalidInput

logger = structlog.get_logger(__name__)

JSON_MEDIA_TYPE = "application/json"


def assert_request_header(request: InboundRequest) -> dict[str, str]:
    """Acepta solo requests AJAX o que acepten `application/json`.

    Devuelve los headers, con la marca XHR añadida si hacía falta.
    """

    headers = dict(request.headers)
    if request.header(XHR_HEADER) == XHR_VALUE:
        return headers

    accepts = [token.strip() for token in request.header("accept").split(",")]
    if JSON_MEDIA_TYPE in accepts:
        headers[XHR_HEADER] = XHR_VALUE
        return headers

    raise InvalidInput("Invalid request")


def assert_query_params(request: InboundRequest) -> str:
    nik = request.query.get("nik")
    if nik is None:
        raise InvalidInput("Please specify your NIK")
    return nik


def validate(request: InboundRequest) -> LookupRequest:
    """Gate completo: headers, parámetro `nik` y formato del NIK.

    Raises:
        InvalidInput: con el mensaje que se devuelve al cliente.
    """

    try:
        headers = assert_request_header(request)
        nik = Nik.parse(assert_query_params(request))
    except InvalidInput as exc:
        logger.info("request_rejected", reason=str(exc))
        raise

    return LookupRequest(nik=nik, headers=headers)
