"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los invariantes del NIK viven en el tipo, no dispersos por la pipeline.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
- Todo se crea por request y se descarta al terminar; no hay estado persistido.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.errors import InvalidInput

NIK_LENGTH = 16
XHR_HEADER = "x-requested-with"
XHR_VALUE = "XMLHttpRequest"


class Nik(BaseModel):
    """Número de identidad (NIK) validado: 16 dígitos decimales."""

    model_config = ConfigDict(frozen=True)

    value: str = Field(
        ...,
        pattern=r"^[0-9]{16}$",
        description="NIK de 16 dígitos.",
    )

    @classmethod
    def parse(cls, raw: str) -> "Nik":
        """Valida `raw` y construye el `Nik`.

        Raises:
            InvalidInput: "Invalid NIK" si la longitud no es 16,
                "Invalid NIK format" si contiene algo que no sea un dígito.
        """

        if len(raw) != NIK_LENGTH:
            raise InvalidInput("Invalid NIK")
        # str.isdigit() acepta dígitos unicode (p.ej. "١"); solo ASCII.
        if not all("0" <= ch <= "9" for ch in raw):
            raise InvalidInput("Invalid NIK format")
        return cls(value=raw)

    def __str__(self) -> str:
        return self.value


class InboundRequest(BaseModel):
    """Vista neutral (sin framework) de un request entrante.

    Los nombres de header se guardan en minúsculas; HTTP no distingue mayúsculas.
    """

    headers: dict[str, str] = Field(default_factory=dict)
    query: dict[str, str] = Field(default_factory=dict)

    @field_validator("headers", mode="before")
    @classmethod
    def _lower_header_names(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return {str(k).lower(): v for k, v in value.items()}
        return value

    def header(self, name: str) -> str:
        """Valor del header `name`, o cadena vacía si no existe."""

        return self.headers.get(name.lower(), "")


class LookupRequest(BaseModel):
    """Request ya validado por el gate: NIK + headers (con marca XHR)."""

    model_config = ConfigDict(frozen=True)

    nik: Nik
    headers: Mapping[str, str] = Field(default_factory=dict, validate_default=True)

    @field_validator("headers", mode="after")
    @classmethod
    def _read_only_headers(cls, value: Mapping[str, str]) -> Mapping[str, str]:
        return MappingProxyType(dict(value))

    @property
    def is_xhr(self) -> bool:
        return self.headers.get(XHR_HEADER) == XHR_VALUE


class UpstreamFormPayload(BaseModel):
    """Formulario fijo que se envía al endpoint de KPU; solo varía el NIK."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    nik_global: str
    g_recaptcha_response: str = Field(default=" ", alias="g-recaptcha-response")
    wilayah_id: str = "0"
    cmd: str = "Cari."

    @classmethod
    def for_nik(cls, nik: Nik) -> "UpstreamFormPayload":
        return cls(nik_global=nik.value)

    def to_form(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


class ExtractedField(BaseModel):
    """Par (label, valor) de un bloque `.form` de la página de resultados."""

    model_config = ConfigDict(frozen=True)

    label: str
    value: str = ""


class LookupResponse(BaseModel):
    """Resultado de la pipeline antes de serializar: cuerpo + status HTTP."""

    body: dict[str, str]
    status_code: int

    @property
    def ok(self) -> bool:
        return self.status_code == 200


class UpstreamResponse(BaseModel):
    """Respuesta cruda del endpoint upstream (ya sin errores de transporte)."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    body: str = ""
