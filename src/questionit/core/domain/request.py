"""Petición ya construida, independiente del transporte."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from questionit.core.domain.forms import MultipartForm


class BodyEncoding(str, Enum):
    JSON = "application/json"
    FORM = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"


@dataclass
class PreparedRequest:
    """Resultado del request builder: lo único que necesita un transporte.

    `body` es texto para JSON/URL-encoded y un `MultipartForm` para multipart;
    en este último caso el `Content-Type` (con su boundary) lo genera el
    codificador multipart del transporte.
    """

    method: str
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: str | MultipartForm | None = None
    encoding: BodyEncoding | None = None

    def header(self, name: str) -> str | None:
        """Lectura case-insensitive de una cabecera."""

        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None
