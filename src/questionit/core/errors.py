"""Excepciones del cliente QuestionIt.

- `QuestionItApiError`: respuesta no-2xx de la API (lleva respuesta y cuerpo).
- `InvalidPollError`: validación local previa a cualquier petición.

Los errores de transporte (DNS, conexión, JSON inválido) no se traducen: llegan
al llamador tal y como los lanza `httpx`.
"""

from __future__ import annotations

from typing import Any, TypeGuard

from questionit.core.domain.error_codes import ApiErrorCode
from questionit.core.interfaces.transport import ResponseLike

API_ERROR_TYPE = "QuestionItApiError"


class QuestionItError(Exception):
    """Base de todas las excepciones propias del cliente."""


class InvalidPollError(QuestionItError, ValueError):
    """Una encuesta necesita entre 2 y 4 opciones."""

    def __init__(self, option_count: int) -> None:
        self.option_count = option_count
        super().__init__(f"A poll needs between 2 and 4 options, got {option_count}.")


class QuestionItApiError(QuestionItError):
    """Error estructurado devuelto por la API.

    `result` es el cuerpo decodificado tal cual (normalmente
    `{code, message, status_code}`); `response` es la respuesta cruda.
    """

    type = API_ERROR_TYPE

    def __init__(self, response: ResponseLike, result: Any) -> None:
        self.response = response
        self.result = result
        super().__init__(self._describe())

    def _field(self, name: str) -> Any:
        if isinstance(self.result, dict):
            return self.result.get(name)
        return None

    @property
    def code(self) -> int | None:
        value = self._field("code")
        return value if isinstance(value, int) else None

    @property
    def error_code(self) -> ApiErrorCode | None:
        return ApiErrorCode.lookup(self.code)

    @property
    def message(self) -> str:
        value = self._field("message")
        return value if isinstance(value, str) else ""

    @property
    def status_code(self) -> int:
        value = self._field("status_code")
        if isinstance(value, int):
            return value
        return self.response.status_code

    def _describe(self) -> str:
        label = f"[{self.code}] " if self.code is not None else ""
        message = self.message or "QuestionIt API error"
        return f"{label}{message} (HTTP {self.status_code})"


def is_api_error(value: object) -> TypeGuard[QuestionItApiError]:
    """Indica si `value` es un error estructurado de la API (mira la etiqueta `type`)."""

    return getattr(value, "type", None) == API_ERROR_TYPE
