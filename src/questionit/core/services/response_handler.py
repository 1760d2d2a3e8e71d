"""Normalización de respuestas de la API.

Dos estados finales por llamada:
- éxito (2xx): el cuerpo decodificado, o `RawResult(response, result)` si el
  llamador pidió la respuesta cruda;
- error (no-2xx): se lanza `QuestionItApiError` con respuesta y cuerpo.

La API siempre responde JSON cuando hay contenido; un cuerpo malformado no se
recupera y el error de decodificación llega al llamador.
"""

from __future__ import annotations

import logging
from typing import Any, NamedTuple

from questionit.core.errors import QuestionItApiError
from questionit.core.interfaces.transport import ResponseLike

logger = logging.getLogger(__name__)


class RawResult(NamedTuple):
    """Respuesta cruda más cuerpo decodificado (`with_raw_response=True`)."""

    response: ResponseLike
    result: Any


def _content_length(response: ResponseLike) -> int:
    raw = response.headers.get("Content-Length")
    if not raw:
        return 0
    try:
        return int(raw)
    except ValueError:
        return 0


def decode_payload(response: ResponseLike, method: str | None = None) -> Any:
    """Cuerpo JSON de la respuesta, o `None` si la respuesta no trae contenido.

    Una respuesta a HEAD nunca trae cuerpo, aunque anuncie `Content-Length`.
    """

    if method is not None and method.upper() == "HEAD":
        return None
    if response.status_code == 204 or _content_length(response) == 0:
        return None
    return response.json()


def handle_response(
    response: ResponseLike,
    *,
    method: str | None = None,
    with_raw_response: bool = False,
) -> Any:
    result = decode_payload(response, method)

    if response.is_success:
        logger.debug("HTTP %s (payload=%s)", response.status_code, type(result).__name__)
        if with_raw_response:
            return RawResult(response, result)
        return result

    error = QuestionItApiError(response, result)
    logger.info("QuestionIt API error: %s", error)
    raise error
