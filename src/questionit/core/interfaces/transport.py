"""Contrato del transporte HTTP.

Por qué Protocol:
- El Core construye `PreparedRequest` sin saber qué librería la envía.
- El adaptador por defecto (`adapters.http_client.HttpxTransport`) usa httpx,
  pero cualquier objeto con la misma forma sirve (tests, otros hosts).
"""

from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

from questionit.core.domain.request import PreparedRequest


@runtime_checkable
class ResponseLike(Protocol):
    """Lo mínimo que el Core lee de una respuesta (`httpx.Response` lo cumple)."""

    @property
    def status_code(self) -> int: ...

    @property
    def headers(self) -> Mapping[str, str]: ...

    @property
    def is_success(self) -> bool: ...

    def json(self, **kwargs: Any) -> Any: ...


@runtime_checkable
class Transport(Protocol):
    """Envía exactamente una petición y devuelve exactamente una respuesta.

    Reglas de diseño:
    - `send` es asíncrono: el llamador queda suspendido hasta que llega la respuesta.
    - Sin reintentos ni redirecciones propias: los fallos de red se propagan.
    """

    async def send(self, request: PreparedRequest) -> ResponseLike:
        ...

    async def aclose(self) -> None:
        ...
