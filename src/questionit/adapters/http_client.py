"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y User-Agent del cliente.
- Traduce `PreparedRequest` (Core) a `httpx.Request`: el Core no conoce httpx.
- Facilita testeo: se puede inyectar un `httpx.AsyncClient` con `MockTransport`.
"""

from __future__ import annotations

import logging
import os

import httpx

from questionit.core.config import ClientSettings
from questionit.core.domain.forms import Attachment, MultipartForm
from questionit.core.domain.request import PreparedRequest

logger = logging.getLogger(__name__)


def build_async_client(
    settings: ClientSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
) -> httpx.AsyncClient:
    """Crea un `httpx.AsyncClient` con los defaults del cliente.

    Sin redirecciones: cada llamada es exactamente una petición.
    """

    settings = settings or ClientSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
    )


def _multipart_files(form: MultipartForm) -> list[tuple[str, tuple]]:
    """Campos multipart en formato `files=` de httpx.

    Los campos de texto van como `(None, valor)` (sin filename) para que httpx
    codifique multipart aunque no haya ningún adjunto.
    """

    files: list[tuple[str, tuple]] = []
    for name, value in form:
        if isinstance(value, Attachment):
            files.append((name, (value.filename, value.content, value.content_type)))
        else:
            files.append((name, (None, value.encode("utf-8"))))
    return files


def _empty_multipart(headers: dict[str, str]) -> tuple[dict[str, str], bytes]:
    """Cuerpo multipart sin partes: httpx no codifica multipart con `files=[]`."""

    boundary = os.urandom(16).hex()
    headers = {**headers, "Content-Type": f"multipart/form-data; boundary={boundary}"}
    return headers, f"--{boundary}--\r\n".encode("ascii")


def to_httpx_request(client: httpx.AsyncClient, request: PreparedRequest) -> httpx.Request:
    if isinstance(request.body, MultipartForm):
        if not request.body.entries:
            headers, content = _empty_multipart(request.headers)
            return client.build_request(request.method, request.url, headers=headers, content=content)
        return client.build_request(
            request.method,
            request.url,
            headers=request.headers,
            files=_multipart_files(request.body),
        )
    return client.build_request(
        request.method,
        request.url,
        headers=request.headers,
        content=request.body,
    )


class HttpxTransport:
    """Implementación de `core.interfaces.Transport` sobre `httpx.AsyncClient`.

    Si no se le pasa un cliente, crea uno con `build_async_client` y lo cierra
    en `aclose()`; un cliente inyectado lo cierra su dueño.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None = None,
        *,
        settings: ClientSettings | None = None,
    ) -> None:
        self._settings = settings
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client(self._settings)
        return self._client

    async def send(self, request: PreparedRequest) -> httpx.Response:
        http_request = to_httpx_request(self.client, request)
        logger.debug("Sending %s %s", http_request.method, http_request.url)
        return await self.client.send(http_request)

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None
