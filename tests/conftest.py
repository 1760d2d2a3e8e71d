"""Fixtures comunes: transporte simulado con `httpx.MockTransport` y utilidades."""

from __future__ import annotations

import json
import re
from typing import Any, Callable

import httpx
import pytest
import pytest_asyncio

from questionit.adapters.http_client import HttpxTransport
from questionit.client import QuestionIt
from questionit.core.domain.request import PreparedRequest

Handler = Callable[[httpx.Request], httpx.Response]


class ApiRecorder:
    """Guarda cada petición enviada y responde con la cola de respuestas."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._responses: list[httpx.Response] = []

    def queue(self, *responses: httpx.Response) -> None:
        self._responses.extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self._responses:
            return self._responses.pop(0)
        return httpx.Response(200, json={})

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


class FakeTransport:
    """Transporte mínimo que cumple `core.interfaces.Transport` sin httpx.AsyncClient."""

    def __init__(self, handler: Callable[[PreparedRequest], httpx.Response] | None = None) -> None:
        self.sent: list[PreparedRequest] = []
        self.closed = False
        self._handler = handler or (lambda request: httpx.Response(200, json={}))

    async def send(self, request: PreparedRequest) -> httpx.Response:
        self.sent.append(request)
        return self._handler(request)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def recorder() -> ApiRecorder:
    return ApiRecorder()


@pytest_asyncio.fixture
async def api(recorder: ApiRecorder):
    """Cliente QuestionIt cuyo transporte httpx responde desde `recorder`."""

    http = httpx.AsyncClient(transport=httpx.MockTransport(recorder.handler))
    client = QuestionIt(transport=HttpxTransport(http))
    yield client
    await client.aclose()
    await http.aclose()


def json_body(request: httpx.Request) -> Any:
    assert request.headers["Content-Type"] == "application/json"
    return json.loads(request.content)


def multipart_fields(request: httpx.Request) -> list[tuple[str, bytes, str | None]]:
    """Campos (name, contenido, filename) de un cuerpo multipart."""

    content_type = request.headers["Content-Type"]
    assert content_type.startswith("multipart/form-data; boundary=")
    boundary = content_type.split("boundary=", 1)[1].encode("ascii")

    fields: list[tuple[str, bytes, str | None]] = []
    for part in request.content.split(b"--" + boundary):
        if not part.strip() or part.strip() == b"--":
            continue
        raw_headers, _, body = part.strip(b"\r\n").partition(b"\r\n\r\n")
        name = re.search(rb'name="([^"]*)"', raw_headers)
        filename = re.search(rb'filename="([^"]*)"', raw_headers)
        assert name is not None
        fields.append(
            (
                name.group(1).decode("utf-8"),
                body,
                filename.group(1).decode("utf-8") if filename else None,
            )
        )
    return fields
