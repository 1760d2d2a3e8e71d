"""Construcción de peticiones para la API QuestionIt.

Reglas:
- GET/DELETE/HEAD: todos los parámetros van en la query string.
- Resto de verbos: los parámetros van en el cuerpo. Los endpoints de
  `MULTIPART_ENDPOINTS` siempre se envían como multipart; el resto como JSON si
  llega un dict, o URL-encoded si llega un formulario pre-construido.
- `None` significa "ausente": la clave no aparece ni en la query ni en el cuerpo.
- Authorization: un `auth` de tipo `str` gana sobre el token guardado;
  `auth=False` no añade cabecera.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any

from questionit.core.domain.forms import (
    Attachment,
    MultipartForm,
    Params,
    UrlEncodedForm,
    is_sequence_value,
)
from questionit.core.domain.request import BodyEncoding, PreparedRequest

logger = logging.getLogger(__name__)

PREFIX = "https://api.questionit.space/"
MULTIPART_ENDPOINTS = frozenset({"questions/answer", "users/profile"})
QUERY_PARAMS_METHODS = frozenset({"GET", "DELETE", "HEAD"})

AuthOption = bool | str | None


def build_query(params: Params) -> str:
    """Serializa `params` como query string (vacía si no queda ningún valor)."""

    if isinstance(params, UrlEncodedForm):
        return params.encode()

    query = UrlEncodedForm()
    entries = params if isinstance(params, MultipartForm) else params.items()
    for name, value in entries:
        query.append(name, value)
    return query.encode()


def build_multipart(params: Params) -> MultipartForm:
    if isinstance(params, MultipartForm):
        return params

    form = MultipartForm()
    entries = params if isinstance(params, UrlEncodedForm) else params.items()
    for name, value in entries:
        form.append(name, value)
    return form


def _jsonable(name: str, value: Any) -> Any:
    if isinstance(value, Attachment):
        raise TypeError(
            f"Field {name!r} is a binary attachment; only multipart endpoints accept files."
        )
    if is_sequence_value(value):
        return [_jsonable(name, item) for item in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Mapping):
        return {key: _jsonable(key, item) for key, item in value.items() if item is not None}
    return value


def build_json(params: Mapping[str, Any]) -> str:
    payload = {name: _jsonable(name, value) for name, value in params.items() if value is not None}
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":"))


def build_body(endpoint: str, params: Params) -> tuple[str | MultipartForm, BodyEncoding]:
    """Elige codificación y cuerpo según el endpoint y la forma de `params`."""

    if endpoint in MULTIPART_ENDPOINTS:
        return build_multipart(params), BodyEncoding.MULTIPART

    if isinstance(params, UrlEncodedForm):
        return params.encode(), BodyEncoding.FORM

    if isinstance(params, MultipartForm):
        form = UrlEncodedForm()
        for name, value in params:
            form.append(name, value)
        return form.encode(), BodyEncoding.FORM

    return build_json(params), BodyEncoding.JSON


def _drop_header(headers: dict[str, str], name: str) -> None:
    for key in [k for k in headers if k.lower() == name.lower()]:
        del headers[key]


def _set_header(headers: dict[str, str], name: str, value: str) -> None:
    _drop_header(headers, name)
    headers[name] = value


def resolve_authorization(auth: AuthOption, token: str | None) -> str | None:
    """Valor de la cabecera Authorization, o `None` si no debe enviarse."""

    if isinstance(auth, str):
        return f"Bearer {auth}"
    if auth is False:
        return None
    if token:
        return f"Bearer {token}"
    return None


def build_request(
    method: str,
    endpoint: str,
    *,
    params: Params | None = None,
    headers: Mapping[str, str] | None = None,
    auth: AuthOption = None,
    token: str | None = None,
    base_url: str = PREFIX,
) -> PreparedRequest:
    """Traduce una llamada del cliente a una `PreparedRequest`.

    `token` es el token guardado en el cliente en el momento de la llamada.
    """

    method = method.upper()
    request = PreparedRequest(
        method=method,
        url=base_url + endpoint,
        headers=dict(headers or {}),
    )

    if params is not None:
        if method in QUERY_PARAMS_METHODS:
            query = build_query(params)
            if query:
                request.url += "?" + query
        else:
            body, encoding = build_body(endpoint, params)
            request.body = body
            request.encoding = encoding
            if encoding is BodyEncoding.MULTIPART:
                # El boundary lo genera el codificador multipart del transporte.
                _drop_header(request.headers, "Content-Type")
            else:
                _set_header(request.headers, "Content-Type", encoding.value)

    authorization = resolve_authorization(auth, token)
    if authorization is not None:
        _set_header(request.headers, "Authorization", authorization)

    logger.debug(
        "Prepared %s %s (encoding=%s, authenticated=%s)",
        request.method,
        request.url,
        request.encoding.name if request.encoding else None,
        authorization is not None,
    )
    return request
