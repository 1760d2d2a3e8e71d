"""Cliente de la API QuestionIt.

`QuestionIt` traduce llamadas a peticiones HTTP: el request builder decide
query/JSON/multipart y la cabecera Authorization, el transporte envía, y el
response handler devuelve el cuerpo decodificado o lanza `QuestionItApiError`.

Uso típico::

    async with QuestionIt() as api:
        request_token = await api.get_request_token(APP_KEY)
        result = await api.get_access_token(APP_KEY, request_token, validator)
        api.set_token(result.token)
        me = await api.get_logged_user()
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeGuard

from questionit.adapters.http_client import HttpxTransport
from questionit.core.config import ClientSettings
from questionit.core.domain.forms import Params
from questionit.core.domain.models import AccessTokenResult
from questionit.core.errors import QuestionItApiError, is_api_error
from questionit.core.interfaces.transport import Transport
from questionit.core.services.request_builder import (
    MULTIPART_ENDPOINTS,
    PREFIX,
    QUERY_PARAMS_METHODS,
    AuthOption,
    build_request,
)
from questionit.core.services.response_handler import handle_response
from questionit.endpoints import (
    AuthEndpoints,
    LikesEndpoints,
    NotificationsEndpoints,
    QuestionsEndpoints,
    RelationshipsEndpoints,
    UsersEndpoints,
)


class QuestionIt(
    AuthEndpoints,
    UsersEndpoints,
    QuestionsEndpoints,
    LikesEndpoints,
    RelationshipsEndpoints,
    NotificationsEndpoints,
):
    """Cliente asíncrono de `https://api.questionit.space/`.

    El único estado es el bearer token; se lee al construir cada petición, así
    que cambiarlo con peticiones en vuelo no afecta a las ya construidas.
    """

    PREFIX = PREFIX
    FORM_DATA_ENDPOINTS = MULTIPART_ENDPOINTS
    QUERY_PARAMS_METHODS = QUERY_PARAMS_METHODS

    def __init__(
        self,
        token: str | None = None,
        *,
        transport: Transport | None = None,
        settings: ClientSettings | None = None,
    ) -> None:
        self._settings = settings
        self._base_url = settings.base_url if settings else self.PREFIX
        self._token = token or (settings.token if settings else None)
        self._transport: Transport = transport or HttpxTransport(settings=settings)
        self._owns_transport = transport is None

    @classmethod
    def from_settings(cls, settings: ClientSettings | None = None) -> "QuestionIt":
        settings = settings or ClientSettings()
        return cls(settings=settings)

    # State management

    @property
    def token(self) -> str | None:
        return self._token

    def set_token(self, token: str) -> None:
        self._token = token

    def clear_token(self) -> None:
        self._token = None

    set_access_token = set_token
    remove_access_token = clear_token

    # Auth exchange

    async def get_request_token(self, app_key: str, url: str = "oob") -> str:
        """Intercambia la clave de aplicación y la URL de callback por un request token."""

        result = await self.post("apps/token", params={"key": app_key, "url": url}, auth=False)
        return result["token"]

    async def get_access_token(self, app_key: str, token: str, validator: str) -> AccessTokenResult:
        """Intercambia request token + validator por un access token y el usuario asociado.

        No guarda el token: el llamador decide con `set_token`.
        """

        result = await self.post(
            "auth/token/create",
            params={"key": app_key, "token": token, "validator": validator},
            auth=False,
        )
        return AccessTokenResult.model_validate(result)

    # Generic endpoint methods

    async def get(self, endpoint: str, **options: Any) -> Any:
        return await self.request("GET", endpoint, **options)

    async def post(self, endpoint: str, **options: Any) -> Any:
        return await self.request("POST", endpoint, **options)

    async def put(self, endpoint: str, **options: Any) -> Any:
        return await self.request("PUT", endpoint, **options)

    async def patch(self, endpoint: str, **options: Any) -> Any:
        return await self.request("PATCH", endpoint, **options)

    async def delete(self, endpoint: str, **options: Any) -> Any:
        return await self.request("DELETE", endpoint, **options)

    async def request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Params | None = None,
        headers: Mapping[str, str] | None = None,
        auth: AuthOption = None,
        with_raw_response: bool = False,
    ) -> Any:
        """Envía una petición y normaliza la respuesta.

        - `params`: dict de valores (None = ausente) o formulario pre-construido.
        - `headers`: cabeceras extra; Content-Type y Authorization se recalculan.
        - `auth`: None/True usa el token guardado, False no autentica, un `str`
          se usa como token puntual.
        - `with_raw_response`: devuelve `RawResult(response, result)`.

        Lanza `QuestionItApiError` para respuestas no-2xx.
        """

        prepared = build_request(
            method,
            endpoint,
            params=params,
            headers=headers,
            auth=auth,
            token=self._token,
            base_url=self._base_url,
        )
        response = await self._transport.send(prepared)
        return handle_response(response, method=prepared.method, with_raw_response=with_raw_response)

    @staticmethod
    def is_api_error(value: object) -> TypeGuard[QuestionItApiError]:
        return is_api_error(value)

    # Lifecycle

    async def aclose(self) -> None:
        if self._owns_transport:
            await self._transport.aclose()

    async def __aenter__(self) -> "QuestionIt":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
