"""Base común de los mixins de endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import quote


def path_segment(value: object) -> str:
    """Escapa un identificador para usarlo como segmento de ruta."""

    return quote(str(value), safe="")


def cursor_params(
    *,
    since: str | None = None,
    until: str | None = None,
    count: int | None = None,
) -> dict[str, Any]:
    """Parámetros de paginación por cursores; el llamador los encadena a mano."""

    return {"since": since, "until": until, "count": count}


class EndpointMixin(ABC):
    """Los mixins solo traducen argumentos a `self.get/post/...`.

    La clase que los combina (`QuestionIt`) implementa los verbos y el token.
    """

    @abstractmethod
    async def get(self, endpoint: str, **options: Any) -> Any:
        ...

    @abstractmethod
    async def post(self, endpoint: str, **options: Any) -> Any:
        ...

    @abstractmethod
    async def put(self, endpoint: str, **options: Any) -> Any:
        ...

    @abstractmethod
    async def patch(self, endpoint: str, **options: Any) -> Any:
        ...

    @abstractmethod
    async def delete(self, endpoint: str, **options: Any) -> Any:
        ...

    @abstractmethod
    def clear_token(self) -> None:
        ...
