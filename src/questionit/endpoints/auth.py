"""Endpoints de autenticación (tokens ya emitidos)."""

from __future__ import annotations

from typing import Any

from questionit.endpoints.base import EndpointMixin


class AuthEndpoints(EndpointMixin):
    async def verify_token(self) -> Any:
        """Valida el token actual y devuelve sus derechos."""

        return await self.get("auth/token/verify")

    async def revoke_token(self) -> None:
        """Revoca el token actual en la API y lo elimina del cliente."""

        await self.delete("auth/token")
        self.clear_token()
