"""Endpoints de relaciones (follow) y bloqueos."""

from __future__ import annotations

from typing import Any

from questionit.core.domain.models import SentRelationship, parse_payload
from questionit.endpoints.base import EndpointMixin, cursor_params, path_segment


class RelationshipsEndpoints(EndpointMixin):
    async def get_relationship(self, user_id: str) -> SentRelationship:
        """Relación entre el usuario logueado y `user_id`."""

        return parse_payload(
            SentRelationship,
            await self.get(f"relationships/{path_segment(user_id)}"),
        )

    async def follow(self, user_id: str) -> Any:
        return await self.post(f"relationships/{path_segment(user_id)}")

    async def unfollow(self, user_id: str) -> Any:
        return await self.delete(f"relationships/{path_segment(user_id)}")

    async def get_followers(
        self,
        user_id: str,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            f"relationships/followers/{path_segment(user_id)}",
            params=cursor_params(since=since, until=until, count=count),
        )

    async def get_followings(
        self,
        user_id: str,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            f"relationships/followings/{path_segment(user_id)}",
            params=cursor_params(since=since, until=until, count=count),
        )

    async def block(self, user_id: str) -> Any:
        return await self.post(f"blocks/{path_segment(user_id)}")

    async def unblock(self, user_id: str) -> Any:
        return await self.delete(f"blocks/{path_segment(user_id)}")

    async def get_blocked_users(
        self,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            "blocks",
            params=cursor_params(since=since, until=until, count=count),
        )
