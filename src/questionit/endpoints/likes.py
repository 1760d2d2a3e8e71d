"""Endpoints de likes."""

from __future__ import annotations

from typing import Any

from questionit.endpoints.base import EndpointMixin, cursor_params, path_segment


class LikesEndpoints(EndpointMixin):
    async def like(self, question_id: str) -> Any:
        return await self.post(f"likes/{path_segment(question_id)}")

    async def unlike(self, question_id: str) -> Any:
        return await self.delete(f"likes/{path_segment(question_id)}")

    async def get_likers(
        self,
        question_id: str,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            f"likes/list/{path_segment(question_id)}",
            params=cursor_params(since=since, until=until, count=count),
        )

    async def get_liker_ids(
        self,
        question_id: str,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            f"likes/ids/{path_segment(question_id)}",
            params=cursor_params(since=since, until=until, count=count),
        )
