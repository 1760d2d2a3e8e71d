"""Endpoints de notificaciones."""

from __future__ import annotations

from typing import Any, Sequence

from questionit.endpoints.base import EndpointMixin, cursor_params, path_segment


class NotificationsEndpoints(EndpointMixin):
    async def get_notifications(
        self,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
        mark_as_seen: bool | None = None,
    ) -> Any:
        params = cursor_params(since=since, until=until, count=count)
        params["mark_as_seen"] = mark_as_seen
        return await self.get("notifications", params=params)

    async def get_notification_count(self) -> Any:
        return await self.get("notifications/count")

    async def delete_notification(self, notification_id: str) -> Any:
        return await self.delete(f"notifications/{path_segment(notification_id)}")

    async def delete_all_notifications(self) -> Any:
        return await self.delete("notifications/all")

    async def mark_notifications_seen(self, ids: Sequence[str]) -> Any:
        return await self.post("notifications/bulk_seen", params={"ids": list(ids)})
