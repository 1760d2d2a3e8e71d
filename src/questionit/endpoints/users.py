"""Endpoints de usuarios y perfil."""

from __future__ import annotations

from typing import Any, Sequence

from questionit.core.domain.forms import Attachment
from questionit.core.domain.models import SentUser, parse_payload
from questionit.endpoints.base import EndpointMixin, cursor_params, path_segment


class UsersEndpoints(EndpointMixin):
    async def find_users(
        self,
        query: str,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            "users/find",
            params={"q": query, **cursor_params(since=since, until=until, count=count)},
        )

    async def get_user(self, user_id: str) -> SentUser:
        return parse_payload(SentUser, await self.get(f"users/id/{path_segment(user_id)}"))

    async def get_user_by_slug(self, slug: str) -> SentUser:
        return parse_payload(SentUser, await self.get(f"users/slug/{path_segment(slug)}"))

    async def get_logged_user(self) -> SentUser:
        """Usuario dueño del token actual."""

        return parse_payload(SentUser, await self.get("users/logged"))

    async def update_profile(
        self,
        *,
        name: str | None = None,
        slug: str | None = None,
        ask_me_message: str | None = None,
        allow_anonymous: bool | None = None,
        allow_question_of_the_day: bool | None = None,
        default_send_twitter: bool | None = None,
        visible: bool | None = None,
        safe_mode: bool | None = None,
        drop_on_block_match: bool | None = None,
        profile_picture: Attachment | None = None,
        banner_picture: Attachment | None = None,
    ) -> SentUser:
        """Actualiza el perfil (multipart). Solo se envían los campos no `None`."""

        params = {
            "name": name,
            "slug": slug,
            "ask_me_message": ask_me_message,
            "allow_anonymous": allow_anonymous,
            "allow_question_of_the_day": allow_question_of_the_day,
            "default_send_twitter": default_send_twitter,
            "visible": visible,
            "safe_mode": safe_mode,
            "drop_on_block_match": drop_on_block_match,
            "profile_picture": profile_picture,
            "banner_picture": banner_picture,
        }
        return parse_payload(SentUser, await self.post("users/profile", params=params))

    async def pin_question(self, question_id: str) -> Any:
        return await self.patch("questions/pin", params={"question": question_id})

    async def unpin_question(self) -> Any:
        return await self.delete("questions/pin")

    async def set_blocked_words(self, words: Sequence[str]) -> Any:
        return await self.post("users/blocked_words", params={"words": list(words)})

    async def get_blocked_words(self) -> Any:
        return await self.get("users/blocked_words")
