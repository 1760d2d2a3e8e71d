"""Endpoints de preguntas, respuestas y encuestas."""

from __future__ import annotations

from typing import Any, Sequence

from questionit.core.domain.forms import Attachment
from questionit.core.domain.models import SentPoll, SentQuestion, parse_payload
from questionit.core.errors import InvalidPollError
from questionit.endpoints.base import EndpointMixin, cursor_params, path_segment

POLL_MIN_OPTIONS = 2
POLL_MAX_OPTIONS = 4


class QuestionsEndpoints(EndpointMixin):
    async def create_poll(self, options: Sequence[str]) -> SentPoll:
        """Crea una encuesta para adjuntarla a una pregunta.

        Lanza `InvalidPollError` (sin tocar la red) si no hay entre 2 y 4 opciones.
        """

        options = list(options)
        if not POLL_MIN_OPTIONS <= len(options) <= POLL_MAX_OPTIONS:
            raise InvalidPollError(len(options))
        return parse_payload(SentPoll, await self.post("polls", params={"options": options}))

    async def ask(
        self,
        content: str,
        to: str,
        anonymous: bool = False,
        in_reply_to: str | None = None,
        poll_options: Sequence[str] | None = None,
    ) -> SentQuestion:
        """Envía una pregunta a `to`.

        Con `poll_options` se crea primero la encuesta y su id viaja como `poll_id`.
        """

        poll_id = None
        if poll_options is not None:
            poll = await self.create_poll(poll_options)
            poll_id = poll.id

        endpoint = "questions/anonymous" if anonymous else "questions"
        params = {
            "content": content,
            "to": to,
            "in_reply_to": in_reply_to,
            "poll_id": poll_id,
        }
        return parse_payload(SentQuestion, await self.post(endpoint, params=params))

    async def reply(
        self,
        answer: str,
        question: str,
        post_on_twitter: bool = False,
        picture: Attachment | None = None,
    ) -> SentQuestion:
        """Responde una pregunta recibida (multipart, con imagen opcional)."""

        params = {
            "answer": answer,
            "question": question,
            "post_on_twitter": post_on_twitter,
            "picture": picture,
        }
        return parse_payload(SentQuestion, await self.post("questions/answer", params=params))

    async def get_waiting_questions(
        self,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        """Preguntas recibidas pendientes de respuesta."""

        return await self.get(
            "questions/waiting",
            params=cursor_params(since=since, until=until, count=count),
        )

    async def delete_question(self, question_id: str) -> Any:
        return await self.delete("questions", params={"question": question_id})

    async def mask_question(self, question_id: str) -> Any:
        """Oculta una pregunta recibida sin responderla."""

        return await self.delete("questions/masked", params={"question": question_id})

    async def get_user_questions(
        self,
        user_id: str,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            "questions",
            params={"user_id": user_id, **cursor_params(since=since, until=until, count=count)},
        )

    async def get_sent_questions(
        self,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            "questions/sent",
            params=cursor_params(since=since, until=until, count=count),
        )

    async def get_timeline(
        self,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            "questions/timeline",
            params=cursor_params(since=since, until=until, count=count),
        )

    async def get_question_tree(self, question_id: str) -> Any:
        return await self.get(f"questions/tree/{path_segment(question_id)}")

    async def get_question_replies(
        self,
        question_id: str,
        *,
        since: str | None = None,
        until: str | None = None,
        count: int | None = None,
    ) -> Any:
        return await self.get(
            f"questions/replies/{path_segment(question_id)}",
            params=cursor_params(since=since, until=until, count=count),
        )
