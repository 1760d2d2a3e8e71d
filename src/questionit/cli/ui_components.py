"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Any, Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from questionit.core.domain.models import SentNotification, SentQuestion, SentUser
from questionit.core.errors import QuestionItApiError


def page_items(payload: Any) -> list[dict[str, Any]]:
    """Elementos de una página de resultados.

    Acepta una lista directa o un objeto cuya primera lista de objetos sea la página.
    """

    if isinstance(payload, list):
        return [item for item in payload if isinstance(item, dict)]
    if isinstance(payload, dict):
        for value in payload.values():
            if isinstance(value, list) and all(isinstance(item, dict) for item in value):
                return value
    return []


def _user_label(user: SentUser | None) -> str:
    if user is None:
        return "anonymous"
    return f"{user.name} (@{user.slug})" if user.slug else user.name


def build_user_panel(user: SentUser) -> Panel:
    body = Text()
    body.append(f"@{user.slug}\n", style="bold cyan")
    if user.ask_me_message:
        body.append(user.ask_me_message.strip() + "\n\n")
    body.append(f"Questions: {user.question_count}  ")
    body.append(f"Followers: {user.follower_count}  ")
    body.append(f"Following: {user.following_count}")
    if user.allow_anonymous:
        body.append("\nAnonymous questions allowed", style="dim")
    return Panel(body, title=Text(user.name or user.id, style="bold"), border_style="cyan")


def build_questions_table(questions: Iterable[SentQuestion], *, title: str = "Questions") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("From", style="cyan")
    table.add_column("Question", style="white")
    table.add_column("Answer", style="green")
    table.add_column("Likes", justify="right")

    for question in questions:
        content = question.content
        if question.of_the_day:
            content = f"[QOTD] {content}"
        table.add_row(
            question.id,
            _user_label(question.emitter),
            content,
            question.answer or "",
            str(question.like_count),
        )
    return table


def build_notifications_table(notifications: Iterable[SentNotification]) -> Table:
    table = Table(title="Notifications")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Type", style="magenta")
    table.add_column("Seen", style="green")
    table.add_column("Details", style="white")

    for notification in notifications:
        if notification.question is not None:
            details = notification.question.content
        elif notification.user is not None:
            details = _user_label(notification.user)
        else:
            details = ""
        table.add_row(
            notification.id,
            notification.type.value,
            "yes" if notification.seen else "no",
            details,
        )
    return table


def format_api_error(error: QuestionItApiError) -> Text:
    text = Text("API error ", style="bold red")
    text.append(str(error))
    if error.error_code is not None:
        text.append(f" {error.error_code.name}", style="dim")
    return text
