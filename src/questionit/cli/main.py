"""CLI de QuestionIt (Typer + Rich).

Comandos:
- `login` / `logout`: flujo request token → validator → access token.
- `whoami`, `timeline`, `waiting`, `notifications`: lectura.
- `ask`, `reply`: escritura.
- `doctor`: diagnóstico de entorno.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional, TypeVar

import typer
from rich.console import Console

from questionit.adapters.json_exporter import dump_payload, export_payload_json
from questionit.cli import doctor
from questionit.cli.ui_components import (
    build_notifications_table,
    build_questions_table,
    build_user_panel,
    format_api_error,
    page_items,
)
from questionit.client import QuestionIt
from questionit.core.config import ClientSettings, write_user_env_vars
from questionit.core.domain.forms import Attachment
from questionit.core.domain.models import SentNotification, SentQuestion
from questionit.core.errors import InvalidPollError, QuestionItApiError
from questionit.core.logging import configure_logging

T = TypeVar("T")

app = typer.Typer(no_args_is_help=True, help="Command-line client for the QuestionIt API.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING...). Defaults to QUESTIONIT_LOG_LEVEL.",
    ),
) -> None:
    configure_logging(log_level or ClientSettings().log_level)


def _call(action: Callable[[QuestionIt], Awaitable[T]], settings: ClientSettings | None = None) -> T:
    """Ejecuta `action` con un cliente nuevo; los errores de la API terminan con exit code 1."""

    async def runner() -> T:
        async with QuestionIt.from_settings(settings) as api:
            return await action(api)

    try:
        return asyncio.run(runner())
    except QuestionItApiError as exc:
        _console.print(format_api_error(exc))
        raise typer.Exit(code=1) from exc


def _require_token(settings: ClientSettings) -> None:
    if not settings.token:
        _console.print("[red]Not logged in.[/red] Run `questionit login` first.")
        raise typer.Exit(code=1)


def _print_page(
    payload: Any,
    *,
    as_json: bool,
    render: Callable[[list[dict[str, Any]]], Any],
    output: Path | None = None,
) -> None:
    if output is not None:
        path = export_payload_json(payload=payload, output_path=output)
        _console.print(f"[green]Saved:[/green] {path}")
        return
    if as_json:
        typer.echo(dump_payload(payload))
        return
    _console.print(render(page_items(payload)))


@app.command()
def login(
    app_key: Optional[str] = typer.Option(None, "--app-key", help="Application key (defaults to QUESTIONIT_APP_KEY)."),
    callback_url: str = typer.Option("oob", "--callback-url", help="Callback URL registered for the application."),
) -> None:
    """Obtain an access token and store it in the user config."""

    settings = ClientSettings()
    key = app_key or settings.app_key
    if not key:
        raise typer.BadParameter("an application key is required (--app-key or QUESTIONIT_APP_KEY)")

    request_token = _call(lambda api: api.get_request_token(key, callback_url), settings)
    _console.print(f"Request token: [bold]{request_token}[/bold]")
    _console.print("Approve it on QuestionIt, then paste the validator code.")
    validator = typer.prompt("Validator").strip()

    result = _call(lambda api: api.get_access_token(key, request_token, validator), settings)
    env_path = write_user_env_vars({"QUESTIONIT_TOKEN": result.token, "QUESTIONIT_APP_KEY": key})

    _console.print(build_user_panel(result.user))
    _console.print(f"[green]Token saved to:[/green] {env_path}")


@app.command()
def logout() -> None:
    """Revoke the stored token and forget it."""

    settings = ClientSettings()
    _require_token(settings)
    _call(lambda api: api.revoke_token(), settings)
    write_user_env_vars({"QUESTIONIT_TOKEN": None})
    _console.print("[green]Logged out.[/green]")


@app.command()
def whoami(as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload.")) -> None:
    """Show the logged user."""

    settings = ClientSettings()
    _require_token(settings)
    user = _call(lambda api: api.get_logged_user(), settings)
    if as_json:
        typer.echo(dump_payload(user))
        return
    _console.print(build_user_panel(user))


def _questions_table(title: str) -> Callable[[list[dict[str, Any]]], Any]:
    return lambda items: build_questions_table(
        (SentQuestion.model_validate(item) for item in items),
        title=title,
    )


@app.command()
def timeline(
    since: Optional[str] = typer.Option(None, "--since"),
    until: Optional[str] = typer.Option(None, "--until"),
    count: Optional[int] = typer.Option(None, "--count", min=1),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the raw JSON payload to a file."),
) -> None:
    """Show the home timeline."""

    settings = ClientSettings()
    _require_token(settings)
    payload = _call(lambda api: api.get_timeline(since=since, until=until, count=count), settings)
    _print_page(payload, as_json=as_json, render=_questions_table("Timeline"), output=output)


@app.command()
def waiting(
    since: Optional[str] = typer.Option(None, "--since"),
    until: Optional[str] = typer.Option(None, "--until"),
    count: Optional[int] = typer.Option(None, "--count", min=1),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the raw JSON payload to a file."),
) -> None:
    """Show received questions waiting for an answer."""

    settings = ClientSettings()
    _require_token(settings)
    payload = _call(lambda api: api.get_waiting_questions(since=since, until=until, count=count), settings)
    _print_page(payload, as_json=as_json, render=_questions_table("Waiting questions"), output=output)


@app.command()
def notifications(
    since: Optional[str] = typer.Option(None, "--since"),
    until: Optional[str] = typer.Option(None, "--until"),
    count: Optional[int] = typer.Option(None, "--count", min=1),
    as_json: bool = typer.Option(False, "--json", help="Print the raw JSON payload."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Save the raw JSON payload to a file."),
) -> None:
    """Show notifications."""

    settings = ClientSettings()
    _require_token(settings)
    payload = _call(lambda api: api.get_notifications(since=since, until=until, count=count), settings)
    _print_page(
        payload,
        as_json=as_json,
        render=lambda items: build_notifications_table(SentNotification.model_validate(item) for item in items),
        output=output,
    )


def _sent_id(question: SentQuestion | None) -> str:
    return question.id if question is not None else "(empty response)"


@app.command()
def ask(
    to: str = typer.Argument(..., help="Receiver user id."),
    content: str = typer.Argument(..., help="Question text."),
    anonymous: bool = typer.Option(False, "--anonymous", help="Ask anonymously."),
    in_reply_to: Optional[str] = typer.Option(None, "--in-reply-to", help="Question id this one follows up."),
    option: Optional[list[str]] = typer.Option(None, "--option", help="Poll option (repeat 2 to 4 times)."),
) -> None:
    """Ask a question, optionally with a poll."""

    settings = ClientSettings()
    _require_token(settings)
    try:
        question = _call(
            lambda api: api.ask(content, to, anonymous, in_reply_to, option or None),
            settings,
        )
    except InvalidPollError as exc:
        raise typer.BadParameter(str(exc), param_hint="--option") from exc
    _console.print(f"[green]Question sent:[/green] {_sent_id(question)}")


@app.command()
def reply(
    question: str = typer.Argument(..., help="Question id."),
    answer: str = typer.Argument(..., help="Answer text."),
    picture: Optional[Path] = typer.Option(None, "--picture", exists=True, dir_okay=False, help="Image to attach."),
    twitter: bool = typer.Option(False, "--twitter", help="Also post the answer on Twitter."),
) -> None:
    """Answer a received question."""

    settings = ClientSettings()
    _require_token(settings)
    attachment = Attachment.from_path(picture) if picture else None
    answered = _call(lambda api: api.reply(answer, question, twitter, attachment), settings)
    _console.print(f"[green]Answered:[/green] {_sent_id(answered)}")


def run() -> None:
    app()
