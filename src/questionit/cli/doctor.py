"""Doctor command for environment diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from questionit.adapters.http_client import build_async_client
from questionit.client import QuestionIt
from questionit.core.config import ClientSettings, get_user_env_file, write_user_env_vars
from questionit.core.errors import QuestionItApiError

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


async def _check_http(settings: ClientSettings) -> tuple[bool, str]:
    try:
        async with build_async_client(settings) as client:
            response = await client.get(settings.base_url)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc)


async def _check_token(settings: ClientSettings) -> tuple[bool, str]:
    async with QuestionIt.from_settings(settings) as api:
        try:
            await api.verify_token()
        except QuestionItApiError as exc:
            return False, str(exc)
    return True, "Token accepted"


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = ClientSettings()

    table = Table(title="QuestionIt Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    table.add_row("Base URL", "OK", settings.base_url)
    table.add_row("User config", "OK", str(get_user_env_file()))
    if settings.app_key:
        table.add_row("App key", "OK", "Set")
    else:
        table.add_row("App key", "OPTIONAL", "Needed only for `questionit login`")

    ok_http, detail_http = asyncio.run(_check_http(settings))
    table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    if not settings.token:
        table.add_row("Token", "MISSING", "Run `questionit login`")
    elif ok_http:
        ok_token, detail_token = asyncio.run(_check_token(settings))
        table.add_row("Token", "OK" if ok_token else "FAIL", detail_token)
    else:
        table.add_row("Token", "SKIPPED", "No connectivity")

    _console.print(table)


@app.command()
def setup() -> None:
    """Interactive setup (stores config in the user config .env)."""

    settings = ClientSettings()

    base_url = typer.prompt("API base URL", default=settings.base_url, show_default=True).strip()
    app_key = typer.prompt("Application key", default=settings.app_key or "", show_default=False).strip()

    if not base_url:
        raise typer.BadParameter("base_url is required")

    env_path = write_user_env_vars(
        {
            "QUESTIONIT_BASE_URL": base_url,
            "QUESTIONIT_APP_KEY": app_key or None,
        }
    )

    _console.print(f"[green]Saved config to:[/green] {env_path}")
