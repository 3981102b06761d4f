"""Doctor command for configuration diagnostics."""

from __future__ import annotations

import asyncio

import typer
from rich.console import Console
from rich.table import Table

from nursys.adapters.http_client import build_async_client
from nursys.cli.ui_components import print_banner
from nursys.core.config import NursysSettings, get_user_env_file, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Configuration checks and credential setup.")

_console = Console()


async def _check_http(url: str, settings: NursysSettings) -> tuple[bool, str]:
    """Reachability only: any HTTP status counts as reachable."""

    try:
        async with build_async_client(settings) as client:
            response = await client.get(url, timeout=10.0)
        return True, f"HTTP {response.status_code}"
    except Exception as exc:
        return False, str(exc) or type(exc).__name__


@app.command()
def run() -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = NursysSettings()
    print_banner(_console)

    table = Table(title="nursys doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    missing = settings.missing_credentials()
    table.add_row("Base URL", "OK" if settings.base_url else "MISSING", settings.base_url or "NURSYS_BASE_URL")
    table.add_row("Username", "OK" if settings.username else "MISSING", settings.username or "NURSYS_USERNAME")
    table.add_row(
        "Password",
        "MISSING" if "NURSYS_PASSWORD" in missing else "OK",
        "NURSYS_PASSWORD" if "NURSYS_PASSWORD" in missing else "set (hidden)",
    )
    table.add_row(
        "Transport timeout",
        "OK",
        f"{settings.http_timeout_seconds}s" if settings.http_timeout_seconds else "none (per-call only)",
    )

    ok_http = False
    if settings.base_url:
        ok_http, detail_http = asyncio.run(_check_http(settings.base_url, settings))
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if missing:
        _console.print(
            f"\n[yellow]Note:[/yellow] run `nursys doctor configure` or set {', '.join(missing)}."
        )
        raise typer.Exit(code=1)
    if not ok_http:
        raise typer.Exit(code=1)


@app.command()
def configure() -> None:
    """Interactive credential setup (stored in the user config .env)."""

    current = NursysSettings()
    base_url = typer.prompt("Nursys API base URL", default=current.base_url or "", show_default=True).strip()
    username = typer.prompt("API username", default=current.username or "", show_default=True).strip()
    password = typer.prompt("API password", hide_input=True, confirmation_prompt=False).strip()

    if not base_url or not username or not password:
        raise typer.BadParameter("base URL, username and password are required")

    env_path = write_user_env_vars(
        {
            "NURSYS_BASE_URL": base_url,
            "NURSYS_USERNAME": username,
            "NURSYS_PASSWORD": password,
        }
    )

    _console.print(f"[green]Saved Nursys config to:[/green] {env_path}")


@app.command(name="where")
def where() -> None:
    """Print the path of the user config .env."""

    _console.print(str(get_user_env_file()))
