"""CLI de nursys (Typer + Rich).

Por qué una CLI:
- Permite operar la API (enviar lotes, recuperar resultados) sin escribir
  código, y sirve de ejemplo de uso del cliente.
- No hace polling: tras un envío muestra el `TransactionId` y el resultado se
  pide después con `nursys result`.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Awaitable, Callable, List, Optional, TypeVar

import typer
from pydantic import BaseModel, ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from nursys.adapters.json_exporter import export_response_json
from nursys.adapters.nursys_client import NursysClient
from nursys.cli import doctor
from nursys.cli.ui_components import (
    build_errors_table,
    build_manage_nurse_list_table,
    build_notifications_table,
    build_nurse_lookup_table,
    build_transaction_panel,
)
from nursys.core.config import NursysSettings, write_user_env_vars
from nursys.core.domain.change_password import ChangePasswordSubmitRequestMessage
from nursys.core.domain.manage_nurse_list import (
    ManageNurseListRetrieveResponseMessage,
    ManageNurseListSubmitRequestMessage,
)
from nursys.core.domain.models import RetrieveResponseMessage, SubmitResponseMessage
from nursys.core.domain.notification_lookup import (
    NotificationLookupRetrieveResponseMessage,
    NotificationLookupSubmitRequestMessage,
)
from nursys.core.domain.nurse_lookup import (
    NurseLookupRequest,
    NurseLookupRetrieveResponseMessage,
    NurseLookupSubmitRequestMessage,
)
from nursys.core.domain.retrieve_documents import RetrieveDocumentsRetrieveResponseMessage
from nursys.core.errors import NursysError, RemoteError

app = typer.Typer(no_args_is_help=True, help="Nursys e-Notify API client.")
app.add_typer(doctor.app, name="doctor")

_console = Console()

M = TypeVar("M", bound=BaseModel)

TimeoutOption = typer.Option(None, "--timeout", min=0.0, help="Per-call deadline in seconds.")
OutputOption = typer.Option(None, "--output", "-o", help="Write the decoded response as JSON.")


class ResultKind(str, Enum):
    MANAGE_NURSE_LIST = "managenurselist"
    NURSE_LOOKUP = "nurselookup"
    NOTIFICATION_LOOKUP = "notificationlookup"


def build_client() -> NursysClient:
    """Cliente configurado desde el entorno (`NURSYS_*`)."""

    return NursysClient.from_settings(NursysSettings())


async def _call(operation: Callable[[NursysClient], Awaitable[M]]) -> M:
    async with build_client() as client:
        return await operation(client)


def _execute(operation: Callable[[NursysClient], Awaitable[M]], output: Optional[Path]) -> M:
    try:
        result = asyncio.run(_call(operation))
    except ValueError as exc:
        # Configuración incompleta (from_settings).
        _console.print(f"[red]Configuration error:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2) from exc
    except NursysError as exc:
        _console.print(f"[red]{type(exc).__name__}:[/red] {escape(str(exc))}")
        if isinstance(exc, RemoteError):
            _console.print(f"[dim]HTTP status {exc.status_code}[/dim]")
        raise typer.Exit(code=1) from exc

    if output is not None:
        path = export_response_json(response=result, output_path=output)
        _console.print(f"[green]Saved response to:[/green] {path}")
    return result


def _load_json_model(path: Path, model: type[M]) -> M:
    try:
        return model.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as exc:
        raise typer.BadParameter(f"{path}: {exc}") from exc


def _print_transaction(response: SubmitResponseMessage | RetrieveResponseMessage) -> None:
    _console.print(build_transaction_panel(response.transaction))
    if response.transaction.errors:
        _console.print(build_errors_table(response.transaction.errors, title="Transaction errors"))


def _print_submitted(response: SubmitResponseMessage, kind: ResultKind) -> None:
    _print_transaction(response)
    if response.transaction.success_flag:
        _console.print(
            f"\nRetrieve the result later with: "
            f"[bold]nursys result {kind.value} {response.transaction.transaction_id}[/bold]"
        )


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log HTTP calls (credentials are never logged)."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )
    # httpx loguea cada petición en INFO; con --verbose basta con el nuestro.
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@app.command(name="change-password")
def change_password(
    new_password: str = typer.Option(..., prompt=True, hide_input=True, confirmation_prompt=True),
    save: bool = typer.Option(False, "--save", help="Store the new password in the user config .env on success."),
    timeout: Optional[float] = TimeoutOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """Change the institution's API password."""

    request = ChangePasswordSubmitRequestMessage(new_password=new_password)
    response = _execute(lambda c: c.change_password(request, timeout=timeout), output)
    _print_transaction(response)
    if not response.transaction.success_flag:
        raise typer.Exit(code=1)
    if save:
        env_path = write_user_env_vars({"NURSYS_PASSWORD": new_password})
        _console.print(f"[green]Saved new password to:[/green] {env_path}")


@app.command(name="manage-nurse-list")
def manage_nurse_list(
    file: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON with ManageNurseListRequests."),
    timeout: Optional[float] = TimeoutOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """Submit a batch of nurse list additions, updates and removals."""

    request = _load_json_model(file, ManageNurseListSubmitRequestMessage)
    response = _execute(lambda c: c.manage_nurse_list(request, timeout=timeout), output)
    _print_submitted(response, ResultKind.MANAGE_NURSE_LIST)


@app.command(name="nurse-lookup")
def nurse_lookup(
    file: Optional[Path] = typer.Argument(None, exists=True, dir_okay=False, help="JSON with NurseLookupRequests."),
    ncsbn_id: Optional[List[str]] = typer.Option(None, "--ncsbn-id", help="Look up by NCSBN ID (repeatable)."),
    timeout: Optional[float] = TimeoutOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """Submit a Nurse Lookup batch."""

    if file is not None:
        request = _load_json_model(file, NurseLookupSubmitRequestMessage)
    elif ncsbn_id:
        request = NurseLookupSubmitRequestMessage(requests=[NurseLookupRequest(ncsbn_id=i) for i in ncsbn_id])
    else:
        raise typer.BadParameter("pass a JSON file or at least one --ncsbn-id")

    response = _execute(lambda c: c.nurse_lookup(request, timeout=timeout), output)
    _print_submitted(response, ResultKind.NURSE_LOOKUP)


@app.command(name="notification-lookup")
def notification_lookup(
    start: datetime = typer.Option(..., "--start", formats=["%Y-%m-%d"], help="Start date (YYYY-MM-DD)."),
    end: datetime = typer.Option(..., "--end", formats=["%Y-%m-%d"], help="End date (YYYY-MM-DD)."),
    timeout: Optional[float] = TimeoutOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """Submit a Notification Lookup for a date range."""

    request = NotificationLookupSubmitRequestMessage(start_date=start.date(), end_date=end.date())
    response = _execute(lambda c: c.notification_lookup(request, timeout=timeout), output)
    _print_submitted(response, ResultKind.NOTIFICATION_LOOKUP)


@app.command(name="result")
def result(
    kind: ResultKind = typer.Argument(..., help="Which submission the transaction belongs to."),
    tx_id: str = typer.Argument(..., help="TransactionId returned by the submission."),
    timeout: Optional[float] = TimeoutOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """Retrieve the result of a previous submission."""

    if kind is ResultKind.MANAGE_NURSE_LIST:
        manage = _execute(lambda c: c.get_manage_nurse_list_result(tx_id, timeout=timeout), output)
        _print_retrieved(manage)
    elif kind is ResultKind.NURSE_LOOKUP:
        lookup = _execute(lambda c: c.get_nurse_lookup_result(tx_id, timeout=timeout), output)
        _print_retrieved(lookup)
    else:
        notifications = _execute(lambda c: c.get_notification_lookup_result(tx_id, timeout=timeout), output)
        _print_retrieved(notifications)


def _print_retrieved(response: RetrieveResponseMessage) -> None:
    _print_transaction(response)
    if not response.processing_complete:
        _console.print("[yellow]Processing is not complete yet; try again later.[/yellow]")
        return
    if isinstance(response, ManageNurseListRetrieveResponseMessage):
        _console.print(build_manage_nurse_list_table(response.responses))
    elif isinstance(response, NurseLookupRetrieveResponseMessage):
        _console.print(build_nurse_lookup_table(response.responses))
    elif isinstance(response, NotificationLookupRetrieveResponseMessage):
        _console.print(build_notifications_table(response.responses))


@app.command(name="retrieve-documents")
def retrieve_documents(
    document_ids: List[str] = typer.Argument(..., help="DocumentId values (up to five)."),
    timeout: Optional[float] = TimeoutOption,
    output: Optional[Path] = OutputOption,
) -> None:
    """Retrieve documents attached to disciplines and notifications."""

    response: RetrieveDocumentsRetrieveResponseMessage = _execute(
        lambda c: c.retrieve_documents(document_ids, timeout=timeout), output
    )
    _print_transaction(response)
    for doc in response.documents:
        status = "[green]OK[/green]" if doc.success_flag else "[red]NOT FOUND[/red]"
        name = escape(f"{doc.document_id} {doc.document_name}")
        _console.print(f"{status} {name} ({len(doc.document_contents)} chars)")


def run() -> None:
    app()


if __name__ == "__main__":
    run()
