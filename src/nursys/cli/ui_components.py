"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from nursys.core.domain.constants import LicenseType
from nursys.core.domain.manage_nurse_list import ManageNurseListResponse
from nursys.core.domain.models import Transaction, TransactionError
from nursys.core.domain.notification_lookup import NotificationLookupResponse
from nursys.core.domain.nurse_lookup import NurseLookupResponse
from nursys.core.domain.timestamps import format_timestamp


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida."""

    title = Text("nursys", style="bold cyan")
    subtitle = Text("Nursys e-Notify • Licencias • Notificaciones", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_errors_table(errors: Iterable[TransactionError], *, title: str = "Errors") -> Table:
    table = Table(title=title)
    table.add_column("ErrorID", style="red", no_wrap=True)
    table.add_column("Message", style="white")
    for err in errors:
        table.add_row(str(err.error_id), Text(err.error_message.strip()))
    return table


def build_transaction_panel(transaction: Transaction) -> Panel:
    """Panel con el resumen de una `Transaction`."""

    ok = transaction.success_flag
    body = Text()
    body.append("Id: ", style="bold")
    body.append(f"{transaction.transaction_id}\n")
    body.append("Fecha: ", style="bold")
    when = format_timestamp(transaction.transaction_date) if transaction.transaction_date else "-"
    body.append(f"{when}\n")
    body.append("Resultado: ", style="bold")
    body.append("OK" if ok else "FAILED", style="green" if ok else "red")
    if transaction.transaction_comment and transaction.transaction_comment.strip():
        body.append(f"\n{transaction.transaction_comment.strip()}", style="dim")

    return Panel(body, title=Text("Transaction", style="bold yellow"), border_style="green" if ok else "red")


def _license_label(value: str) -> str:
    try:
        return f"{value} ({LicenseType(value).label()})"
    except ValueError:
        return value


def build_nurse_lookup_table(responses: Iterable[NurseLookupResponse]) -> Table:
    """Una fila por licencia encontrada."""

    table = Table(title="Nurse Lookup")
    table.add_column("Nurse", style="cyan")
    table.add_column("NCSBN ID", style="white", no_wrap=True)
    table.add_column("Jurisdiction", style="white", no_wrap=True)
    table.add_column("License", style="magenta")
    table.add_column("Status", style="green")
    table.add_column("Expires", style="white")
    table.add_column("Disciplines", style="red", justify="right")

    for resp in responses:
        name = f"{resp.first_name} {resp.last_name}".strip() or "-"
        if not resp.success_flag:
            detail = "; ".join(e.error_message.strip() for e in resp.errors) or "not found"
            table.add_row(name, resp.ncsbn_id or "-", "-", "-", Text(detail, style="red"), "-", "-")
            continue
        for lic in resp.licenses:
            table.add_row(
                name,
                resp.ncsbn_id or "-",
                lic.jurisdiction_abbreviation,
                f"{_license_label(lic.license_type)} #{lic.license_number}",
                lic.license_status or lic.active or "-",
                lic.license_expiration_date or "-",
                str(len(lic.disciplines)),
            )
    return table


def build_manage_nurse_list_table(responses: Iterable[ManageNurseListResponse]) -> Table:
    table = Table(title="Manage Nurse List")
    table.add_column("Action", style="cyan", no_wrap=True)
    table.add_column("RecordId", style="white")
    table.add_column("License", style="magenta")
    table.add_column("Result", style="green")
    for resp in responses:
        action, record, license_ref = "-", "-", ""
        req = resp.request
        if req is not None:
            action = str(getattr(req.submission_action_code, "value", req.submission_action_code))
            record = req.record_id or "-"
            parts = (req.jurisdiction_abbreviation, req.license_type, req.license_number)
            license_ref = " ".join(str(getattr(p, "value", p)) for p in parts if p)
        if resp.success_flag:
            result = Text("OK", style="green")
        else:
            result = Text("; ".join(e.error_message.strip() for e in resp.errors) or "FAILED", style="red")
        table.add_row(action, record, license_ref or "-", result)
    return table


def build_notifications_table(responses: Iterable[NotificationLookupResponse]) -> Table:
    table = Table(title="Notifications")
    table.add_column("Date", style="cyan", no_wrap=True)
    table.add_column("Nurse", style="white")
    table.add_column("License", style="magenta")
    table.add_column("Change", style="yellow")
    for resp in responses:
        when = format_timestamp(resp.notification_date) if resp.notification_date else "-"
        changes = [c for c in (resp.license_status_change, resp.discipline_status_change) if c]
        table.add_row(
            when,
            f"{resp.first_name} {resp.last_name}".strip() or "-",
            f"{resp.jurisdiction_abbreviation} {resp.license_type} #{resp.license_number}",
            "\n".join(changes) or "-",
        )
    return table
