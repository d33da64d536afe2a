"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from presentation details.
- Tables/trees are reused by several commands.
"""

from __future__ import annotations

from typing import Any

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from ebayr.core.domain.models import ErrorDetail
from ebayr.core.domain.record import Record
from ebayr.core.response import Response


def print_banner(console: Console) -> None:
    """Welcome banner (skipped in --raw/pipeline modes)."""

    title = Text("ebayr", style="bold cyan")
    subtitle = Text("eBay Trading API • XML calls • Records", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def _add_value(tree: Tree, label: str, value: Any) -> None:
    if isinstance(value, Record):
        branch = tree.add(Text(label, style="cyan"))
        for key, child in value.items():
            _add_value(branch, str(key), child)
    elif isinstance(value, list):
        for position, item in enumerate(value):
            _add_value(tree, f"{label}[{position}]", item)
    else:
        tree.add(Text.assemble((label, "cyan"), ": ", ("" if value is None else str(value), "white")))


def build_record_tree(record: Record, title: str = "Response") -> Tree:
    """Render a `Record` as a Rich tree, one branch per nested record."""

    tree = Tree(Text(title, style="bold yellow"))
    for key, value in record.items():
        _add_value(tree, str(key), value)
    return tree


def build_errors_table(details: list[ErrorDetail]) -> Table:
    table = Table(title="API Errors")
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Severity", style="white")
    table.add_column("Message", style="red")
    for detail in details:
        style = "yellow" if detail.is_warning else "red"
        table.add_row(
            detail.error_code or "-",
            Text(detail.severity_code or "-", style=style),
            detail.long_message or detail.short_message or "",
        )
    return table


def build_status_panel(response: Response) -> Panel:
    """Ack/HTTP status summary for a response."""

    ok = response.success
    body = Text()
    body.append(f"{response.command}\n", style="bold")
    body.append("Ack: ")
    body.append(str(response.ack), style="green" if ok else "red")
    body.append(f"\nHTTP {response.status_code}", style="dim")
    return Panel(body, border_style="green" if ok else "red")
