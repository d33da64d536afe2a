"""Command line entry point (`ebayr`)."""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.syntax import Syntax

from ebayr.cli import doctor
from ebayr.cli.ui_components import build_errors_table, build_record_tree, build_status_panel, print_banner
from ebayr.core.config import EbayrSettings
from ebayr.core.errors import MalformedResponseError
from ebayr.core.serializer import xml
from ebayr.core.services.api import authorization_uri, call

app = typer.Typer(no_args_is_help=True, help="Send eBay Trading API calls and inspect the responses.")
app.add_typer(doctor.app, name="doctor")

_console = Console()


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_json(text: str | None) -> Any:
    if not text:
        return {}
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"invalid JSON: {exc}") from exc


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log requests at DEBUG level."),
) -> None:
    _configure_logging(verbose)


@app.command(name="call")
def call_command(
    command: str = typer.Argument(..., help="Call name, e.g. GeteBayOfficialTime or get_ebay_official_time."),
    input_json: Optional[str] = typer.Option(None, "--input", "-i", help="Call input as a JSON object."),
    auth_token: Optional[str] = typer.Option(None, "--auth-token", help="Override the configured token."),
    site_id: Optional[int] = typer.Option(None, "--site-id", help="Override the configured site id."),
    raw: bool = typer.Option(False, "--raw", help="Print the response XML instead of a tree."),
    show_request: bool = typer.Option(False, "--show-request", help="Print the request XML before sending."),
) -> None:
    """Send a Trading API call and print the response."""

    settings = EbayrSettings()
    options: dict[str, Any] = {"input": _load_json(input_json)}
    if auth_token:
        options["auth_token"] = auth_token
    if site_id is not None:
        options["site_id"] = site_id

    try:
        response = call(command, settings, **options)
    except httpx.HTTPError as exc:
        _console.print(f"[red]Transport error:[/red] {exc}")
        raise typer.Exit(code=2) from exc
    except MalformedResponseError as exc:
        _console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    if show_request and response.request is not None:
        _console.print(Syntax(response.request.body, "xml", word_wrap=True))

    if raw:
        _console.print(Syntax(response.raw.body, "xml", word_wrap=True))
    else:
        print_banner(_console)
        _console.print(build_status_panel(response))
        _console.print(build_record_tree(response.record, title=f"{response.command}Response"))

    details = response.error_details()
    if details:
        _console.print(build_errors_table(details))
    if not response.success:
        raise typer.Exit(code=1)


@app.command(name="xml")
def xml_command(
    structure: str = typer.Argument(..., help="JSON structure to serialize."),
) -> None:
    """Print the XML fragment a JSON structure serializes to."""

    typer.echo(xml(_load_json(structure)))


@app.command(name="auth-url")
def auth_url_command(
    session_id: str = typer.Argument(..., help="Session id returned by GetSessionID."),
    ru_name: Optional[str] = typer.Option(None, "--ru-name", help="Override the configured RuName."),
) -> None:
    """Print the sign-in URL for a session id."""

    typer.echo(authorization_uri(session_id, ru_name, EbayrSettings()))


def run() -> None:
    app()
