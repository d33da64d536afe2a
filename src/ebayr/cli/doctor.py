"""Doctor command for environment diagnostics."""

from __future__ import annotations

import httpx
import typer
from rich.console import Console
from rich.table import Table

from ebayr.adapters.http_client import build_client
from ebayr.core.config import EbayrSettings, write_user_env_vars

app = typer.Typer(no_args_is_help=True, help="Environment diagnostics and configuration checks.")

_console = Console()


def _check_http(settings: EbayrSettings) -> tuple[bool, str]:
    try:
        with build_client(settings) as client:
            response = client.get(settings.endpoint)
        return True, f"HTTP {response.status_code}"
    except httpx.HTTPError as exc:
        return False, str(exc)


@app.command()
def run(
    offline: bool = typer.Option(False, "--offline", help="Skip the connectivity check."),
) -> None:
    """Run baseline diagnostics and show recommended fixes."""

    settings = EbayrSettings()

    table = Table(title="ebayr Doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Credentials
    for label, value in (("Dev id", settings.dev_id), ("App id", settings.app_id), ("Cert id", settings.cert_id)):
        table.add_row(label, "OK" if value else "MISSING", "set" if value else "EBAYR_" + label.upper().replace(" ", "_"))
    if settings.auth_token:
        table.add_row("Auth token", "OK", "RequesterCredentials will be sent")
    else:
        table.add_row("Auth token", "OPTIONAL", "No token -> only token-less calls will work")

    table.add_row("Endpoint", "OK", settings.endpoint)
    table.add_row("Environment", "SANDBOX" if settings.sandbox else "PRODUCTION", f"site id {settings.site_id}")
    table.add_row("Compatibility level", "OK", str(settings.compatibility_level))
    if not settings.verify_ssl:
        table.add_row("TLS verification", "WARN", "Certificates are not verified")

    if not offline:
        ok_http, detail_http = _check_http(settings)
        table.add_row("HTTP connectivity", "OK" if ok_http else "FAIL", detail_http)

    _console.print(table)

    if not (settings.dev_id and settings.app_id and settings.cert_id):
        _console.print("\n[yellow]Note:[/yellow] Run `ebayr doctor setup` to store your application keys.")


@app.command()
def setup() -> None:
    """Interactive credential setup (stores config in the user config .env)."""

    environment = typer.prompt(
        "Environment (sandbox/production)",
        default="sandbox",
        show_default=True,
    ).strip().lower()
    if environment not in {"sandbox", "production"}:
        raise typer.BadParameter("environment must be 'sandbox' or 'production'")

    dev_id = typer.prompt("Dev id").strip()
    app_id = typer.prompt("App id").strip()
    cert_id = typer.prompt("Cert id", hide_input=True).strip()
    ru_name = typer.prompt("RuName", default="", show_default=False).strip()
    auth_token = typer.prompt("Auth token", default="", show_default=False, hide_input=True).strip()

    if not dev_id or not app_id or not cert_id:
        raise typer.BadParameter("dev id, app id and cert id are required")

    env_path = write_user_env_vars(
        {
            "EBAYR_SANDBOX": "true" if environment == "sandbox" else "false",
            "EBAYR_DEV_ID": dev_id,
            "EBAYR_APP_ID": app_id,
            "EBAYR_CERT_ID": cert_id,
            "EBAYR_RU_NAME": ru_name or None,
            "EBAYR_AUTH_TOKEN": auth_token or None,
        }
    )

    _console.print(f"[green]Saved ebayr config to:[/green] {env_path}")
