"""Configuration.

Why here:
- Centralizes environment variables (pydantic-settings) so requests, the
  CLI and the transport read credentials and endpoints the same way.
- Settings are an explicit object passed to `Request`; per-call overrides are
  layered on top of it. There is no module-level mutable configuration.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

API_NAMESPACE = "urn:ebay:apis:eBLBaseComponents"


def get_user_config_dir() -> Path:
    """Per-user configuration directory (cross-platform, no dependencies)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "ebayr"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "ebayr"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "ebayr"
    return Path.home() / ".config" / "ebayr"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str | None], env_path: Path | None = None) -> Path:
    """Write/update variables in the user's global .env file."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# ebayr user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


def uri_prefix(service: str = "api", *, sandbox: bool = True) -> str:
    """`https://api.sandbox.ebay.com/ws` and friends."""

    return f"https://{service}{'.sandbox' if sandbox else ''}.ebay.com/ws"


class EbayrSettings(BaseSettings):
    """Request defaults for the Trading API.

    Why pydantic-settings:
    - Typed, validated values at the edge (env vars, .env files).
    - A single configuration contract for the library and the CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="EBAYR_",
        extra="ignore",
        case_sensitive=False,
        # Order: project first (dev), then the user's global config.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    dev_id: str = Field(
        default="",
        description="Developer id (`X-EBAY-API-DEV-NAME`).",
    )
    app_id: str = Field(
        default="",
        description="Application id (`X-EBAY-API-APP-NAME`).",
    )
    cert_id: str = Field(
        default="",
        description="Certificate id (`X-EBAY-API-CERT-NAME`).",
    )
    ru_name: str = Field(
        default="",
        description="RuName used when building sign-in URLs.",
    )
    auth_token: str | None = Field(
        default=None,
        description="User token sent in `RequesterCredentials`.",
    )

    sandbox: bool = Field(
        default=True,
        description="Use the sandbox endpoints instead of production.",
    )
    uri: str | None = Field(
        default=None,
        description="Explicit API endpoint; overrides the sandbox/production choice.",
    )
    site_id: int = Field(
        default=0,
        ge=0,
        description="eBay site id (`X-EBAY-API-SITEID`), 0 is US.",
    )
    compatibility_level: int = Field(
        default=837,
        gt=0,
        description="API schema version (`X-EBAY-API-COMPATIBILITY-LEVEL`).",
    )

    http_timeout: float = Field(
        default=60.0,
        gt=0,
        description="Read timeout per call (seconds).",
    )
    verify_ssl: bool = Field(
        default=True,
        description="Verify TLS certificates.",
    )
    debug: bool = Field(
        default=False,
        description="Log every request body before it is sent.",
    )

    @property
    def endpoint(self) -> str:
        return self.uri or f"{uri_prefix(sandbox=self.sandbox)}/api.dll"

    @property
    def authorization_callback_url(self) -> str:
        return f"{uri_prefix('signin', sandbox=self.sandbox)}/eBayISAPI.dll"
