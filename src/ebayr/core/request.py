"""A single call to the Trading API.

Responsibility:
- Layer per-call overrides over `EbayrSettings`.
- Build the headers and the XML body for the call.
- Hand the body to a `Transport` and wrap the answer in a `Response`.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

from ebayr.adapters.http_client import HttpxTransport
from ebayr.core.config import API_NAMESPACE, EbayrSettings
from ebayr.core.naming import camelize
from ebayr.core.response import Response
from ebayr.core.serializer import xml

if TYPE_CHECKING:
    from ebayr.core.interfaces.transport import Transport

logger = logging.getLogger(__name__)


class Request:
    """Encapsulates a request sent to the eBay Trading API.

    The endpoint, auth token, site id, compatibility level and timeout come
    from `settings` unless overridden here. Remaining keyword options are the
    call input, unless `input` is given explicitly:

        Request("get_item", settings, ItemID="110012345678")
        Request("GetItem", settings, input={"ItemID": "110012345678"})
    """

    def __init__(
        self,
        command: str,
        settings: EbayrSettings | None = None,
        *,
        uri: str | None = None,
        auth_token: str | None = None,
        headers: dict[str, str] | None = None,
        site_id: int | str | None = None,
        compatibility_level: int | str | None = None,
        http_timeout: float | None = None,
        input: Any = None,
        **options: Any,
    ) -> None:
        self.settings = settings or EbayrSettings()
        self.command = camelize(command)
        self.uri = uri or self.settings.endpoint
        self.auth_token = str(auth_token or self.settings.auth_token or "")
        self.custom_headers = dict(headers or {})
        self.site_id = str(self.settings.site_id if site_id is None else site_id)
        self.compatibility_level = str(
            self.settings.compatibility_level if compatibility_level is None else compatibility_level
        )
        self.http_timeout = float(self.settings.http_timeout if http_timeout is None else http_timeout)
        if self.http_timeout <= 0:
            raise ValueError(f"http_timeout must be positive, got {self.http_timeout}")
        self.input = options if input is None else input
        self.response: Response | None = None

    @property
    def input_xml(self) -> str:
        return xml(self.input)

    @property
    def path(self) -> str:
        """Path the request is posted to."""

        return urlsplit(self.uri).path

    @property
    def headers(self) -> dict[str, str]:
        headers = {
            "X-EBAY-API-COMPATIBILITY-LEVEL": self.compatibility_level,
            "X-EBAY-API-DEV-NAME": self.settings.dev_id,
            "X-EBAY-API-APP-NAME": self.settings.app_id,
            "X-EBAY-API-CERT-NAME": self.settings.cert_id,
            "X-EBAY-API-CALL-NAME": self.command,
            "X-EBAY-API-SITEID": self.site_id,
            "Content-Type": "text/xml",
        }
        # Header names are case-insensitive; a custom header replaces any default spelled differently.
        overridden = {name.casefold() for name in self.custom_headers}
        headers = {name: value for name, value in headers.items() if name.casefold() not in overridden}
        headers.update(self.custom_headers)
        return headers

    @property
    def requester_credentials_xml(self) -> str:
        # Custom headers (e.g. an OAuth X-EBAY-API-IAF-TOKEN) replace the token block.
        if not self.auth_token.strip() or self.custom_headers:
            return ""
        return f"<RequesterCredentials><eBayAuthToken>{self.auth_token}</eBayAuthToken></RequesterCredentials>"

    @property
    def body(self) -> str:
        return (
            '<?xml version="1.0" encoding="utf-8"?>'
            f'<{self.command}Request xmlns="{API_NAMESPACE}">'
            f"{self.requester_credentials_xml}"
            f"{self.input_xml}"
            f"</{self.command}Request>"
        )

    def send(self, transport: Transport | None = None) -> Response:
        """Post the request and return the parsed `Response`.

        Transport errors propagate unchanged; there is no retry.
        """

        transport = transport or HttpxTransport(self.settings)
        body = self.body

        if self.settings.debug:
            logger.info("%s request body:\n%s", self.command, body)
        logger.debug("Sending %s to %s", self.command, self.uri)

        raw = transport.post(self.uri, headers=self.headers, content=body, timeout=self.http_timeout)
        self.response = Response(self, raw)
        return self.response

    def __str__(self) -> str:
        return f"{self.command}[{self.input}] <{self.uri}>"

    def __repr__(self) -> str:
        return f"Request({self.command!r}, uri={self.uri!r})"
