"""Call helpers.

Entry points that most callers need and that do not belong to a single
`Request`: one-shot calls and the sign-in URL used in the token flow
(`GetSessionID` -> user signs in -> `FetchToken`).
"""

from __future__ import annotations

from typing import Any
from urllib.parse import urlencode

from ebayr.core.config import EbayrSettings
from ebayr.core.interfaces.transport import Transport
from ebayr.core.request import Request
from ebayr.core.response import Response


def call(
    command: str,
    settings: EbayrSettings | None = None,
    *,
    transport: Transport | None = None,
    **options: Any,
) -> Response:
    """Build a `Request` for `command` and send it.

        call("GeteBayOfficialTime")
        call("get_item", ItemID="110012345678", DetailLevel="ReturnAll")
    """

    return Request(command, settings, **options).send(transport)


def authorization_uri(
    session_id: str,
    ru_name: str | None = None,
    settings: EbayrSettings | None = None,
) -> str:
    """URL the user visits to grant this application a token."""

    settings = settings or EbayrSettings()
    query = urlencode({"RuName": ru_name or settings.ru_name, "SessID": session_id})
    return f"{settings.authorization_callback_url}?SignIn&{query}"
