"""ebayr: a small client for the eBay Trading API.

    >>> from ebayr import EbayrSettings, call
    >>> response = call("GeteBayOfficialTime", EbayrSettings(auth_token="..."))
    >>> response.success, response.timestamp

Requests are serialized from plain Python structures (see
`ebayr.core.serializer`) and responses are read through case-insensitive
`Record` views.
"""

from ebayr.core.config import EbayrSettings
from ebayr.core.domain.models import ErrorDetail, RawResponse
from ebayr.core.domain.record import Record
from ebayr.core.errors import CallError, EbayrError, MalformedResponseError
from ebayr.core.naming import camelize
from ebayr.core.request import Request
from ebayr.core.response import Response
from ebayr.core.serializer import Attributed, serialize, xml
from ebayr.core.services.api import authorization_uri, call

__version__ = "0.1.0"

__all__ = [
    "Attributed",
    "CallError",
    "EbayrError",
    "EbayrSettings",
    "ErrorDetail",
    "MalformedResponseError",
    "RawResponse",
    "Record",
    "Request",
    "Response",
    "authorization_uri",
    "call",
    "camelize",
    "serialize",
    "xml",
]
