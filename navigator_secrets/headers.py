"""
Header helpers — case-insensitive lookup and provenance capture.

Header values may arrive as ``str`` (already decoded by the transport) or as
raw ``bytes``. Bytes that are not valid UTF-8 are never an error: they are
recorded as the literal marker ``"error"`` and creation carries on.
"""
import logging
from collections.abc import Mapping
from typing import Any, Optional, Union

from aiohttp import web
from multidict import CIMultiDict, CIMultiDictProxy

logger = logging.getLogger("navigator.secrets")

ERROR_MARKER = "error"

X_FORWARDED_FOR = "X-Forwarded-For"
USER_AGENT = "User-Agent"
CONTENT_TYPE = "Content-Type"

HeaderValue = Union[str, bytes]
Headers = Mapping[str, HeaderValue]


def as_header_map(headers: Optional[Headers] = None) -> Mapping[str, Any]:
    """Wrap any header mapping in a case-insensitive multidict."""
    if headers is None:
        return CIMultiDict()
    if isinstance(headers, (CIMultiDict, CIMultiDictProxy)):
        return headers
    return CIMultiDict(headers)


def decode_header(name: str, value: HeaderValue) -> str:
    """Decode a header value as UTF-8, or return the error marker."""
    if isinstance(value, str):
        return value
    try:
        return bytes(value).decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Header %s is not valid UTF-8", name)
        return ERROR_MARKER


def header_value(headers: Optional[Headers], name: str) -> Optional[str]:
    """Look up a header.

    Returns:
        None when the header is absent, the decoded value when present,
        or ``"error"`` when present but undecodable.
    """
    value = as_header_map(headers).get(name)
    if value is None:
        return None
    return decode_header(name, value)


def capture_provenance(headers: Optional[Headers]) -> dict:
    """Extract caller network/agent metadata for the audit trail."""
    hdrs = as_header_map(headers)
    return {
        "x_forwarded_for": header_value(hdrs, X_FORWARDED_FOR),
        "user_agent": header_value(hdrs, USER_AGENT),
    }


def headers_from_request(request: web.Request) -> CIMultiDict:
    """Build a header map of undecoded values from an aiohttp request.

    Uses ``request.raw_headers`` so that bytes which are not valid UTF-8
    reach the core untouched instead of being decoded by the transport.
    """
    return CIMultiDict(
        (name.decode("latin-1"), value) for name, value in request.raw_headers
    )
