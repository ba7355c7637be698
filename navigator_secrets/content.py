"""Content-type classification for sealed payloads."""
import logging
from typing import Optional

import filetype
from filetype.types.base import Type

from .headers import CONTENT_TYPE, Headers, header_value

logger = logging.getLogger("navigator.secrets")

NONE_MARKER = "none"

_WHITESPACE = b" \t\n\r\x0c"

# tag openers recognised at the start of an HTML document
_HTML_SIGNATURES = (
    b"<!DOCTYPE HTML",
    b"<HTML",
    b"<HEAD",
    b"<SCRIPT",
    b"<IFRAME",
    b"<H1",
    b"<DIV",
    b"<FONT",
    b"<TABLE",
    b"<A",
    b"<STYLE",
    b"<TITLE",
    b"<B",
    b"<BODY",
    b"<BR",
    b"<P",
    b"<!--",
)


class Html(Type):
    """HTML document, detected by its leading tag."""
    MIME = "text/html"
    EXTENSION = "html"

    def __init__(self):
        super().__init__(mime=Html.MIME, extension=Html.EXTENSION)

    def match(self, buf):
        data = bytes(buf).lstrip(_WHITESPACE)
        for sig in _HTML_SIGNATURES:
            head = data[:len(sig)]
            if head.upper() != sig:
                continue
            # the tag must end right after the signature
            tail = data[len(sig):len(sig) + 1]
            if tail in (b" ", b">"):
                return True
        return False


class Xml(Type):
    """XML document, detected by its declaration."""
    MIME = "text/xml"
    EXTENSION = "xml"

    def __init__(self):
        super().__init__(mime=Xml.MIME, extension=Xml.EXTENSION)

    def match(self, buf):
        return bytes(buf).lstrip(_WHITESPACE).startswith(b"<?xml")


class ShellScript(Type):
    """Script starting with a shebang line."""
    MIME = "text/x-shellscript"
    EXTENSION = "sh"

    def __init__(self):
        super().__init__(mime=ShellScript.MIME, extension=ShellScript.EXTENSION)

    def match(self, buf):
        return bytes(buf[:2]) == b"#!"


for _matcher in (ShellScript(), Xml(), Html()):
    filetype.add_type(_matcher)


def sniff_mime(value: bytes) -> Optional[str]:
    """Infer a MIME type from the signature of value, if any."""
    if not value:
        return None
    kind = filetype.guess(bytes(value))
    if kind is None:
        return None
    return kind.mime


def classify_content(value: bytes, headers: Optional[Headers] = None) -> str:
    """Detect the payload mime-type, falling back on the Content-Type header.

    Best-effort only; the result is a display hint and never affects
    encryption. Returns ``"none"`` when nothing can be determined (header
    absent or empty) and ``"error"`` when the declared header is not valid
    UTF-8.
    """
    mime_type = sniff_mime(value)
    if mime_type is not None:
        logger.debug("Detected mime type as %s", mime_type)
        return mime_type
    declared = header_value(headers, CONTENT_TYPE)
    if not declared:
        return NONE_MARKER
    return declared
