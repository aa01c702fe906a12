"""
Part classification from headers alone.

Decides whether a part is a nested container, a body text candidate, an
attachment or an embedded (inline) resource.
"""

from enum import Enum

from ..errors import ContentTypeError
from .envelope import HeaderMultimap
from .media_type import parse_media_type


class MediaKind(str, Enum):
    """Media types the tree walker knows how to route."""

    MIXED = "mixed"
    ALTERNATIVE = "alternative"
    RELATED = "related"
    TEXT_PLAIN = "text/plain"
    TEXT_HTML = "text/html"
    OTHER = "other"


_MEDIA_KINDS = {
    "multipart/mixed": MediaKind.MIXED,
    # Signatures are not verified, the signed content is read like mixed
    "multipart/signed": MediaKind.MIXED,
    "multipart/alternative": MediaKind.ALTERNATIVE,
    "multipart/related": MediaKind.RELATED,
    "text/plain": MediaKind.TEXT_PLAIN,
    "text/html": MediaKind.TEXT_HTML,
}


def media_kind(media_type: str) -> MediaKind:
    """Map a parsed (lower-cased) media type to its MediaKind."""
    return _MEDIA_KINDS.get(media_type, MediaKind.OTHER)


def is_attachment(headers: HeaderMultimap) -> bool:
    """
    Determine if a part is an attachment.

    True only when Content-Disposition parses and its type is "attachment".
    A malformed disposition classifies the part as not an attachment.

    Args:
        headers: Part headers

    Returns:
        True if part is an attachment, False otherwise
    """
    disposition = headers.get("Content-Disposition")
    if not disposition:
        return False
    try:
        disposition_type, _ = parse_media_type(disposition)
    except ContentTypeError:
        return False
    return disposition_type == "attachment"


def is_embedded_file(headers: HeaderMultimap) -> bool:
    """
    Determine if a part is an embedded resource.

    Any Content-Transfer-Encoding header, or a disposition starting with
    ``inline; filename=``, marks the part as embedded.
    """
    if "Content-Transfer-Encoding" in headers:
        return True
    return headers.get("Content-Disposition").startswith("inline; filename=")
