"""
Charset resolution and transcoding of text leaves.

Declared charsets are resolved to Python text codecs. When a part declares no
charset, or one Python does not know, the bytes are sniffed with
charset-normalizer like the rest of the pipeline does.
"""

import codecs
from typing import Optional

import charset_normalizer
import structlog

from ..config import settings
from ..errors import ContentTypeError
from .media_type import parse_media_type

logger = structlog.get_logger(__name__)


def resolve_codec(charset: str) -> Optional[str]:
    """
    Resolve a charset label to a Python text codec name.

    Args:
        charset: Charset label as found in a header (case-insensitive)

    Returns:
        Canonical codec name, or None when no text codec exists
    """
    label = charset.strip().strip('"')
    if not label:
        return None
    try:
        codec = codecs.lookup(label)
    except LookupError:
        return None
    # base64, zlib, rot13 and friends are codecs but not charsets
    if not getattr(codec, "_is_text_encoding", True):
        return None
    try:
        # undefined and idna refuse errors="replace"
        b"a".decode(codec.name, errors="replace")
    except (LookupError, UnicodeError):
        return None
    return codec.name


def content_charset(content_type: str) -> str:
    """Charset parameter of a Content-Type value, or "" when absent or unparsable."""
    if not content_type:
        return ""
    try:
        _, params = parse_media_type(content_type)
    except ContentTypeError:
        return ""
    return params.get("charset", "")


def detect_charset(data: bytes) -> Optional[str]:
    """
    Detect the encoding of a byte string using charset-normalizer.

    Args:
        data: Raw bytes

    Returns:
        Detected encoding name, or None when nothing plausible was found
    """
    detected = charset_normalizer.from_bytes(data).best()
    if detected:
        return detected.encoding
    return None


def transcode(data: bytes, content_type: str) -> str:
    """
    Decode the bytes of a text part to str.

    Args:
        data: Transfer-decoded bytes
        content_type: Full Content-Type value of the owning part

    Returns:
        Decoded text; undecodable sequences are replaced with U+FFFD
    """
    if not data:
        return ""

    declared = content_charset(content_type)
    codec = resolve_codec(declared) if declared else None
    if codec:
        try:
            return data.decode(codec, errors="replace")
        except (LookupError, UnicodeError):
            codec = None

    if declared:
        logger.warning("charset_unsupported", charset=declared)

    detected = detect_charset(data)
    if detected:
        logger.debug("charset_detected", declared=declared or None, detected=detected)
        return data.decode(detected, errors="replace")

    return data.decode(settings.default_charset, errors="replace")
