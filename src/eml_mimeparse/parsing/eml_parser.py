"""
Email parser for .eml files (RFC5322/MIME format).

Entry point of the package: reads the envelope, resolves the structured
header fields, then decodes the body according to the top-level Content-Type.
Header field errors are deferred until the body has been decoded; body
errors abort immediately.
"""

import io
from pathlib import Path
from typing import BinaryIO, Optional, Tuple, Union

import structlog

from ..config import settings
from ..errors import ParseError
from ..models.email_document import Email
from .classifier import MediaKind, media_kind
from .encoded_words import decode_header_multimap
from .envelope import HeaderMultimap, read_envelope
from .headers import resolve_headers
from .transfer import DecodedStream
from .walker import CONTAINER_KINDS, BodyParts, content_type_of, read_text, walk_multipart

logger = structlog.get_logger(__name__)


def parse_body(
    headers: HeaderMultimap, body: BinaryIO
) -> Tuple[BodyParts, Optional[DecodedStream]]:
    """
    Decode a message body according to its top-level Content-Type.

    Args:
        headers: Top-level headers
        body: Body stream positioned after the header block

    Returns:
        Tuple of (text/html bodies and binary leaves, opaque content stream).
        The opaque stream is only set when the body is neither multipart nor text.

    Raises:
        ParseError: If the body cannot be decoded
    """
    media_type, params = content_type_of(headers)
    kind = media_kind(media_type)

    container = CONTAINER_KINDS.get(kind)
    if container is not None:
        return walk_multipart(body, params.get("boundary", ""), container), None

    if kind is MediaKind.TEXT_PLAIN:
        return BodyParts(text_body=read_text(body, headers)), None

    if kind is MediaKind.TEXT_HTML:
        return BodyParts(html_body=read_text(body, headers)), None

    content = DecodedStream(body.read(), headers.get("Content-Transfer-Encoding"))
    return BodyParts(), content


def parse(stream: BinaryIO) -> Email:
    """
    Parse an email message read from a binary stream.

    Args:
        stream: Binary stream positioned at the start of the message

    Returns:
        Decoded Email

    Raises:
        ParseError: If the body cannot be decoded, or a structured header
            field (address, date) is malformed
    """
    headers, body = read_envelope(stream)
    resolution = resolve_headers(headers)

    parts, content = parse_body(headers, body)

    if resolution.error is not None:
        raise resolution.error

    email = Email(
        header=decode_header_multimap(headers),
        content_type=headers.get("Content-Type"),
        content=content,
        text_body=parts.text_body,
        html_body=parts.html_body,
        attachments=parts.attachments,
        embedded_files=parts.embedded_files,
        **resolution.fields,
    )

    logger.debug(
        "email_parsed",
        message_id=email.message_id,
        content_type=email.content_type,
        attachments=len(email.attachments),
        embedded_files=len(email.embedded_files),
    )
    return email


def parse_eml_bytes(eml_bytes: bytes) -> Email:
    """
    Parse .eml bytes into an Email.

    Args:
        eml_bytes: Raw .eml file bytes

    Returns:
        Decoded Email

    Raises:
        ParseError: If bytes are not a decodable RFC5322/MIME message
    """
    return parse(io.BytesIO(eml_bytes))


def parse_eml_file(eml_path: Union[str, Path]) -> Email:
    """
    Parse .eml file into an Email.

    Args:
        eml_path: Path to .eml file

    Returns:
        Decoded Email

    Raises:
        FileNotFoundError: If file doesn't exist
        ParseError: If the file is larger than max_email_size_mb or cannot be parsed
    """
    path = Path(eml_path)
    size_mb = path.stat().st_size / (1024 * 1024)
    if size_mb > settings.max_email_size_mb:
        raise ParseError(
            f"{path.name} is {size_mb:.1f} MB, limit is {settings.max_email_size_mb} MB"
        )

    with open(path, "rb") as f:
        return parse(f)
