"""
Structured header field resolution.

Resolves the RFC 5322 fields with structured meaning (addresses, dates,
message ids) from a HeaderMultimap. Resolution threads a HeaderResolution
value through every field: once a field fails, the error is kept and every
later field is left at its zero value without being parsed.
"""

import re
from dataclasses import dataclass, field, replace
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_tz
from typing import Any, Callable, Dict, List, Optional, Tuple

import structlog

from ..errors import DateFormatError, HeaderFieldError
from ..models.email_document import Address
from . import addresses
from .encoded_words import (
    decode_mime_sentence,
    remove_unsupported_encoding_for_address,
    remove_unsupported_encoding_for_address_list,
)
from .envelope import HeaderMultimap

logger = structlog.get_logger(__name__)

# RFC 5322 date, weekday optional, optionally followed by a "(zone)" comment
_DATE_RE = re.compile(
    r"^((?:(?:Mon|Tue|Wed|Thu|Fri|Sat|Sun), )?"
    r"\d{1,2} [A-Za-z]{3} \d{4} \d{2}:\d{2}:\d{2} [+-]\d{4})"
    r"(?:\s+\([^()]*\))?$"
)


def _is_blank(value: str) -> bool:
    return not value.strip(" \r\n\t")


def parse_address(value: str) -> Optional[Address]:
    """Single address header (Sender, Resent-Sender)."""
    if _is_blank(value):
        return None
    return addresses.parse_address(remove_unsupported_encoding_for_address(value))


def parse_address_list(value: str) -> List[Address]:
    """Address list header (From, To, Cc, ...)."""
    if _is_blank(value):
        return []
    return addresses.parse_address_list(remove_unsupported_encoding_for_address_list(value))


def parse_date(value: str) -> Optional[datetime]:
    """
    Parse a Date style header.

    Accepts "[Mon, ]2 Jan 2006 15:04:05 -0700" with an optional trailing
    "(MST)" comment. Month and weekday names are English whatever the locale.

    Raises:
        DateFormatError: If the value has another layout or impossible fields
    """
    value = value.strip()
    if not value:
        return None

    match = _DATE_RE.match(value)
    parsed = parsedate_tz(match.group(1)) if match else None
    if parsed is None:
        raise DateFormatError(f"cannot parse date: {value!r}")

    try:
        # "-0000" comes back as an unknown offset; treat it as UTC
        zone = timezone(timedelta(seconds=parsed[9] or 0))
        return datetime(*parsed[:6], tzinfo=zone)
    except ValueError as e:
        raise DateFormatError(f"cannot parse date: {value!r}") from e


def parse_message_id(value: str) -> str:
    return value.strip("<> \t\r\n")


def parse_message_id_list(value: str) -> List[str]:
    return [parse_message_id(token) for token in value.split(" ") if token.strip()]


# Field name on Email, header name, parser, zero value factory
FIELD_TABLE: Tuple[Tuple[str, str, Callable[[str], Any], Callable[[], Any]], ...] = (
    ("from_addresses", "From", parse_address_list, list),
    ("sender", "Sender", parse_address, lambda: None),
    ("reply_to_addresses", "Reply-To", parse_address_list, list),
    ("to_addresses", "To", parse_address_list, list),
    ("cc_addresses", "Cc", parse_address_list, list),
    ("bcc_addresses", "Bcc", parse_address_list, list),
    ("date", "Date", parse_date, lambda: None),
    ("resent_from_addresses", "Resent-From", parse_address_list, list),
    ("resent_sender", "Resent-Sender", parse_address, lambda: None),
    ("resent_to_addresses", "Resent-To", parse_address_list, list),
    ("resent_cc_addresses", "Resent-Cc", parse_address_list, list),
    ("resent_bcc_addresses", "Resent-Bcc", parse_address_list, list),
    ("resent_message_id", "Resent-Message-ID", parse_message_id, str),
    ("message_id", "Message-ID", parse_message_id, str),
    ("in_reply_to", "In-Reply-To", parse_message_id_list, list),
    ("references", "References", parse_message_id_list, list),
    ("resent_date", "Resent-Date", parse_date, lambda: None),
)


@dataclass(frozen=True)
class HeaderResolution:
    """Resolved header fields plus the first error met while resolving them."""

    fields: Dict[str, Any] = field(default_factory=dict)
    error: Optional[HeaderFieldError] = None

    def with_field(self, name: str, value: Any) -> "HeaderResolution":
        return replace(self, fields={**self.fields, name: value})

    def with_error(self, error: HeaderFieldError) -> "HeaderResolution":
        return replace(self, error=error)


def resolve_field(
    resolution: HeaderResolution,
    name: str,
    raw: str,
    parser: Callable[[str], Any],
    zero: Callable[[], Any],
) -> HeaderResolution:
    """
    Resolve one field into the accumulated resolution.

    Once the resolution carries an error the parser is not called and the
    field gets its zero value.
    """
    if resolution.error is not None:
        return resolution.with_field(name, zero())

    try:
        value = parser(raw)
    except HeaderFieldError as e:
        e.field = name
        logger.info("header_field_failed", field=name, error=str(e))
        return resolution.with_error(e).with_field(name, zero())

    return resolution.with_field(name, value)


def resolve_headers(headers: HeaderMultimap) -> HeaderResolution:
    """
    Resolve all structured fields of a message header.

    Args:
        headers: Raw header multimap

    Returns:
        HeaderResolution with one entry per Email header field
    """
    resolution = HeaderResolution(
        fields={"subject": decode_mime_sentence(headers.get("Subject"))}
    )
    for name, header, parser, zero in FIELD_TABLE:
        resolution = resolve_field(resolution, name, headers.get(header), parser, zero)
    return resolution
