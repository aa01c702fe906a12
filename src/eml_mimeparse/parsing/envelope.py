"""
Envelope reading: header block of an RFC 5322 message.

The header block is parsed with the standard library email parser (compat32
policy, which tolerates real-world malformed headers) and exposed as a
HeaderMultimap. The stream is left positioned at the first body byte.
"""

import re
from email import policy
from email.parser import HeaderParser
from typing import BinaryIO, Dict, Iterable, Iterator, List, Tuple

_FOLD_RE = re.compile(r"\r?\n[ \t]+")


class HeaderMultimap:
    """
    Ordered header multimap with case-insensitive lookup.

    Keys keep the spelling and position of their first occurrence; every
    value of a repeated header is kept in source order.
    """

    def __init__(self, items: Iterable[Tuple[str, str]] = ()):
        self._values: Dict[str, List[str]] = {}
        self._names: Dict[str, str] = {}
        for name, value in items:
            self.add(name, value)

    def add(self, name: str, value: str) -> None:
        key = name.lower()
        if key not in self._values:
            self._names[key] = name
            self._values[key] = []
        self._values[key].append(value)

    def get(self, name: str, default: str = "") -> str:
        """First value of a header, or default when absent."""
        values = self._values.get(name.lower())
        return values[0] if values else default

    def get_all(self, name: str) -> List[str]:
        return list(self._values.get(name.lower(), []))

    def keys(self) -> List[str]:
        return [self._names[key] for key in self._values]

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for key, values in self._values.items():
            yield self._names[key], list(values)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"HeaderMultimap({dict(self.items())!r})"


def unfold(value: str) -> str:
    """Join folded header continuation lines with a single space."""
    return _FOLD_RE.sub(" ", value).strip()


def parse_header_block(block: bytes) -> HeaderMultimap:
    """
    Parse raw header lines into a HeaderMultimap.

    Raw bytes are read as UTF-8 (RFC 6532) with replacement of invalid
    sequences; encoded words are left untouched for later decoding.
    """
    text = block.decode("utf-8", errors="replace")
    msg = HeaderParser(policy=policy.compat32).parsestr(text, headersonly=True)
    return HeaderMultimap((name, unfold(str(value))) for name, value in msg.items())


def read_header_block(stream: BinaryIO) -> bytes:
    """
    Consume header lines up to and including the blank separator line.

    Returns the raw header bytes; the stream is left at the body.
    """
    lines = []
    while True:
        line = stream.readline()
        if not line or line in (b"\r\n", b"\n"):
            break
        lines.append(line)
    return b"".join(lines)


def read_envelope(stream: BinaryIO) -> Tuple[HeaderMultimap, BinaryIO]:
    """
    Split a message stream into its headers and its (unread) body.

    Args:
        stream: Binary stream positioned at the start of a message

    Returns:
        Tuple of (headers, body stream)
    """
    headers = parse_header_block(read_header_block(stream))
    return headers, stream
