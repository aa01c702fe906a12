"""
Multipart body tokenizer.

Splits a multipart body into its parts following the boundary rules of
RFC 2046: preamble and epilogue are ignored, the line break preceding a
delimiter belongs to the delimiter, and trailing whitespace after a
delimiter is transport padding.
"""

import io
from dataclasses import dataclass
from typing import BinaryIO, Iterator, List, Optional

import structlog

from ..errors import MultipartError
from .envelope import HeaderMultimap, parse_header_block

logger = structlog.get_logger(__name__)

_PART = "part"
_CLOSE = "close"


@dataclass
class Part:
    """One part of a multipart body: its own headers and its raw body."""

    headers: HeaderMultimap
    body: BinaryIO


class MultipartReader:
    """
    Sequential reader over the parts of one multipart body.

    Iterating the reader yields each Part once; iteration ends after the
    closing delimiter (or at end of input when no delimiter was ever seen).
    """

    def __init__(self, stream: BinaryIO, boundary: str):
        if not boundary:
            raise MultipartError("multipart: boundary is empty")
        self._stream = stream
        self._delimiter = b"--" + boundary.encode("utf-8")
        self._started = False
        self._done = False

    def __iter__(self) -> Iterator[Part]:
        while True:
            part = self.next_part()
            if part is None:
                return
            yield part

    def _delimiter_kind(self, line: bytes) -> Optional[str]:
        if not line.startswith(self._delimiter):
            return None
        stripped = line.rstrip(b"\r\n").rstrip(b" \t")
        if stripped == self._delimiter:
            return _PART
        if stripped == self._delimiter + b"--":
            return _CLOSE
        return None

    def _skip_preamble(self) -> bool:
        while True:
            line = self._stream.readline()
            if not line:
                return False
            kind = self._delimiter_kind(line)
            if kind == _CLOSE:
                return False
            if kind == _PART:
                return True

    def next_part(self) -> Optional[Part]:
        """
        Read the next part.

        Returns:
            The next Part, or None when there are no more parts

        Raises:
            MultipartError: If the input ends inside a part
        """
        if self._done:
            return None

        if not self._started:
            self._started = True
            if not self._skip_preamble():
                self._done = True
                return None

        lines: List[bytes] = []
        while True:
            line = self._stream.readline()
            if not line:
                self._done = True
                raise MultipartError("multipart: NextPart: unexpected EOF")
            kind = self._delimiter_kind(line)
            if kind is not None:
                break
            lines.append(line)

        if kind == _CLOSE:
            self._done = True

        return _build_part(lines)


def _build_part(lines: List[bytes]) -> Part:
    if lines:
        last = lines[-1]
        if last.endswith(b"\r\n"):
            lines[-1] = last[:-2]
        elif last.endswith(b"\n"):
            lines[-1] = last[:-1]

    header_end = len(lines)
    for index, line in enumerate(lines):
        if line in (b"\r\n", b"\n", b""):
            header_end = index
            break

    headers = parse_header_block(b"".join(lines[:header_end]))
    body = b"".join(lines[header_end + 1:])
    logger.debug("multipart_part", headers=headers.keys(), size=len(body))
    return Part(headers=headers, body=io.BytesIO(body))
