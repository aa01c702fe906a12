"""
Content-Transfer-Encoding decoding.

Text leaves are decoded eagerly; binary leaves are wrapped in a DecodedStream
that only decodes when first read.
"""

import base64
import binascii
import io
import quopri
from typing import Optional

from ..errors import TransferDecodingError, UnknownTransferEncodingError

IDENTITY_ENCODINGS = frozenset({"7bit", "8bit", "binary"})
KNOWN_ENCODINGS = IDENTITY_ENCODINGS | {"base64", "quoted-printable"}


def normalize_transfer_encoding(name: str) -> str:
    """
    Normalize a Content-Transfer-Encoding value.

    Args:
        name: Header value (case-insensitive, may be empty)

    Returns:
        Lower-cased encoding name; empty maps to "8bit"

    Raises:
        UnknownTransferEncodingError: If the encoding is not supported
    """
    encoding = name.strip().lower() or "8bit"
    if encoding not in KNOWN_ENCODINGS:
        raise UnknownTransferEncodingError(encoding)
    return encoding


def decode_transfer_encoding(raw: bytes, name: str) -> bytes:
    """
    Decode a part body according to its transfer encoding.

    Args:
        raw: Body bytes as found in the message
        name: Content-Transfer-Encoding value

    Returns:
        Decoded bytes

    Raises:
        UnknownTransferEncodingError: If the encoding is not supported
        TransferDecodingError: If a base64 body is malformed
    """
    encoding = normalize_transfer_encoding(name)

    if encoding == "base64":
        # Line breaks are not part of the alphabet
        compact = b"".join(raw.split())
        try:
            return base64.b64decode(compact, validate=True)
        except binascii.Error as e:
            raise TransferDecodingError(f"illegal base64 data: {e}") from e

    if encoding == "quoted-printable":
        return quopri.decodestring(raw)

    return raw


class DecodedStream(io.BufferedIOBase):
    """
    Read-once stream over a transfer-decoded body.

    The encoding name is validated on construction; the payload itself is
    decoded on the first read. Once drained, further reads return b"".
    """

    def __init__(self, raw: bytes, encoding: str = ""):
        super().__init__()
        self._encoding = normalize_transfer_encoding(encoding)
        self._raw: Optional[bytes] = raw
        self._buffer: Optional[io.BytesIO] = None

    @property
    def encoding(self) -> str:
        return self._encoding

    def readable(self) -> bool:
        return True

    def _decoded(self) -> io.BytesIO:
        if self._buffer is None:
            data = decode_transfer_encoding(self._raw or b"", self._encoding)
            self._raw = None
            self._buffer = io.BytesIO(data)
        return self._buffer

    def read(self, size: Optional[int] = -1) -> bytes:
        if self.closed:
            raise ValueError("I/O operation on closed stream")
        return self._decoded().read(-1 if size is None else size)

    def read1(self, size: int = -1) -> bytes:
        return self.read(size)

    def close(self) -> None:
        if self._buffer is not None:
            self._buffer.close()
        self._raw = None
        super().close()

    def __repr__(self) -> str:
        state = "pending" if self._buffer is None else "decoded"
        return f"<DecodedStream encoding={self._encoding!r} {state}>"
