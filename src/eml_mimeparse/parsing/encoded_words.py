"""
RFC 2047 encoded-word decoding for header values.

Header values are decoded one space-separated token at a time. Encoded words
naming a charset or encoding we cannot handle are replaced by a fixed
placeholder instead of failing the whole message.
"""

import base64
import binascii
import re
from typing import Dict, List

from ..errors import EncodedWordError
from .charset import resolve_codec
from .envelope import HeaderMultimap

UNSUPPORTED_CHARSET = "(removed text: non supported charset)"
UNSUPPORTED_ENCODING = "(removed text: non supported encoding)"
UNSUPPORTED_ENCODER = "(removed text: non supported encoder)"

_ENCODED_WORD_RE = re.compile(r"^=\?([^?]*)\?([^?]*)\?([^?]*)\?=$")


def _is_encoded_word(token: str) -> bool:
    return len(token) >= 4 and token.startswith("=?") and token.endswith("?=")


def remove_unsupported_encoding(token: str) -> str:
    """
    Replace an encoded word we cannot decode with a placeholder.

    Tokens that are not encoded words, and encoded words with a supported
    charset and a single-letter encoding, are returned unchanged.
    """
    if not _is_encoded_word(token):
        return token

    charset, _, rest = token[2:-2].partition("?")
    if not charset:
        return UNSUPPORTED_CHARSET

    encoding = rest.partition("?")[0]
    if len(encoding) != 1:
        return UNSUPPORTED_ENCODING

    if resolve_codec(_strip_language(charset)) is None:
        return UNSUPPORTED_ENCODER

    return token


def _strip_language(charset: str) -> str:
    # RFC 2231 allows "charset*language"
    return charset.split("*", 1)[0]


def decode_word(token: str) -> str:
    """
    Decode a single encoded word.

    Args:
        token: A token of the form ``=?charset?Q|B?payload?=``

    Returns:
        Decoded text

    Raises:
        EncodedWordError: If the token is not a decodable encoded word
    """
    match = _ENCODED_WORD_RE.match(token)
    if not match:
        raise EncodedWordError(f"invalid RFC 2047 encoded-word: {token!r}")

    charset, encoding, payload = match.groups()
    codec = resolve_codec(_strip_language(charset))
    if codec is None:
        raise EncodedWordError(f"unsupported charset: {charset!r}")

    try:
        raw = payload.encode("ascii")
        if encoding.upper() == "B":
            data = base64.b64decode(raw + b"=" * (-len(raw) % 4), validate=True)
        elif encoding.upper() == "Q":
            data = binascii.a2b_qp(raw, header=True)
        else:
            raise EncodedWordError(f"invalid encoding: {encoding!r}")
    except (UnicodeEncodeError, binascii.Error) as e:
        raise EncodedWordError(f"malformed encoded-word payload: {token!r}") from e

    try:
        return data.decode(codec, errors="replace")
    except (LookupError, UnicodeError) as e:
        raise EncodedWordError(f"unsupported charset: {charset!r}") from e


def decode_mime_sentence(value: str) -> str:
    """
    Decode every encoded word in a free-text header value.

    Whitespace between two adjacent encoded words is dropped; every other
    token keeps its single separating space. Never raises: tokens that
    cannot be decoded are kept verbatim.

    Args:
        value: Raw header value

    Returns:
        Decoded header text
    """
    out: List[str] = []
    previous_encoded = False

    for index, word in enumerate(value.split(" ")):
        word = remove_unsupported_encoding(word)
        try:
            text = decode_word(word)
            encoded = True
        except EncodedWordError:
            text, encoded = word, False

        if index and not (encoded and previous_encoded):
            out.append(" ")
        out.append(text)
        previous_encoded = encoded

    return "".join(out)


def remove_unsupported_encoding_for_address(value: str) -> str:
    """
    Placeholder substitution for a single address.

    Placeholders are quoted so the address parser reads them as a display
    name rather than as address syntax.
    """
    if not value:
        return value

    words = []
    for word in value.split(" "):
        replaced = remove_unsupported_encoding(word)
        words.append(replaced if replaced == word else f'"{replaced}"')
    return " ".join(words)


def remove_unsupported_encoding_for_address_list(value: str) -> str:
    """Placeholder substitution for every entry of a comma separated list."""
    if not value:
        return value
    return ",".join(
        remove_unsupported_encoding_for_address(address) for address in value.split(",")
    )


def decode_header_multimap(headers: HeaderMultimap) -> Dict[str, List[str]]:
    """Decode encoded words in every value of every header."""
    return {
        name: [decode_mime_sentence(value) for value in values]
        for name, values in headers.items()
    }
