"""
Media type parsing for Content-Type and Content-Disposition values.

Values look like ``type/subtype; name=value; name="quoted value"``. The type
is lower-cased, parameter names are lower-cased and RFC 2231 extended
parameters (``name*=utf-8''%E2%82%AC`` and ``name*0=`` continuations) are
merged into plain values. Anything that does not follow the grammar raises
ContentTypeError.
"""

import re
from typing import Dict, List, Tuple
from urllib.parse import unquote

from ..errors import ContentTypeError

_TOKEN = r"[!#$%&'*+\-.^_`|~0-9A-Za-z]+"
_MEDIA_TYPE_RE = re.compile(rf"\s*({_TOKEN})(?:\s*/\s*({_TOKEN}))?\s*")
_PARAM_RE = re.compile(
    rf"\s*;\s*({_TOKEN})\s*=\s*(?:\"((?:[^\"\\]|\\.)*)\"|({_TOKEN}))\s*"
)
_TRAILING_SEMICOLON_RE = re.compile(r"\s*;?\s*")
_QUOTED_PAIR_RE = re.compile(r"\\(.)")
_CONTINUATION_RE = re.compile(r"^(.+?)\*(\d+)(\*?)$")


def parse_media_type(value: str) -> Tuple[str, Dict[str, str]]:
    """
    Parse a media type value into its type and parameters.

    Args:
        value: Raw header value, e.g. ``text/plain; charset="utf-8"``

    Returns:
        Tuple of (lower-cased media type, parameter dict)

    Raises:
        ContentTypeError: If the value is empty or malformed
    """
    match = _MEDIA_TYPE_RE.match(value)
    if not match:
        raise ContentTypeError(f"mime: no media type in {value!r}")

    media_type = match.group(1).lower()
    if match.group(2):
        media_type = f"{media_type}/{match.group(2).lower()}"
    elif value.startswith("/", match.end()):
        raise ContentTypeError(f"mime: expected token after slash in {value!r}")

    raw_params: List[Tuple[str, str]] = []
    pos = match.end()
    while pos < len(value):
        param = _PARAM_RE.match(value, pos)
        if not param:
            if _TRAILING_SEMICOLON_RE.fullmatch(value, pos):
                break
            raise ContentTypeError(f"mime: invalid media parameter in {value!r}")
        name = param.group(1).lower()
        if param.group(2) is not None:
            raw = _QUOTED_PAIR_RE.sub(r"\1", param.group(2))
        else:
            raw = param.group(3)
        raw_params.append((name, raw))
        pos = param.end()

    return media_type, _merge_params(raw_params, value)


def _merge_params(raw_params: List[Tuple[str, str]], value: str) -> Dict[str, str]:
    params: Dict[str, str] = {}
    continuations: Dict[str, Dict[int, Tuple[str, bool]]] = {}

    for name, raw in raw_params:
        cont = _CONTINUATION_RE.match(name)
        if cont:
            base, index, extended = cont.group(1), int(cont.group(2)), bool(cont.group(3))
            continuations.setdefault(base, {})[index] = (raw, extended)
            continue
        if name.endswith("*"):
            name = name[:-1]
            raw = _decode_extended(raw, first=True)
        if name in params:
            raise ContentTypeError(f"mime: duplicate parameter {name!r} in {value!r}")
        params[name] = raw

    for base, pieces in continuations.items():
        if base in params:
            continue
        out = []
        for index in range(len(pieces)):
            if index not in pieces:
                break
            raw, extended = pieces[index]
            out.append(_decode_extended(raw, first=index == 0) if extended else raw)
        params[base] = "".join(out)

    return params


def _decode_extended(raw: str, first: bool) -> str:
    """Decode an RFC 2231 ``charset'language'percent-encoded`` value."""
    charset = "us-ascii"
    if first:
        parts = raw.split("'", 2)
        if len(parts) == 3:
            charset, _, raw = parts
    try:
        return unquote(raw, encoding=charset or "us-ascii", errors="replace")
    except LookupError:
        return unquote(raw, errors="replace")


def strip_parameters(value: str) -> str:
    """Media type with parameters removed, as declared (``image/png; name=a`` -> ``image/png``)."""
    return value.split(";", 1)[0].strip()
