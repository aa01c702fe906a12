# Email parsing module

from .classifier import MediaKind, is_attachment, is_embedded_file, media_kind
from .eml_parser import parse, parse_body, parse_eml_bytes, parse_eml_file
from .encoded_words import (
    UNSUPPORTED_CHARSET,
    UNSUPPORTED_ENCODER,
    UNSUPPORTED_ENCODING,
    decode_header_multimap,
    decode_mime_sentence,
    decode_word,
    remove_unsupported_encoding,
)
from .envelope import HeaderMultimap, read_envelope
from .headers import HeaderResolution, resolve_headers
from .multipart import MultipartReader, Part
from .transfer import DecodedStream, decode_transfer_encoding
from .walker import BodyParts, ContainerKind, walk_multipart

__all__ = [
    "parse",
    "parse_body",
    "parse_eml_bytes",
    "parse_eml_file",
    "read_envelope",
    "HeaderMultimap",
    "resolve_headers",
    "HeaderResolution",
    "decode_mime_sentence",
    "decode_word",
    "decode_header_multimap",
    "remove_unsupported_encoding",
    "UNSUPPORTED_CHARSET",
    "UNSUPPORTED_ENCODING",
    "UNSUPPORTED_ENCODER",
    "decode_transfer_encoding",
    "DecodedStream",
    "MultipartReader",
    "Part",
    "MediaKind",
    "media_kind",
    "is_attachment",
    "is_embedded_file",
    "ContainerKind",
    "BodyParts",
    "walk_multipart",
]
