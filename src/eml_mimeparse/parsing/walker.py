"""
Recursive traversal of multipart containers.

One entry point, walk_multipart(), handles the three container kinds
(mixed/signed, alternative, related). Every child is routed by its own
Content-Type: nested containers recurse with their own boundary, text leaves
go through transfer decoding and charset transcoding, everything else becomes
an attachment or an embedded file, or aborts the parse.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import BinaryIO, Dict, List, Tuple

import structlog

from ..config import settings
from ..errors import ContentTypeError, NestingDepthError, UnsupportedMediaTypeError
from ..models.email_document import Attachment, EmbeddedFile
from .charset import transcode
from .classifier import MediaKind, is_attachment, is_embedded_file, media_kind
from .encoded_words import decode_mime_sentence
from .envelope import HeaderMultimap
from .media_type import parse_media_type, strip_parameters
from .multipart import MultipartReader, Part
from .transfer import DecodedStream, decode_transfer_encoding

logger = structlog.get_logger(__name__)

MESSAGE_RFC822 = "message/rfc822"


class ContainerKind(str, Enum):
    """Multipart containers the walker can traverse."""

    MIXED = "multipart/mixed"
    ALTERNATIVE = "multipart/alternative"
    RELATED = "multipart/related"


CONTAINER_KINDS = {
    MediaKind.MIXED: ContainerKind.MIXED,
    MediaKind.ALTERNATIVE: ContainerKind.ALTERNATIVE,
    MediaKind.RELATED: ContainerKind.RELATED,
}


@dataclass
class BodyParts:
    """Accumulated output of a container traversal."""

    text_body: str = ""
    html_body: str = ""
    attachments: List[Attachment] = field(default_factory=list)
    embedded_files: List[EmbeddedFile] = field(default_factory=list)

    def merge(self, other: "BodyParts") -> None:
        self.text_body += other.text_body
        self.html_body += other.html_body
        self.attachments.extend(other.attachments)
        self.embedded_files.extend(other.embedded_files)

    def add_text(self, kind: MediaKind, text: str, replace: bool = False) -> None:
        """
        Add a decoded text leaf.

        With replace set (inside multipart/alternative) a non-empty leaf
        replaces the body of its type instead of being appended.
        """
        name = "html_body" if kind is MediaKind.TEXT_HTML else "text_body"
        if replace and text:
            setattr(self, name, text)
        else:
            setattr(self, name, getattr(self, name) + text)


def content_type_of(headers: HeaderMultimap) -> Tuple[str, Dict[str, str]]:
    """
    Parsed Content-Type of a part.

    A part without Content-Type is text/plain (RFC 2045).

    Raises:
        ContentTypeError: If the header is present but malformed
    """
    value = headers.get("Content-Type")
    if not value:
        return "text/plain", {}
    return parse_media_type(value)


def trim_trailing_newline(text: str) -> str:
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


def read_text(body: BinaryIO, headers: HeaderMultimap) -> str:
    """Transfer-decode and transcode a text leaf, trimming one trailing newline."""
    data = decode_transfer_encoding(body.read(), headers.get("Content-Transfer-Encoding"))
    return trim_trailing_newline(transcode(data, headers.get("Content-Type")))


def part_filename(headers: HeaderMultimap) -> str:
    """Filename from the disposition, falling back to the Content-Type name."""
    for header, param in (("Content-Disposition", "filename"), ("Content-Type", "name")):
        value = headers.get(header)
        if not value:
            continue
        try:
            _, params = parse_media_type(value)
        except ContentTypeError:
            continue
        if params.get(param):
            return params[param]
    return ""


def decode_attachment(part: Part) -> Attachment:
    """
    Build an Attachment from a part.

    Forwarded messages (message/rfc822) keep their raw bytes and are named
    after their Content-Id.
    """
    content_type = strip_parameters(part.headers.get("Content-Type"))

    if content_type.lower() == MESSAGE_RFC822:
        cid = decode_mime_sentence(part.headers.get("Content-Id")).strip("<>")
        return Attachment(
            filename=f"{cid}.eml",
            content_type=content_type,
            data=DecodedStream(part.body.read()),
        )

    return Attachment(
        filename=decode_mime_sentence(part_filename(part.headers)),
        content_type=content_type,
        data=DecodedStream(part.body.read(), part.headers.get("Content-Transfer-Encoding")),
    )


def decode_embedded_file(part: Part) -> EmbeddedFile:
    """Build an EmbeddedFile from a part, identified by Content-Id or filename."""
    data = DecodedStream(part.body.read(), part.headers.get("Content-Transfer-Encoding"))
    cid = decode_mime_sentence(part.headers.get("Content-Id")).strip("<>")

    if not cid:
        disposition = part.headers.get("Content-Disposition")
        if disposition:
            try:
                _, params = parse_media_type(disposition)
                cid = params.get("filename", "")
            except ContentTypeError:
                logger.info("embedded_file_disposition_invalid", disposition=disposition)

    return EmbeddedFile(
        cid=cid,
        content_type=strip_parameters(part.headers.get("Content-Type")),
        data=data,
    )


def walk_multipart(
    stream: BinaryIO,
    boundary: str,
    container: ContainerKind,
    depth: int = 0,
) -> BodyParts:
    """
    Traverse one multipart container and everything nested in it.

    Args:
        stream: Container body, positioned at its first byte
        boundary: Boundary parameter declared by this container
        container: Kind of this container
        depth: Number of enclosing multipart containers

    Returns:
        BodyParts accumulated in traversal order

    Raises:
        ParseError: On malformed content types, unknown transfer encodings,
            unsupported child types, tokenizer failures or excessive nesting
    """
    if depth > settings.max_nesting_depth:
        raise NestingDepthError(
            f"multipart nesting deeper than {settings.max_nesting_depth} levels"
        )

    result = BodyParts()
    log = logger.bind(container=container.value, depth=depth)

    for part in MultipartReader(stream, boundary):
        media_type, params = content_type_of(part.headers)
        kind = media_kind(media_type)

        if container is ContainerKind.MIXED and is_attachment(part.headers):
            log.debug("part_classified", media_type=media_type, role="attachment")
            result.attachments.append(decode_attachment(part))
            continue

        nested = CONTAINER_KINDS.get(kind)
        if nested is not None:
            result.merge(
                walk_multipart(part.body, params.get("boundary", ""), nested, depth + 1)
            )
        elif kind in (MediaKind.TEXT_PLAIN, MediaKind.TEXT_HTML):
            log.debug("part_classified", media_type=media_type, role="body")
            result.add_text(
                kind,
                read_text(part.body, part.headers),
                replace=container is ContainerKind.ALTERNATIVE,
            )
        elif is_embedded_file(part.headers):
            log.debug("part_classified", media_type=media_type, role="embedded")
            result.embedded_files.append(decode_embedded_file(part))
        else:
            raise UnsupportedMediaTypeError(container.value, media_type)

    return result
