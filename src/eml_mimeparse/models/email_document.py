"""
Email document model - structured representation of a decoded MIME message.

This module defines the data structures produced by the parser: the email
itself, its addresses, and the binary leaves (attachments and embedded files).
"""

import io
from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Address(BaseModel):
    """A single mailbox: decoded display name plus addr-spec."""

    name: str = Field("", description="Decoded display name (may be empty)")
    address: str = Field(description="addr-spec, e.g. user@example.com")

    def __str__(self) -> str:
        if self.name:
            return f"{self.name} <{self.address}>"
        return self.address


class Attachment(BaseModel):
    """A part with an attachment disposition."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    filename: str = Field("", description="Decoded filename")
    content_type: str = Field(description="MIME type without parameters")
    data: io.BufferedIOBase = Field(
        description="Decoded content, readable once"
    )


class EmbeddedFile(BaseModel):
    """An inline resource, usually referenced from the HTML body by cid."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    cid: str = Field("", description="Content-ID without brackets, or the filename")
    content_type: str = Field(description="MIME type without parameters")
    data: io.BufferedIOBase = Field(
        description="Decoded content, readable once"
    )


class Email(BaseModel):
    """
    Decoded email message.

    Carries every RFC 5322 header with structured meaning, the decoded header
    multimap, the aggregated text and HTML bodies and the binary leaves.
    Streams are lazy: nothing is transfer-decoded until the caller reads it.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    # Headers
    header: Dict[str, List[str]] = Field(
        default_factory=dict, description="All headers, encoded words decoded"
    )
    subject: str = ""
    sender: Optional[Address] = None
    from_addresses: List[Address] = Field(default_factory=list)
    reply_to_addresses: List[Address] = Field(default_factory=list)
    to_addresses: List[Address] = Field(default_factory=list)
    cc_addresses: List[Address] = Field(default_factory=list)
    bcc_addresses: List[Address] = Field(default_factory=list)
    date: Optional[datetime] = None
    message_id: str = ""
    in_reply_to: List[str] = Field(default_factory=list)
    references: List[str] = Field(default_factory=list)

    # Resent-* block
    resent_from_addresses: List[Address] = Field(default_factory=list)
    resent_sender: Optional[Address] = None
    resent_to_addresses: List[Address] = Field(default_factory=list)
    resent_cc_addresses: List[Address] = Field(default_factory=list)
    resent_bcc_addresses: List[Address] = Field(default_factory=list)
    resent_date: Optional[datetime] = None
    resent_message_id: str = ""

    # Body
    content_type: str = Field("", description="Top-level Content-Type, verbatim")
    content: Optional[io.BufferedIOBase] = Field(
        None, description="Decoded body when it is neither multipart nor text"
    )
    text_body: str = ""
    html_body: str = ""
    attachments: List[Attachment] = Field(default_factory=list)
    embedded_files: List[EmbeddedFile] = Field(default_factory=list)
