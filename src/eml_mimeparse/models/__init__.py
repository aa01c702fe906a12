# Data models for decoded email messages

from .email_document import Address, Attachment, Email, EmbeddedFile

__all__ = [
    "Address",
    "Attachment",
    "Email",
    "EmbeddedFile",
]
