"""
MIME decomposition and decoding of RFC 5322 email messages.

Usage:
    from eml_mimeparse import parse_eml_bytes

    email = parse_eml_bytes(raw)
    print(email.subject, email.text_body, [a.filename for a in email.attachments])
"""

from .errors import ParseError
from .models import Address, Attachment, Email, EmbeddedFile
from .parsing import parse, parse_eml_bytes, parse_eml_file
from .version import __version__

__all__ = [
    "parse",
    "parse_eml_bytes",
    "parse_eml_file",
    "Email",
    "Address",
    "Attachment",
    "EmbeddedFile",
    "ParseError",
    "__version__",
]
