"""
Exception hierarchy for MIME parsing.

Every error raised by the parser derives from ParseError, which is itself a
ValueError so callers of parse_eml_bytes() can keep catching ValueError.
"""


class ParseError(ValueError):
    """Base class for all parsing failures."""


class ContentTypeError(ParseError):
    """A Content-Type or Content-Disposition value could not be parsed."""


class UnknownTransferEncodingError(ParseError):
    """Content-Transfer-Encoding names an encoding we cannot decode."""

    def __init__(self, encoding: str):
        super().__init__(f"unknown encoding: {encoding}")
        self.encoding = encoding


class TransferDecodingError(ParseError):
    """The payload is not valid for its declared transfer encoding."""


class UnsupportedMediaTypeError(ParseError):
    """A multipart container holds a child type it cannot process."""

    def __init__(self, container: str, content_type: str):
        super().__init__(f"Can't process {container} inner mime type: {content_type}")
        self.container = container
        self.content_type = content_type


class MultipartError(ParseError):
    """The multipart body could not be split into parts."""


class NestingDepthError(ParseError):
    """Multipart containers are nested deeper than the configured limit."""


class HeaderFieldError(ParseError):
    """A structured header field (address, date) is malformed."""

    def __init__(self, message: str, field: str = ""):
        super().__init__(message)
        self.field = field


class AddressError(HeaderFieldError):
    """An address or address list does not follow RFC 5322 syntax."""


class DateFormatError(HeaderFieldError):
    """A date header matches none of the accepted layouts."""


class EncodedWordError(ValueError):
    """A token is not a decodable RFC 2047 encoded word."""
