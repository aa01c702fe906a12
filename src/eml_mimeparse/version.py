"""
Version constants for the MIME parser.

Reported alongside parse results so output can be traced back to the parser
that produced it.
"""

# Package version
__version__ = "1.0.0"

# Component versions (update these when implementations change)
PARSER_VERSION = "mimeparse-1.0.0"
