"""
Address parsing for From/To/Cc style headers.

Built on email.utils.getaddresses, with extra validation so malformed input
raises AddressError instead of silently yielding empty entries. Encoded words
left in display names are decoded.
"""

import re
from email.utils import getaddresses
from typing import List

from ..errors import AddressError
from ..models.email_document import Address
from .encoded_words import decode_mime_sentence

# "undisclosed-recipients:;"
_EMPTY_GROUP_RE = re.compile(r'^\s*[^:<>@",]*:\s*;\s*$')


def parse_address_list(text: str) -> List[Address]:
    """
    Parse a comma separated address list.

    Args:
        text: Header value with unsupported encoded words already replaced

    Returns:
        Addresses in input order

    Raises:
        AddressError: If any entry is not a valid address
    """
    if _EMPTY_GROUP_RE.match(text):
        return []

    addresses = []
    for name, addr in getaddresses([text]):
        local, at, domain = addr.rpartition("@")
        if not at or not local or not domain:
            raise AddressError(f"mail: invalid address list: {text!r}")
        addresses.append(Address(name=decode_mime_sentence(name), address=addr))

    if not addresses:
        raise AddressError(f"mail: no address in {text!r}")
    return addresses


def parse_address(text: str) -> Address:
    """
    Parse exactly one address.

    Raises:
        AddressError: If the value is malformed or holds more than one address
    """
    addresses = parse_address_list(text)
    if len(addresses) != 1:
        raise AddressError(f"mail: expected single address, got {len(addresses)}: {text!r}")
    return addresses[0]
