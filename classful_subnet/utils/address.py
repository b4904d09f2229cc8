from __future__ import annotations
import ipaddress
import logging
from typing import Tuple

from ..errors import InvalidAddressError

logger = logging.getLogger(__name__)

Octets = Tuple[int, int, int, int]


def parse_octets(address: str) -> Octets:
    """Parse a dotted-decimal IPv4 string into its four octets.

    Fails fast with InvalidAddressError on anything ipaddress.IPv4Address
    rejects: wrong segment count, non-decimal segments, octets above 255,
    leading zeros or surrounding whitespace.
    """
    if not isinstance(address, str):
        raise InvalidAddressError(address, "expected a dotted-decimal string")
    try:
        parsed = ipaddress.IPv4Address(address)
    except ipaddress.AddressValueError as e:
        logger.debug("[subnet.address] rejected %r: %s", address, e)
        raise InvalidAddressError(address, str(e)) from e
    packed = parsed.packed
    return (packed[0], packed[1], packed[2], packed[3])
