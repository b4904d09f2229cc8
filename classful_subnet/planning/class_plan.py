from __future__ import annotations
import logging
from typing import Optional

from ..constants import CLASS_DEFAULT_MASKS, CLASS_NETWORK_BITS, CLASS_PREFIXES
from ..errors import UnknownClassError, UnsupportedClassError
from ..types import AddressClass
from ..utils.bits import octet_to_binary

logger = logging.getLogger(__name__)


def classify_octet(first_octet: int) -> AddressClass:
    """Return the classful address class for a first octet.

    Prefixes are tried in table order (0, 10, 110, 1110, 1111); the first
    starts-with match wins.
    """
    binary_octet = octet_to_binary(first_octet)
    for name, bits in CLASS_PREFIXES:
        if binary_octet.startswith(bits):
            logger.debug("[subnet.class] octet=%s binary=%s prefix=%s -> %s", first_octet, binary_octet, bits, name)
            return AddressClass(name)
    raise UnknownClassError(binary_octet)


def default_mask_for(address_class: AddressClass) -> Optional[str]:
    for name, mask in CLASS_DEFAULT_MASKS:
        if name == address_class.value:
            return mask
    raise UnknownClassError(address_class.value)


def network_bits_for(address_class: AddressClass) -> int:
    """Return N for classes A/B/C; D and E have no network/host split."""
    for name, bits in CLASS_NETWORK_BITS:
        if name != address_class.value:
            continue
        if bits is None:
            raise UnsupportedClassError(address_class.value)
        return bits
    raise UnknownClassError(address_class.value)
