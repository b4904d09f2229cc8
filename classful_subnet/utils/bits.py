from __future__ import annotations
from typing import List

from ..constants import IPV4_BITS, OCTET_BITS


def octet_to_binary(octet: int) -> str:
    """Return an octet as 8 binary digits, most significant bit first."""
    if not 0 <= octet <= 0xFF:
        raise ValueError(f"octet out of range 0-255: {octet}")
    return f"{octet:08b}"


def mask_bits_to_binary(bits_count: int) -> str:
    """Render a prefix length as a dot-grouped 32-bit binary mask.

    The first ``bits_count`` bits are 1, the rest 0, with a ``.`` after
    every 8 bits except the last group, e.g. 26 ->
    ``11111111.11111111.11111111.11000000``.
    """
    if not 0 <= bits_count <= IPV4_BITS:
        raise ValueError(f"mask bit count out of range 0-{IPV4_BITS}: {bits_count}")
    flat = "1" * bits_count + "0" * (IPV4_BITS - bits_count)
    groups = [flat[i:i + OCTET_BITS] for i in range(0, IPV4_BITS, OCTET_BITS)]
    return ".".join(groups)


def binary_octet_to_decimal(binary: str) -> int:
    if len(binary) != OCTET_BITS or any(c not in "01" for c in binary):
        raise ValueError(f"not an 8-bit binary octet: {binary!r}")
    value = 0
    for bit in binary:
        value = (value << 1) | (1 if bit == "1" else 0)
    return value


def binary_mask_to_decimal(binary_mask: str) -> str:
    octets: List[str] = []
    for group in binary_mask.split("."):
        octets.append(str(binary_octet_to_decimal(group)))
    return ".".join(octets)
