"""Small, shared constants used across classful_subnet.

Keep this module dependency-free to avoid import cycles.
"""

from __future__ import annotations

IPV4_BITS: int = 32
OCTET_BITS: int = 8
OCTET_COUNT: int = 4

# Network and broadcast addresses are never assignable to hosts.
RESERVED_HOSTS_PER_SUBNET: int = 2

# Upper bound on subnets listed by enumerate_subnets (class A can describe 2**22).
MAX_ENUMERATED_SUBNETS: int = 4096

# Ordered association lists; matching order is significant, do not turn into dicts.
CLASS_PREFIXES: tuple[tuple[str, str], ...] = (
    ("A", "0"),
    ("B", "10"),
    ("C", "110"),
    ("D", "1110"),
    ("E", "1111"),
)

CLASS_DEFAULT_MASKS: tuple[tuple[str, str | None], ...] = (
    ("A", "255.0.0.0"),
    ("B", "255.255.0.0"),
    ("C", "255.255.255.0"),
    ("D", None),  # multicast
    ("E", None),  # reserved
)

CLASS_NETWORK_BITS: tuple[tuple[str, int | None], ...] = (
    ("A", 8),
    ("B", 16),
    ("C", 24),
    ("D", None),
    ("E", None),
)
