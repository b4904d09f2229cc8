from __future__ import annotations


class SubnetCalculationError(Exception):
    """Base class for every error raised by classful_subnet."""


class InvalidAddressError(SubnetCalculationError, ValueError):
    def __init__(self, address: object, reason: str):
        self.address = address
        self.reason = reason
        super().__init__(f"Invalid IPv4 address {address!r}: {reason}")


class InvalidCountError(SubnetCalculationError, ValueError):
    def __init__(self, name: str, value: object):
        self.name = name
        self.value = value
        super().__init__(f"{name} must be a positive integer, got {value!r}")


class UnknownClassError(SubnetCalculationError, RuntimeError):
    """No classful prefix matched the first octet.

    The five prefixes cover every 8-bit value, so reaching this means the
    octet itself was not a valid 8-bit binary string.
    """

    def __init__(self, binary_octet: str):
        self.binary_octet = binary_octet
        super().__init__(f"Unknown class of IP address (first octet {binary_octet!r})")


class UnsupportedClassError(SubnetCalculationError, ValueError):
    def __init__(self, address_class: str, operation: str = "classful subnetting"):
        self.address_class = address_class
        self.operation = operation
        super().__init__(f"Class {address_class} addresses have no network bits; {operation} is undefined")


class InfeasibleSubnetError(SubnetCalculationError, ValueError):
    """Requested subnets/hosts do not fit in the class bit budget."""

    def __init__(self, subnets_count: int, hosts_count: int, usable_hosts: int):
        self.subnets_count = subnets_count
        self.hosts_count = hosts_count
        self.usable_hosts = usable_hosts
        super().__init__(
            f"Impossible condition: {subnets_count} subnet(s) leave {usable_hosts} usable host(s) "
            f"per subnet, {hosts_count} requested"
        )
