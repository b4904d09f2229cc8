from __future__ import annotations
import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from .constants import RESERVED_HOSTS_PER_SUBNET


class AddressClass(str, Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"  # multicast
    E = "E"  # reserved / experimental

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SubnetPlan:
    address_class: AddressClass
    network_bits: int
    subnet_bits: int
    host_bits: int
    subnet_mask_binary: str
    subnet_mask_decimal: str
    subnet_mask_short: str

    @property
    def mask_bits(self) -> int:
        return self.network_bits + self.subnet_bits

    @property
    def subnets_available(self) -> int:
        return 1 << self.subnet_bits

    @property
    def usable_hosts(self) -> int:
        if self.host_bits < 0:
            return -RESERVED_HOSTS_PER_SUBNET
        return (1 << self.host_bits) - RESERVED_HOSTS_PER_SUBNET

    def to_dict(self) -> Dict[str, Any]:
        return {
            "class": self.address_class.value,
            "network_bits": self.network_bits,
            "subnet_bits": self.subnet_bits,
            "host_bits": self.host_bits,
            "subnet_mask_binary": self.subnet_mask_binary,
            "subnet_mask_decimal": self.subnet_mask_decimal,
            "subnet_mask_short": self.subnet_mask_short,
        }


@dataclass(frozen=True)
class SubnetRange:
    index: int
    network: ipaddress.IPv4Network
    first_host: ipaddress.IPv4Address
    last_host: ipaddress.IPv4Address
    broadcast: ipaddress.IPv4Address
    usable_hosts: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "network": str(self.network),
            "first_host": str(self.first_host),
            "last_host": str(self.last_host),
            "broadcast": str(self.broadcast),
            "usable_hosts": self.usable_hosts,
        }
