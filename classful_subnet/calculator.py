from __future__ import annotations
import ipaddress
from typing import List, Optional, Tuple

from .errors import UnsupportedClassError
from .planning.class_plan import classify_octet, default_mask_for, network_bits_for
from .planning.enumeration import classful_network, enumerate_subnet_ranges
from .planning.subnet_plan import compute_classful_subnet_plan
from .types import AddressClass, SubnetPlan, SubnetRange
from .utils.address import parse_octets
from .utils.bits import octet_to_binary


class AddressCalculator:
    """Classful subnetting calculations over a single IPv4 address.

    The address is validated once at construction (InvalidAddressError on
    malformed input); every method recomputes from the stored octets and
    has no side effects.
    """

    __slots__ = ("_address", "_octets")

    def __init__(self, address: str):
        self._octets: Tuple[int, int, int, int] = parse_octets(address)
        self._address = address

    def __repr__(self) -> str:
        return f"AddressCalculator({self._address!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AddressCalculator):
            return NotImplemented
        return self._octets == other._octets

    def __hash__(self) -> int:
        return hash(self._octets)

    @property
    def address(self) -> str:
        return self._address

    @property
    def octets(self) -> Tuple[int, int, int, int]:
        return self._octets

    def to_binary(self) -> str:
        return ".".join(octet_to_binary(o) for o in self._octets)

    def classify(self) -> AddressClass:
        return classify_octet(self._octets[0])

    def default_subnet_mask(self) -> Optional[str]:
        """Default mask of the address class; None for D (multicast) and E (reserved)."""
        return default_mask_for(self.classify())

    def classful_subnet(self, subnets_count: int, hosts_count: int) -> SubnetPlan:
        return compute_classful_subnet_plan(self._address, self.classify(), subnets_count, hosts_count)

    def classful_network(self) -> ipaddress.IPv4Network:
        address_class = self.classify()
        try:
            network_bits = network_bits_for(address_class)
        except UnsupportedClassError as e:
            raise UnsupportedClassError(e.address_class, "classful network lookup") from e
        return classful_network(self._address, network_bits)

    def enumerate_subnets(self, subnets_count: int, hosts_count: int, limit: Optional[int] = None) -> List[SubnetRange]:
        plan = self.classful_subnet(subnets_count, hosts_count)
        return enumerate_subnet_ranges(self._address, plan, subnets_count, limit=limit)
