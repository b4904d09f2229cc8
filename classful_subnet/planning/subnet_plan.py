from __future__ import annotations
import logging

from ..constants import IPV4_BITS, RESERVED_HOSTS_PER_SUBNET
from ..errors import InfeasibleSubnetError, InvalidCountError
from ..types import AddressClass, SubnetPlan
from ..utils.bits import binary_mask_to_decimal, mask_bits_to_binary
from .class_plan import network_bits_for

logger = logging.getLogger(__name__)


def _require_positive_int(name: str, value: object) -> int:
    # bool is an int subclass; True would silently mean 1
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidCountError(name, value)
    return value


def subnet_bits_for(subnets_count: int) -> int:
    """Smallest S with 2**S >= subnets_count, i.e. ceil(log2(subnets_count)).

    Computed on integers so large counts never round down.
    """
    subnets_count = _require_positive_int("subnets_count", subnets_count)
    return (subnets_count - 1).bit_length()


def usable_hosts_for(host_bits: int) -> int:
    if host_bits < 0:
        return -RESERVED_HOSTS_PER_SUBNET
    return (1 << host_bits) - RESERVED_HOSTS_PER_SUBNET


def compute_classful_subnet_plan(address: str, address_class: AddressClass, subnets_count: int, hosts_count: int) -> SubnetPlan:
    """Derive the classful subnet mask for ``subnets_count`` subnets of ``hosts_count`` hosts.

    N + S + H = 32
    N - network bits of the class (A=8, B=16, C=24)
    S - bits borrowed from the host part for subnets
    H - bits left for hosts

    Raises UnsupportedClassError for class D/E and InfeasibleSubnetError when
    2**H - 2 usable hosts cannot hold ``hosts_count``.
    """
    subnets_count = _require_positive_int("subnets_count", subnets_count)
    hosts_count = _require_positive_int("hosts_count", hosts_count)

    network_bits = network_bits_for(address_class)
    subnet_bits = subnet_bits_for(subnets_count)
    host_bits = (IPV4_BITS - network_bits) - subnet_bits
    usable_hosts = usable_hosts_for(host_bits)
    logger.debug(
        "[subnet.plan] address=%s class=%s subnets=%d hosts=%d -> N=%d S=%d H=%d usable=%d",
        address, address_class.value, subnets_count, hosts_count, network_bits, subnet_bits, host_bits, usable_hosts,
    )
    if usable_hosts < hosts_count:
        logger.debug("[subnet.plan] infeasible: usable=%d < requested=%d", usable_hosts, hosts_count)
        raise InfeasibleSubnetError(subnets_count, hosts_count, usable_hosts)

    mask_bits = network_bits + subnet_bits
    mask_binary = mask_bits_to_binary(mask_bits)
    mask_decimal = binary_mask_to_decimal(mask_binary)
    return SubnetPlan(
        address_class=address_class,
        network_bits=network_bits,
        subnet_bits=subnet_bits,
        host_bits=host_bits,
        subnet_mask_binary=mask_binary,
        subnet_mask_decimal=mask_decimal,
        subnet_mask_short=f"{address}/{mask_bits}",
    )
