from __future__ import annotations
import ipaddress
import itertools
import logging
from typing import List, Optional

from ..constants import MAX_ENUMERATED_SUBNETS
from ..types import SubnetPlan, SubnetRange

logger = logging.getLogger(__name__)


def classful_network(address: str, network_bits: int) -> ipaddress.IPv4Network:
    """Return the classful network containing ``address`` (host bits cleared)."""
    return ipaddress.IPv4Network((address, network_bits), strict=False)


def enumerate_subnet_ranges(address: str, plan: SubnetPlan, subnets_count: int, limit: Optional[int] = None) -> List[SubnetRange]:
    """List the subnets a plan carves out of the address's classful network.

    Returns the first ``subnets_count`` subnets at prefix N + S, further
    bounded by ``limit`` and MAX_ENUMERATED_SUBNETS.
    """
    wanted = min(subnets_count, plan.subnets_available)
    if limit is not None:
        if limit < 0:
            raise ValueError(f"limit must be >= 0, got {limit}")
        wanted = min(wanted, limit)
    if wanted > MAX_ENUMERATED_SUBNETS:
        logger.warning(
            "[subnet.enum] %d subnets requested for %s; listing first %d",
            wanted, plan.subnet_mask_short, MAX_ENUMERATED_SUBNETS,
        )
        wanted = MAX_ENUMERATED_SUBNETS

    base = classful_network(address, plan.network_bits)
    ranges: List[SubnetRange] = []
    for idx, net in enumerate(itertools.islice(base.subnets(new_prefix=plan.mask_bits), wanted)):
        ranges.append(SubnetRange(
            index=idx,
            network=net,
            first_host=net.network_address + 1,
            last_host=net.broadcast_address - 1,
            broadcast=net.broadcast_address,
            usable_hosts=plan.usable_hosts,
        ))
    logger.debug("[subnet.enum] base=%s prefix=/%d listed=%d", base, plan.mask_bits, len(ranges))
    return ranges
