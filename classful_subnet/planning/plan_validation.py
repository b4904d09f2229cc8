from __future__ import annotations

from typing import List

from ..constants import CLASS_NETWORK_BITS, IPV4_BITS, OCTET_BITS, OCTET_COUNT
from ..types import SubnetPlan
from ..utils.bits import binary_mask_to_decimal


def validate_subnet_plan(plan: SubnetPlan) -> List[str]:
    """Validate internal consistency of a SubnetPlan.

    Returns a list of human-readable issues. Empty list means OK.

    Invariants checked:
    - network_bits + subnet_bits + host_bits == 32.
    - network_bits matches the address class.
    - The binary mask is four 8-digit groups: mask_bits ones, then zeros.
    - The decimal mask is the binary mask converted octet by octet.
    - The short form ends with /mask_bits.
    """
    issues: List[str] = []

    total = plan.network_bits + plan.subnet_bits + plan.host_bits
    if total != IPV4_BITS:
        issues.append(f"bit budget N+S+H={total}, expected {IPV4_BITS}")
    if plan.subnet_bits < 0:
        issues.append(f"negative subnet_bits: {plan.subnet_bits}")

    expected_n = next((bits for name, bits in CLASS_NETWORK_BITS if name == plan.address_class.value), None)
    if expected_n != plan.network_bits:
        issues.append(f"class {plan.address_class.value} has {expected_n} network bits, plan says {plan.network_bits}")

    groups = plan.subnet_mask_binary.split(".")
    if len(groups) != OCTET_COUNT or any(len(g) != OCTET_BITS or set(g) - {"0", "1"} for g in groups):
        issues.append(f"malformed binary mask: {plan.subnet_mask_binary}")
        return issues

    flat = "".join(groups)
    ones = len(flat) - len(flat.lstrip("1"))
    if "1" in flat[ones:]:
        issues.append(f"binary mask is not contiguous: {plan.subnet_mask_binary}")
    elif ones != plan.mask_bits:
        issues.append(f"binary mask has {ones} leading ones, expected {plan.mask_bits}")

    decimal = binary_mask_to_decimal(plan.subnet_mask_binary)
    if decimal != plan.subnet_mask_decimal:
        issues.append(f"decimal mask {plan.subnet_mask_decimal} does not match binary ({decimal})")

    if not plan.subnet_mask_short.endswith(f"/{plan.mask_bits}"):
        issues.append(f"short mask {plan.subnet_mask_short} does not end with /{plan.mask_bits}")

    return issues


def assert_subnet_plan_valid(plan: SubnetPlan) -> None:
    issues = validate_subnet_plan(plan)
    if issues:
        raise ValueError("Subnet plan validation failed: " + "; ".join(issues))
