"""Planning subpackage: pure computations behind AddressCalculator.

Each module derives one piece of the classful plan (class lookups, the
subnet mask, subnet enumeration, consistency checks) so they can be unit
tested without constructing a calculator.
"""

from .class_plan import classify_octet, default_mask_for, network_bits_for  # noqa: F401
from .subnet_plan import compute_classful_subnet_plan, subnet_bits_for  # noqa: F401
from .enumeration import classful_network, enumerate_subnet_ranges  # noqa: F401
from .plan_validation import assert_subnet_plan_valid, validate_subnet_plan  # noqa: F401

__all__ = [
    "classify_octet",
    "default_mask_for",
    "network_bits_for",
    "compute_classful_subnet_plan",
    "subnet_bits_for",
    "classful_network",
    "enumerate_subnet_ranges",
    "assert_subnet_plan_valid",
    "validate_subnet_plan",
]
