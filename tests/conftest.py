import sys
from pathlib import Path

import pytest

# Ensure repository root is on sys.path so 'classful_subnet' imports without installation
ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from classful_subnet.calculator import AddressCalculator  # noqa: E402


@pytest.fixture
def class_c_calc():
    """Calculator for the private class C address used throughout the examples."""
    return AddressCalculator("192.168.0.0")
