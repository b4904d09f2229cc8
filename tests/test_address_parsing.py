import pytest

from classful_subnet.calculator import AddressCalculator
from classful_subnet.errors import InvalidAddressError, SubnetCalculationError
from classful_subnet.utils.address import parse_octets


def test_parse_octets_well_formed():
    assert parse_octets("192.168.0.0") == (192, 168, 0, 0)
    assert parse_octets("0.0.0.0") == (0, 0, 0, 0)
    assert parse_octets("255.255.255.255") == (255, 255, 255, 255)


@pytest.mark.parametrize("address", [
    "1.2.3",
    "1.2.3.4.5",
    "999.1.1.1",
    "1.2.3.256",
    "abc.1.1.1",
    "1.2.3.-4",
    "01.2.3.4",
    " 1.2.3.4",
    "",
])
def test_malformed_addresses_rejected_at_construction(address):
    with pytest.raises(InvalidAddressError) as exc:
        AddressCalculator(address)
    assert exc.value.address == address
    assert isinstance(exc.value, ValueError)
    assert isinstance(exc.value, SubnetCalculationError)


def test_non_string_address_rejected():
    with pytest.raises(InvalidAddressError):
        parse_octets(3232235520)


def test_calculator_keeps_original_address(class_c_calc):
    assert class_c_calc.address == "192.168.0.0"
    assert class_c_calc.octets == (192, 168, 0, 0)
    assert repr(class_c_calc) == "AddressCalculator('192.168.0.0')"


def test_calculator_is_a_value():
    assert AddressCalculator("10.0.0.1") == AddressCalculator("10.0.0.1")
    assert AddressCalculator("10.0.0.1") != AddressCalculator("10.0.0.2")
    assert len({AddressCalculator("10.0.0.1"), AddressCalculator("10.0.0.1")}) == 1
    with pytest.raises(AttributeError):
        AddressCalculator("10.0.0.1").extra = 1
