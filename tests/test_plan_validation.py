import dataclasses

import pytest

from classful_subnet.planning.plan_validation import assert_subnet_plan_valid, validate_subnet_plan


@pytest.fixture
def plan(class_c_calc):
    return class_c_calc.classful_subnet(4, 60)


def test_generated_plan_is_valid(plan):
    assert validate_subnet_plan(plan) == []
    assert_subnet_plan_valid(plan)


def test_detects_broken_bit_budget(plan):
    issues = validate_subnet_plan(dataclasses.replace(plan, host_bits=7))
    assert any("bit budget" in msg for msg in issues)


def test_detects_wrong_network_bits_for_class(plan):
    issues = validate_subnet_plan(dataclasses.replace(plan, network_bits=16, host_bits=14))
    assert any("class C has 24 network bits" in msg for msg in issues)


def test_detects_decimal_mismatch(plan):
    issues = validate_subnet_plan(dataclasses.replace(plan, subnet_mask_decimal="255.255.255.0"))
    assert any("does not match binary" in msg for msg in issues)


def test_detects_non_contiguous_mask(plan):
    bad = dataclasses.replace(plan, subnet_mask_binary="11111111.11111111.11111111.10100000")
    assert any("not contiguous" in msg for msg in validate_subnet_plan(bad))


def test_detects_malformed_mask(plan):
    bad = dataclasses.replace(plan, subnet_mask_binary="1111.0000")
    assert validate_subnet_plan(bad) == ["malformed binary mask: 1111.0000"]


def test_detects_wrong_short_form(plan):
    issues = validate_subnet_plan(dataclasses.replace(plan, subnet_mask_short="192.168.0.0/24"))
    assert any("/26" in msg for msg in issues)


def test_assert_raises_value_error(plan):
    with pytest.raises(ValueError):
        assert_subnet_plan_valid(dataclasses.replace(plan, subnet_bits=3))
