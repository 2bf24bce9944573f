"""Unit tests for INR display formatting"""

import pytest
from loan_engine.utils.currency import PLACEHOLDER, format_inr, group_indian


@pytest.mark.parametrize(
    "digits, expected",
    [
        ("0", "0"),
        ("999", "999"),
        ("1000", "1,000"),
        ("300000", "3,00,000"),
        ("1234567", "12,34,567"),
        ("12345678", "1,23,45,678"),
    ],
)
def test_group_indian(digits, expected):
    assert group_indian(digits) == expected


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₹0"),
        (300000, "₹3,00,000"),
        (9609.883, "₹9,609.88"),
        (1234567.891, "₹12,34,567.89"),
        (0.5, "₹0.5"),
        (-1500, "-₹1,500"),
    ],
)
def test_format_inr(amount, expected):
    assert format_inr(amount) == expected


@pytest.mark.parametrize("amount", [float("nan"), float("inf"), "1000", None, True])
def test_format_inr_placeholder(amount):
    """Non-numbers render as the placeholder"""
    assert format_inr(amount) == PLACEHOLDER


def test_format_inr_custom_symbol():
    assert format_inr(2500, symbol="Rs ") == "Rs 2,500"
