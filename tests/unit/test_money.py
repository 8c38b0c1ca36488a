"""Unit tests for free-text money parsing"""

import pytest
from trip_budget.domain.money import coerce_money, parse_money, parse_override, to_positive_int


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("450,00", 450.00),
        ("1.234,56", 1234.56),
        ("€ 1234,56", 1234.56),
        ("  90 ", 90.00),
        ("1234.56", 1234.56),
        ("1 234,56", 1234.56),
        ("12.500", 12500.0),
        ("$80", 80.0),
    ],
)
def test_parse_money_accepted_formats(raw, expected):
    """Test comma/dot decimals, grouping, symbols and whitespace"""
    assert parse_money(raw) == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["abc", "", "-50", "   ", "1.2.3,4,5", "-", None])
def test_parse_money_degrades_to_zero(raw):
    """Test unreadable and negative input never raises and yields 0"""
    assert parse_money(raw) == 0


def test_coerce_money_numbers():
    """Test JSON numbers bypass text parsing but are still clamped"""
    assert coerce_money(1234.567) == pytest.approx(1234.567)
    assert coerce_money(-10) == 0
    assert coerce_money(float("inf")) == 0
    assert coerce_money("1.234,56") == pytest.approx(1234.56)


def test_parse_override_empty_means_no_override():
    """Test empty override text is distinguished from an explicit 0"""
    assert parse_override(None) is None
    assert parse_override("   ") is None
    assert parse_override("0") == 0
    assert parse_override("abc") == 0
    assert parse_override("150,5") == pytest.approx(150.5)


def test_to_positive_int():
    """Test passenger and night counts from text"""
    assert to_positive_int("3", 1) == 3
    assert to_positive_int(" 4 nights", 0) == 4
    assert to_positive_int("0", 1) == 1
    assert to_positive_int("-2", 1) == 1
    assert to_positive_int("two", 1) == 1
    assert to_positive_int(None, 0) == 0
