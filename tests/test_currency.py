import pytest

from kisan_sahayak.utils.currency import format_inr, parse_inr, round_half_up


@pytest.mark.parametrize(
    "amount, expected",
    [
        (0, "₹0"),
        (999, "₹999"),
        (6000, "₹6,000"),
        (26000, "₹26,000"),
        (100000, "₹1,00,000"),
        (1234567, "₹12,34,567"),
        (10000000, "₹1,00,00,000"),
    ],
)
def test_format_uses_indian_grouping(amount, expected):
    assert format_inr(amount) == expected


def test_format_rounds_halves_up():
    assert format_inr(17999.5) == "₹18,000"
    assert round_half_up(12.5) == 13
    assert round_half_up(12.49) == 12


def test_parse_reverses_format():
    for amount in (0, 5000, 6000, 23400, 1234567, 180000):
        assert parse_inr(format_inr(amount)) == amount


def test_parse_strips_currency_formatting():
    assert parse_inr("₹12,34,567") == 1234567
    assert parse_inr("₹1,500.50") == 1500.5


def test_parse_rejects_text_without_amount():
    with pytest.raises(ValueError):
        parse_inr("₹")
