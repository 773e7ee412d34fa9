"""Unit tests for price string parsing and savings computation."""

from __future__ import annotations

import pytest

from app.core.pricing import parse_price_amount, savings_percentage


class TestParsePriceAmount:
    """Test amount extraction from formatted price strings."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("₹75,999", 75999),
            ("â‚¹75,999", 75999),
            ("Rs. 75,999.00", 75999),
            ("75999", 75999),
            ("1,234.5", 1234),
            ("12.345", 12345),
            ("₹1 299", 1299),
            ("Only 2 left ₹75,999", 75999),
        ],
    )
    def test_extracts_digits(self, raw, expected):
        assert parse_price_amount(raw) == expected

    def test_none_and_blank(self):
        assert parse_price_amount(None) is None
        assert parse_price_amount("") is None

    def test_no_digits(self):
        """Strings without digits have no amount."""
        assert parse_price_amount("free") is None
        assert parse_price_amount("₹") is None


class TestSavingsPercentage:
    """Test savings percentage rules."""

    def test_reference_example(self):
        # 100 * 9001 / 85000 = 10.59
        assert savings_percentage(85000, 75999) == 11

    def test_no_amount(self):
        assert savings_percentage(85000, None) == 0

    def test_free_item(self):
        assert savings_percentage(85000, 0) == 100

    def test_negative_passed_through(self):
        """Promotional price above the reference is not clamped."""
        assert savings_percentage(85000, 90000) == -6
        assert savings_percentage(85000, 200000) == -135

    def test_rounds_half_up(self):
        assert savings_percentage(200, 199) == 1
        assert savings_percentage(200, 201) == 0

    def test_zero_reference(self):
        assert savings_percentage(0, 100) == 0
