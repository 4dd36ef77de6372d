from decimal import Decimal

import pytest

from utils import cell_to_text, format_decimal_sv, parse_decimal, parse_int, round_half_up


class TestCellToText:
    def test_empty_cell(self) -> None:
        assert cell_to_text(None) == ""

    def test_integral_float_has_no_fraction(self) -> None:
        assert cell_to_text(12.0) == "12"

    def test_float(self) -> None:
        assert cell_to_text(1234.5) == "1234.5"

    def test_text_is_kept_as_is(self) -> None:
        assert cell_to_text(" Namn ") == " Namn "


class TestParseNumbers:
    def test_decimal_comma(self) -> None:
        assert parse_decimal("2,34") == Decimal("2.34")

    def test_thousands_spaces(self) -> None:
        assert parse_decimal("1 234,5") == Decimal("1234.5")
        assert parse_decimal("1\u00a0234") == Decimal("1234")

    def test_not_a_number(self) -> None:
        with pytest.raises(ValueError):
            parse_decimal("n/a")

    def test_empty(self) -> None:
        with pytest.raises(ValueError):
            parse_decimal("  ")

    def test_infinity_rejected(self) -> None:
        with pytest.raises(ValueError):
            parse_decimal("Infinity")

    def test_int_truncates(self) -> None:
        assert parse_int("1834") == 1834
        assert parse_int("12.7") == 12
        assert parse_int("-12,7") == -12


class TestRoundHalfUp:
    def test_halves_go_away_from_zero(self) -> None:
        assert round_half_up(Decimal("2.5")) == 3
        assert round_half_up(Decimal("-2.5")) == -3

    def test_regular_rounding(self) -> None:
        assert round_half_up(Decimal("2.4")) == 2
        assert round_half_up(Decimal("-75.6")) == -76


class TestFormatDecimalSv:
    def test_decimal_comma(self) -> None:
        assert format_decimal_sv(2.34) == "2,34"

    def test_whole_number(self) -> None:
        assert format_decimal_sv(3.0) == "3"

    def test_grouping(self) -> None:
        assert format_decimal_sv(1234.5) == "1\u00a0234,5"

    def test_at_most_three_decimals(self) -> None:
        assert format_decimal_sv(1.23456) == "1,235"


class TestNumberLimits:
    def test_too_many_whole_digits(self) -> None:
        with pytest.raises(ValueError):
            parse_decimal("1" * 30)

    def test_large_but_allowed(self) -> None:
        assert parse_int("999999999999999") == 999999999999999

    def test_round_beyond_precision(self) -> None:
        with pytest.raises(ValueError):
            round_half_up(Decimal("1" * 30))

    def test_format_beyond_precision(self) -> None:
        with pytest.raises(ValueError):
            format_decimal_sv(1e30)
