"""Tests for rounding, number formatting and unit-aware scaling."""

import pytest

from theme_engine.units import (
    clamp,
    fmt_int,
    fmt_number,
    lerp,
    parse_dimension,
    parse_duration,
    round_half_up,
    scale_dimension,
    scale_duration,
)


def test_lerp_endpoints():
    assert lerp(6, 4, 0) == 6
    assert lerp(6, 4, 1) == 4
    assert lerp(6, 4, 0.5) == 5


def test_clamp():
    assert clamp(0.9, 0.35, 0.85) == 0.85
    assert clamp(0.2, 0.35, 0.85) == 0.35
    assert clamp(0.5, 0.35, 0.85) == 0.5


class TestRounding:
    def test_half_goes_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(3.5) == 4
        assert round_half_up(0.125, 2) == 0.13

    def test_fmt_int(self):
        assert fmt_int(3.5) == "4"
        assert fmt_int(10.5) == "11"
        assert fmt_int(349.9999999) == "350"


class TestFmtNumber:
    def test_whole_numbers_drop_decimal(self):
        assert fmt_number(5.0) == "5"
        assert fmt_number(1.00000000000001) == "1"

    def test_shortest_form(self):
        assert fmt_number(0.1 + 0.2) == "0.3"
        assert fmt_number(1.2000000000001) == "1.2"
        assert fmt_number(-0.02) == "-0.02"
        assert fmt_number(1.375) == "1.375"

    def test_keeps_small_differences(self):
        assert fmt_number(5.99998) == "5.99998"
        assert fmt_number(5.99998) != fmt_number(5.99996)

    def test_explicit_digits(self):
        assert fmt_number(0.123456, 4) == "0.1235"
        assert fmt_number(1.5, 2) == "1.5"

    def test_never_exponent_form(self):
        assert fmt_number(0.00001) == "0.00001"

    def test_negative_zero(self):
        assert fmt_number(-0.00000000001) == "0"


class TestParsing:
    def test_dimension(self):
        assert parse_dimension("5.75rem") == (5.75, "rem")
        assert parse_dimension("12px") == (12.0, "px")
        assert parse_dimension("50%") == (50.0, "%")

    def test_dimension_rejects(self):
        assert parse_dimension("auto") is None
        assert parse_dimension("-2px") is None
        assert parse_dimension("1.2.3px") is None
        assert parse_dimension("300ms") is None

    def test_duration(self):
        assert parse_duration("300ms") == (300.0, "ms")
        assert parse_duration("0.3s") == (0.3, "s")
        assert parse_duration("4rem") is None


class TestScaling:
    def test_dimension_two_decimals(self):
        assert scale_dimension("5rem", 1.15) == "5.75rem"
        assert scale_dimension("2.75rem", 1.10) == "3.03rem"
        assert scale_dimension("4rem", 1.15) == "4.6rem"

    def test_duration_whole_numbers(self):
        assert scale_duration("300ms", 1.2) == "360ms"
        assert scale_duration("3ms", 0.75) == "2ms"
        assert scale_duration("3ms", 1.2) == "4ms"

    @pytest.mark.parametrize("value", ["auto", "none", "-2px", "calc(1rem + 2px)"])
    def test_unparseable_passes_through(self, value):
        assert scale_dimension(value, 2) == value
        assert scale_duration(value, 2) == value
