"""Unit tests for the numeric text primitives."""

from __future__ import annotations

import math

import pytest

from bufmt.convert.numeric import (
    RealFormat,
    atof_first,
    atoi_first,
    check_radix,
    check_width,
    ftoa,
    itoa,
    to_float32,
)
from bufmt.core.types import NPOS
from bufmt.exceptions import PreconditionError


class TestItoa:
    @pytest.mark.parametrize(
        ("value", "radix", "expected"),
        [
            (255, 16, b"0xff"),
            (-255, 16, b"-0xff"),
            (8, 8, b"0o10"),
            (5, 2, b"0b101"),
            (0, 2, b"0b0"),
            (-42, 10, b"-42"),
            (35, 36, b"z"),
            (-7, 3, b"-21"),
        ],
    )
    def test_radix_rendering(self, value, radix, expected):
        assert itoa(value, radix) == expected

    @pytest.mark.parametrize("radix", [0, 1, 37, 2.0])
    def test_invalid_radix(self, radix):
        with pytest.raises(PreconditionError, match="radix"):
            check_radix(radix)  # type: ignore[arg-type]


class TestAtoi:
    def test_stops_at_first_non_digit(self):
        assert atoi_first(b"12ab") == (2, 12)

    def test_signed(self):
        assert atoi_first(b"-12 rest") == (3, -12)
        assert atoi_first(b"+7") == (2, 7)

    def test_hex_with_and_without_prefix(self):
        assert atoi_first(b"0xff rest", 16) == (4, 255)
        assert atoi_first(b"ff", 16) == (2, 255)
        assert atoi_first(b"-0x10", 16) == (5, -16)

    def test_binary_stops_at_invalid_digit(self):
        assert atoi_first(b"0b102", 2) == (4, 2)

    def test_no_digits_is_not_found(self):
        assert atoi_first(b"abc") == (NPOS, None)
        assert atoi_first(b"") == (NPOS, None)
        assert atoi_first(b"-") == (NPOS, None)


class TestFtoa:
    def test_shortest_default(self):
        assert ftoa(0.1) == b"0.1"
        assert ftoa(2.5) == b"2.5"

    def test_fixed_shortest(self):
        assert ftoa(1e-7, notation=RealFormat.FIXED) == b"0.0000001"
        assert ftoa(0.25, notation=RealFormat.FIXED) == b"0.25"

    def test_scientific_shortest(self):
        assert ftoa(1234.5, notation=RealFormat.SCIENTIFIC) == b"1.2345e+03"

    def test_explicit_precision(self):
        assert ftoa(3.14159, 2, RealFormat.FIXED) == b"3.14"
        assert ftoa(2.5, 3, RealFormat.SCIENTIFIC) == b"2.500e+00"

    def test_hexa(self):
        assert ftoa(1.0, notation=RealFormat.HEXA) == b"0x1.0000000000000p+0"

    def test_non_finite(self):
        assert ftoa(math.inf) == b"inf"
        assert ftoa(-math.inf) == b"-inf"
        assert ftoa(math.nan) == b"nan"

    def test_float32_shortest(self):
        assert ftoa(0.1, width=32) == b"0.1"
        assert ftoa(16777217.0, width=32) == b"16777216"

    def test_float32_explicit_precision_shows_rounding(self):
        assert ftoa(0.1, 10, RealFormat.FIXED, width=32) == b"0.1000000015"

    def test_invalid_width(self):
        with pytest.raises(PreconditionError, match="width"):
            check_width(16)


class TestAtof:
    def test_exponent(self):
        assert atof_first(b"1.5e3xyz") == (5, 1500.0)

    def test_dangling_exponent_not_consumed(self):
        assert atof_first(b"1e") == (1, 1.0)

    def test_leading_dot(self):
        assert atof_first(b".5") == (2, 0.5)

    def test_hex_float(self):
        assert atof_first(b"0x1p3") == (5, 8.0)

    def test_inf_and_nan(self):
        assert atof_first(b"-inf") == (4, -math.inf)
        consumed, value = atof_first(b"nan,")
        assert consumed == 3
        assert math.isnan(value)

    def test_not_found(self):
        assert atof_first(b"abc") == (NPOS, None)

    def test_float32_rounding(self):
        assert atof_first(b"0.1", width=32) == (3, to_float32(0.1))
