"""Tests for shared coordinate field helpers."""

import pytest

from aprs_coords.lonlat.fields import (
    hemisphere_sign,
    parse_blanked_group,
    split_degrees_minutes,
    to_decimal_degrees,
)


class TestParseBlankedGroup:
    """Tests for parse_blanked_group function."""

    def test_two_digits(self):
        assert parse_blanked_group(b"12", False) == (12, 0)

    def test_trailing_space(self):
        assert parse_blanked_group(b"1 ", False) == (10, 1)

    def test_two_spaces(self):
        assert parse_blanked_group(b"  ", False) == (0, 2)

    def test_leading_space(self):
        assert parse_blanked_group(b" 2", False) is None

    def test_non_digit(self):
        assert parse_blanked_group(b"1Z", False) is None
        assert parse_blanked_group(b"Z ", False) is None

    @pytest.mark.parametrize("group", [b"12", b"1 ", b" 1"])
    def test_only_spaces_rejects_digits(self, group):
        assert parse_blanked_group(group, True) is None

    def test_only_spaces_accepts_blank(self):
        assert parse_blanked_group(b"  ", True) == (0, 2)

    def test_wrong_length(self):
        assert parse_blanked_group(b"1", False) is None


class TestHemisphereSign:
    """Tests for hemisphere_sign function."""

    def test_positive(self):
        assert hemisphere_sign(ord("N"), ord("N"), ord("S")) == 1

    def test_negative(self):
        assert hemisphere_sign(ord("W"), ord("E"), ord("W")) == -1

    def test_other(self):
        assert hemisphere_sign(ord("n"), ord("N"), ord("S")) is None


class TestToDecimalDegrees:
    """Tests for to_decimal_degrees function."""

    def test_north(self):
        assert to_decimal_degrees(49, 3, 50, 1) == pytest.approx(49.05833333333333)

    def test_south(self):
        assert to_decimal_degrees(49, 3, 50, -1) == pytest.approx(-49.05833333333333)

    def test_whole_minutes(self):
        assert to_decimal_degrees(129, 30, 0, 1) == pytest.approx(129.5)


class TestSplitDegreesMinutes:
    """Tests for split_degrees_minutes function."""

    def test_rounds_hundredths(self):
        assert split_degrees_minutes(49.05833) == (49, 3, 50)

    def test_zero(self):
        assert split_degrees_minutes(0.0) == (0, 0, 0)

    def test_exact_minutes(self):
        assert split_degrees_minutes(49.05) == (49, 3, 0)

    def test_carry_into_degrees(self):
        assert split_degrees_minutes(49.999999) == (50, 0, 0)

    def test_maximum(self):
        assert split_degrees_minutes(180.0) == (180, 0, 0)
