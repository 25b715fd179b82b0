"""Tests for fixed-width base-91 encoding."""

import io
import math

import pytest

from aprs_coords import EncodeError
from aprs_coords.base91 import decode_ascii, encode_ascii


class FailingSink:
    """Binary sink whose writes always fail."""

    def write(self, data):
        raise OSError("disk full")


class ShortSink:
    """Raw-style sink that accepts only two bytes per write."""

    def __init__(self):
        self.data = b""

    def write(self, data):
        self.data += data[:2]
        return 2


class TestDecodeAscii:
    """Tests for decode_ascii function."""

    def test_latitude_example(self):
        # APRS101 compressed latitude for 49.5 N
        assert decode_ascii(b"5L!!") == 15427503.0

    def test_minimum(self):
        assert decode_ascii(b"!!!!") == 0.0

    def test_maximum(self):
        assert decode_ascii(b"{{{{") == float(91**4 - 1)

    def test_single_digit(self):
        assert decode_ascii(b"\"") == 1.0

    @pytest.mark.parametrize("value", [b"", b"5L! ", b"|!!!", b"5L!\x7f", b"5L!\xff"])
    def test_rejects_invalid_bytes(self, value):
        with pytest.raises(ValueError):
            decode_ascii(value)


class TestEncodeAscii:
    """Tests for encode_ascii function."""

    def test_latitude_example(self):
        buf = io.BytesIO()
        encode_ascii(15427503.0, buf, 4)
        assert buf.getvalue() == b"5L!!"

    def test_truncates_fraction(self):
        buf = io.BytesIO()
        encode_ascii(15427503.99, buf, 4)
        assert buf.getvalue() == b"5L!!"

    def test_pads_to_width(self):
        buf = io.BytesIO()
        encode_ascii(1.0, buf, 4)
        assert buf.getvalue() == b"!!!\""

    def test_appends_to_existing_content(self):
        buf = io.BytesIO()
        buf.write(b"=")
        encode_ascii(0.0, buf, 2)
        assert buf.getvalue() == b"=!!"

    @pytest.mark.parametrize("value", [-1.0, math.nan, math.inf, float(91**4)])
    def test_rejects_unencodable_values(self, value):
        buf = io.BytesIO()
        with pytest.raises(EncodeError):
            encode_ascii(value, buf, 4)
        assert buf.getvalue() == b""

    def test_sink_failure(self):
        with pytest.raises(EncodeError) as excinfo:
            encode_ascii(15427503.0, FailingSink(), 4)
        assert isinstance(excinfo.value.__cause__, OSError)

    def test_short_write(self):
        sink = ShortSink()
        with pytest.raises(EncodeError):
            encode_ascii(15427503.0, sink, 4)
        assert sink.data == b"5L"
