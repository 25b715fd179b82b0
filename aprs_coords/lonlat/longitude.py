"""Longitude value type and its APRS wire formats.

Uncompressed Format (9 bytes):
    12903.50E
    |  | || |
    |  | || +-- Hemisphere (E/W)
    |  | ++---- Hundredths of a minute
    |  +------- Whole minutes (decimal point at offset 5)
    +---------- Degrees

    Longitude has no ambiguity marker of its own. When parsing, the
    precision of the paired latitude decides how many trailing digits are
    ignored. When encoding, all digits are always written.

Compressed Format (4 bytes):
    Base-91 digits of (180 + longitude) * 190463.
"""

import io
import logging
import math
from dataclasses import dataclass
from typing import IO

from aprs_coords import base91
from aprs_coords.digits import parse_ascii_digits
from aprs_coords.errors import InvalidLongitude
from aprs_coords.lonlat.fields import (
    hemisphere_sign,
    split_degrees_minutes,
    to_decimal_degrees,
)
from aprs_coords.lonlat.precision import Precision
from aprs_coords.sink import write_field

__all__ = ["Longitude"]

logger = logging.getLogger(__name__)

# --- wire layout --------------------------------------------------------------

_UNCOMPRESSED_LENGTH = 9
_DECIMAL_POINT_OFFSET = 5
_HEMISPHERE_OFFSET = 8

_COMPRESSED_LENGTH = 4
_COMPRESSED_SCALE = 190463.0

# --- bounds -------------------------------------------------------------------

_MIN_DEGREES = -180.0
_MAX_DEGREES = 180.0


def _is_valid(value: float) -> bool:
    return not math.isnan(value) and _MIN_DEGREES <= value <= _MAX_DEGREES


def _reject(field: bytes, reason: str) -> InvalidLongitude:
    logger.debug("Rejected longitude %r: %s", bytes(field), reason)
    return InvalidLongitude(field)


def _extract_digits(field: bytes, precision: Precision) -> bytes:
    """Return the 7 digit bytes ``DDDMMff`` with ambiguous positions set to ``0``."""
    field = bytes(field)
    digits = field[:_DECIMAL_POINT_OFFSET] + field[_DECIMAL_POINT_OFFSET + 1 : _HEMISPHERE_OFFSET]
    kept = len(digits) - precision.num_digits
    return digits[:kept] + b"0" * precision.num_digits


@dataclass(frozen=True, order=True)
class Longitude:
    """A longitude in decimal degrees, positive East.

    Instances always hold a finite value in [-180.0, 180.0]; constructing
    one with anything else raises ``ValueError``. Use ``Longitude.new`` for a
    constructor that returns None instead.

    Attributes:
        value: Longitude in decimal degrees.
    """

    value: float

    def __post_init__(self) -> None:
        if not _is_valid(self.value):
            raise ValueError(f"Longitude out of range: {self.value!r}")
        # Use object.__setattr__ since frozen=True
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    @classmethod
    def new(cls, value: float) -> "Longitude | None":
        """Create a longitude, or return None if ``value`` is NaN or outside [-180, 180]."""
        if not _is_valid(value):
            return None
        return cls(value)

    @classmethod
    def parse_uncompressed(
        cls,
        field: bytes,
        precision: Precision = Precision.HUNDREDTH_MINUTE,
    ) -> "Longitude":
        """Parse a 9-byte ``DDDMM.ffH`` longitude.

        Args:
            field: The 9 longitude bytes of a position report
            precision: Ambiguity level returned by parsing the paired
                latitude. Its trailing digit count is read as zeros
                whatever the field holds there.

        Raises:
            InvalidLongitude: If the field has the wrong length or layout, a
                hemisphere other than E/W, a non-digit in a significant
                position, or a value beyond 180 degrees

        Example:
            >>> Longitude.parse_uncompressed(b"12903.50E").value
            129.05833333333333
            >>> Longitude.parse_uncompressed(b"12903.  E", Precision.ONE_MINUTE).value
            129.05
        """
        if len(field) != _UNCOMPRESSED_LENGTH:
            raise _reject(field, f"expected {_UNCOMPRESSED_LENGTH} bytes")
        if field[_DECIMAL_POINT_OFFSET] != ord("."):
            raise _reject(field, "missing decimal point")

        sign = hemisphere_sign(field[_HEMISPHERE_OFFSET], ord("E"), ord("W"))
        if sign is None:
            raise _reject(field, "hemisphere must be E or W")

        digits = _extract_digits(field, precision)
        try:
            degrees = parse_ascii_digits(digits[0:3])
            minutes = parse_ascii_digits(digits[3:5])
            hundredths = parse_ascii_digits(digits[5:7])
        except ValueError as e:
            raise _reject(field, str(e)) from e

        longitude = cls.new(to_decimal_degrees(degrees, minutes, hundredths, sign))
        if longitude is None:
            raise _reject(field, "out of range")
        return longitude

    @classmethod
    def parse_compressed(cls, field: bytes) -> "Longitude":
        """Parse a 4-byte base-91 compressed longitude.

        Raises:
            InvalidLongitude: If the field is not 4 base-91 digits or decodes
                beyond 180 degrees

        Example:
            >>> round(Longitude.parse_compressed(b"<*e7").value, 4)
            -72.75
        """
        if len(field) != _COMPRESSED_LENGTH:
            raise _reject(field, f"expected {_COMPRESSED_LENGTH} bytes")

        try:
            scaled = base91.decode_ascii(field)
        except ValueError as e:
            raise _reject(field, str(e)) from e

        longitude = cls.new(scaled / _COMPRESSED_SCALE - _MAX_DEGREES)
        if longitude is None:
            raise _reject(field, "out of range")
        return longitude

    def encode_compressed(self, buf: IO[bytes]) -> None:
        """Write the 4-byte base-91 form to ``buf``.

        Raises:
            EncodeError: If the sink fails
        """
        base91.encode_ascii(
            (_MAX_DEGREES + self.value) * _COMPRESSED_SCALE, buf, _COMPRESSED_LENGTH
        )

    def encode_uncompressed(self, buf: IO[bytes]) -> None:
        """Write the 9-byte ``DDDMM.ffH`` form to ``buf`` at full precision.

        Raises:
            EncodeError: If the sink fails
        """
        hemisphere = b"E" if self.value >= 0.0 else b"W"
        degrees, minutes, hundredths = split_degrees_minutes(abs(self.value))
        write_field(buf, b"%03d%02d.%02d" % (degrees, minutes, hundredths) + hemisphere)

    def to_compressed(self) -> bytes:
        """Return the 4-byte base-91 form."""
        buf = io.BytesIO()
        self.encode_compressed(buf)
        return buf.getvalue()

    def to_uncompressed(self) -> bytes:
        """Return the 9-byte ``DDDMM.ffH`` form."""
        buf = io.BytesIO()
        self.encode_uncompressed(buf)
        return buf.getvalue()
