"""Latitude value type and its APRS wire formats.

Uncompressed Format (8 bytes):
    4903.50N
    | | || |
    | | || +-- Hemisphere (N/S)
    | | ++---- Hundredths of a minute
    | +------- Whole minutes (decimal point at offset 4)
    +--------- Degrees

    Trailing digits may be replaced by spaces to signal position ambiguity,
    see ``aprs_coords.lonlat.precision``.

Compressed Format (4 bytes):
    Base-91 digits of (90 - latitude) * 380926.
"""

import io
import logging
import math
from dataclasses import dataclass
from typing import IO

from aprs_coords import base91
from aprs_coords.errors import InvalidLatitude
from aprs_coords.lonlat.fields import (
    hemisphere_sign,
    parse_blanked_group,
    split_degrees_minutes,
    to_decimal_degrees,
)
from aprs_coords.lonlat.precision import Precision
from aprs_coords.sink import write_field

__all__ = ["Latitude"]

logger = logging.getLogger(__name__)

# --- wire layout --------------------------------------------------------------

_UNCOMPRESSED_LENGTH = 8
_DECIMAL_POINT_OFFSET = 4
_HEMISPHERE_OFFSET = 7

# Degrees, minutes, hundredths of a minute
_DIGIT_GROUPS = (slice(0, 2), slice(2, 4), slice(5, 7))

_COMPRESSED_LENGTH = 4
_COMPRESSED_SCALE = 380926.0

# --- bounds -------------------------------------------------------------------

_MIN_DEGREES = -90.0
_MAX_DEGREES = 90.0


def _is_valid(value: float) -> bool:
    return not math.isnan(value) and _MIN_DEGREES <= value <= _MAX_DEGREES


def _reject(field: bytes, reason: str) -> InvalidLatitude:
    logger.debug("Rejected latitude %r: %s", bytes(field), reason)
    return InvalidLatitude(field)


def _parse_digit_groups(field: bytes) -> tuple[list[int], int] | None:
    """Parse the three digit groups left to right.

    Returns:
        Tuple of ([degrees, minutes, hundredths], total blanked digits), or
        None if a group is malformed or a digit follows a blank
    """
    values = []
    total_blanks = 0
    blanked = False
    for group in _DIGIT_GROUPS:
        parsed = parse_blanked_group(field[group], blanked)
        if parsed is None:
            return None
        value, num_blanks = parsed
        values.append(value)
        total_blanks += num_blanks
        blanked = blanked or num_blanks > 0
    return values, total_blanks


@dataclass(frozen=True, order=True)
class Latitude:
    """A latitude in decimal degrees, positive North.

    Instances always hold a finite value in [-90.0, 90.0]; constructing one
    with anything else raises ``ValueError``. Use ``Latitude.new`` for a
    constructor that returns None instead.

    Attributes:
        value: Latitude in decimal degrees.

    Example:
        >>> lat, precision = Latitude.parse_uncompressed(b"4903.50N")
        >>> lat.value
        49.05833333333333
        >>> lat.to_uncompressed(Precision.ONE_MINUTE)
        b'4903.  N'
    """

    value: float

    def __post_init__(self) -> None:
        if not _is_valid(self.value):
            raise ValueError(f"Latitude out of range: {self.value!r}")
        # Use object.__setattr__ since frozen=True
        object.__setattr__(self, "value", float(self.value))

    def __float__(self) -> float:
        return self.value

    @classmethod
    def new(cls, value: float) -> "Latitude | None":
        """Create a latitude, or return None if ``value`` is NaN or outside [-90, 90]."""
        if not _is_valid(value):
            return None
        return cls(value)

    @classmethod
    def parse_uncompressed(cls, field: bytes) -> tuple["Latitude", Precision]:
        """Parse an 8-byte ``DDMM.ffH`` latitude and its ambiguity level.

        Each two-digit group may end in spaces to mark ambiguity. Once a
        group contains a space, all groups to its right must be entirely
        spaces. Blanked digits count as zero.

        Args:
            field: The 8 latitude bytes of a position report

        Returns:
            Tuple of (latitude, precision). The precision applies to the
            paired longitude as well.

        Raises:
            InvalidLatitude: If the field has the wrong length or layout, a
                hemisphere other than N/S, an invalid blanking pattern, all
                six digits blanked, or a value beyond 90 degrees

        Example:
            >>> Latitude.parse_uncompressed(b"4903.5 S")
            (Latitude(value=-49.05833333333333), <Precision.TENTH_MINUTE: 4>)
        """
        if len(field) != _UNCOMPRESSED_LENGTH:
            raise _reject(field, f"expected {_UNCOMPRESSED_LENGTH} bytes")
        if field[_DECIMAL_POINT_OFFSET] != ord("."):
            raise _reject(field, "missing decimal point")

        sign = hemisphere_sign(field[_HEMISPHERE_OFFSET], ord("N"), ord("S"))
        if sign is None:
            raise _reject(field, "hemisphere must be N or S")

        parsed = _parse_digit_groups(field)
        if parsed is None:
            raise _reject(field, "invalid digits or blanking pattern")
        (degrees, minutes, hundredths), total_blanks = parsed

        precision = Precision.from_num_digits(total_blanks)
        if precision is None:
            raise _reject(field, f"{total_blanks} digits blanked")

        latitude = cls.new(to_decimal_degrees(degrees, minutes, hundredths, sign))
        if latitude is None:
            raise _reject(field, "out of range")

        return latitude, precision

    @classmethod
    def parse_compressed(cls, field: bytes) -> "Latitude":
        """Parse a 4-byte base-91 compressed latitude.

        Raises:
            InvalidLatitude: If the field is not 4 base-91 digits or decodes
                beyond 90 degrees

        Example:
            >>> Latitude.parse_compressed(b"5L!!").value
            49.5
        """
        if len(field) != _COMPRESSED_LENGTH:
            raise _reject(field, f"expected {_COMPRESSED_LENGTH} bytes")

        try:
            scaled = base91.decode_ascii(field)
        except ValueError as e:
            raise _reject(field, str(e)) from e

        latitude = cls.new(_MAX_DEGREES - scaled / _COMPRESSED_SCALE)
        if latitude is None:
            raise _reject(field, "out of range")
        return latitude

    def encode_compressed(self, buf: IO[bytes]) -> None:
        """Write the 4-byte base-91 form to ``buf``.

        Raises:
            EncodeError: If the sink fails
        """
        base91.encode_ascii(
            (_MAX_DEGREES - self.value) * _COMPRESSED_SCALE, buf, _COMPRESSED_LENGTH
        )

    def encode_uncompressed(
        self,
        buf: IO[bytes],
        precision: Precision = Precision.HUNDREDTH_MINUTE,
    ) -> None:
        """Write the 8-byte ``DDMM.ffH`` form to ``buf``.

        The last ``precision.num_digits`` digits of ``DDMMff`` are written as
        spaces. The blanked digits are dropped, not rounded into the digits
        that remain.

        Raises:
            EncodeError: If the sink fails
        """
        hemisphere = b"N" if self.value >= 0.0 else b"S"
        digits = b"%02d%02d%02d" % split_degrees_minutes(abs(self.value))

        kept = len(digits) - precision.num_digits
        digits = digits[:kept] + b" " * precision.num_digits

        write_field(buf, digits[:4] + b"." + digits[4:] + hemisphere)

    def to_compressed(self) -> bytes:
        """Return the 4-byte base-91 form."""
        buf = io.BytesIO()
        self.encode_compressed(buf)
        return buf.getvalue()

    def to_uncompressed(self, precision: Precision = Precision.HUNDREDTH_MINUTE) -> bytes:
        """Return the 8-byte ``DDMM.ffH`` form at the given precision."""
        buf = io.BytesIO()
        self.encode_uncompressed(buf, precision)
        return buf.getvalue()
