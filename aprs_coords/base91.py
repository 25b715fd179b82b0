"""Fixed-width base-91 numbers as used by APRS compressed positions.

Each printable ASCII byte from ``!`` (33) to ``{`` (123) is one base-91
digit, most significant digit first. A four digit field covers
0 .. 91**4 - 1, enough for the scaled coordinate values. The digit
arithmetic itself is ``aprslib.base91``; this module adapts it to byte
fields, fixed widths and the caller's output sink.

Example:
    Latitude 49.5 N is scaled to (90 - 49.5) * 380926 = 15427503, which is
    written as the four digits 20, 43, 0, 0 -> b"5L!!".
"""

import math
from typing import IO

from aprslib import base91 as aprs_base91

from aprs_coords.errors import EncodeError
from aprs_coords.sink import write_field

__all__ = ["decode_ascii", "encode_ascii"]

_RADIX = 91


def decode_ascii(value: bytes) -> float:
    """Decode a base-91 field into a number.

    Args:
        value: One or more base-91 digit bytes

    Returns:
        The decoded value as a float, ready for coordinate scaling

    Raises:
        ValueError: If ``value`` is empty or holds a byte outside ``!``..``{``

    Example:
        >>> decode_ascii(b"5L!!")
        15427503.0
    """
    if not value:
        raise ValueError("empty base-91 field")

    # latin-1 maps every byte to one character, so aprslib sees bytes >= 0x7C
    # and rejects them instead of a UnicodeDecodeError escaping
    return float(aprs_base91.to_decimal(bytes(value).decode("latin-1")))


def encode_ascii(value: float, buf: IO[bytes], width: int) -> None:
    """Write ``value`` as exactly ``width`` base-91 digits.

    The value is truncated toward zero before encoding, matching how the
    scaled coordinate is defined on the wire.

    Args:
        value: Non-negative number to encode
        buf: Writable binary sink
        width: Number of digits to emit

    Raises:
        EncodeError: If the value is negative, not finite or too large for
            ``width`` digits, or if the sink fails
    """
    if not math.isfinite(value) or value < 0:
        raise EncodeError(f"{value!r} cannot be base-91 encoded")

    integer = int(value)
    # aprslib pads short values but never truncates long ones
    if integer >= _RADIX**width:
        raise EncodeError(f"{value!r} does not fit in {width} base-91 digits")

    try:
        digits = aprs_base91.from_decimal(integer, width)
    except ValueError as e:
        raise EncodeError(f"{value!r} cannot be base-91 encoded") from e

    write_field(buf, digits.encode("ascii"))
