"""Field helpers shared by the latitude and longitude codecs.

Uncompressed APRS coordinates are degrees, whole minutes and hundredths of a
minute written as fixed-width ASCII digits:

    4903.50N   -> 49 deg, 03 min, .50 min, North
    12903.50E  -> 129 deg, 03 min, .50 min, East

These helpers cover the pieces both axes need: classifying the two-byte digit
groups of a possibly ambiguous latitude, mapping hemisphere letters to a sign,
and converting between decimal degrees and the (degrees, minutes, hundredths)
triple.
"""

import math

# Hundredths of a minute per degree
_HUNDREDTHS_PER_DEGREE = 6000.0
_MINUTES_PER_DEGREE = 60.0

_SPACE = 0x20
_DIGITS = range(0x30, 0x3A)


def parse_blanked_group(group: bytes, only_spaces: bool) -> tuple[int, int] | None:
    """Classify one two-byte digit group of an uncompressed latitude.

    Ambiguity replaces digits with spaces from the right, so within a group
    a space may only follow a digit, never precede one. Once an earlier group
    has been blanked, every later group must be blank too; the caller signals
    that with ``only_spaces``.

    Args:
        group: Two bytes from the latitude field
        only_spaces: True if a group to the left already held a space

    Returns:
        Tuple of (value, number of blanked digits), or None if the group
        is not valid in this position

    Example:
        >>> parse_blanked_group(b"12", False)
        (12, 0)
        >>> parse_blanked_group(b"1 ", False)
        (10, 1)
        >>> parse_blanked_group(b"  ", False)
        (0, 2)
        >>> parse_blanked_group(b" 2", False)  # space before a digit
        None
        >>> parse_blanked_group(b"12", True)  # digits after blanking started
        None
    """
    if len(group) != 2:
        return None

    first, second = group
    if first == _SPACE and second == _SPACE:
        return 0, 2
    if only_spaces:
        return None
    if first in _DIGITS and second == _SPACE:
        return (first - 0x30) * 10, 1
    if first in _DIGITS and second in _DIGITS:
        return (first - 0x30) * 10 + (second - 0x30), 0
    return None


def hemisphere_sign(flag: int, positive: int, negative: int) -> int | None:
    """Map a hemisphere byte to +1 or -1.

    Args:
        flag: The hemisphere byte from the field
        positive: Byte meaning North or East
        negative: Byte meaning South or West

    Returns:
        1 for ``positive``, -1 for ``negative``, None for anything else
    """
    if flag == positive:
        return 1
    if flag == negative:
        return -1
    return None


def to_decimal_degrees(degrees: int, minutes: int, hundredths: int, sign: int) -> float:
    """Combine degrees, minutes and hundredths of a minute into decimal degrees.

    Example:
        >>> to_decimal_degrees(49, 3, 50, 1)
        49.05833333333333
    """
    value = (
        degrees
        + minutes / _MINUTES_PER_DEGREE
        + hundredths / _HUNDREDTHS_PER_DEGREE
    )
    return value if sign > 0 else -value


def split_degrees_minutes(magnitude: float) -> tuple[int, int, int]:
    """Split a non-negative angle into whole degrees, whole minutes and hundredths.

    Degrees and minutes are truncated; the hundredths of a minute are rounded
    to the nearest value, halves away from zero. A rounding carry into the
    next minute or degree is propagated so every component stays in range.

    Example:
        >>> split_degrees_minutes(49.05833)
        (49, 3, 50)
        >>> split_degrees_minutes(49.999999)
        (50, 0, 0)
    """
    degrees = int(magnitude)
    minutes = int((magnitude - degrees) * _MINUTES_PER_DEGREE)
    remainder = magnitude - degrees - minutes / _MINUTES_PER_DEGREE
    hundredths = math.floor(remainder * _HUNDREDTHS_PER_DEGREE + 0.5)

    if hundredths >= 100:
        hundredths -= 100
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1

    return degrees, minutes, hundredths
