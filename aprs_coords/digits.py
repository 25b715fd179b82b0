"""Strict ASCII digit parsing.

APRS fixed-width fields are plain runs of ASCII digits. ``int()`` is too
lenient for them: it accepts surrounding whitespace, a sign, underscores and
non-ASCII digits, all of which must be rejected on the wire.
"""

_DIGITS = frozenset(b"0123456789")


def parse_ascii_digits(value: bytes) -> int:
    """Parse a run of ASCII digits as an unsigned integer.

    Args:
        value: One or more bytes, each in ``b"0"``..``b"9"``

    Returns:
        The base-10 integer the digits spell

    Raises:
        ValueError: If ``value`` is empty or holds any non-digit byte

    Example:
        >>> parse_ascii_digits(b"049")
        49
        >>> parse_ascii_digits(b" 49")
        Traceback (most recent call last):
        ...
        ValueError: not an ASCII digit string: b' 49'
    """
    if not value or not _DIGITS.issuperset(value):
        raise ValueError(f"not an ASCII digit string: {bytes(value)!r}")

    result = 0
    for byte in value:
        result = result * 10 + (byte - 0x30)
    return result
