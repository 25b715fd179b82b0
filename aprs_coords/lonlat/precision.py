"""Position ambiguity levels.

APRS lets a station deliberately reduce the precision of an uncompressed
position by replacing trailing digits of the latitude with spaces. The number
of blanked digits, counted from the right of the six digit ``DDMMff``
sequence, selects the level:

    4903.50N  -> 0 blanks -> HUNDREDTH_MINUTE
    4903.5 N  -> 1 blank  -> TENTH_MINUTE
    4903.  N  -> 2 blanks -> ONE_MINUTE
    490 .  N  -> 3 blanks -> TEN_MINUTE
    49  .  N  -> 4 blanks -> ONE_DEGREE
    4   .  N  -> 5 blanks -> TEN_DEGREE

Blanking all six digits is not a valid level. The longitude of the same
report has no ambiguity marker of its own and reuses the latitude's level.
"""

from enum import Enum
from functools import total_ordering

_MAX_BLANK_DIGITS = 5


@total_ordering
class Precision(Enum):
    """Ambiguity level of an uncompressed position, least precise first.

    Members compare by precision: ``Precision.TEN_DEGREE < Precision.ONE_MINUTE``.
    They only compare with each other, never with plain integers.
    """

    TEN_DEGREE = 0
    ONE_DEGREE = 1
    TEN_MINUTE = 2
    ONE_MINUTE = 3
    TENTH_MINUTE = 4
    HUNDREDTH_MINUTE = 5

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Precision):
            return NotImplemented
        return self.value < other.value

    @property
    def num_digits(self) -> int:
        """Number of trailing digits blanked at this level."""
        return _MAX_BLANK_DIGITS - self.value

    @classmethod
    def from_num_digits(cls, num_digits: int) -> "Precision | None":
        """Return the level that blanks ``num_digits`` digits, or None if there is none.

        Example:
            >>> Precision.from_num_digits(2)
            <Precision.ONE_MINUTE: 3>
            >>> Precision.from_num_digits(6) is None
            True
        """
        if not 0 <= num_digits <= _MAX_BLANK_DIGITS:
            return None
        return cls(_MAX_BLANK_DIGITS - num_digits)

    @classmethod
    def default(cls) -> "Precision":
        """Full precision, no blanked digits."""
        return cls.HUNDREDTH_MINUTE
