"""Exceptions raised by the APRS coordinate codec.

Decode failures carry the raw field bytes that could not be parsed so the
packet-level caller can report or skip the offending field. Encode failures
only arise from the output sink, since the coordinate types cannot hold an
out-of-range value.
"""


class AprsError(Exception):
    """Base class for all codec errors."""


class DecodeError(AprsError, ValueError):
    """A wire field could not be decoded.

    Attributes:
        raw: Copy of the field bytes exactly as received.
    """

    _field_name = "field"

    def __init__(self, raw: bytes) -> None:
        self.raw = bytes(raw)
        super().__init__(f"Invalid {self._field_name}: {self.raw!r}")


class InvalidLatitude(DecodeError):
    """An uncompressed or compressed latitude field was malformed or out of range."""

    _field_name = "latitude"


class InvalidLongitude(DecodeError):
    """An uncompressed or compressed longitude field was malformed or out of range."""

    _field_name = "longitude"


class EncodeError(AprsError):
    """A coordinate could not be written to the output sink."""
