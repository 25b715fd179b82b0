"""APRS position coordinate codec.

Converts between uncompressed (``DDMM.ffN`` / ``DDDMM.ffW``) and base-91
compressed coordinate fields and bounded latitude/longitude values.
"""

from aprs_coords.errors import (
    AprsError,
    DecodeError,
    EncodeError,
    InvalidLatitude,
    InvalidLongitude,
)
from aprs_coords.lonlat import Latitude, Longitude, Precision

__all__ = [
    "AprsError",
    "DecodeError",
    "EncodeError",
    "InvalidLatitude",
    "InvalidLongitude",
    "Latitude",
    "Longitude",
    "Precision",
]
