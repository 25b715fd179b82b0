"""Latitude and longitude codecs for APRS position reports."""

from aprs_coords.lonlat.latitude import Latitude
from aprs_coords.lonlat.longitude import Longitude
from aprs_coords.lonlat.precision import Precision

__all__ = [
    "Latitude",
    "Longitude",
    "Precision",
]
