"""Coordinate field codecs: human-readable, Base91 compressed, and NMEA."""

from positcodec.coords.compressed import (
    latitude_from_comp_str,
    latitude_to_comp_str,
    longitude_from_comp_str,
    longitude_to_comp_str,
)
from positcodec.coords.nmea import (
    latitude_from_nmea,
    latitude_to_nmea,
    longitude_from_nmea,
    longitude_to_nmea,
)
from positcodec.coords.text import (
    blanked_digits,
    latitude_from_str,
    latitude_to_str,
    longitude_from_str,
    longitude_to_str,
)
from positcodec.coords.types import LATITUDE, LONGITUDE, MAX_AMBIGUITY, UNKNOWN, Axis

__all__ = [
    "LATITUDE",
    "LONGITUDE",
    "MAX_AMBIGUITY",
    "UNKNOWN",
    "Axis",
    "blanked_digits",
    "latitude_from_comp_str",
    "latitude_from_nmea",
    "latitude_from_str",
    "latitude_to_comp_str",
    "latitude_to_nmea",
    "latitude_to_str",
    "longitude_from_comp_str",
    "longitude_from_nmea",
    "longitude_from_str",
    "longitude_to_comp_str",
    "longitude_to_nmea",
    "longitude_to_str",
]
