"""NMEA 0183 sentences: checksum, GGA and RMC parsing, WPL building."""

from positcodec.nmea.checksum import compute_checksum, validate_checksum, wrap_sentence
from positcodec.nmea.gga import parse_gga
from positcodec.nmea.rmc import parse_rmc
from positcodec.nmea.types import GGAData, RMCData
from positcodec.nmea.waypoint import build_wpl

__all__ = [
    "GGAData",
    "RMCData",
    "build_wpl",
    "compute_checksum",
    "parse_gga",
    "parse_rmc",
    "validate_checksum",
    "wrap_sentence",
]
