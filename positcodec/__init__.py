"""Coordinate field codecs for APRS position reports and NMEA 0183."""

from positcodec.coords import (
    LATITUDE,
    LONGITUDE,
    MAX_AMBIGUITY,
    UNKNOWN,
    Axis,
    latitude_from_comp_str,
    latitude_from_nmea,
    latitude_from_str,
    latitude_to_comp_str,
    latitude_to_nmea,
    latitude_to_str,
    longitude_from_comp_str,
    longitude_from_nmea,
    longitude_from_str,
    longitude_to_comp_str,
    longitude_to_nmea,
    longitude_to_str,
)
from positcodec.diagnostics import Reporter, WarningCollector
from positcodec.nmea import (
    GGAData,
    RMCData,
    build_wpl,
    parse_gga,
    parse_rmc,
    validate_checksum,
)

__all__ = [
    "LATITUDE",
    "LONGITUDE",
    "MAX_AMBIGUITY",
    "UNKNOWN",
    "Axis",
    "GGAData",
    "RMCData",
    "Reporter",
    "WarningCollector",
    "build_wpl",
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
    "parse_gga",
    "parse_rmc",
    "validate_checksum",
]
