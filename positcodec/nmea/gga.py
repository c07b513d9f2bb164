"""GGA sentence parser.

GGA (Global Positioning System Fix Data) carries the position fix, its
quality, and the altitude.

GGA Sentence Format:
    $GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F
           |         |        | |         | | |  |   |     | |     |
           |         |        | |         | | |  |   |     | |     +-- DGPS info (optional)
           |         |        | |         | | |  |   |     | +-- Geoid height (M=meters)
           |         |        | |         | | |  |   +-----+-- Altitude above MSL
           |         |        | |         | | |  +-- HDOP
           |         |        | |         | | +-- Number of satellites
           |         |        | |         | +-- Fix quality (0-6)
           |         |        | +---------+-- Longitude + E/W
           |         +--------+-- Latitude + N/S
           +-- UTC time (HHMMSS.ss)
"""

from positcodec.diagnostics import Reporter
from positcodec.nmea.checksum import validate_checksum
from positcodec.nmea.fields import (
    is_sentence_type,
    parse_float_field,
    parse_int_field,
    parse_latitude_fields,
    parse_longitude_fields,
    parse_string_field,
    split_fields,
)
from positcodec.nmea.types import GGAData

# 14 standard fields (indices 0-13); some receivers append DGPS station info.
_MINIMUM_FIELD_COUNT = 14


def _build_gga_data(fields: list[str], report: Reporter | None) -> GGAData:
    """Map GGA field indices onto a GGAData.

        fields[1]  -> utc_time
        fields[2]  -> latitude (DDMM.MMMM)
        fields[3]  -> N/S
        fields[4]  -> longitude (DDDMM.MMMM)
        fields[5]  -> E/W
        fields[6]  -> fix_quality
        fields[7]  -> num_satellites
        fields[8]  -> HDOP
        fields[9]  -> altitude above MSL
        fields[11] -> geoid height
    """
    # Empty fix quality means no fix, same as 0.
    fix_quality = parse_int_field(fields[6]) or 0

    return GGAData(
        utc_time=parse_string_field(fields[1]),
        latitude_degrees=parse_latitude_fields(fields[2], fields[3], report),
        longitude_degrees=parse_longitude_fields(fields[4], fields[5], report),
        fix_quality=fix_quality,
        num_satellites=parse_int_field(fields[7]),
        horizontal_dilution_of_precision=parse_float_field(fields[8]),
        altitude_meters=parse_float_field(fields[9]),
        geoid_height_meters=parse_float_field(fields[11]),
        valid=fix_quality > 0,
    )


def parse_gga(sentence: str, report: Reporter | None = None) -> GGAData | None:
    """Parse a GGA sentence into structured data.

    Args:
        sentence: Raw GGA sentence, with or without the trailing CRLF.
        report: Diagnostic sink for coordinate warnings (out-of-range
            magnitude, unexpected hemisphere letter).

    Returns:
        GGAData, or None if the checksum is wrong, fields are missing, or
        the sentence is not GGA from a supported talker. A malformed
        coordinate field leaves that coordinate as None without rejecting
        the sentence.

    Example:
        >>> result = parse_gga("$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F")
        >>> result.latitude_degrees
        48.1173
    """
    sentence = sentence.strip()

    if not validate_checksum(sentence):
        return None

    fields = split_fields(sentence, _MINIMUM_FIELD_COUNT)
    if fields is None or not is_sentence_type(fields[0], "GGA"):
        return None

    return _build_gga_data(fields, report)
