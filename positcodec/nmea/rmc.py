"""RMC sentence parser.

RMC (Recommended Minimum Specific GNSS Data) is the sentence most receivers
emit by default. It is the only common sentence carrying both the position
and the date.

RMC Sentence Format:
    $GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A
           |      | |        | |         | |     |     |      |     |
           |      | |        | |         | |     |     |      +-----+-- Magnetic variation
           |      | |        | |         | |     |     +-- Date (DDMMYY)
           |      | |        | |         | |     +-- Course over ground (true)
           |      | |        | |         | +-- Speed over ground (knots)
           |      | |        | +---------+-- Longitude + E/W
           |      | +--------+-- Latitude + N/S
           |      +-- Status (A=active, V=void)
           +-- UTC time (HHMMSS)

Receivers without a fix still emit RMC with status V, sometimes with zeroed
coordinates and a "0" hemisphere:
    $GPRMC,000000,V,0000.0000,0,00000.0000,0,000,000,000000,,*01
"""

from positcodec.diagnostics import Reporter
from positcodec.nmea.checksum import validate_checksum
from positcodec.nmea.fields import (
    is_sentence_type,
    parse_float_field,
    parse_latitude_fields,
    parse_longitude_fields,
    parse_string_field,
    split_fields,
)
from positcodec.nmea.types import RMCData

# Up to the magnetic variation direction (indices 0-11).
# NMEA 2.3+ appends a mode indicator, NMEA 4.1 a navigational status.
_MINIMUM_FIELD_COUNT = 12


def parse_rmc(sentence: str, report: Reporter | None = None) -> RMCData | None:
    """Parse an RMC sentence into structured data.

    Args:
        sentence: Raw RMC sentence, with or without the trailing CRLF.
        report: Diagnostic sink for coordinate warnings.

    Returns:
        RMCData, or None if the checksum is wrong, fields are missing, or the
        sentence is not RMC from a supported talker.

    Example:
        >>> rmc = parse_rmc("$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A")
        >>> rmc.speed_knots
        22.4
        >>> rmc.valid
        True
    """
    sentence = sentence.strip()

    if not validate_checksum(sentence):
        return None

    fields = split_fields(sentence, _MINIMUM_FIELD_COUNT)
    if fields is None or not is_sentence_type(fields[0], "RMC"):
        return None

    status = parse_string_field(fields[2])

    return RMCData(
        utc_time=parse_string_field(fields[1]),
        status=status,
        latitude_degrees=parse_latitude_fields(fields[3], fields[4], report),
        longitude_degrees=parse_longitude_fields(fields[5], fields[6], report),
        speed_knots=parse_float_field(fields[7]),
        course_degrees=parse_float_field(fields[8]),
        date=parse_string_field(fields[9]),
        valid=status == "A",
    )
