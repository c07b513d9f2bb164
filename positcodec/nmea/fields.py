"""Field-level helpers shared by the NMEA sentence parsers.

NMEA fields are comma-separated and may be empty (",," means "no data").
These helpers return None for empty fields so callers can tell "no data"
from a measured zero.
"""

from positcodec.coords import UNKNOWN, latitude_from_nmea, longitude_from_nmea
from positcodec.diagnostics import Reporter

# Talker IDs accepted in front of the sentence type:
#   GP = GPS, GN = combined GNSS, GL = GLONASS,
#   GA = Galileo, GB = BeiDou, GQ = QZSS
VALID_TALKER_IDS = ("GP", "GN", "GL", "GA", "GB", "GQ")


def split_fields(sentence: str, minimum_count: int) -> list[str] | None:
    """Split a checksum-validated sentence into its fields.

    Args:
        sentence: Sentence that has already passed ``validate_checksum``.
        minimum_count: Fewest fields (including the address field) that a
            well-formed sentence of this type has.

    Returns:
        Fields between '$' and '*', or None if there are too few.

    Example:
        >>> split_fields("$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A", 12)
        ['GPRMC', '123519', 'A', '4807.038', 'N', '01131.000', 'E', '022.4', '084.4', '230394', '003.1', 'W']
    """
    content = sentence[1 : sentence.index("*")]
    fields = content.split(",")

    if len(fields) < minimum_count:
        return None

    return fields


def is_sentence_type(address: str, sentence_type: str) -> bool:
    """Check that an address field is *sentence_type* from a known talker.

    Example:
        >>> is_sentence_type("GNGGA", "GGA")
        True
        >>> is_sentence_type("XXGGA", "GGA")
        False
    """
    if len(address) < 5:
        return False
    return address[:2] in VALID_TALKER_IDS and address[2:] == sentence_type


def parse_float_field(value: str) -> float | None:
    """Parse a float field; None if empty or unparseable.

    Example:
        >>> parse_float_field("545.4")
        545.4
        >>> parse_float_field("")
        None
    """
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_int_field(value: str) -> int | None:
    """Parse an integer field such as a satellite count; None if empty or unparseable."""
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def parse_string_field(value: str) -> str | None:
    """Return the field unchanged, or None if empty."""
    if not value:
        return None
    return value


def _known(degrees: float) -> float | None:
    if degrees == UNKNOWN:
        return None
    return degrees


def parse_latitude_fields(value: str, hemisphere: str, report: Reporter | None = None) -> float | None:
    """Decode a latitude field pair to signed degrees, or None if unknown."""
    return _known(latitude_from_nmea(value, hemisphere, report))


def parse_longitude_fields(value: str, hemisphere: str, report: Reporter | None = None) -> float | None:
    """Decode a longitude field pair to signed degrees, or None if unknown."""
    return _known(longitude_from_nmea(value, hemisphere, report))
