"""WPL (waypoint location) sentence builder.

Mapping and navigation programs accept WPL sentences to place a named marker
on the chart, e.g. for each station heard on the radio:

    $GPWPL,4807.0380,N,01131.0000,E,WPTNME*5C
           |         | |          | |
           |         | |          | +-- Waypoint name
           |         | +----------+-- Longitude + E/W
           +---------+-- Latitude + N/S
"""

from positcodec.coords import latitude_to_nmea, longitude_to_nmea
from positcodec.diagnostics import Reporter
from positcodec.nmea.checksum import wrap_sentence

_DEFAULT_TALKER = "GP"

# Characters with framing meaning inside a sentence.
_RESERVED = str.maketrans("", "", ",*$\r\n")


def build_wpl(
    latitude: float,
    longitude: float,
    name: str,
    talker: str = _DEFAULT_TALKER,
    report: Reporter | None = None,
) -> str:
    """Build a complete WPL sentence with checksum and CRLF.

    Args:
        latitude: Degrees, positive north, or ``UNKNOWN``.
        longitude: Degrees, positive east, or ``UNKNOWN``.
        name: Waypoint name. Characters that would break framing
            (',', '*', '$', CR, LF) are removed.
        talker: Two-letter talker ID.
        report: Diagnostic sink for clamp warnings.

    Returns:
        The sentence. An unknown coordinate leaves both of its fields empty.

    Example:
        >>> build_wpl(48.1173, 11.5166667, "WPTNME")
        '$GPWPL,4807.0380,N,01131.0000,E,WPTNME*5C\\r\\n'
    """
    latitude_field, latitude_hemisphere = latitude_to_nmea(latitude, report)
    longitude_field, longitude_hemisphere = longitude_to_nmea(longitude, report)
    payload = (
        f"{talker}WPL,{latitude_field},{latitude_hemisphere},"
        f"{longitude_field},{longitude_hemisphere},{name.translate(_RESERVED)}"
    )
    return wrap_sentence(payload)
