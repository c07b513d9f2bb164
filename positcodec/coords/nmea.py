"""NMEA 0183 coordinate fields.

NMEA sentences carry each coordinate as two comma-separated fields: a
degrees-and-decimal-minutes number and a hemisphere letter.

    4903.5000,N      latitude   ddmm.mmmm   + N/S
    07201.7500,W     longitude  dddmm.mmmm  + E/W

The encoder always writes four fractional minute digits. Receivers in the
wild emit anywhere from two to five, so the decoder only insists on the
fixed-width degree and minute digits in front of the decimal point.

Unknown positions are written as two empty fields (",,").
"""

import re

from positcodec.coords.common import clamp, split_degrees
from positcodec.coords.types import LATITUDE, LONGITUDE, UNKNOWN, Axis
from positcodec.diagnostics import Reporter, resolve_reporter

_FRACTION_DIGITS = 4
_LEADING_DIGIT = re.compile(r"[0-9]")

# Whole degrees, then minutes up to the end of the fractional digits.
# Anything after the last fractional digit is ignored.
_FIELD_PATTERNS = {
    LATITUDE.name: re.compile(r"([0-9]{2})([0-9]{2}\.[0-9]*)"),
    LONGITUDE.name: re.compile(r"([0-9]{3})([0-9]{2}\.[0-9]*)"),
}


def _to_nmea(degrees: float, axis: Axis, report: Reporter | None) -> tuple[str, str]:
    if degrees == UNKNOWN:
        return "", ""

    degrees = clamp(degrees, axis, resolve_reporter(report))
    hemisphere = axis.hemisphere(degrees)
    whole, minutes = split_degrees(abs(degrees), _FRACTION_DIGITS)
    return f"{whole:0{axis.degree_digits}d}{minutes}", hemisphere


def latitude_to_nmea(latitude: float, report: Reporter | None = None) -> tuple[str, str]:
    """Encode a latitude as NMEA ``ddmm.mmmm`` and hemisphere fields.

    Args:
        latitude: Degrees, positive north, or ``UNKNOWN``.
        report: Diagnostic sink for clamp warnings. Defaults to logging.

    Returns:
        Tuple of (numeric field, hemisphere letter). Both are empty strings
        for ``UNKNOWN``; no clamping or warning happens in that case.

    Example:
        >>> latitude_to_nmea(49.058333333)
        ('4903.5000', 'N')
        >>> latitude_to_nmea(UNKNOWN)
        ('', '')
    """
    return _to_nmea(latitude, LATITUDE, report)


def longitude_to_nmea(longitude: float, report: Reporter | None = None) -> tuple[str, str]:
    """Encode a longitude as NMEA ``dddmm.mmmm`` and hemisphere fields.

    Example:
        >>> longitude_to_nmea(-72.029166667)
        ('07201.7500', 'W')
    """
    return _to_nmea(longitude, LONGITUDE, report)


def _from_nmea(field: str, hemisphere: str, axis: Axis, report: Reporter | None) -> float:
    # Structural problems: give up quietly.
    if not _LEADING_DIGIT.match(field):
        return UNKNOWN
    if field[axis.decimal_offset : axis.decimal_offset + 1] != ".":
        return UNKNOWN
    match = _FIELD_PATTERNS[axis.name].match(field)
    if match is None:
        return UNKNOWN

    degrees_text, minutes_text = match.groups()
    value = int(degrees_text) + float(minutes_text) / 60.0

    # Content problems: complain, but still return what was decoded.
    report = resolve_reporter(report)
    if value < 0 or value > axis.limit:
        report(f"{axis.name} not in range of 0 to {axis.limit:.0f}.")

    letter = hemisphere[:1]
    if letter not in (axis.positive, axis.negative, ""):
        report(f"{axis.name} hemisphere should be {axis.positive} or {axis.negative}.")

    if letter == axis.negative:
        value = -value
    return value


def latitude_from_nmea(field: str, hemisphere: str, report: Reporter | None = None) -> float:
    """Decode NMEA latitude fields to signed degrees.

    The numeric field has 2 degree digits, 2 minute digits, a period, and any
    number of fractional minute digits. Only the leading digit and the
    position of the period are checked; a magnitude over 90 or a hemisphere
    other than N, S or empty is reported but still decoded.

    Args:
        field: Numeric field, e.g. "4903.5000".
        hemisphere: The following field, "N", "S", or "" when unknown.
        report: Diagnostic sink for range and hemisphere warnings.

    Returns:
        Degrees, negative for south, or ``UNKNOWN`` for a malformed field.

    Example:
        >>> latitude_from_nmea("4903.5000", "N")
        49.058333333333336
        >>> latitude_from_nmea("490.35000", "N")
        -999999.0
    """
    return _from_nmea(field, hemisphere, LATITUDE, report)


def longitude_from_nmea(field: str, hemisphere: str, report: Reporter | None = None) -> float:
    """Decode NMEA longitude fields (3 degree digits, E/W) to signed degrees.

    See ``latitude_from_nmea`` for the validation rules.

    Example:
        >>> longitude_from_nmea("07201.7500", "W")
        -72.02916666666667
    """
    return _from_nmea(field, hemisphere, LONGITUDE, report)
