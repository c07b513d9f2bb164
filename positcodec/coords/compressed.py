"""Base91 compressed APRS position fields.

Compressed position reports squeeze each coordinate into four printable
characters. The coordinate is first mapped onto a non-negative integer with a
fixed linear scale spanning the whole domain, then written as four base-91
digits, most significant first, each offset by 33 into printable ASCII:

    latitude:   n = round(380926 * (90 - lat))     lat  90 -> 0, lat  -90 -> 68566680
    longitude:  n = round(190463 * (180 + lon))    lon -180 -> 0, lon 180 -> 68566680

Both scales are chosen so the largest ``n`` stays just under 91**4.
The sign lives in the scale, so there is no hemisphere letter and no
position ambiguity.

Example (APRS 1.0.1 reference positions; the APRS document truncates ``n``
while these encoders round it, so 72°45'W ends in "8" rather than "7"):
    49°30'N  -> "5L!!"
    72°45'W  -> "<*e8"
"""

import math

from positcodec.coords.common import clamp
from positcodec.coords.types import LATITUDE, LONGITUDE, UNKNOWN
from positcodec.diagnostics import Reporter, resolve_reporter

_BASE = 91
_OFFSET = 33  # '!'
_WIDTH = 4

_LATITUDE_SCALE = 380926.0
_LONGITUDE_SCALE = 190463.0

_FIRST_SYMBOL = chr(_OFFSET)
_LAST_SYMBOL = chr(_OFFSET + _BASE - 1)  # '{'


def _round_half_up(value: float) -> int:
    # Scaled values are never negative, so this matches C's round().
    return int(math.floor(value + 0.5))


def _encode_base91(value: int) -> str:
    """Write *value* as four base-91 digits, most significant first.

    Example:
        >>> _encode_base91(15427503)
        '5L!!'
    """
    symbols = []
    for power in range(_WIDTH - 1, -1, -1):
        divisor = _BASE**power
        digit = value // divisor
        value -= digit * divisor
        symbols.append(chr(digit + _OFFSET))
    return "".join(symbols)


def _decode_base91(field: str) -> int | None:
    if len(field) != _WIDTH:
        return None
    value = 0
    for symbol in field:
        if not _FIRST_SYMBOL <= symbol <= _LAST_SYMBOL:
            return None
        value = value * _BASE + (ord(symbol) - _OFFSET)
    return value


def latitude_to_comp_str(latitude: float, report: Reporter | None = None) -> str:
    """Encode a latitude as a 4-character compressed field.

    Args:
        latitude: Degrees, positive north. Clamped to [-90, 90] with a report.
        report: Diagnostic sink for clamp warnings. Defaults to logging.

    Returns:
        Four characters in the range '!' to '{'.

    Example:
        >>> latitude_to_comp_str(49.5)
        '5L!!'
    """
    latitude = clamp(latitude, LATITUDE, resolve_reporter(report))
    return _encode_base91(_round_half_up(_LATITUDE_SCALE * (90.0 - latitude)))


def longitude_to_comp_str(longitude: float, report: Reporter | None = None) -> str:
    """Encode a longitude as a 4-character compressed field.

    Example:
        >>> longitude_to_comp_str(-72.75)
        '<*e8'
    """
    longitude = clamp(longitude, LONGITUDE, resolve_reporter(report))
    return _encode_base91(_round_half_up(_LONGITUDE_SCALE * (180.0 + longitude)))


def latitude_from_comp_str(field: str) -> float:
    """Decode a compressed latitude field.

    Returns:
        Degrees, positive north, or ``UNKNOWN`` if the field is not exactly
        four characters from the Base91 alphabet.
    """
    value = _decode_base91(field)
    if value is None:
        return UNKNOWN
    return 90.0 - value / _LATITUDE_SCALE


def longitude_from_comp_str(field: str) -> float:
    """Decode a compressed longitude field. See ``latitude_from_comp_str``."""
    value = _decode_base91(field)
    if value is None:
        return UNKNOWN
    return -180.0 + value / _LONGITUDE_SCALE
