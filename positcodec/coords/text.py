"""Human-readable APRS position fields with position ambiguity.

APRS uncompressed position reports carry latitude and longitude as fixed-width
degrees and decimal minutes followed by a hemisphere letter:

    4903.50N     latitude   ddmm.mmH   (8 characters)
    07201.75W    longitude  dddmm.mmH  (9 characters)
    ||||| || |
    ||||| || +-- Hemisphere (N/S or E/W)
    ||||| |+-- Hundredths of a minute   (blanked at ambiguity >= 1)
    ||||| +-- Tenths of a minute        (blanked at ambiguity >= 2)
    ||||+-- Minute units                (blanked at ambiguity >= 3)
    |||+-- Minute tens                  (blanked at ambiguity >= 4)
    +++-- Whole degrees (2 digits for latitude, 3 for longitude)

Position ambiguity lets a station deliberately reduce the precision it
reveals by replacing trailing minute digits with spaces. Ambiguity stated in
the latitude implicitly applies to the longitude too; the longitude digits
are blanked as well so both fields read the same.
"""

import re
from enum import Enum

from positcodec.coords.common import clamp, split_degrees
from positcodec.coords.types import LATITUDE, LONGITUDE, MAX_AMBIGUITY, UNKNOWN, Axis
from positcodec.diagnostics import Reporter, resolve_reporter

_FRACTION_DIGITS = 2
_DEGREES_PATTERN = re.compile(r"[0-9]+")
_MINUTES_PATTERN = re.compile(r"[0-9]{2}\.[0-9]{2}")


class _Digit(Enum):
    """Minute digits that ambiguity can blank, valued by offset in ``mm.mm``."""

    MINUTE_TENS = 0
    MINUTE_UNITS = 1
    TENTHS = 3
    HUNDREDTHS = 4


_BLANKED_DIGITS: dict[int, frozenset[_Digit]] = {
    0: frozenset(),
    1: frozenset({_Digit.HUNDREDTHS}),
    2: frozenset({_Digit.HUNDREDTHS, _Digit.TENTHS}),
    3: frozenset({_Digit.HUNDREDTHS, _Digit.TENTHS, _Digit.MINUTE_UNITS}),
    4: frozenset(_Digit),
}

_AMBIGUITY_BY_BLANKS = {digits: level for level, digits in _BLANKED_DIGITS.items()}


def blanked_digits(ambiguity: int) -> frozenset[str]:
    """Names of the minute digits blanked at an ambiguity level.

    Levels below 0 act as 0 and levels above ``MAX_AMBIGUITY`` act as the
    maximum.

    Example:
        >>> sorted(blanked_digits(2))
        ['HUNDREDTHS', 'TENTHS']
    """
    return frozenset(digit.name for digit in _BLANKED_DIGITS[_ambiguity_level(ambiguity)])


def _ambiguity_level(ambiguity: int) -> int:
    return min(max(ambiguity, 0), MAX_AMBIGUITY)


def _mask_minutes(minutes: str, ambiguity: int) -> str:
    offsets = {digit.value for digit in _BLANKED_DIGITS[_ambiguity_level(ambiguity)]}
    return "".join(" " if index in offsets else char for index, char in enumerate(minutes))


def _to_str(degrees: float, ambiguity: int, axis: Axis, report: Reporter | None) -> str:
    degrees = clamp(degrees, axis, resolve_reporter(report))
    hemisphere = axis.hemisphere(degrees)
    whole, minutes = split_degrees(abs(degrees), _FRACTION_DIGITS)
    return f"{whole:0{axis.degree_digits}d}{_mask_minutes(minutes, ambiguity)}{hemisphere}"


def latitude_to_str(latitude: float, ambiguity: int = 0, report: Reporter | None = None) -> str:
    """Encode a latitude as ``ddmm.mmH`` for an APRS position report.

    Values outside [-90, 90] are clamped and reported, never rejected.

    Args:
        latitude: Degrees, positive north.
        ambiguity: Number of trailing minute digits to blank (0-4).
        report: Diagnostic sink for clamp warnings. Defaults to logging.

    Returns:
        8-character field.

    Example:
        >>> latitude_to_str(49.0583)
        '4903.50N'
        >>> latitude_to_str(49.0583, ambiguity=2)
        '4903.  N'
    """
    return _to_str(latitude, ambiguity, LATITUDE, report)


def longitude_to_str(longitude: float, ambiguity: int = 0, report: Reporter | None = None) -> str:
    """Encode a longitude as ``dddmm.mmH`` for an APRS position report.

    Blanking follows the latitude's ambiguity level digit for digit.

    Example:
        >>> longitude_to_str(-72.0292)
        '07201.75W'
    """
    return _to_str(longitude, ambiguity, LONGITUDE, report)


def _from_str(field: str, axis: Axis, report: Reporter | None) -> tuple[float, int]:
    if len(field) != axis.decimal_offset + 4:
        return UNKNOWN, 0

    degrees_text = field[: axis.degree_digits]
    minutes = field[axis.degree_digits : -1]
    letter = field[-1]

    if not _DEGREES_PATTERN.fullmatch(degrees_text) or minutes[2] != ".":
        return UNKNOWN, 0
    if letter not in (axis.positive, axis.negative):
        return UNKNOWN, 0

    blanks = frozenset(digit for digit in _Digit if minutes[digit.value] == " ")
    ambiguity = _AMBIGUITY_BY_BLANKS.get(blanks)
    if ambiguity is None:
        return UNKNOWN, 0

    digits = minutes.replace(" ", "0")
    if not _MINUTES_PATTERN.fullmatch(digits):
        return UNKNOWN, 0

    value = int(degrees_text) + float(digits) / 60.0
    if value > axis.limit:
        resolve_reporter(report)(f"{axis.name} not in range of 0 to {axis.limit:.0f}.")

    if letter == axis.negative:
        value = -value
    return value, ambiguity


def latitude_from_str(field: str, report: Reporter | None = None) -> tuple[float, int]:
    """Decode a ``ddmm.mmH`` latitude field.

    Blanked (ambiguous) digits read as zero, so the result is the corner of
    the ambiguity box nearest the equator.

    Args:
        field: 8-character latitude field, possibly with blanked digits.
        report: Diagnostic sink for out-of-range magnitudes.

    Returns:
        Tuple of (signed degrees, ambiguity level), or ``(UNKNOWN, 0)`` when
        the field is malformed.

    Example:
        >>> latitude_from_str("4903.50N")
        (49.05833333333333, 0)
        >>> latitude_from_str("4903.  N")
        (49.05, 2)
    """
    return _from_str(field, LATITUDE, report)


def longitude_from_str(field: str, report: Reporter | None = None) -> tuple[float, int]:
    """Decode a ``dddmm.mmH`` longitude field. See ``latitude_from_str``."""
    return _from_str(field, LONGITUDE, report)
