"""Dataclasses for parsed NMEA sentences.

Design Decisions:
    1. Optional fields (float | None): NMEA fields may be empty. None keeps
       "no data received" apart from "measured zero". Coordinates that the
       field decoder rejects as malformed also come back as None.

    2. Separate valid flag: ``valid`` is navigation validity, not parse
       validity. A parser returns None for a sentence it cannot read; a parsed
       sentence may still report that the receiver has no fix.
"""

from dataclasses import dataclass


@dataclass
class GGAData:
    """Parsed GGA (Global Positioning System Fix Data) sentence.

    Attributes:
        utc_time: UTC time as HHMMSS.ss, or None if empty.

        latitude_degrees: Decimal degrees, positive north, or None.

        longitude_degrees: Decimal degrees, positive east, or None.

        fix_quality: 0 = no fix, 1 = GPS, 2 = DGPS, 4 = RTK fixed,
            5 = RTK float, 6 = dead reckoning. Empty reads as 0.

        num_satellites: Satellites used in the solution, or None.

        horizontal_dilution_of_precision: HDOP, or None.

        altitude_meters: Altitude above mean sea level, or None.

        geoid_height_meters: Geoid separation above the WGS84 ellipsoid,
            or None.

        valid: True only if fix_quality > 0.
    """

    utc_time: str | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    fix_quality: int
    num_satellites: int | None
    horizontal_dilution_of_precision: float | None
    altitude_meters: float | None
    geoid_height_meters: float | None
    valid: bool


@dataclass
class RMCData:
    """Parsed RMC (Recommended Minimum Specific GNSS Data) sentence.

    Attributes:
        utc_time: UTC time as HHMMSS(.ss), or None if empty.

        status: "A" (active) or "V" (void), or None if empty.

        latitude_degrees: Decimal degrees, positive north, or None.

        longitude_degrees: Decimal degrees, positive east, or None.

        speed_knots: Speed over ground in knots, or None.

        course_degrees: Course over ground relative to true north, or None.

        date: UTC date as DDMMYY, or None.

        valid: True only if status is "A". A void sentence should be
            discarded rather than used for position.
    """

    utc_time: str | None
    status: str | None
    latitude_degrees: float | None
    longitude_degrees: float | None
    speed_knots: float | None
    course_degrees: float | None
    date: str | None
    valid: bool
