"""Coordinate value types shared by the field codecs.

Design Decisions:
    1. Sentinel instead of None: ``UNKNOWN`` is a float so that decoder
       results can be passed straight into arithmetic-free pipelines (and back
       into the NMEA encoder) without Optional checks. It lies far outside both
       coordinate domains, so it can never be confused with a real position.

    2. One Axis descriptor per coordinate: latitude and longitude differ only
       in their limit, the number of degree digits, and the hemisphere letters.
       Every codec takes an ``Axis`` rather than duplicating itself per axis.
"""

from dataclasses import dataclass

# "No fix / not available". Not a valid latitude or longitude.
UNKNOWN: float = -999999.0

# Highest defined position ambiguity level (all four minute digits blanked).
MAX_AMBIGUITY = 4


@dataclass(frozen=True)
class Axis:
    """Fixed layout of one coordinate axis.

    Attributes:
        name: Human-readable axis name used in diagnostic messages
            ("Latitude" or "Longitude").

        limit: Largest valid magnitude in degrees. The domain is
            [-limit, +limit].

        degree_digits: Number of zero-padded whole-degree digits in text and
            NMEA fields (2 for latitude, 3 for longitude).

        positive: Hemisphere letter for values >= 0 ("N" or "E").

        negative: Hemisphere letter for values < 0 ("S" or "W").

    Example:
        >>> LATITUDE.decimal_offset
        4
        >>> LONGITUDE.hemisphere(-72.0)
        'W'
    """

    name: str
    limit: float
    degree_digits: int
    positive: str
    negative: str

    @property
    def decimal_offset(self) -> int:
        """Index of the decimal point: degree digits plus two minute digits."""
        return self.degree_digits + 2

    def hemisphere(self, degrees: float) -> str:
        """Return the hemisphere letter for a signed coordinate."""
        return self.negative if degrees < 0 else self.positive


LATITUDE = Axis(name="Latitude", limit=90.0, degree_digits=2, positive="N", negative="S")
LONGITUDE = Axis(name="Longitude", limit=180.0, degree_digits=3, positive="E", negative="W")
