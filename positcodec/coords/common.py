"""Clamping and degree/minute splitting shared by the coordinate encoders."""

from positcodec.diagnostics import Reporter
from positcodec.coords.types import Axis


def clamp(degrees: float, axis: Axis, report: Reporter) -> float:
    """Clamp a coordinate into the axis domain, reporting any change.

    Args:
        degrees: Signed coordinate in degrees.
        axis: Axis whose limit applies.
        report: Receives a message when the value had to be clamped.

    Returns:
        The coordinate limited to [-axis.limit, axis.limit].

    Example:
        >>> from positcodec.coords.types import LATITUDE
        >>> clamp(95.0, LATITUDE, print)
        Latitude is greater than 90.  Changing to 90.
        90.0
    """
    if degrees < -axis.limit:
        report(f"{axis.name} is less than -{axis.limit:.0f}.  Changing to -{axis.limit:.0f}.")
        return -axis.limit
    if degrees > axis.limit:
        report(f"{axis.name} is greater than {axis.limit:.0f}.  Changing to {axis.limit:.0f}.")
        return axis.limit
    return degrees


def split_degrees(magnitude: float, fraction_digits: int) -> tuple[int, str]:
    """Split a non-negative coordinate into whole degrees and formatted minutes.

    Minutes are formatted zero-padded to ``mm.`` plus *fraction_digits*
    decimals. Formatting can round 59.999... up to "60.00"; that case is
    detected on the formatted text and carried into the degrees, so minutes
    never read 60.

    Args:
        magnitude: Absolute coordinate value in degrees.
        fraction_digits: Number of decimals for the minutes (2 or 4).

    Returns:
        Tuple of (whole degrees, minutes text).

    Example:
        >>> split_degrees(49.0583, 2)
        (49, '03.50')
        >>> split_degrees(10.99998333, 2)  # 10° 59.999'
        (11, '00.00')
    """
    whole = int(magnitude)
    width = fraction_digits + 3
    minutes = f"{(magnitude - whole) * 60.0:0{width}.{fraction_digits}f}"
    if minutes[0] == "6":
        minutes = "0" + minutes[1:]
        whole += 1
    return whole, minutes
