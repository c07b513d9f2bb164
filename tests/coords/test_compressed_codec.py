"""Tests for Base91 compressed position fields."""

import pytest

from positcodec import (
    UNKNOWN,
    WarningCollector,
    latitude_from_comp_str,
    latitude_to_comp_str,
    longitude_from_comp_str,
    longitude_to_comp_str,
)

_FIRST = ord("!")
_LAST = ord("{")


def _base91_value(field: str) -> int:
    value = 0
    for symbol in field:
        value = value * 91 + ord(symbol) - 33
    return value


class TestLatitudeToCompStr:
    """Tests for latitude_to_comp_str function."""

    def test_reference_value(self):
        # 49°30'N from the APRS 1.0.1 compressed position example.
        assert latitude_to_comp_str(49.5) == "5L!!"

    def test_north_pole_is_zero(self):
        assert latitude_to_comp_str(90.0) == "!!!!"

    def test_south_pole_is_top_of_scale(self):
        field = latitude_to_comp_str(-90.0)
        assert field == "{{!!"
        assert _base91_value(field) == 68566680
        assert _base91_value(field) == pytest.approx(91**4 - 1, rel=1e-3)

    def test_equator(self):
        assert _base91_value(latitude_to_comp_str(0.0)) == 380926 * 90

    def test_deterministic(self):
        assert latitude_to_comp_str(-33.86785) == latitude_to_comp_str(-33.86785)

    def test_output_is_printable(self):
        for tenth in range(-900, 901, 7):
            field = latitude_to_comp_str(tenth / 10)
            assert len(field) == 4
            assert all(_FIRST <= ord(symbol) <= _LAST for symbol in field)

    def test_clamps_with_warning(self):
        warnings = WarningCollector()
        assert latitude_to_comp_str(-91.0, report=warnings) == "{{!!"
        assert warnings.messages == ["Latitude is less than -90.  Changing to -90."]


class TestLongitudeToCompStr:
    """Tests for longitude_to_comp_str function."""

    def test_reference_value(self):
        # 72°45'W from the APRS 1.0.1 compressed position example. n is
        # 20427156.75, which the APRS document truncates to "<*e7"; rounding
        # gives "<*e8".
        assert longitude_to_comp_str(-72.75) == "<*e8"

    def test_extremes(self):
        assert longitude_to_comp_str(-180.0) == "!!!!"
        assert longitude_to_comp_str(180.0) == "{{!!"

    def test_prime_meridian(self):
        assert _base91_value(longitude_to_comp_str(0.0)) == 190463 * 180

    def test_clamps_with_warning(self):
        warnings = WarningCollector()
        assert longitude_to_comp_str(181.0, report=warnings) == "{{!!"
        assert warnings.messages == ["Longitude is greater than 180.  Changing to 180."]


class TestFromCompStr:
    """Tests for the compressed field decoders."""

    def test_latitude(self):
        assert latitude_from_comp_str("5L!!") == pytest.approx(49.5)

    def test_longitude(self):
        assert longitude_from_comp_str("<*e8") == pytest.approx(-72.75, abs=1e-5)

    @pytest.mark.parametrize("latitude", [-90.0, -12.345678, 0.0, 33.3, 90.0])
    def test_latitude_round_trip(self, latitude):
        decoded = latitude_from_comp_str(latitude_to_comp_str(latitude))
        assert decoded == pytest.approx(latitude, abs=1.0 / 380926)

    @pytest.mark.parametrize("longitude", [-180.0, -72.75, -0.000001, 0.0, 11.5166667, 180.0])
    def test_longitude_round_trip(self, longitude):
        decoded = longitude_from_comp_str(longitude_to_comp_str(longitude))
        assert decoded == pytest.approx(longitude, abs=1.0 / 190463)

    @pytest.mark.parametrize("field", ["", "5L!", "5L!!!", "5L! ", "5L!|"])
    def test_malformed_returns_unknown(self, field):
        assert latitude_from_comp_str(field) == UNKNOWN
        assert longitude_from_comp_str(field) == UNKNOWN
