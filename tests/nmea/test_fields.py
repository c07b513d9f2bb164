"""Tests for NMEA field helpers."""

import pytest

from positcodec.nmea.fields import (
    is_sentence_type,
    parse_float_field,
    parse_latitude_fields,
    split_fields,
)

RMC = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


class TestSplitFields:
    """Tests for split_fields function."""

    def test_complete_sentence(self):
        assert split_fields(RMC, 12) == [
            "GPRMC", "123519", "A", "4807.038", "N", "01131.000",
            "E", "022.4", "084.4", "230394", "003.1", "W",
        ]

    def test_too_few_fields(self):
        assert split_fields("$GPRMC,123519,A,4807.038,N*57", 12) is None


class TestIsSentenceType:
    """Tests for is_sentence_type function."""

    def test_known_talker(self):
        assert is_sentence_type("GNGGA", "GGA")

    def test_unknown_talker(self):
        assert not is_sentence_type("XXGGA", "GGA")

    def test_other_type(self):
        assert not is_sentence_type("GPRMC", "GGA")


class TestFieldParsers:
    """Tests for the empty-tolerant field parsers."""

    def test_float(self):
        assert parse_float_field("545.4") == pytest.approx(545.4)

    def test_empty_float(self):
        assert parse_float_field("") is None

    def test_empty_latitude_is_none(self):
        assert parse_latitude_fields("", "") is None
