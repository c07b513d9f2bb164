"""Tests for NMEA checksum calculation and validation."""

from positcodec.nmea import compute_checksum, validate_checksum, wrap_sentence

GGA_VALID = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
RMC_VALID = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"


class TestValidateChecksum:
    """Tests for validate_checksum function."""

    def test_valid_gga_checksum(self):
        assert validate_checksum(GGA_VALID) is True

    def test_valid_rmc_checksum(self):
        assert validate_checksum(RMC_VALID) is True

    def test_valid_checksum_with_newline(self):
        assert validate_checksum(GGA_VALID + "\r\n") is True

    def test_invalid_checksum(self):
        assert validate_checksum(GGA_VALID[:-2] + "FF") is False

    def test_non_hex_checksum(self):
        assert validate_checksum(GGA_VALID[:-2] + "ZZ") is False

    def test_missing_dollar_sign(self):
        assert validate_checksum(GGA_VALID[1:]) is False

    def test_missing_asterisk(self):
        assert validate_checksum(GGA_VALID.replace("*", "")) is False

    def test_empty_string(self):
        assert validate_checksum("") is False

    def test_truncated_checksum(self):
        assert validate_checksum(GGA_VALID[:-1]) is False


class TestComputeChecksum:
    """Tests for compute_checksum and wrap_sentence."""

    def test_known_payload(self):
        assert compute_checksum("GPWPL,4807.038,N,01131.000,E,WPTNME") == "5C"

    def test_two_uppercase_hex_digits(self):
        assert compute_checksum("GPRMC,235947,V,,,,,,,010125,,") == "38"
        assert compute_checksum("") == "00"

    def test_wrap_sentence(self):
        sentence = wrap_sentence("GPWPL,4807.038,N,01131.000,E,WPTNME")
        assert sentence == "$GPWPL,4807.038,N,01131.000,E,WPTNME*5C\r\n"
        assert validate_checksum(sentence) is True
