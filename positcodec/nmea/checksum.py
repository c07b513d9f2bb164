"""NMEA checksum calculation and validation.

NMEA 0183 sentences end with an XOR checksum of every character between '$'
and '*' (exclusive), written as two uppercase hexadecimal digits:

    $GPWPL,4807.0380,N,01131.0000,E,WPTNME*5C
     ^-------------- checksummed ---------^ ^^
"""


def _split_sentence(sentence: str) -> tuple[str, str] | None:
    """Separate the checksummed payload from the transmitted checksum.

    Returns:
        Tuple of (payload, checksum_hex), or None if the '$' or '*' delimiter
        is missing or fewer than two checksum characters follow '*'.

    Example:
        >>> _split_sentence("$GPGGA,123519*7F")
        ('GPGGA,123519', '7F')
    """
    if not sentence.startswith("$") or "*" not in sentence:
        return None

    end = sentence.index("*")
    payload = sentence[1:end]
    provided = sentence[end + 1 : end + 3]

    if len(provided) != 2:
        return None

    return payload, provided


def _xor(payload: str) -> int:
    result = 0
    for character in payload:
        result ^= ord(character)
    return result


def compute_checksum(payload: str) -> str:
    """Return the checksum of a payload as two uppercase hex digits.

    Args:
        payload: Sentence text between '$' and '*', e.g. "GPWPL,...,WPTNME".
    """
    return f"{_xor(payload):02X}"


def wrap_sentence(payload: str) -> str:
    """Frame a payload as a complete sentence: ``$payload*HH`` plus CRLF."""
    return f"${payload}*{compute_checksum(payload)}\r\n"


def validate_checksum(sentence: str) -> bool:
    """Check that a sentence's transmitted checksum matches its payload.

    Args:
        sentence: Complete sentence including '$', '*' and checksum. Trailing
            whitespace such as CRLF is ignored.

    Returns:
        False if a delimiter is missing, the checksum is truncated or not
        hexadecimal, or it does not match; True otherwise.
    """
    parts = _split_sentence(sentence.strip())
    if parts is None:
        return False

    payload, provided = parts
    try:
        return _xor(payload) == int(provided, 16)
    except ValueError:
        return False
