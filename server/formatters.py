"""JSON payload builders for codec results."""

from dataclasses import asdict
from typing import Any

from positcodec import UNKNOWN, GGAData, RMCData, WarningCollector

__all__ = ["format_decoded", "format_encoded", "format_sentence"]


def format_encoded(
    field: str,
    warnings: WarningCollector,
    hemisphere: str | None = None,
) -> dict[str, Any]:
    """Payload for an encoded field; ``hemisphere`` only for NMEA fields."""
    payload: dict[str, Any] = {"field": field}
    if hemisphere is not None:
        payload["hemisphere"] = hemisphere
    payload["warnings"] = list(warnings.messages)
    return payload


def format_decoded(degrees: float, warnings: WarningCollector) -> dict[str, Any]:
    """Payload for a decoded coordinate; the unknown sentinel becomes null."""
    return {
        "degrees": None if degrees == UNKNOWN else degrees,
        "warnings": list(warnings.messages),
    }


def format_sentence(data: GGAData | RMCData, warnings: WarningCollector) -> dict[str, Any]:
    """Payload for a parsed sentence, tagged with its sentence type."""
    sentence_type = "gga" if isinstance(data, GGAData) else "rmc"
    return {"type": sentence_type, **asdict(data), "warnings": list(warnings.messages)}
