"""FastAPI web service exposing the coordinate field codecs.

Start with::

    uvicorn server.main:app --host 0.0.0.0 --port 8000

Every endpoint is a stateless GET. Advisory codec warnings (clamped input,
out-of-range decoded magnitude, unexpected hemisphere letter) never fail a
request; they are returned in the ``warnings`` list of the JSON body.
Malformed query parameters are rejected by FastAPI with 422.
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any

from fastapi import FastAPI, HTTPException, Query

from positcodec import (
    MAX_AMBIGUITY,
    WarningCollector,
    latitude_from_nmea,
    latitude_to_comp_str,
    latitude_to_nmea,
    latitude_to_str,
    longitude_from_nmea,
    longitude_to_comp_str,
    longitude_to_nmea,
    longitude_to_str,
    parse_gga,
    parse_rmc,
)
from positcodec.diagnostics import get_logger
from server.formatters import format_decoded, format_encoded, format_sentence

_LOG_LEVEL = logging.INFO

logger = logging.getLogger(__name__)


class AxisName(str, Enum):
    """Coordinate axis selected by the ``{axis}`` path segment."""

    LATITUDE = "latitude"
    LONGITUDE = "longitude"


_TEXT_ENCODERS: dict[AxisName, Callable[..., str]] = {
    AxisName.LATITUDE: latitude_to_str,
    AxisName.LONGITUDE: longitude_to_str,
}
_COMPRESSED_ENCODERS: dict[AxisName, Callable[..., str]] = {
    AxisName.LATITUDE: latitude_to_comp_str,
    AxisName.LONGITUDE: longitude_to_comp_str,
}
_NMEA_ENCODERS: dict[AxisName, Callable[..., tuple[str, str]]] = {
    AxisName.LATITUDE: latitude_to_nmea,
    AxisName.LONGITUDE: longitude_to_nmea,
}
_NMEA_DECODERS: dict[AxisName, Callable[..., float]] = {
    AxisName.LATITUDE: latitude_from_nmea,
    AxisName.LONGITUDE: longitude_from_nmea,
}


@asynccontextmanager
async def _lifespan(_application: FastAPI) -> AsyncIterator[None]:
    get_logger("positcodec", _LOG_LEVEL)
    get_logger(__name__, _LOG_LEVEL)
    yield


app = FastAPI(title="positcodec", lifespan=_lifespan)


@app.get("/encode/{axis}/text")
def encode_text(
    axis: AxisName,
    degrees: float = Query(allow_inf_nan=False),
    ambiguity: int = Query(0, ge=0, le=MAX_AMBIGUITY),
) -> dict[str, Any]:
    """Encode a coordinate as a human-readable ``ddmm.mmH`` / ``dddmm.mmH`` field."""
    warnings = WarningCollector()
    field = _TEXT_ENCODERS[axis](degrees, ambiguity, report=warnings)
    return format_encoded(field, warnings)


@app.get("/encode/{axis}/compressed")
def encode_compressed(
    axis: AxisName,
    degrees: float = Query(allow_inf_nan=False),
) -> dict[str, Any]:
    """Encode a coordinate as a 4-character Base91 compressed field."""
    warnings = WarningCollector()
    field = _COMPRESSED_ENCODERS[axis](degrees, report=warnings)
    return format_encoded(field, warnings)


@app.get("/encode/{axis}/nmea")
def encode_nmea(
    axis: AxisName,
    degrees: float = Query(allow_inf_nan=False),
) -> dict[str, Any]:
    """Encode a coordinate as NMEA numeric and hemisphere fields."""
    warnings = WarningCollector()
    field, hemisphere = _NMEA_ENCODERS[axis](degrees, report=warnings)
    return format_encoded(field, warnings, hemisphere=hemisphere)


@app.get("/decode/{axis}/nmea")
def decode_nmea(axis: AxisName, field: str, hemisphere: str = "") -> dict[str, Any]:
    """Decode NMEA numeric and hemisphere fields to signed degrees.

    A malformed numeric field yields ``"degrees": null`` rather than an
    error status, mirroring the codec's unknown-position result.
    """
    warnings = WarningCollector()
    degrees = _NMEA_DECODERS[axis](field, hemisphere, report=warnings)
    return format_decoded(degrees, warnings)


@app.get("/sentence")
def decode_sentence(text: str) -> dict[str, Any]:
    """Parse a GGA or RMC sentence.

    Raises:
        HTTPException: 422 if the text is not a well-formed GGA or RMC
            sentence from a supported talker.
    """
    warnings = WarningCollector()
    data = parse_gga(text, report=warnings) or parse_rmc(text, report=warnings)
    if data is None:
        logger.info("Rejected sentence: %r", text)
        raise HTTPException(status_code=422, detail="Not a valid GGA or RMC sentence.")
    return format_sentence(data, warnings)
