"""Tests for the codec HTTP endpoints."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from server.main import app


@pytest.fixture
def client() -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client


def test_encode_latitude_text(client: TestClient) -> None:
    response = client.get("/encode/latitude/text", params={"degrees": 49.0583})
    assert response.status_code == 200
    assert response.json() == {"field": "4903.50N", "warnings": []}


def test_encode_longitude_text_with_ambiguity(client: TestClient) -> None:
    response = client.get("/encode/longitude/text", params={"degrees": -72.0292, "ambiguity": 2})
    assert response.json()["field"] == "07201.  W"


def test_encode_text_rejects_ambiguity_out_of_range(client: TestClient) -> None:
    response = client.get("/encode/latitude/text", params={"degrees": 10.0, "ambiguity": 5})
    assert response.status_code == 422


def test_encode_requires_degrees(client: TestClient) -> None:
    assert client.get("/encode/latitude/text").status_code == 422


def test_unknown_axis_is_rejected(client: TestClient) -> None:
    response = client.get("/encode/altitude/text", params={"degrees": 1.0})
    assert response.status_code == 422


def test_clamp_warning_is_returned(client: TestClient) -> None:
    response = client.get("/encode/latitude/compressed", params={"degrees": 95.0})
    assert response.status_code == 200
    assert response.json() == {
        "field": "!!!!",
        "warnings": ["Latitude is greater than 90.  Changing to 90."],
    }


def test_encode_longitude_compressed(client: TestClient) -> None:
    response = client.get("/encode/longitude/compressed", params={"degrees": -72.75})
    assert response.json()["field"] == "<*e8"


def test_encode_nmea(client: TestClient) -> None:
    response = client.get("/encode/longitude/nmea", params={"degrees": 11.5166667})
    assert response.json() == {"field": "01131.0000", "hemisphere": "E", "warnings": []}


def test_decode_nmea(client: TestClient) -> None:
    response = client.get("/decode/latitude/nmea", params={"field": "4903.5000", "hemisphere": "S"})
    body = response.json()
    assert body["degrees"] == pytest.approx(-49.058333333)
    assert body["warnings"] == []


def test_decode_nmea_malformed_gives_null(client: TestClient) -> None:
    response = client.get("/decode/longitude/nmea", params={"field": "7201.75", "hemisphere": "W"})
    assert response.status_code == 200
    assert response.json() == {"degrees": None, "warnings": []}


def test_decode_nmea_bad_hemisphere_warns(client: TestClient) -> None:
    response = client.get("/decode/latitude/nmea", params={"field": "4903.5000", "hemisphere": "Q"})
    assert response.json()["warnings"] == ["Latitude hemisphere should be N or S."]


def test_sentence_gga(client: TestClient) -> None:
    text = "$GNGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,47.0,M,,*7F"
    body = client.get("/sentence", params={"text": text}).json()
    assert body["type"] == "gga"
    assert body["latitude_degrees"] == pytest.approx(48.1173)
    assert body["valid"] is True


def test_sentence_rmc(client: TestClient) -> None:
    text = "$GPRMC,123519,A,4807.038,N,01131.000,E,022.4,084.4,230394,003.1,W*6A"
    body = client.get("/sentence", params={"text": text}).json()
    assert body["type"] == "rmc"
    assert body["speed_knots"] == pytest.approx(22.4)


def test_sentence_rejected(client: TestClient) -> None:
    response = client.get("/sentence", params={"text": "$GNVTG,054.7,T,034.4,M,005.5,N,010.2,K,A*3B"})
    assert response.status_code == 422
