from unittest.mock import MagicMock

import pytest

from services.flight.domain.value_object import OpenSkyFlight


@pytest.fixture
def create_open_sky_flight():
    """OpenSkyFlight を生成する Factory fixture"""

    def _factory(icao24: str = "489789", callsign: str = "LOT1  ", **overrides):
        values = {
            "icao24": icao24,
            "first_seen": 1517227200,
            "est_departure_airport": "EPWA",
            "last_seen": 1517230800,
            "est_arrival_airport": "EGLL",
            "callsign": callsign,
        }
        values.update(overrides)
        return OpenSkyFlight(**values)

    return _factory


@pytest.fixture
def open_sky_json():
    """OpenSky /flights/departure のレスポンスボディ"""
    return """[
        {
            "icao24": "489789",
            "firstSeen": 1517227200,
            "estDepartureAirport": "EPWA",
            "lastSeen": 1517230800,
            "estArrivalAirport": "EGLL",
            "callsign": "LOT1  ",
            "estDepartureAirportHorizDistance": 1321,
            "estDepartureAirportVertDistance": 21,
            "estArrivalAirportHorizDistance": null,
            "estArrivalAirportVertDistance": null,
            "departureAirportCandidatesCount": 1,
            "arrivalAirportCandidatesCount": 0
        },
        {
            "icao24": "48ae01",
            "firstSeen": 1517227500,
            "estDepartureAirport": "EPWA",
            "lastSeen": 1517231000,
            "estArrivalAirport": null,
            "callsign": null,
            "estDepartureAirportHorizDistance": 800,
            "estDepartureAirportVertDistance": 10,
            "estArrivalAirportHorizDistance": null,
            "estArrivalAirportVertDistance": null,
            "departureAirportCandidatesCount": 1,
            "arrivalAirportCandidatesCount": 0,
            "unknownField": "ignored"
        }
    ]"""


@pytest.fixture
def provider():
    """FlightProvider のモックフィクスチャ"""
    return MagicMock()
