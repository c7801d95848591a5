from __future__ import annotations

from dataclasses import asdict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from services.flight.domain.value_object import Flight


class FlightData(BaseModel):
    """フライトのレスポンスモデル（OpenSky の項目 + capacity）"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    icao24: str | None
    first_seen: int | None
    est_departure_airport: str | None
    last_seen: int | None
    est_arrival_airport: str | None
    callsign: str | None
    est_departure_airport_horiz_distance: int | None
    est_departure_airport_vert_distance: int | None
    est_arrival_airport_horiz_distance: int | None
    est_arrival_airport_vert_distance: int | None
    departure_airport_candidates_count: int | None
    arrival_airport_candidates_count: int | None
    capacity: int


def to_response(flights: list[Flight]) -> list[dict]:
    """Flight の一覧をレスポンス形式に変換する"""
    return [
        FlightData.model_validate(asdict(flight)).model_dump(by_alias=True)
        for flight in flights
    ]
