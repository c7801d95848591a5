from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from services.reservation.domain.factory import ReservationDetails


class FlightRequest(BaseModel):
    """フライト予約リクエストスキーマ"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "departureDate": "2025-01-01",
                    "arrivalDate": "2025-01-01",
                    "departureAirport": "WAW",
                    "arrivalAirport": "LHR",
                    "airline": "LO",
                    "travelClass": "Y",
                    "seatNumber": "12A",
                }
            ]
        },
    )

    departure_date: date = Field(..., description="出発日（ISO 8601形式）")
    arrival_date: date = Field(..., description="到着日（ISO 8601形式）")
    departure_airport: str = Field(..., min_length=1, description="出発空港コード")
    arrival_airport: str = Field(..., min_length=1, description="到着空港コード")
    airline: str = Field(..., min_length=1, description="航空会社")
    travel_class: str = Field(..., min_length=1, description="搭乗クラス")
    seat_number: str = Field(..., min_length=1, description="座席番号")


class CancelRequest(BaseModel):
    """フライト予約キャンセルリクエストスキーマ"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    reservation_id: str = Field(..., min_length=1)


def to_reservation_details(request: FlightRequest) -> ReservationDetails:
    """リクエストボディから ReservationDetails を構築する"""
    return {
        "departure_date": request.departure_date,
        "arrival_date": request.arrival_date,
        "departure_airport": request.departure_airport,
        "arrival_airport": request.arrival_airport,
        "airline": request.airline,
        "travel_class": request.travel_class,
        "seat_number": request.seat_number,
    }
