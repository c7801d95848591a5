from datetime import date
from typing import TypedDict

from services.reservation.domain.entity import Reservation
from services.reservation.domain.value_object import ReservationId
from services.user.domain.value_object import UserId


class ReservationDetails(TypedDict):
    """フライト予約の入力データ構造"""

    departure_date: date
    arrival_date: date
    departure_airport: str
    arrival_airport: str
    airline: str
    travel_class: str
    seat_number: str


class ReservationFactory:
    """フライト予約エンティティのファクトリ"""

    def create(self, user_id: UserId, details: ReservationDetails) -> Reservation:
        """新規予約エンティティを生成する

        Args:
            user_id: 予約するユーザーのID
            details: フライト情報

        Returns:
            Reservation: 生成された予約エンティティ
        """
        return Reservation(
            id=ReservationId.generate(),
            user_id=user_id,
            departure_date=details["departure_date"],
            arrival_date=details["arrival_date"],
            departure_airport=details["departure_airport"],
            arrival_airport=details["arrival_airport"],
            airline=details["airline"],
            travel_class=details["travel_class"],
            seat_number=details["seat_number"],
        )
