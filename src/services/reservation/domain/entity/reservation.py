from datetime import date

from services.reservation.domain.value_object import ReservationId
from services.shared.domain import Entity
from services.user.domain.value_object import UserId


class Reservation(Entity[ReservationId]):
    """フライト予約

    作成後に変更されることはなく、キャンセル時に削除される。
    出発日と到着日の前後関係は検証しない。
    """

    def __init__(
        self,
        id: ReservationId,
        user_id: UserId,
        departure_date: date,
        arrival_date: date,
        departure_airport: str,
        arrival_airport: str,
        airline: str,
        travel_class: str,
        seat_number: str,
    ) -> None:
        super().__init__(id)

        self._user_id = user_id
        self._departure_date = departure_date
        self._arrival_date = arrival_date
        self._departure_airport = departure_airport
        self._arrival_airport = arrival_airport
        self._airline = airline
        self._travel_class = travel_class
        self._seat_number = seat_number

    @property
    def user_id(self) -> UserId:
        return self._user_id

    @property
    def departure_date(self) -> date:
        return self._departure_date

    @property
    def arrival_date(self) -> date:
        return self._arrival_date

    @property
    def departure_airport(self) -> str:
        return self._departure_airport

    @property
    def arrival_airport(self) -> str:
        return self._arrival_airport

    @property
    def airline(self) -> str:
        return self._airline

    @property
    def travel_class(self) -> str:
        return self._travel_class

    @property
    def seat_number(self) -> str:
        return self._seat_number

    def is_owned_by(self, user_id: UserId) -> bool:
        """指定ユーザーの予約かどうか"""
        return self._user_id == user_id
