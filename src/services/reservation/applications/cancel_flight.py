from services.reservation.domain.entity import Reservation
from services.reservation.domain.repository import ReservationRepository
from services.reservation.domain.value_object import ReservationId
from services.shared.domain.exception import (
    EntityNotFoundException,
    InvalidBusinessArgumentException,
)
from services.user.domain.value_object import CallerContext


class CancelFlightService:
    """フライト予約キャンセルサービス

    予約したユーザー本人のみキャンセルできる。
    """

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def cancel(
        self, caller: CallerContext, reservation_id: ReservationId
    ) -> Reservation:
        """フライト予約をキャンセル（削除）する"""
        user = caller.require_user()

        reservation = self._repository.find_by_id(reservation_id)
        if reservation is None:
            raise InvalidBusinessArgumentException("This reservation does not exist")
        if not reservation.is_owned_by(user.id):
            raise InvalidBusinessArgumentException(
                "You were not booked for this flight"
            )

        try:
            self._repository.delete(reservation)
        except EntityNotFoundException as e:
            # 同時キャンセルで先に削除された
            raise InvalidBusinessArgumentException(
                "This reservation does not exist"
            ) from e
        return reservation
