from services.reservation.domain.entity import Reservation
from services.reservation.domain.factory import ReservationDetails, ReservationFactory
from services.reservation.domain.repository import ReservationRepository
from services.user.domain.value_object import CallerContext


class BookFlightService:
    """フライト予約サービス

    同一内容の予約が既にあっても重複チェックは行わない。
    """

    def __init__(
        self, repository: ReservationRepository, factory: ReservationFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def book(self, caller: CallerContext, details: ReservationDetails) -> Reservation:
        """ログイン中のユーザーとしてフライトを予約する"""
        user = caller.require_user()
        reservation = self._factory.create(user.id, details)
        self._repository.save(reservation)
        return reservation
