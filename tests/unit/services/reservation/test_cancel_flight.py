import pytest

from services.reservation.applications.cancel_flight import CancelFlightService
from services.reservation.domain.value_object import ReservationId
from services.shared.domain.exception import (
    EntityNotFoundException,
    ForbiddenException,
    InvalidBusinessArgumentException,
)


@pytest.fixture
def service(reservation_repository):
    return CancelFlightService(repository=reservation_repository)


class TestCancelFlight:
    """CancelFlightService のテスト"""

    def test_owner_can_cancel(
        self, service, reservation_repository, alice, caller_for, create_reservation
    ):
        """予約者本人はキャンセルできる"""
        # Arrange
        reservation = create_reservation(user_id="alice-id")
        reservation_repository.save(reservation)

        # Act
        service.cancel(caller_for(alice), reservation.id)

        # Assert
        assert reservation_repository.reservations == {}

    def test_second_cancel_reports_missing_reservation(
        self, service, reservation_repository, alice, caller_for, create_reservation
    ):
        """キャンセル済みの予約を再度キャンセルすると存在しない扱い"""
        reservation = create_reservation(user_id="alice-id")
        reservation_repository.save(reservation)
        service.cancel(caller_for(alice), reservation.id)

        with pytest.raises(
            InvalidBusinessArgumentException, match="This reservation does not exist"
        ):
            service.cancel(caller_for(alice), reservation.id)

    def test_other_user_cannot_cancel(
        self, service, reservation_repository, bob, caller_for, create_reservation
    ):
        """他人の予約はキャンセルできず、予約は残る"""
        reservation = create_reservation(user_id="alice-id")
        reservation_repository.save(reservation)

        with pytest.raises(
            InvalidBusinessArgumentException,
            match="You were not booked for this flight",
        ):
            service.cancel(caller_for(bob), reservation.id)

        assert reservation.id in reservation_repository.reservations

    def test_unknown_caller_is_forbidden(self, service, caller_for):
        with pytest.raises(ForbiddenException):
            service.cancel(caller_for(None), ReservationId(value="reservation-1"))

    def test_concurrent_delete_reports_missing_reservation(
        self, mock_repository, alice, caller_for, create_reservation
    ):
        """削除時点で既に消えていた場合も存在しない扱い"""
        service = CancelFlightService(repository=mock_repository)
        reservation = create_reservation(user_id="alice-id")
        mock_repository.find_by_id.return_value = reservation
        mock_repository.delete.side_effect = EntityNotFoundException("gone")

        with pytest.raises(
            InvalidBusinessArgumentException, match="This reservation does not exist"
        ):
            service.cancel(caller_for(alice), reservation.id)
