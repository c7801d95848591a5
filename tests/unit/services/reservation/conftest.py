from datetime import date

import pytest

from services.reservation.domain.entity import Reservation
from services.reservation.domain.value_object import ReservationId
from services.user.domain.entity import User
from services.user.domain.value_object import CallerContext, PasswordHash, UserId


@pytest.fixture
def alice():
    return User(
        id=UserId(value="alice-id"),
        first_name="Alice",
        last_name="Smith",
        email="alice@x.io",
        password_hash=PasswordHash("hashed"),
    )


@pytest.fixture
def bob():
    return User(
        id=UserId(value="bob-id"),
        first_name="Bob",
        last_name="Jones",
        email="bob@x.io",
        password_hash=PasswordHash("hashed"),
    )


@pytest.fixture
def caller_for():
    """ユーザーから CallerContext を生成する Factory fixture"""

    def _factory(user: User | None, email: str = "alice@x.io") -> CallerContext:
        return CallerContext(email=user.email if user else email, user=user)

    return _factory


@pytest.fixture
def reservation_details():
    """ReservationDetails を生成する Factory fixture"""

    def _factory(**overrides):
        details = {
            "departure_date": date(2025, 1, 1),
            "arrival_date": date(2025, 1, 1),
            "departure_airport": "WAW",
            "arrival_airport": "LHR",
            "airline": "LO",
            "travel_class": "Y",
            "seat_number": "12A",
        }
        details.update(overrides)
        return details

    return _factory


@pytest.fixture
def create_reservation(reservation_details):
    """Reservation を生成する Factory fixture"""

    def _factory(
        reservation_id: str = "reservation-1", user_id: str = "alice-id", **overrides
    ) -> Reservation:
        return Reservation(
            id=ReservationId(value=reservation_id),
            user_id=UserId(value=user_id),
            **reservation_details(**overrides),
        )

    return _factory
