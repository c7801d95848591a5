from .reservation_id import ReservationId as ReservationId
