from abc import abstractmethod
from typing import Optional

from services.reservation.domain.entity import Reservation
from services.reservation.domain.value_object import ReservationId
from services.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReservationId]):
    """フライト予約レポジトリ"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reservation_id: ReservationId) -> Optional[Reservation]:
        """予約IDで検索"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, reservation: Reservation) -> None:
        """削除する

        既に存在しない場合は EntityNotFoundException
        """
        raise NotImplementedError
