from abc import abstractmethod

from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.value_object import ReferenceNumber
from airline.shared.domain import Repository


class ReservationRepository(Repository[Reservation, ReferenceNumber]):
    """フライト予約レポジトリ"""

    @abstractmethod
    def save(self, reservation: Reservation) -> None:
        """永続化する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, reference_number: ReferenceNumber) -> Reservation | None:
        """予約番号で検索"""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[Reservation]:
        """全件を登録順で返す"""
        raise NotImplementedError
