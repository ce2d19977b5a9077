from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.factory import (
    ManualReservationDetails,
    PackageReservationDetails,
    ReservationFactory,
)
from airline.reservation.domain.repository import ReservationRepository
from airline.reservation.domain.value_object import Coupon
from airline.shared.utils.logger import get_logger

logger = get_logger()


class ReserveFlightService:
    """フライト予約サービス

    Factory と Repository を使用してエンティティの生成・永続化を行う。
    """

    def __init__(
        self, repository: ReservationRepository, factory: ReservationFactory
    ) -> None:
        self._repository = repository
        self._factory = factory

    def quote_manual(self, details: ManualReservationDetails) -> Reservation:
        """クーポン適用前の見積もり（保存しない）"""
        return self._factory.create_manual(details)

    def reserve_manual(
        self, details: ManualReservationDetails, coupon: Coupon | None = None
    ) -> Reservation:
        """手動予約を確定する"""
        reservation = self._factory.create_manual(details)
        if coupon is not None:
            reservation.apply_coupon(coupon)
        self._repository.save(reservation)
        logger.info(
            "Manual reservation confirmed",
            extra={
                "reference_number": str(reservation.id),
                "destination": reservation.destination.value,
                "total_price": str(reservation.total_price.amount),
                "coupon": str(coupon) if coupon else None,
            },
        )
        return reservation

    def quote_package(self, details: PackageReservationDetails) -> Reservation:
        """パッケージ予約の見積もり（保存しない）"""
        return self._factory.create_package(details)

    def reserve_package(self, details: PackageReservationDetails) -> Reservation:
        """パッケージ予約を確定する"""
        reservation = self._factory.create_package(details)
        self._repository.save(reservation)
        logger.info(
            "Package reservation confirmed",
            extra={
                "reference_number": str(reservation.id),
                "package": details["package"],
                "total_price": str(reservation.total_price.amount),
            },
        )
        return reservation
