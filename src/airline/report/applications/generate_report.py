import time
from collections.abc import Callable, Sequence
from decimal import Decimal
from typing import Any

from airline.report.domain.algorithm import (
    binary_search,
    bubble_sort,
    linear_search,
    merge_sort,
)
from airline.report.domain.enum import SearchAlgorithm, SortAlgorithm
from airline.report.domain.value_object import ReservationSummary, TimedResult
from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.repository import ReservationRepository
from airline.shared.utils.logger import get_logger

logger = get_logger()

Sorter = Callable[[Sequence[Reservation], Callable[[Reservation], Any]], list[Reservation]]
Searcher = Callable[[Sequence[Reservation], Any, Callable[[Reservation], Any]], int | None]

_SORTERS: dict[SortAlgorithm, Sorter] = {
    SortAlgorithm.BUBBLE: bubble_sort,
    SortAlgorithm.MERGE: merge_sort,
}

_SEARCHERS: dict[SearchAlgorithm, Searcher] = {
    SearchAlgorithm.LINEAR: linear_search,
    SearchAlgorithm.BINARY: binary_search,
}


def _price(reservation: Reservation) -> Decimal:
    return reservation.total_price.amount


def _reference(reservation: Reservation) -> str:
    return str(reservation.id)


class ReportService:
    """予約レポートサービス

    集計と、価格順ソート・予約番号検索を行う。
    ソート・検索は所要時間を計測して TimedResult で返す。
    """

    def __init__(self, repository: ReservationRepository) -> None:
        self._repository = repository

    def list_reservations(self) -> list[Reservation]:
        """登録順の全予約"""
        return self._repository.find_all()

    def summarize(self) -> ReservationSummary:
        return ReservationSummary.from_reservations(self._repository.find_all())

    def sort_by_price(self, algorithm: SortAlgorithm) -> TimedResult[list[Reservation]]:
        """合計金額の昇順に並べ替える（保存済みの順序は変えない）"""
        reservations = self._repository.find_all()
        sort = _SORTERS[algorithm]

        started = time.perf_counter()
        result = sort(reservations, _price)
        elapsed = time.perf_counter() - started

        logger.info(
            "Reservations sorted by price",
            extra={
                "algorithm": algorithm.value,
                "count": len(result),
                "elapsed_seconds": elapsed,
            },
        )
        return TimedResult(value=result, elapsed_seconds=elapsed)

    def search_by_reference(
        self, reference: str, algorithm: SearchAlgorithm
    ) -> TimedResult[Reservation | None]:
        """予約番号で検索する

        二分探索の場合は予約番号順に並べたコピーを対象にする。
        並べ替えの時間は計測に含めない。
        """
        target = reference.strip().upper()
        reservations = self._repository.find_all()
        if algorithm is SearchAlgorithm.BINARY:
            reservations = merge_sort(reservations, _reference)
        search = _SEARCHERS[algorithm]

        started = time.perf_counter()
        index = search(reservations, target, _reference)
        elapsed = time.perf_counter() - started

        found = None if index is None else reservations[index]
        logger.info(
            "Reservation searched by reference",
            extra={
                "algorithm": algorithm.value,
                "reference_number": target,
                "found": found is not None,
                "elapsed_seconds": elapsed,
            },
        )
        return TimedResult(value=found, elapsed_seconds=elapsed)
