from airline.report.applications.generate_report import ReportService
from airline.report.domain.enum import SearchAlgorithm, SortAlgorithm
from airline.report.handlers.response_models import render_summary, to_response
from airline.reservation.domain.entity import Reservation
from airline.reservation.handlers.response_models import render_boarding_pass
from airline.reservation.handlers.response_models import (
    to_response as to_boarding_pass,
)
from airline.shared.utils.console import Console

BACK = 6

MENU = (
    "\n1. Sort reservations by price (Bubble Sort)"
    "\n2. Sort reservations by price (Merge Sort)"
    "\n3. Search reservation by reference number (Linear Search)"
    "\n4. Search reservation by reference number (Binary Search)"
    "\n5. View all reservations"
    f"\n{BACK}. Back to main menu"
    "\nChoose an option"
)

_SORTS = {1: SortAlgorithm.BUBBLE, 2: SortAlgorithm.MERGE}
_SEARCHES = {3: SearchAlgorithm.LINEAR, 4: SearchAlgorithm.BINARY}


def handle_report(console: Console, service: ReportService) -> None:
    """レポート画面

    集計を表示した後、「戻る」が選ばれるまでソート・検索メニューを繰り返す。
    """
    while True:
        console.show(render_summary(to_response(service.summarize())))
        choice = console.ask_int(
            MENU, 1, BACK, f"Invalid option. Please choose 1-{BACK} only"
        )
        if choice == BACK:
            return
        if choice in _SORTS:
            _sort(console, service, _SORTS[choice])
        elif choice in _SEARCHES:
            _search(console, service, _SEARCHES[choice])
        else:
            _view_all(console, service)


def _sort(console: Console, service: ReportService, algorithm: SortAlgorithm) -> None:
    result = service.sort_by_price(algorithm)
    if not result.value:
        console.show("\nNo reservations to sort.")
        return

    console.show(f"\nReservations sorted by price ({algorithm.value}):")
    for reservation in result.value:
        console.show(render_line(reservation))
    console.show(
        f"\n{algorithm.value} completed in {result.elapsed_seconds:.6f} seconds."
    )


def _search(
    console: Console, service: ReportService, algorithm: SearchAlgorithm
) -> None:
    if not service.list_reservations():
        console.show("\nNo reservations to search.")
        return

    reference = console.ask("\nEnter reference number to search")
    result = service.search_by_reference(reference, algorithm)
    if result.value is None:
        console.show(f"\nReservation with reference number {reference} not found.")
    else:
        console.show("\nReservation found:")
        console.show(render_boarding_pass(to_boarding_pass(result.value)))
    console.show(
        f"\n{algorithm.value} completed in {result.elapsed_seconds:.6f} seconds."
    )


def _view_all(console: Console, service: ReportService) -> None:
    reservations = service.list_reservations()
    if not reservations:
        console.show("\nNo reservations to display.")
        return

    console.show(f"\nAll reservations ({len(reservations)}):")
    for reservation in reservations:
        console.show(render_boarding_pass(to_boarding_pass(reservation)))


def render_line(reservation: Reservation) -> str:
    """一覧表示用の1行"""
    return (
        f"  Ref: {reservation.id}, Dest: {reservation.destination.value}, "
        f"Passengers: {reservation.num_passengers}, "
        f"Price: {reservation.total_price.format()}"
    )
