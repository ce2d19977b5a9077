import argparse
from collections.abc import Sequence

from airline.report.applications.generate_report import ReportService
from airline.report.handlers.report import handle_report
from airline.report.handlers.response_models import render_summary
from airline.report.handlers.response_models import to_response as to_summary
from airline.reservation.applications.reserve_flight import ReserveFlightService
from airline.reservation.domain.factory import ReservationFactory
from airline.reservation.domain.repository import ReservationRepository
from airline.reservation.domain.value_object import ReferenceNumber
from airline.reservation.handlers.coupons import handle_coupons
from airline.reservation.handlers.reserve import (
    handle_manual_reservation,
    handle_package_reservation,
)
from airline.reservation.handlers.response_models import (
    AIRLINE_NAME,
    render_boarding_pass,
)
from airline.reservation.handlers.response_models import (
    to_response as to_boarding_pass,
)
from airline.reservation.infrastructure.file_reservation_repository import (
    FileReservationRepository,
)
from airline.shared.domain.exception import (
    DomainException,
    ResourceNotFoundException,
)
from airline.shared.utils.console import Console
from airline.shared.utils.logger import get_logger

logger = get_logger()

EXIT = 5

MAIN_MENU = (
    f"\n========== {' '.join(AIRLINE_NAME)} ==========\n"
    "\n1. Travel packages"
    "\n2. Manual reservation"
    "\n3. Coupons"
    "\n4. Report"
    f"\n{EXIT}. Exit"
    "\nChoose an option"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="airline",
        description="Flight reservation console for a single operator.",
    )
    parser.add_argument(
        "--file",
        help="reservation data file (default: $RESERVATIONS_FILE or reservations.txt)",
    )
    subparsers = parser.add_subparsers(dest="command")
    subparsers.add_parser("menu", help="interactive main menu (default)")
    subparsers.add_parser("report", help="print the reservation summary and exit")
    show = subparsers.add_parser("show", help="print the boarding pass of a reservation")
    show.add_argument("reference", help="reference number, e.g. RB1A2B3C")
    return parser


def main(argv: Sequence[str] | None = None, console: Console | None = None) -> int:
    """エントリポイント。終了コードを返す"""
    args = build_parser().parse_args(argv)
    console = console or Console()
    repository = FileReservationRepository(args.file)

    try:
        if args.command == "report":
            summary = ReportService(repository).summarize()
            console.show(render_summary(to_summary(summary)))
        elif args.command == "show":
            show_reservation(console, repository, args.reference)
        else:
            run_menu(console, repository)
    except (DomainException, ValueError) as e:
        logger.exception("Command failed", extra={"command": args.command or "menu"})
        console.error(str(e))
        return 1
    return 0


def show_reservation(
    console: Console, repository: ReservationRepository, reference: str
) -> None:
    """予約番号を指定して搭乗券を表示する"""
    reference_number = ReferenceNumber(value=reference)
    reservation = repository.find_by_id(reference_number)
    if reservation is None:
        raise ResourceNotFoundException(f"Reservation not found: {reference_number}")
    console.show(render_boarding_pass(to_boarding_pass(reservation)))


def run_menu(console: Console, repository: ReservationRepository) -> None:
    """メインメニュー

    Exit を選ぶか、入力が終了（EOF / Ctrl-C）するまで繰り返す。
    各画面で発生したドメイン例外はエラー表示してメニューに戻る。
    """
    factory = ReservationFactory()
    reserve_service = ReserveFlightService(repository=repository, factory=factory)
    report_service = ReportService(repository)

    actions = {
        1: lambda: handle_package_reservation(
            console, reserve_service, factory.composition
        ),
        2: lambda: handle_manual_reservation(console, reserve_service),
        3: lambda: handle_coupons(console),
        4: lambda: handle_report(console, report_service),
    }

    try:
        while True:
            choice = console.ask_int(
                MAIN_MENU, 1, EXIT, f"Invalid option. Please choose 1-{EXIT} only"
            )
            if choice == EXIT:
                break
            try:
                actions[choice]()
            except DomainException as e:
                logger.exception("Menu action failed", extra={"option": choice})
                console.error(str(e))
    except (EOFError, KeyboardInterrupt):
        logger.info("Input closed, leaving the main menu")

    console.show("\nThank you for choosing us. Goodbye!")
