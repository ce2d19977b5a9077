from collections.abc import Collection

from airline.reservation.applications.reserve_flight import ReserveFlightService
from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.enum import DepartureTime, Destination, TravelPackage
from airline.reservation.domain.factory import (
    ManualReservationDetails,
    PackageReservationDetails,
    PassengerDetails,
    ReservationFactory,
)
from airline.reservation.domain.value_object import (
    Coupon,
    PackageComposition,
    Passenger,
    SeatNumber,
)
from airline.reservation.handlers.request_models import (
    ManualReservationRequest,
    PackageReservationRequest,
    PassengerRequest,
)
from airline.reservation.handlers.response_models import (
    AIRCRAFT,
    FLIGHT_NUMBER,
    render_boarding_pass,
    to_response,
)
from airline.shared.utils.console import Console
from airline.shared.utils.logger import get_logger

logger = get_logger()

SECTION_RULE = "_" * 52
MAX_TICKETS = Reservation.MAX_PASSENGERS


def handle_manual_reservation(
    console: Console, service: ReserveFlightService
) -> Reservation | None:
    """手動予約の対話フロー

    就航先 -> 枚数 -> 乗客 -> 出発時刻 -> クーポン -> 購入確認 の順に入力させる。
    購入を確認しなかった場合は None を返す。
    """
    console.show("\n========== M A N U A L   R E S E R V A T I O N ==========")
    destination = _ask_destination(console)
    tickets = console.ask_int(
        f"Enter number of tickets (maximum {MAX_TICKETS})",
        1,
        MAX_TICKETS,
        f"Invalid number of tickets chosen (1-{MAX_TICKETS} only)",
    )

    passengers: list[PassengerRequest] = []
    for number in range(1, tickets + 1):
        passengers.append(
            _ask_passenger(console, number, {p.seat for p in passengers})
        )

    departure_time = _ask_departure_time(console)

    request = ManualReservationRequest.model_validate(
        {
            "destination": destination,
            "departure_time": departure_time.option,
            "passengers": passengers,
        }
    )
    details = _to_manual_details(request)

    quote = service.quote_manual(details)
    console.show(f"\nTotal amount is {quote.total_price.format()}")
    coupon = _ask_coupon(console)
    if coupon is not None:
        quote.apply_coupon(coupon)

    if not console.confirm(
        "\nYou have completed your information and details\n"
        f"Total amount : {quote.total_price.format()}\nCONFIRM PURCHASE?"
    ):
        logger.info("Manual reservation abandoned before purchase")
        console.show("\nReservation cancelled.")
        return None

    reservation = service.reserve_manual(details, coupon)
    _show_confirmation(console, reservation)
    return reservation


def handle_package_reservation(
    console: Console,
    service: ReserveFlightService,
    composition: PackageComposition | None = None,
) -> Reservation | None:
    """パッケージ予約の対話フロー

    M を選んだ場合、または購入を確認しなかった場合は None を返す。
    """
    composition = composition or PackageComposition()
    console.show(_render_packages(composition))

    choices: dict[str, TravelPackage | None] = {p.value: p for p in TravelPackage}
    choices["M"] = None
    package = console.ask_choice(
        "Choose package (A / B / C). If NOT interested (M = Main Menu)",
        choices,
        "Choose (A / B / C) for the packages OR (M = Main Menu) only",
    )
    if package is None:
        return None

    passengers: list[PassengerRequest] = []
    while len(passengers) < composition.size:
        number = len(passengers) + 1
        request = _ask_passenger(console, number, {p.seat for p in passengers})
        admitted = [_to_passenger(p) for p in passengers]
        candidate = _to_passenger(request)
        if not composition.admits(admitted, candidate):
            adults = sum(1 for p in admitted if p.is_adult)
            console.show(
                f"\n{SECTION_RULE}\n"
                f"This package is for {composition.adults} adults and "
                f"{composition.kids} kids only. "
                f"Current adults: {adults}, kids: {len(admitted) - adults}\n"
                f"{_ordinal(number)} passenger age ({candidate.age}) "
                f"violates package rules.\n{SECTION_RULE}"
            )
            continue
        passengers.append(request)

    departure_time = _ask_departure_time(console)

    request = PackageReservationRequest.model_validate(
        {
            "package": package.value,
            "departure_time": departure_time.option,
            "passengers": passengers,
        }
    )
    details = _to_package_details(request)

    quote = service.quote_package(details)
    if not console.confirm(
        "\nYou have completed your information and details\n"
        f"Total amount : {quote.total_price.format()}\nCONFIRM PURCHASE?"
    ):
        logger.info("Package reservation abandoned before purchase")
        console.show("\nReservation cancelled.")
        return None

    reservation = service.reserve_package(details)
    _show_confirmation(console, reservation)
    return reservation


def _ask_destination(console: Console) -> Destination:
    options = "\n".join(f"  {d.menu_number}. {d.value.title()}" for d in Destination)
    number = console.ask_int(
        f"\nYou will depart at KUALA LUMPUR\n\nAvailable DESTINATION today :\n"
        f"{options}\n{SECTION_RULE}\nChoose your destination",
        1,
        len(Destination),
        f"Invalid number chosen (Choose 1-{len(Destination)} only)",
    )
    return Destination.from_menu_number(number)


def _ask_passenger(
    console: Console, number: int, taken_seats: Collection[int]
) -> PassengerRequest:
    """乗客1名分の名前・年齢・座席を入力させる"""
    ordinal = _ordinal(number)
    name = console.ask_until(
        f"\nEnter {ordinal} passenger name", Passenger.validate_name
    )
    age = console.ask_until(
        f"\nEnter {ordinal} passenger age",
        _parse_age,
        "Invalid age. Please enter a valid non-negative number.",
    )

    console.show(render_seat_map(taken_seats))

    def _parse_seat(raw: str) -> int:
        try:
            seat = SeatNumber(int(raw))
        except ValueError:
            raise ValueError(
                f"Available seats for this flight is "
                f"{SeatNumber.FIRST}-{SeatNumber.LAST} only\nChoose available seat"
            ) from None
        if seat.value in taken_seats:
            raise ValueError(f"Seat {seat} has been taken\nChoose another seat")
        return seat.value

    seat = console.ask_until(
        f"Choose seat ({SeatNumber.FIRST}-{SeatNumber.LAST})", _parse_seat
    )
    return PassengerRequest(name=name, age=age, seat=seat)


def _ask_departure_time(console: Console) -> DepartureTime:
    options = "\n".join(f" {t.option} - {t.value}" for t in DepartureTime)
    return console.ask_choice(
        f"\nYour flight is {AIRCRAFT} ({FLIGHT_NUMBER})\n\n{options}\n"
        "Choose departure time",
        {t.option: t for t in DepartureTime},
        "Choose (A / B / C / D) only",
    )


def _ask_coupon(console: Console) -> Coupon | None:
    """クーポンを1回だけ適用できる。無効なコードは再入力かスキップを選ばせる"""
    if not console.confirm("Do you want to apply any coupons? (Once)"):
        return None

    while True:
        code = console.ask("\nEnter your coupon")
        try:
            coupon = Coupon(code)
        except ValueError:
            retry = console.ask_int(
                "\nInvalid coupon\n1. Apply coupon again\n2. Continue",
                1,
                2,
                "Invalid option chosen "
                "(1-Enter coupon again   2-Continue without coupon)",
            )
            if retry == 2:
                return None
            continue

        console.show(f"\nSuccess, {coupon.percent_off}% off applied!")
        return coupon


def _show_confirmation(console: Console, reservation: Reservation) -> None:
    console.show("\n========== P A Y M E N T   S U C C E S S F U L ==========\n")
    console.show(render_boarding_pass(to_response(reservation)))


def _parse_age(raw: str) -> int:
    age = int(raw)
    if age < 0:
        raise ValueError("Age cannot be negative")
    return age


def _to_passenger(request: PassengerRequest) -> Passenger:
    return Passenger(name=request.name, age=request.age, seat=SeatNumber(request.seat))


def _to_passenger_details(request: PassengerRequest) -> PassengerDetails:
    return {"name": request.name, "age": request.age, "seat": request.seat}


def _to_manual_details(request: ManualReservationRequest) -> ManualReservationDetails:
    """リクエストから ManualReservationDetails を構築する"""
    return {
        "destination": request.destination.value,
        "departure_time": request.departure_time,
        "passengers": [_to_passenger_details(p) for p in request.passengers],
    }


def _to_package_details(
    request: PackageReservationRequest,
) -> PackageReservationDetails:
    """リクエストから PackageReservationDetails を構築する"""
    return {
        "package": request.package,
        "departure_time": request.departure_time,
        "passengers": [_to_passenger_details(p) for p in request.passengers],
    }


def _render_packages(composition: PackageComposition) -> str:
    lines = ["\n========== P A C K A G E S ==========", SECTION_RULE]
    for package in TravelPackage:
        list_price = ReservationFactory.list_price(package, composition)
        price = list_price.subtract(list_price.multiply(package.discount_rate))
        lines += [
            "",
            f" {package.value} : KUALA LUMPUR to {package.destination.value}",
            f"     {composition.adults} Adults {composition.kids} Kids"
            f"             < DISCOUNT {int(package.discount_rate * 100)}%",
            f"     {price.format()} (After Discount) - "
            f"Original price {list_price.format()}",
        ]
    lines.append(SECTION_RULE)
    return "\n".join(lines)


def render_seat_map(taken_seats: Collection[int] = ()) -> str:
    """座席表（この予約で選択済みの座席は XX）"""

    def cell(seat: int) -> str:
        return "XX" if seat in taken_seats else f"{seat:02d}"

    lines = [SECTION_RULE, "", "  BUSINESS CLASS"]
    for start in range(SeatNumber.FIRST, SeatNumber.LAST_BUSINESS + 1, 3):
        lines.append("    " + "     ".join(cell(s) for s in range(start, start + 3)))

    lines += ["", "  ECONOMY CLASS"]
    for start in range(SeatNumber.LAST_BUSINESS + 1, SeatNumber.LAST + 1, 6):
        row = [cell(s) for s in range(start, start + 6)]
        lines.append(
            "    " + " ".join(row[0:2]) + "   " + " ".join(row[2:4])
            + "   " + " ".join(row[4:6])
        )
    lines.append(SECTION_RULE)
    return "\n".join(lines)


def _ordinal(number: int) -> str:
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(number, "th")
    return f"{number}{suffix}"
