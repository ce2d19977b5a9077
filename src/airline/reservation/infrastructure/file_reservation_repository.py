import os
from collections.abc import Iterable
from decimal import InvalidOperation
from pathlib import Path

from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.enum import DepartureTime, Destination, TravelClass
from airline.reservation.domain.repository import ReservationRepository
from airline.reservation.domain.value_object import (
    Passenger,
    ReferenceNumber,
    SeatNumber,
)
from airline.shared.domain import Money
from airline.shared.domain.exception import (
    DataFormatException,
    DomainException,
    DuplicateResourceException,
    PersistenceException,
)
from airline.shared.utils.logger import get_logger

logger = get_logger()

DEFAULT_FILE_NAME = "reservations.txt"
END_MARKER = "END_RESERVATION"

# 1予約分のレコードに含まれるキー（PASSENGER は乗客数だけ繰り返す）
FIELD_KEYS = (
    "REF",
    "DEST",
    "TIME",
    "PRICE",
    "DISCOUNT",
    "NUM_ADULTS",
    "NUM_KIDS",
    "NUM_PASSENGERS",
    "PASSENGER",
)

Field = tuple[int, str]


class FileReservationRepository(ReservationRepository):
    """テキストファイルを使用した ReservationRepository の具象実装

    1行1項目の "KEY:値" 形式で、END_RESERVATION 行が1予約の終端。
    初回アクセス時に全件を読み込み、保存のたびにファイル全体を書き直す。
    """

    def __init__(self, file_path: str | Path | None = None) -> None:
        self.file_path = Path(
            file_path or os.getenv("RESERVATIONS_FILE", DEFAULT_FILE_NAME)
        )
        self._reservations: list[Reservation] | None = None

    def save(self, reservation: Reservation) -> None:
        """予約を追加してファイルに書き出す"""
        reservations = self._load()
        if any(r.id == reservation.id for r in reservations):
            raise DuplicateResourceException(
                f"Reservation already exists: {reservation.id}"
            )

        updated = [*reservations, reservation]
        self._write(updated)
        self._reservations = updated
        logger.info(
            "Reservation saved",
            extra={
                "reference_number": str(reservation.id),
                "file_path": str(self.file_path),
            },
        )

    def find_by_id(self, reference_number: ReferenceNumber) -> Reservation | None:
        """予約番号で検索"""
        for reservation in self._load():
            if reservation.id == reference_number:
                return reservation
        return None

    def find_all(self) -> list[Reservation]:
        """全件を登録順で返す"""
        return list(self._load())

    def _load(self) -> list[Reservation]:
        if self._reservations is None:
            self._reservations = self._read()
        return self._reservations

    def _read(self) -> list[Reservation]:
        if not self.file_path.exists():
            logger.info(
                "Reservation file not found, starting with no reservations",
                extra={"file_path": str(self.file_path)},
            )
            return []

        try:
            with self.file_path.open(encoding="utf-8") as f:
                reservations = self._parse(f)
        except OSError as e:
            raise PersistenceException(
                f"Could not open reservation file {self.file_path}: {e}"
            ) from e
        except UnicodeDecodeError as e:
            raise DataFormatException(
                f"Reservation file {self.file_path} is not valid UTF-8: {e}"
            ) from e

        logger.info(
            "Reservations loaded",
            extra={"file_path": str(self.file_path), "count": len(reservations)},
        )
        return reservations

    def _write(self, reservations: list[Reservation]) -> None:
        """一時ファイルに書き出して fsync してから置き換える

        失敗した場合は一時ファイルを残さず、元のファイルもそのまま。
        """
        temp_path = self.file_path.with_name(f"{self.file_path.name}.tmp")
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            with temp_path.open("w", encoding="utf-8") as f:
                for reservation in reservations:
                    f.writelines(f"{line}\n" for line in self._to_lines(reservation))
                f.flush()
                os.fsync(f.fileno())
            os.replace(temp_path, self.file_path)
        except OSError as e:
            if temp_path.exists():
                temp_path.unlink()
            raise PersistenceException(
                f"Could not write reservation file {self.file_path}: {e}"
            ) from e

    def _parse(self, lines: Iterable[str]) -> list[Reservation]:
        """ファイルの各行から予約を復元する

        - REF 行で新しいレコードを開始し、END_RESERVATION 行で確定する
        - 未知の行は無視する
        - 終端のないレコードは破棄する
        """
        reservations: list[Reservation] = []
        record: dict[str, Field] | None = None
        passengers: list[Field] = []

        for line_number, raw in enumerate(lines, start=1):
            line = raw.rstrip("\r\n")

            if line == END_MARKER:
                if record is None:
                    logger.warning(
                        "End marker without a reservation",
                        extra={"line_number": line_number},
                    )
                    continue
                reservations.append(self._to_entity(record, passengers))
                record = None
                continue

            key, separator, value = line.partition(":")
            if not separator or key not in FIELD_KEYS:
                continue

            if key == "REF":
                if record is not None:
                    self._warn_incomplete(record)
                record = {"REF": (line_number, value)}
                passengers = []
            elif record is None:
                logger.warning(
                    "Field outside of a reservation record",
                    extra={"line_number": line_number, "key": key},
                )
            elif key == "PASSENGER":
                passengers.append((line_number, value))
            else:
                record[key] = (line_number, value)

        if record is not None:
            self._warn_incomplete(record)

        return reservations

    def _to_lines(self, reservation: Reservation) -> list[str]:
        """予約をファイルの行に変換する"""
        lines = [
            f"REF:{reservation.id}",
            f"DEST:{reservation.destination.value}",
            f"TIME:{reservation.departure_time.value}",
            f"PRICE:{reservation.total_price.amount:.2f}",
            f"DISCOUNT:{reservation.discount.amount:.2f}",
            f"NUM_ADULTS:{reservation.num_adults}",
            f"NUM_KIDS:{reservation.num_kids}",
            f"NUM_PASSENGERS:{reservation.num_passengers}",
        ]
        lines.extend(
            f"PASSENGER:{p.name},{p.age},{p.seat},{p.travel_class.value}"
            for p in reservation.passengers
        )
        lines.append(END_MARKER)
        return lines

    def _to_entity(
        self, record: dict[str, Field], passengers: list[Field]
    ) -> Reservation:
        """ファイルのレコードをドメインエンティティに変換する"""
        line_number = record["REF"][0]
        try:
            reservation = Reservation(
                id=ReferenceNumber(value=record["REF"][1]),
                destination=Destination(self._require(record, "DEST")),
                departure_time=DepartureTime(self._require(record, "TIME")),
                passengers=[self._to_passenger(*p) for p in passengers],
                total_price=Money.myr(self._require(record, "PRICE")),
                discount=Money.myr(self._require(record, "DISCOUNT")),
            )
        except (ValueError, InvalidOperation, DomainException) as e:
            raise DataFormatException(
                f"Invalid reservation record starting at line {line_number}: {e}"
            ) from e

        self._check_counts(record, reservation)
        return reservation

    def _to_passenger(self, line_number: int, value: str) -> Passenger:
        try:
            name, age, seat, travel_class = value.rsplit(",", 3)
            passenger = Passenger(
                name=name, age=int(age), seat=SeatNumber(int(seat))
            )
            recorded_class = TravelClass(travel_class)
        except ValueError as e:
            raise DataFormatException(
                f"Invalid passenger at line {line_number}: {e}"
            ) from e

        if recorded_class != passenger.travel_class:
            logger.warning(
                "Recorded travel class does not match the seat",
                extra={"line_number": line_number, "seat": passenger.seat.value},
            )
        return passenger

    def _check_counts(self, record: dict[str, Field], reservation: Reservation) -> None:
        """保存された人数と乗客明細が一致するか確認する（不一致は警告のみ）"""
        expected = {
            "NUM_ADULTS": reservation.num_adults,
            "NUM_KIDS": reservation.num_kids,
            "NUM_PASSENGERS": reservation.num_passengers,
        }
        for key, actual in expected.items():
            if key not in record:
                continue
            line_number, value = record[key]
            if value.strip() != str(actual):
                logger.warning(
                    "Recorded count does not match passengers",
                    extra={
                        "line_number": line_number,
                        "key": key,
                        "recorded": value,
                        "actual": actual,
                    },
                )

    @staticmethod
    def _require(record: dict[str, Field], key: str) -> str:
        if key not in record:
            raise ValueError(f"missing {key}")
        return record[key][1]

    @staticmethod
    def _warn_incomplete(record: dict[str, Field]) -> None:
        line_number, reference = record["REF"]
        logger.warning(
            "Dropped reservation without end marker",
            extra={"line_number": line_number, "reference_number": reference},
        )
