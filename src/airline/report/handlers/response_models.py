from pydantic import BaseModel, Field

from airline.report.domain.value_object import ReservationSummary

RULE = "_" * 52


class SummaryData(BaseModel):
    """レポート集計のレスポンスモデル"""

    total_reservations: int = Field(..., description="予約件数")
    total_tickets: int = Field(..., description="販売した航空券の枚数（乗客数）")
    total_adults: int
    total_kids: int
    reservations_by_destination: dict[str, int] = Field(
        ..., description="就航先ごとの予約件数", examples=[{"LONDON": 2, "TOKYO": 1}]
    )
    total_discount: str = Field(..., examples=["RM1350.00"])
    total_income: str = Field(..., examples=["RM3150.00"])
    gross_sales: str = Field(..., description="割引前の売上合計", examples=["RM4500.00"])


def to_response(summary: ReservationSummary) -> SummaryData:
    return SummaryData(
        total_reservations=summary.total_reservations,
        total_tickets=summary.total_tickets,
        total_adults=summary.total_adults,
        total_kids=summary.total_kids,
        reservations_by_destination=dict(summary.reservations_by_destination),
        total_discount=summary.total_discount.format(),
        total_income=summary.total_income.format(),
        gross_sales=summary.gross_sales.format(),
    )


def render_summary(data: SummaryData) -> str:
    """集計を画面表示用のテキストにする"""
    lines = [
        "\n========== R E P O R T ==========",
        RULE,
        f"Total Reservations     : {data.total_reservations}",
        f"Total Tickets Sold     : {data.total_tickets}",
        f"Total Adults           : {data.total_adults}",
        f"Total Kids             : {data.total_kids}",
        "",
        "Reservations by destination :",
    ]
    if data.reservations_by_destination:
        lines += [
            f"  - {destination:<12}: {count}"
            for destination, count in data.reservations_by_destination.items()
        ]
    else:
        lines.append("  (none)")
    lines += [
        "",
        f"Total Discount Allowed : {data.total_discount}",
        f"Total Income           : {data.total_income}",
        f"Gross Sales            : {data.gross_sales}",
        RULE,
    ]
    return "\n".join(lines)
