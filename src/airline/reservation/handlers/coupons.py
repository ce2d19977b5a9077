from airline.reservation.domain.value_object import Coupon
from airline.shared.utils.console import Console


def handle_coupons(console: Console) -> None:
    """利用可能なクーポンを表示する"""
    lines = [
        "\n========== C O U P O N S ==========",
        "\nApply one of these coupons in Manual Reservation only\n",
    ]
    lines += [
        f"  - {coupon.code:<14}({coupon.percent_off}% OFF)"
        for coupon in Coupon.available()
    ]
    console.show("\n".join(lines))
