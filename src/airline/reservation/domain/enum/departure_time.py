from __future__ import annotations

from enum import Enum


class DepartureTime(str, Enum):
    """出発時刻（RB370 便の1日4便）"""

    MORNING = "8.00AM"
    AFTERNOON = "1.30PM"
    EVENING = "5.00PM"
    NIGHT = "10.30PM"

    @property
    def option(self) -> str:
        """メニュー上の選択記号（A-D）"""
        return "ABCD"[list(DepartureTime).index(self)]

    @classmethod
    def from_option(cls, option: str) -> DepartureTime:
        normalized = option.strip().upper()
        for departure_time in cls:
            if departure_time.option == normalized:
                return departure_time
        raise ValueError(f"Invalid departure time option: {option}. Choose A-D")
