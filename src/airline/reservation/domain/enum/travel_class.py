from enum import Enum


class TravelClass(str, Enum):
    """座席クラス（値は搭乗券・保存ファイルに出力される表記）"""

    BUSINESS = "Business Class"
    ECONOMY = "Economy Class"
