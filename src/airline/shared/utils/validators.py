from decimal import Decimal


def to_decimal(v: object) -> Decimal:
    """任意の値を Decimal に変換する

    すでに Decimal の場合はそのまま返し、それ以外は str 経由で変換する。
    float を直接渡した場合の誤差を避けるため、ファイルから読んだ文字列も
    金額の組み立ても必ずここを通す。
    """
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v).strip())
