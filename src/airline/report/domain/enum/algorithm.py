from enum import Enum


class SortAlgorithm(str, Enum):
    """価格順ソートのアルゴリズム"""

    BUBBLE = "Bubble Sort"
    MERGE = "Merge Sort"


class SearchAlgorithm(str, Enum):
    """予約番号検索のアルゴリズム"""

    LINEAR = "Linear Search"
    BINARY = "Binary Search"
