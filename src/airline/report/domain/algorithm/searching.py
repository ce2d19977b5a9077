from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def linear_search(
    items: Sequence[T], target: Any, key: Callable[[T], Any]
) -> int | None:
    """線形探索 O(n)。最初に一致した位置を返す"""
    for index, item in enumerate(items):
        if key(item) == target:
            return index
    return None


def binary_search(
    items: Sequence[T], target: Any, key: Callable[[T], Any]
) -> int | None:
    """二分探索 O(log n)

    items は key の昇順に並んでいること。
    """
    low = 0
    high = len(items) - 1
    while low <= high:
        middle = (low + high) // 2
        value = key(items[middle])
        if value == target:
            return middle
        if value < target:
            low = middle + 1
        else:
            high = middle - 1
    return None
