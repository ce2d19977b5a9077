"""昇順ソート

どちらも安定ソートで、入力を変更せず新しいリストを返す。
key は比較可能な値（価格・予約番号など）を返す関数。
"""

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def bubble_sort(items: Sequence[T], key: Callable[[T], Any]) -> list[T]:
    """バブルソート O(n^2)

    隣り合う要素を比較して逆順なら交換する。1周で交換がなければ打ち切る。
    """
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        swapped = False
        for j in range(n - i - 1):
            if key(result[j]) > key(result[j + 1]):
                result[j], result[j + 1] = result[j + 1], result[j]
                swapped = True
        if not swapped:
            break
    return result


def merge_sort(items: Sequence[T], key: Callable[[T], Any]) -> list[T]:
    """マージソート O(n log n)

    半分に分割してそれぞれを再帰的にソートし、マージする。
    """
    if len(items) <= 1:
        return list(items)
    middle = len(items) // 2
    left = merge_sort(items[:middle], key)
    right = merge_sort(items[middle:], key)
    return _merge(left, right, key)


def _merge(left: list[T], right: list[T], key: Callable[[T], Any]) -> list[T]:
    merged: list[T] = []
    i = j = 0
    while i < len(left) and j < len(right):
        # 等しい場合は左を先に取り、安定性を保つ
        if key(left[i]) <= key(right[j]):
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged
