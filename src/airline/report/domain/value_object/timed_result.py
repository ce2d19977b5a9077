from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TimedResult(Generic[T]):
    """処理結果と所要時間（秒）"""

    value: T
    elapsed_seconds: float
