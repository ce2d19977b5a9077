from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: MYR
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"MYR"})
    SYMBOLS: ClassVar[dict[str, str]] = {"MYR": "RM"}

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.upper()
        if normalized not in self.SUPPORTED:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def symbol(self) -> str:
        """表示用の通貨記号"""
        return self.SYMBOLS[self.code]

    @classmethod
    def myr(cls) -> Currency:
        """マレーシア・リンギット"""
        return cls("MYR")
