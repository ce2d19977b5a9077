from __future__ import annotations

import re
import secrets
import string
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class ReferenceNumber:
    """予約番号

    "RB" + 英大文字・数字6桁の形式。
    例: RB7K2Q9Z
    """

    PREFIX: ClassVar[str] = "RB"
    ALPHABET: ClassVar[str] = string.digits + string.ascii_uppercase
    LENGTH: ClassVar[int] = 6
    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^RB[0-9A-Z]{6}$")

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(
                f"Invalid reference number format: {self.value}. "
                "Expected format: RB + 6 letters or digits"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> ReferenceNumber:
        """ランダムな予約番号を生成する"""
        suffix = "".join(secrets.choice(cls.ALPHABET) for _ in range(cls.LENGTH))
        return cls(value=f"{cls.PREFIX}{suffix}")
