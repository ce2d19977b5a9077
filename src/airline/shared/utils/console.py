from collections.abc import Callable, Mapping
from typing import TypeVar

T = TypeVar("T")

ERROR_BANNER = "***** E R R O R *****"
ERROR_FOOTER = "*********************"


class Console:
    """対話的な標準入出力のラッパー

    入力関数と出力関数を差し替えられるため、テストではスクリプト化した入力を渡す。
    不正な入力は ValueError として扱い、エラーを表示して再入力を促す。
    """

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
    ) -> None:
        self._input = input_func
        self._output = output_func

    def show(self, text: str = "") -> None:
        self._output(text)

    def error(self, message: str) -> None:
        """エラーブロックを表示する"""
        self._output(f"\n{ERROR_BANNER}\n{message}\n{ERROR_FOOTER}")

    def ask(self, prompt: str) -> str:
        self._output(prompt)
        return self._input("> ").strip()

    def ask_until(
        self,
        prompt: str,
        parse: Callable[[str], T],
        error_message: str | None = None,
    ) -> T:
        """parse が成功するまで入力を繰り返す"""
        while True:
            raw = self.ask(prompt)
            try:
                return parse(raw)
            except ValueError as e:
                self.error(error_message or str(e))

    def ask_int(
        self,
        prompt: str,
        minimum: int,
        maximum: int,
        error_message: str | None = None,
    ) -> int:
        """minimum 以上 maximum 以下の整数を入力させる"""

        def _parse(raw: str) -> int:
            value = int(raw)
            if not minimum <= value <= maximum:
                raise ValueError(f"Choose {minimum}-{maximum} only")
            return value

        return self.ask_until(prompt, _parse, error_message)

    def ask_choice(
        self,
        prompt: str,
        choices: Mapping[str, T],
        error_message: str | None = None,
    ) -> T:
        """選択肢のキー（大文字小文字を区別しない）を入力させる"""

        def _parse(raw: str) -> T:
            key = raw.upper()
            if key not in choices:
                raise ValueError(f"Choose ({' / '.join(choices)}) only")
            return choices[key]

        return self.ask_until(prompt, _parse, error_message)

    def confirm(self, prompt: str) -> bool:
        """1 (Yes) / 2 (No) で確認する"""
        answer = self.ask_int(
            f"{prompt}\n1. Yes\n2. No",
            1,
            2,
            "Invalid option chosen (1-YES   2-NO)",
        )
        return answer == 1
