import os
import sys

from aws_lambda_powertools import Logger

DEFAULT_SERVICE_NAME = "airline-reservation"

# 対話セッションでは INFO ログがメニュー表示の邪魔になるため WARNING を既定とする
DEFAULT_LOG_LEVEL = "WARNING"


def get_logger(service_name: str | None = None) -> Logger:
    """構造化ロガーを返す

    出力先は標準エラー（メニューは標準出力）。
    レベルは POWERTOOLS_LOG_LEVEL、サービス名は POWERTOOLS_SERVICE_NAME で上書きできる。
    """
    return Logger(
        service=service_name
        or os.getenv("POWERTOOLS_SERVICE_NAME", DEFAULT_SERVICE_NAME),
        level=os.getenv("POWERTOOLS_LOG_LEVEL", DEFAULT_LOG_LEVEL),
        stream=sys.stderr,
    )
