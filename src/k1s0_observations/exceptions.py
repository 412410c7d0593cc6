"""observations 設定の例外型定義"""

from __future__ import annotations


class ConfigError(Exception):
    """observations 設定のエラー基底クラス。

    field には問題のあった設定項目名（例: "metrics.reporting_interval"）が入る。
    """

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
        *,
        field: str | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.field = field
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class ConfigErrorCodes:
    """ConfigError のエラーコード定数。"""

    DECODE: str = "DECODE_ERROR"
    INVALID_ENDPOINT: str = "INVALID_ENDPOINT"
    INVALID_DURATION: str = "INVALID_DURATION"
    INVALID_CONFIG: str = "INVALID_CONFIG"
    ENV_OVERRIDE: str = "ENV_OVERRIDE_ERROR"
