"""rocketflag ライブラリの例外型定義"""

from __future__ import annotations


class RocketFlagError(Exception):
    """rocketflag ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class RocketFlagErrorCodes:
    """RocketFlagError のエラーコード定数。"""

    VALIDATION_ERROR: str = "VALIDATION_ERROR"
    INVALID_CONTEXT_FORMAT: str = "INVALID_CONTEXT_FORMAT"
    NETWORK_ERROR: str = "NETWORK_ERROR"
    API_ERROR: str = "API_ERROR"
    INVALID_RESPONSE: str = "INVALID_RESPONSE"


class ValidationError(RocketFlagError):
    """呼び出し側の引数が不正。I/O 前に検出される。"""

    def __init__(
        self,
        field: str,
        message: str,
        *,
        code: str = RocketFlagErrorCodes.VALIDATION_ERROR,
    ) -> None:
        super().__init__(code, message)
        self.field = field


class ContextFormatError(ValidationError):
    """予約済みコンテキストキーの値が書式に合わない。"""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(field, message, code=RocketFlagErrorCodes.INVALID_CONTEXT_FORMAT)


class NetworkError(RocketFlagError):
    """レスポンスを得られなかったトランスポートレベルの失敗。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(RocketFlagErrorCodes.NETWORK_ERROR, message, cause)


class APIError(RocketFlagError):
    """サーバーが非成功ステータスを返した。"""

    def __init__(self, message: str, status: int, status_text: str) -> None:
        super().__init__(RocketFlagErrorCodes.API_ERROR, message)
        self.status = status
        self.status_text = status_text


class InvalidResponseError(RocketFlagError):
    """成功レスポンスだがボディが解釈できない、またはフラグの形をしていない。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(RocketFlagErrorCodes.INVALID_RESPONSE, message, cause)
