"""번역 에러 분류 및 사용자 메시지

Proxy, Gateway 모두 이 분류 밖의 코드를 만들지 않는다.
"""

from typing import Any

from transly.constants import Limits


class ErrorCode:
    INVALID_INPUT = "INVALID_INPUT"
    RATE_LIMIT = "RATE_LIMIT"
    API_ERROR = "API_ERROR"
    AUTH_ERROR = "AUTH_ERROR"
    NETWORK_ERROR = "NETWORK_ERROR"
    OFFLINE = "OFFLINE"


ALL_ERROR_CODES: tuple[str, ...] = (
    ErrorCode.INVALID_INPUT,
    ErrorCode.RATE_LIMIT,
    ErrorCode.API_ERROR,
    ErrorCode.AUTH_ERROR,
    ErrorCode.NETWORK_ERROR,
    ErrorCode.OFFLINE,
)


def get_error_message(code: str) -> str:
    """에러 코드 → 사용자 메시지

    모르는 코드는 API_ERROR 메시지로 대체한다.
    """
    match code:
        case ErrorCode.INVALID_INPUT:
            return "Please enter valid text to translate."
        case ErrorCode.RATE_LIMIT:
            return "Too many requests. Please wait a moment and try again."
        case ErrorCode.AUTH_ERROR:
            return "Translation service configuration error."
        case ErrorCode.NETWORK_ERROR:
            return "Unable to connect. Please check your internet connection."
        case ErrorCode.OFFLINE:
            return "You are offline. Please check your internet connection."
        case _:
            return "Translation service is temporarily unavailable."


class TranslationAPIError(Exception):
    """번역 실패 (code, message, status)

    status 0은 요청이 서버에 도달하지 못한 경우 (오프라인, 네트워크 실패).
    """

    def __init__(self, code: str, message: str | None = None, status: int = 500):
        self.code = code
        self.message = message or get_error_message(code)
        self.status = status
        super().__init__(f"[{code}] {self.message}")

    def to_dict(self) -> dict[str, Any]:
        return {"code": self.code, "message": self.message, "status": self.status}


class ErrorMessage:
    INVALID_TEXT = "Please enter valid text to translate."
    EMPTY_TEXT = "Please enter text to translate."
    TEXT_TOO_LONG = f"Text exceeds maximum length of {Limits.MAX_TEXT_LENGTH} characters."
    INVALID_LANGUAGE = "Invalid language selection."
