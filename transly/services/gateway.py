"""Translation Gateway: UI 쪽 번역 클라이언트

로컬 검증 후 Proxy 엔드포인트를 1회 호출한다. 재시도하지 않는다 (호출자 책임).
"""

from collections.abc import Callable
from typing import Any

import httpx

from transly.config import get_settings
from transly.constants import Limits
from transly.schemas.translation import Language, TranslationAPIResponse
from transly.services.errors import ErrorCode, ErrorMessage, TranslationAPIError, get_error_message


def always_online() -> bool:
    return True


class TranslationGateway:
    """Proxy 엔드포인트 호출 + 에러 정규화

    Args:
        endpoint_url: Proxy 엔드포인트 URL
        is_online: 연결 상태 확인 함수 (False면 요청하지 않고 OFFLINE)
        timeout: 요청 타임아웃 (초). None이면 무제한
        transport: httpx transport 교체용 (테스트, ASGI 직접 연결)
    """

    def __init__(
        self,
        endpoint_url: str,
        is_online: Callable[[], bool] = always_online,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._endpoint_url = endpoint_url
        self._is_online = is_online
        self._timeout = timeout
        self._transport = transport

    async def translate(
        self, text: str, source_language: Language, target_language: Language
    ) -> TranslationAPIResponse:
        """
        Raises:
            TranslationAPIError: 오프라인, 입력 오류, Proxy 에러 응답, 네트워크 실패
        """
        if not self._is_online():
            raise TranslationAPIError(ErrorCode.OFFLINE, status=0)

        if not text or not text.strip():
            raise TranslationAPIError(ErrorCode.INVALID_INPUT, ErrorMessage.EMPTY_TEXT, 400)

        if len(text) > Limits.MAX_TEXT_LENGTH:
            raise TranslationAPIError(ErrorCode.INVALID_INPUT, ErrorMessage.TEXT_TOO_LONG, 400)

        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                response = await client.post(
                    self._endpoint_url,
                    json={
                        "text": text,
                        "sourceLanguage": source_language,
                        "targetLanguage": target_language,
                    },
                )

            if not response.is_success:
                raise self._to_api_error(response)

            return TranslationAPIResponse.model_validate_json(response.content)
        except TranslationAPIError:
            raise
        except httpx.TransportError as e:
            raise TranslationAPIError(ErrorCode.NETWORK_ERROR, status=0) from e
        except Exception as e:
            raise TranslationAPIError(ErrorCode.API_ERROR, status=500) from e

    def _to_api_error(self, response: httpx.Response) -> TranslationAPIError:
        body = self._read_error_body(response)

        code = body.get("code")
        if not isinstance(code, str) or not code:
            code = ErrorCode.API_ERROR

        message = body.get("message")
        if not isinstance(message, str) or not message:
            message = get_error_message(code)

        return TranslationAPIError(code, message, response.status_code)

    def _read_error_body(self, response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError:
            return {}
        return body if isinstance(body, dict) else {}


def get_gateway() -> TranslationGateway:
    settings = get_settings()
    return TranslationGateway(
        endpoint_url=settings.translate_endpoint_url,
        timeout=settings.gateway_timeout,
    )
