"""Translation Proxy: 입력 검증 + provider 호출 + 응답 매핑

Gateway를 거치지 않는 직접 호출도 있으므로 Gateway와 같은 검증을 다시 한다.
provider 내부 에러 내용은 로그에만 남기고 응답에는 일반 메시지만 담는다.
"""

import logging
from typing import Any, Protocol

import httpx
from pydantic import BaseModel, Field

from transly.config import get_settings
from transly.constants import Limits
from transly.schemas.base import BaseSchema
from transly.schemas.translation import TranslationAPIResponse, is_language
from transly.services.errors import ErrorCode, ErrorMessage, TranslationAPIError
from transly.services.provider import GoogleTranslateProvider

logger = logging.getLogger(__name__)


class TranslationProvider(Protocol):
    """외부 번역 API 인터페이스

    구현체:
    - GoogleTranslateProvider: Google Cloud Translation v2
    """

    async def translate(self, api_key: str, text: str, source: str, target: str) -> httpx.Response:
        ...


class ProviderTranslation(BaseSchema):
    translated_text: str
    detected_source_language: str | None = None


class ProviderTranslations(BaseModel):
    translations: list[ProviderTranslation] = Field(min_length=1)


class ProviderResponse(BaseModel):
    """{"data": {"translations": [{"translatedText": ..., "detectedSourceLanguage": ...}]}}"""

    data: ProviderTranslations


class TranslationProxy:
    def __init__(self, api_key: str, provider: TranslationProvider) -> None:
        self._api_key = api_key
        self._provider = provider

    async def handle(self, body: Any) -> TranslationAPIResponse:
        """요청 바디 검증 후 provider 호출

        Raises:
            TranslationAPIError: 검증 실패, 설정 누락, provider 실패
        """
        text, source, target = self._validate(body)

        if not self._api_key:
            logger.error("GOOGLE_TRANSLATE_API_KEY가 설정되지 않았습니다")
            raise TranslationAPIError(ErrorCode.AUTH_ERROR, status=500)

        try:
            response = await self._provider.translate(self._api_key, text, source, target)
        except httpx.TransportError as e:
            logger.error(f"번역 API 연결 실패: {e!r}")
            raise TranslationAPIError(ErrorCode.NETWORK_ERROR, status=503) from e
        except Exception as e:
            logger.exception("번역 API 호출 실패")
            raise TranslationAPIError(ErrorCode.API_ERROR, status=500) from e

        return self._map_response(response)

    def _validate(self, body: Any) -> tuple[str, str, str]:
        text = body.get("text") if isinstance(body, dict) else None

        if not text or not isinstance(text, str):
            raise TranslationAPIError(ErrorCode.INVALID_INPUT, ErrorMessage.INVALID_TEXT, 400)

        if not text.strip():
            raise TranslationAPIError(ErrorCode.INVALID_INPUT, ErrorMessage.EMPTY_TEXT, 400)

        if len(text) > Limits.MAX_TEXT_LENGTH:
            raise TranslationAPIError(ErrorCode.INVALID_INPUT, ErrorMessage.TEXT_TOO_LONG, 400)

        source = body.get("sourceLanguage")
        target = body.get("targetLanguage")
        if not is_language(source) or not is_language(target):
            raise TranslationAPIError(ErrorCode.INVALID_INPUT, ErrorMessage.INVALID_LANGUAGE, 400)

        return text, source, target

    def _map_response(self, response: httpx.Response) -> TranslationAPIResponse:
        status_code = response.status_code

        if status_code == 429:
            raise TranslationAPIError(ErrorCode.RATE_LIMIT, status=429)

        if status_code in (401, 403):
            logger.error(f"번역 API 인증 실패: {status_code}")
            raise TranslationAPIError(ErrorCode.AUTH_ERROR, status=status_code)

        if not response.is_success:
            logger.error(f"번역 API 오류: {status_code}")
            raise TranslationAPIError(ErrorCode.API_ERROR, status=status_code)

        try:
            parsed = ProviderResponse.model_validate_json(response.content)
        except Exception as e:
            logger.exception("번역 API 응답 파싱 실패")
            raise TranslationAPIError(ErrorCode.API_ERROR, status=500) from e

        translation = parsed.data.translations[0]
        return TranslationAPIResponse(
            translated_text=translation.translated_text,
            detected_source_language=translation.detected_source_language,
        )


class _ProxyHolder:
    instance: TranslationProxy | None = None


def get_proxy() -> TranslationProxy:
    """설정 기반 proxy 반환 (캐시)"""
    if _ProxyHolder.instance is None:
        settings = get_settings()
        _ProxyHolder.instance = TranslationProxy(
            api_key=settings.google_translate_api_key,
            provider=GoogleTranslateProvider(
                api_url=settings.google_translate_api_url,
                timeout=settings.translate_api_timeout,
            ),
        )
    return _ProxyHolder.instance


def set_proxy(proxy: TranslationProxy | None) -> None:
    """proxy 교체 (테스트용)"""
    _ProxyHolder.instance = proxy
