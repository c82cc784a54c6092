"""Google Cloud Translation v2 클라이언트

응답 매핑은 하지 않는다. 상태 코드 해석은 proxy 담당.
API 키는 헤더로 보낸다 (URL은 httpx 요청 로그에 남음).
"""

import httpx

GOOGLE_TRANSLATE_API_URL = "https://translation.googleapis.com/language/translate/v2"


class GoogleTranslateProvider:
    """Google Translate REST API 호출"""

    def __init__(
        self,
        api_url: str = GOOGLE_TRANSLATE_API_URL,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    async def translate(self, api_key: str, text: str, source: str, target: str) -> httpx.Response:
        """번역 요청 1회

        Raises:
            httpx.TransportError: 연결 실패, 타임아웃 등
        """
        async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
            return await client.post(
                self._api_url,
                headers={"X-goog-api-key": api_key},
                json={"q": text, "source": source, "target": target, "format": "text"},
            )
