from collections.abc import Generator

import fakeredis
import httpx
import pytest
from fastapi.testclient import TestClient

from transly.infra.redis import set_redis
from transly.main import app
from transly.schemas.translation import TranslationEntry
from transly.services.proxy import TranslationProxy, set_proxy

TEST_API_KEY = "test-google-api-key"


def make_provider_response(
    translated_text: str = "こんにちは", detected_source_language: str | None = None
) -> httpx.Response:
    """Google Translate v2 성공 응답"""
    translation: dict[str, str] = {"translatedText": translated_text}
    if detected_source_language is not None:
        translation["detectedSourceLanguage"] = detected_source_language
    return httpx.Response(200, json={"data": {"translations": [translation]}})


def make_entry(entry_id: str = "entry-1", **overrides: object) -> TranslationEntry:
    data: dict[str, object] = {
        "id": entry_id,
        "source_text": "Hello",
        "translated_text": "こんにちは",
        "source_language": "en",
        "target_language": "ja",
        "romanization": "konnichiwa",
        "timestamp": 1_700_000_000_000,
    }
    data.update(overrides)
    return TranslationEntry.model_validate(data)


class FakeProvider:
    """provider 응답/예외를 고정하고 호출 기록"""

    def __init__(
        self,
        response: httpx.Response | None = None,
        error: Exception | None = None,
    ) -> None:
        self.response = response or make_provider_response()
        self.error = error
        self.calls: list[tuple[str, str, str, str]] = []

    async def translate(self, api_key: str, text: str, source: str, target: str) -> httpx.Response:
        self.calls.append((api_key, text, source, target))
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_redis() -> Generator[fakeredis.FakeRedis, None, None]:
    r = fakeredis.FakeRedis(decode_responses=True)
    set_redis(r)
    yield r
    set_redis(None)


@pytest.fixture
def fake_provider() -> Generator[FakeProvider, None, None]:
    provider = FakeProvider()
    set_proxy(TranslationProxy(api_key=TEST_API_KEY, provider=provider))
    yield provider
    set_proxy(None)


@pytest.fixture
def client(
    fake_redis: fakeredis.FakeRedis, fake_provider: FakeProvider
) -> Generator[TestClient, None, None]:
    yield TestClient(app)
