"""번역 데이터 모델

언어 쌍(en ⇄ ja), 히스토리 엔트리, 번역 응답 스키마.
"""

import time
import uuid
from typing import Literal, Self, TypeGuard

from pydantic import ConfigDict, field_validator, model_validator

from transly.schemas.base import BaseSchema

Language = Literal["en", "ja"]

LANGUAGES: tuple[Language, ...] = ("en", "ja")


def is_language(value: object) -> TypeGuard[Language]:
    return isinstance(value, str) and value in LANGUAGES


def get_opposite_language(language: Language) -> Language:
    """source 언어의 반대 언어 (en → ja, ja → en)"""
    if language == "en":
        return "ja"
    return "en"


class TranslationEntry(BaseSchema):
    """히스토리에 저장되는 번역 기록

    저장 후에는 변경하지 않는다 (frozen).
    """

    model_config = ConfigDict(frozen=True)

    id: str
    source_text: str
    translated_text: str
    source_language: Language
    target_language: Language
    romanization: str | None = None
    timestamp: int  # epoch milliseconds

    @field_validator("id", "source_text", "translated_text", "romanization")
    @classmethod
    def validate_encodable(cls, value: str | None) -> str | None:
        # 짝 없는 surrogate는 JSON 직렬화 불가
        if value is not None:
            try:
                value.encode("utf-8")
            except UnicodeEncodeError as e:
                raise ValueError("UTF-8로 인코딩할 수 없는 문자가 포함되어 있습니다") from e
        return value

    @model_validator(mode="after")
    def validate_language_pair(self) -> Self:
        if self.source_language == self.target_language:
            raise ValueError("source_language와 target_language는 달라야 합니다")
        return self


class _Clock:
    last_timestamp: int = 0


def _now_ms() -> int:
    """단조 비감소 epoch ms (시계가 뒤로 가도 이전 값 유지)"""
    now = time.time_ns() // 1_000_000
    _Clock.last_timestamp = max(_Clock.last_timestamp, now)
    return _Clock.last_timestamp


def create_entry(
    source_text: str,
    translated_text: str,
    source_language: Language,
    target_language: Language,
    romanization: str | None = None,
) -> TranslationEntry:
    """번역 성공 후 히스토리 엔트리 생성 (id, timestamp 자동 부여)"""
    return TranslationEntry(
        id=uuid.uuid4().hex,
        source_text=source_text,
        translated_text=translated_text,
        source_language=source_language,
        target_language=target_language,
        romanization=romanization,
        timestamp=_now_ms(),
    )


class TranslationAPIResponse(BaseSchema):
    """번역 성공 응답"""

    translated_text: str
    detected_source_language: str | None = None
