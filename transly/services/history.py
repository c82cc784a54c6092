"""History 서비스: 번역 기록 저장/조회

Redis 레이아웃:
    history:order   (list) 삽입 순서대로 entry id
    history:entries (hash) id → TranslationEntry JSON

단일 writer(UI) 전제. 락 없음.
"""

import logging
from typing import cast

from pydantic import ValidationError

from transly.constants import HistoryKey
from transly.infra.redis import get_redis
from transly.schemas.translation import TranslationEntry

logger = logging.getLogger(__name__)


async def load_history() -> list[TranslationEntry]:
    """저장된 전체 기록 (삽입 순서). 비어 있으면 빈 리스트."""
    redis = get_redis()

    entry_ids = cast(list[str], redis.lrange(HistoryKey.ORDER, 0, -1))
    if not entry_ids:
        return []

    payloads = cast(list[str | None], redis.hmget(HistoryKey.ENTRIES, entry_ids))

    entries: list[TranslationEntry] = []
    for entry_id, payload in zip(entry_ids, payloads, strict=True):
        if payload is None:
            logger.warning(f"히스토리 데이터 누락: {entry_id}")
            continue
        try:
            entries.append(TranslationEntry.model_validate_json(payload))
        except ValidationError as e:
            logger.warning(f"히스토리 파싱 실패: {entry_id} - {e}")

    return entries


async def save_entry(entry: TranslationEntry) -> None:
    """id 기준 upsert. 새 id는 끝에 추가, 기존 id는 위치 유지하고 덮어쓴다."""
    redis = get_redis()
    exists = bool(redis.hexists(HistoryKey.ENTRIES, entry.id))

    pipe = redis.pipeline(transaction=True)
    pipe.hset(HistoryKey.ENTRIES, entry.id, entry.model_dump_json())
    if not exists:
        pipe.rpush(HistoryKey.ORDER, entry.id)
    pipe.execute()


async def delete_entry(entry_id: str) -> bool:
    """해당 id만 삭제. 없는 id면 아무것도 하지 않음.

    Returns:
        실제로 삭제했으면 True
    """
    redis = get_redis()

    pipe = redis.pipeline(transaction=True)
    pipe.hdel(HistoryKey.ENTRIES, entry_id)
    pipe.lrem(HistoryKey.ORDER, 0, entry_id)
    removed_fields, _ = pipe.execute()

    return bool(removed_fields)


async def clear_all() -> None:
    redis = get_redis()
    redis.delete(HistoryKey.ORDER, HistoryKey.ENTRIES)
