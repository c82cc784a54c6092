from fastapi import APIRouter, Response, status

from transly.schemas.translation import TranslationEntry
from transly.services import history as history_service

router = APIRouter(prefix="/history", tags=["history"])


@router.get("", response_model=list[TranslationEntry])
async def read_history() -> list[TranslationEntry]:
    return await history_service.load_history()


@router.post("", response_model=TranslationEntry, status_code=status.HTTP_201_CREATED)
async def create_entry(entry: TranslationEntry) -> TranslationEntry:
    await history_service.save_entry(entry)
    return entry


@router.delete("/{entry_id:path}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(entry_id: str) -> Response:
    # 없는 id도 204 (idempotent)
    await history_service.delete_entry(entry_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
async def clear_history() -> Response:
    await history_service.clear_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
