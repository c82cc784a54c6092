"""Translate API 라우트

POST /api/translate → Google Cloud Translation 프록시.
에러는 TranslationAPIError로 올리고 main의 핸들러가 {code, message, status}로 응답한다.
"""

import json
from typing import Any

from fastapi import APIRouter, Request

from transly.schemas.translation import TranslationAPIResponse
from transly.services.proxy import get_proxy

router = APIRouter(prefix="/api/translate", tags=["translate"])


async def _read_json_body(req: Request) -> Any:
    """JSON이 아니면 None (proxy 검증에서 INVALID_INPUT 처리)"""
    try:
        return json.loads(await req.body())
    except ValueError:
        return None


@router.post(
    "",
    response_model=TranslationAPIResponse,
    response_model_exclude_none=True,
)
async def translate(req: Request) -> TranslationAPIResponse:
    """텍스트 번역 (en ⇄ ja)"""
    body = await _read_json_body(req)
    return await get_proxy().handle(body)
