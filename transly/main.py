import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from transly.config import get_settings
from transly.infra.redis import close_redis, ping_redis
from transly.routes.history import router as history_router
from transly.routes.translate import router as translate_router
from transly.services.errors import TranslationAPIError

settings = get_settings()
logging.basicConfig(level=settings.log_level.upper())


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    yield
    close_redis()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST", "DELETE"],
    allow_headers=["Content-Type"],
    max_age=600,
)

app.include_router(translate_router)
app.include_router(history_router)


@app.exception_handler(TranslationAPIError)
async def translation_api_error_handler(request: Request, exc: TranslationAPIError) -> JSONResponse:
    return JSONResponse(status_code=exc.status, content=exc.to_dict())


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "redis": "ok" if ping_redis() else "unavailable"}
