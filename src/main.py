"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

import logging
import random
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from config.settings import settings
from src.sa_account.api.router import router as account_router
from src.sa_account.application.service import SavingsAccountService
from src.sa_account.infrastructure.cache import build_account_cache
from src.sa_account.infrastructure.persistence import AccountRepository
from src.sa_common.database import engine, ping_database
from src.sa_common.errors import AppError, ErrorKind
from src.sa_common.logging_config import setup_logging
from src.sa_common.redis_client import close_redis, get_redis
from src.sa_common.response import error_response, field_errors_response
from src.sa_gateway.middleware.request_log import REQUEST_ID_HEADER, RequestLogMiddleware

logger = logging.getLogger("sa.errors")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: verify DB (+ Redis) and build the service. Shutdown: dispose."""
    setup_logging(settings.LOG_LEVEL)
    await ping_database()

    redis = None
    if settings.CACHE_BACKEND.lower() == "redis":
        redis = await get_redis()

    app.state.account_service = SavingsAccountService(
        repo=AccountRepository(),
        cache=build_account_cache(settings, redis),
        rng=random.SystemRandom(),
    )
    yield
    await engine.dispose()
    await close_redis()


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages: list[str] = []
    for err in exc.errors():
        ctx_error = (err.get("ctx") or {}).get("error")
        if err.get("type") == "value_error" and ctx_error is not None:
            messages.append(str(ctx_error))
            continue
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        messages.append(f"{field}: {err['msg']}" if field else str(err["msg"]))
    return messages


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    body = field_errors_response(_validation_messages(exc))
    return JSONResponse(status_code=body.status, content=body.model_dump(exclude_none=True))


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    logger.info("%s %d: %s", exc.kind.value, exc.code, exc.message)
    body = error_response(exc.kind, exc.message)
    return JSONResponse(status_code=body.status, content=body.model_dump(exclude_none=True))


@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = error_response(ErrorKind.UNEXPECTED, f"An unexpected error occurred: {exc}")
    # Runs outside RequestLogMiddleware, which cannot set headers on this response
    request_id = getattr(request.state, "request_id", None)
    headers = {REQUEST_ID_HEADER: request_id} if request_id else None
    return JSONResponse(
        status_code=body.status,
        content=body.model_dump(exclude_none=True),
        headers=headers,
    )


app.include_router(account_router, prefix="/api/v1")


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": settings.APP_VERSION}
