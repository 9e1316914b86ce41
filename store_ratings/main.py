"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 처리기 및 라우터 등록.

FastAPI application entry point — Middleware, exception handlers and router
registration. Every error response has the shape ``{"error": "<message>"}``.
"""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError
from starlette.exceptions import HTTPException as StarletteHTTPException

from store_ratings.config import settings
from store_ratings.middleware.request_logging import RequestLoggingMiddleware
from store_ratings.schemas.common import ErrorResponse, HealthResponse
from store_ratings.seed import seed

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """시작 시 로깅 설정, 테이블 생성, 관리자 시드.

    Startup: configure logging, create tables, seed the administrator.
    """
    logging.basicConfig(level=settings.LOG_LEVEL)
    await seed()
    yield


app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    # 모든 오류 응답의 형식 — Documented shape of every error body
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)

# 요청 로깅 미들웨어 — CORS보다 먼저 등록하여 모든 요청을 캡처
# (Registered before CORS to capture all requests)
app.add_middleware(RequestLoggingMiddleware)

# CORS 미들웨어 — Cross-Origin Resource Sharing middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------------------------------
# 예외 처리기 — Exception handlers rendering {"error": ...}
# ---------------------------------------------------------------------------
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """요청 형식 오류를 400으로 변환 — First schema error as a 400."""
    errors = exc.errors()
    message = "Invalid request"
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{field}: {first.get('msg')}" if field else str(first.get("msg"))
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(IntegrityError)
async def integrity_error_handler(request: Request, exc: IntegrityError) -> JSONResponse:
    """처리되지 않은 제약 위반 — Constraint violations not mapped by a service."""
    logger.warning("Unhandled integrity error on %s: %s", request.url.path, exc.orig)
    return JSONResponse(status_code=400, content={"error": "Constraint violation"})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return HealthResponse(status="OK", message="Server is running")


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from store_ratings.api.admin import admin_router  # noqa: E402
from store_ratings.api.auth import router as auth_router  # noqa: E402
from store_ratings.api.ratings import router as ratings_router  # noqa: E402
from store_ratings.api.store_owner import router as store_owner_router  # noqa: E402
from store_ratings.api.stores import router as stores_router  # noqa: E402

app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(admin_router, prefix="/api/admin")
app.include_router(stores_router, prefix="/api/stores", tags=["Stores"])
app.include_router(ratings_router, prefix="/api/ratings", tags=["Ratings"])
app.include_router(store_owner_router, prefix="/api/store-owner", tags=["Store Owner"])
