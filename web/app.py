"""
FastAPI 애플리케이션

라우터 등록, 도메인 예외 → HTTP 응답 매핑, 작업 공간 생명주기.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from adapters.db.sqlite_adapter import SQLiteAdapter, init_schema
from core.config.loader import AppConfig, get_settings
from core.errors import (
    AlreadyRecordedError,
    EntryLockedError,
    LedgerError,
    NotFoundError,
    ValidationError,
    VersionConflictError,
)
from core.logging import setup_logging
from core.storage.state_store import StateStore
from web.routes import banks, daily_logs, health, ledger, properties

logger = logging.getLogger(__name__)

# 예외 종류 → HTTP 상태 (위에서부터 먼저 일치하는 항목)
ERROR_STATUS: list[tuple[type[LedgerError], int]] = [
    (VersionConflictError, 409),
    (AlreadyRecordedError, 409),
    (EntryLockedError, 423),
    (NotFoundError, 404),
    (ValidationError, 422),
]


def status_for(exc: LedgerError) -> int:
    for error_type, status in ERROR_STATUS:
        if isinstance(exc, error_type):
            return status
    return 400


async def ledger_error_handler(request: Request, exc: LedgerError) -> JSONResponse:
    """도메인 예외를 {"error", "detail"} 응답으로 변환"""
    status = status_for(exc)
    if status == 423:
        logger.warning(f"Locked: {request.method} {request.url.path} - {exc}")
    return JSONResponse(
        status_code=status,
        content={"error": type(exc).__name__, "detail": str(exc)},
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """앱 생명주기: DB 연결 → 스키마 → 작업 공간 로드 / 종료 시 연결 해제"""
    config: AppConfig = app.state.config

    db = SQLiteAdapter(config.db_path)
    await db.connect()
    await init_schema(db)

    state_store = StateStore(db)
    app.state.state_store = state_store
    app.state.workspace = await state_store.load_workspace(config)
    logger.info(f"Web: workspace loaded from {config.db_path}")

    try:
        yield
    finally:
        await db.close()


def create_app(config: AppConfig | None = None) -> FastAPI:
    """FastAPI 앱 생성

    Args:
        config: 애플리케이션 설정 (None이면 settings.yaml)
    """
    app = FastAPI(
        title="PropLedger API",
        description="부동산 장부 / 일일 현금·은행 정산 API",
        version=health.API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.config = config or get_settings().config

    # CORS 설정 (개발용)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(LedgerError, ledger_error_handler)

    app.include_router(health.router)
    app.include_router(properties.router)
    app.include_router(ledger.router)
    app.include_router(daily_logs.router)
    app.include_router(banks.router)

    return app


def build_app() -> FastAPI:
    """uvicorn factory 진입점 (로깅 설정 포함)"""
    config = get_settings().config
    setup_logging("web", config.log_level)
    return create_app(config)
