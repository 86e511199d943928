"""
SQLite 어댑터

WAL 모드로 SQLite 연결 관리.
Web 서버와 운영 스크립트가 같은 DB 파일을 사용한다.

금액 컬럼은 모두 TEXT (Decimal 문자열)로 저장한다.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any, AsyncIterator

import aiosqlite

logger = logging.getLogger(__name__)


async def create_connection(db_path: Path | str) -> aiosqlite.Connection:
    """SQLite 연결 생성 (WAL 모드)

    Args:
        db_path: DB 파일 경로 (":memory:" 허용)

    Returns:
        aiosqlite 연결 객체
    """
    db_path_str = str(db_path)
    if db_path_str != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path_str)
    await conn.execute("PRAGMA journal_mode=WAL")
    await conn.execute("PRAGMA busy_timeout=30000")  # 30초 대기
    await conn.execute("PRAGMA foreign_keys=ON")

    logger.info(f"SQLite 연결 생성: {db_path_str}")
    return conn


class SQLiteAdapter:
    """SQLite 어댑터

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)
        async with db.transaction() as conn:
            await conn.execute("DELETE FROM bank")
    ```
    """

    def __init__(self, db_path: Path | str):
        self.db_path = db_path if str(db_path) == ":memory:" else Path(db_path)
        self._conn: aiosqlite.Connection | None = None

    @property
    def is_connected(self) -> bool:
        return self._conn is not None

    def _require_conn(self) -> aiosqlite.Connection:
        if self._conn is None:
            raise RuntimeError("Not connected to database")
        return self._conn

    async def connect(self) -> None:
        if self._conn is None:
            self._conn = await create_connection(self.db_path)

    async def close(self) -> None:
        if self._conn is not None:
            await self._conn.close()
            self._conn = None
            logger.info("SQLite 연결 종료")

    async def execute(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> aiosqlite.Cursor:
        conn = self._require_conn()
        if parameters:
            return await conn.execute(sql, parameters)
        return await conn.execute(sql)

    async def fetchone(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> tuple[Any, ...] | None:
        cursor = await self.execute(sql, parameters)
        return await cursor.fetchone()

    async def fetchall(
        self,
        sql: str,
        parameters: tuple[Any, ...] | None = None,
    ) -> list[tuple[Any, ...]]:
        cursor = await self.execute(sql, parameters)
        return list(await cursor.fetchall())

    async def commit(self) -> None:
        if self._conn is not None:
            await self._conn.commit()

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[aiosqlite.Connection]:
        """트랜잭션 컨텍스트 매니저

        성공 시 자동 커밋, 예외 시 자동 롤백.
        """
        conn = self._require_conn()
        try:
            yield conn
            await conn.commit()
        except Exception:
            await conn.rollback()
            raise

    async def table_exists(self, table_name: str) -> bool:
        result = await self.fetchone(
            "SELECT name FROM sqlite_master WHERE type='table' AND name=?",
            (table_name,),
        )
        return result is not None

    async def __aenter__(self) -> "SQLiteAdapter":
        await self.connect()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()


async def init_schema(adapter: SQLiteAdapter) -> None:
    """스키마 초기화 (테이블 생성, 이미 있으면 유지)

    Args:
        adapter: 연결된 SQLiteAdapter
    """
    # property: 부동산 (임대 조건은 JSON)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS property (
            property_id      TEXT PRIMARY KEY,
            position         INTEGER NOT NULL,
            name             TEXT NOT NULL,
            property_type    TEXT NOT NULL,
            purchase_date    TEXT NOT NULL,
            rental_json      TEXT
        )
    """)

    # ledger_entry: 부동산별 장부 항목 (position = 입력 순서)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS ledger_entry (
            entry_id           TEXT PRIMARY KEY,
            property_id        TEXT NOT NULL REFERENCES property(property_id) ON DELETE CASCADE,
            position           INTEGER NOT NULL,

            entry_date         TEXT NOT NULL,
            description        TEXT NOT NULL,
            entry_type         TEXT NOT NULL,
            amount             TEXT NOT NULL,
            category           TEXT,
            payment_method     TEXT,
            counterparty       TEXT,
            linked_document_id TEXT,
            linked_image_id    TEXT,
            attachment_json    TEXT,
            notes              TEXT,

            is_opening_balance INTEGER NOT NULL DEFAULT 0,
            is_locked          INTEGER NOT NULL DEFAULT 0,
            version            INTEGER NOT NULL DEFAULT 1
        )
    """)

    # daily_log: 날짜당 1행, 잔액/지출은 JSON
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS daily_log (
            log_id           TEXT PRIMARY KEY,
            log_date         TEXT NOT NULL UNIQUE,
            payload_json     TEXT NOT NULL,
            is_locked        INTEGER NOT NULL DEFAULT 0,
            version          INTEGER NOT NULL DEFAULT 1,
            updated_at       TEXT NOT NULL DEFAULT (datetime('now'))
        )
    """)

    # bank: 은행 계좌 레지스트리
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS bank (
            bank_id          TEXT PRIMARY KEY,
            position         INTEGER NOT NULL,
            name             TEXT NOT NULL,
            account_number   TEXT,
            branch_name      TEXT,
            account_type     TEXT,
            balance          TEXT,
            notes            TEXT
        )
    """)

    # workspace_meta: 저장 이력 표시 (saved_at 행이 있으면 저장된 적 있는 DB)
    await adapter.execute("""
        CREATE TABLE IF NOT EXISTS workspace_meta (
            key              TEXT PRIMARY KEY,
            value            TEXT NOT NULL
        )
    """)

    await adapter.execute("""
        CREATE INDEX IF NOT EXISTS ix_ledger_entry_property
        ON ledger_entry(property_id, position)
    """)

    await adapter.commit()
    logger.info("스키마 초기화 완료")
