"""
SQLite 어댑터 테스트

SQLiteAdapter 및 관련 함수 테스트.
"""

from pathlib import Path

import aiosqlite
import pytest
import pytest_asyncio

from adapters.db.sqlite_adapter import SQLiteAdapter, create_connection, init_schema


class TestCreateConnection:
    """create_connection 테스트"""

    @pytest.mark.asyncio
    async def test_create_connection(self, tmp_path: Path) -> None:
        """연결 생성 (WAL 모드)"""
        conn = await create_connection(tmp_path / "test.db")

        cursor = await conn.execute("PRAGMA journal_mode")
        row = await cursor.fetchone()
        assert row[0].upper() == "WAL"

        await conn.close()

    @pytest.mark.asyncio
    async def test_creates_parent_directory(self, tmp_path: Path) -> None:
        """부모 디렉토리 생성"""
        db_path = tmp_path / "subdir" / "test.db"

        conn = await create_connection(db_path)

        assert db_path.parent.exists()
        await conn.close()

    @pytest.mark.asyncio
    async def test_memory_database(self) -> None:
        conn = await create_connection(":memory:")
        await conn.execute("CREATE TABLE t (id INTEGER)")
        await conn.close()


class TestSQLiteAdapter:
    """SQLiteAdapter 테스트"""

    @pytest_asyncio.fixture
    async def adapter(self, tmp_path: Path) -> SQLiteAdapter:
        """어댑터 픽스처"""
        adapter = SQLiteAdapter(tmp_path / "test.db")
        await adapter.connect()
        yield adapter
        await adapter.close()

    @pytest.mark.asyncio
    async def test_connect_and_close(self, tmp_path: Path) -> None:
        """연결 및 종료"""
        adapter = SQLiteAdapter(tmp_path / "test.db")

        assert adapter.is_connected is False
        await adapter.connect()
        assert adapter.is_connected is True
        await adapter.close()
        assert adapter.is_connected is False

    @pytest.mark.asyncio
    async def test_not_connected(self, tmp_path: Path) -> None:
        adapter = SQLiteAdapter(tmp_path / "test.db")

        with pytest.raises(RuntimeError):
            await adapter.execute("SELECT 1")

    @pytest.mark.asyncio
    async def test_execute_and_fetch(self, adapter: SQLiteAdapter) -> None:
        """SQL 실행 및 조회"""
        await adapter.execute("CREATE TABLE items (value TEXT)")
        for value in ("B", "A", "C"):
            await adapter.execute("INSERT INTO items (value) VALUES (?)", (value,))
        await adapter.commit()

        row = await adapter.fetchone("SELECT value FROM items WHERE value = ?", ("A",))
        rows = await adapter.fetchall("SELECT value FROM items ORDER BY value")

        assert row[0] == "A"
        assert [r[0] for r in rows] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_transaction_commit(self, adapter: SQLiteAdapter) -> None:
        """트랜잭션 커밋"""
        await adapter.execute("CREATE TABLE tx_test (id INTEGER)")
        await adapter.commit()

        async with adapter.transaction() as conn:
            await conn.execute("INSERT INTO tx_test (id) VALUES (1)")
            await conn.execute("INSERT INTO tx_test (id) VALUES (2)")

        rows = await adapter.fetchall("SELECT id FROM tx_test")
        assert len(rows) == 2

    @pytest.mark.asyncio
    async def test_transaction_rollback(self, adapter: SQLiteAdapter) -> None:
        """트랜잭션 롤백"""
        await adapter.execute("CREATE TABLE tx_test2 (id INTEGER)")
        await adapter.commit()

        with pytest.raises(ValueError):
            async with adapter.transaction() as conn:
                await conn.execute("INSERT INTO tx_test2 (id) VALUES (1)")
                raise ValueError("의도적 에러")

        rows = await adapter.fetchall("SELECT id FROM tx_test2")
        assert len(rows) == 0

    @pytest.mark.asyncio
    async def test_context_manager(self, tmp_path: Path) -> None:
        """컨텍스트 매니저"""
        async with SQLiteAdapter(tmp_path / "ctx_test.db") as adapter:
            assert adapter.is_connected is True

        assert adapter.is_connected is False


class TestInitSchema:
    """init_schema 테스트"""

    @pytest.mark.asyncio
    async def test_creates_tables(self, tmp_path: Path) -> None:
        async with SQLiteAdapter(tmp_path / "schema.db") as adapter:
            await init_schema(adapter)

            for table in ("property", "ledger_entry", "daily_log", "bank", "workspace_meta"):
                assert await adapter.table_exists(table) is True, table

    @pytest.mark.asyncio
    async def test_idempotent(self, tmp_path: Path) -> None:
        """여러 번 실행 가능"""
        async with SQLiteAdapter(tmp_path / "schema.db") as adapter:
            await init_schema(adapter)
            await init_schema(adapter)

            assert await adapter.table_exists("ledger_entry") is True

    @pytest.mark.asyncio
    async def test_one_daily_log_per_date(self, tmp_path: Path) -> None:
        """daily_log.log_date UNIQUE"""
        async with SQLiteAdapter(tmp_path / "schema.db") as adapter:
            await init_schema(adapter)
            await adapter.execute(
                "INSERT INTO daily_log (log_id, log_date, payload_json) VALUES ('a', '2024-03-01', '{}')"
            )

            with pytest.raises(aiosqlite.IntegrityError):
                await adapter.execute(
                    "INSERT INTO daily_log (log_id, log_date, payload_json) VALUES ('b', '2024-03-01', '{}')"
                )
