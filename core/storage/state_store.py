"""
StateStore - 작업 공간 영속화

Workspace 전체를 SQLite에 저장/복원한다.
저장은 한 트랜잭션에서 기존 행을 지우고 다시 쓴다 (단일 writer).

금액은 Decimal 문자열로 저장하므로 반복 저장/복원에도 값이 변하지 않는다.
ID, 잠금 플래그, 버전은 그대로 보존된다.
"""

import json
import logging
from dataclasses import asdict
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from adapters.db.sqlite_adapter import SQLiteAdapter
from core.banks import Bank
from core.config.loader import AppConfig
from core.daily.models import Balances, DailyExpense, DailyLog, ReopenRecord
from core.ledger.entry import Attachment, LedgerEntry
from core.property import Property, RentalDetails
from core.types import EntryType, ExpensePaymentMethod, PaymentMethod, PropertyType
from core.utils.timezone import now_utc
from core.workspace import Workspace

logger = logging.getLogger(__name__)

SAVED_AT_KEY = "saved_at"


# =============================================================================
# 직렬화 헬퍼
# =============================================================================


def _dec(value: Decimal | None) -> str | None:
    return str(value) if value is not None else None


def _to_dec(value: str | None) -> Decimal | None:
    return Decimal(value) if value is not None else None


def _balances_to_json(balances: Balances) -> dict[str, Any]:
    return {
        "cash": str(balances.cash),
        "banks": {name: str(amount) for name, amount in balances.banks.items()},
    }


def _balances_from_json(data: dict[str, Any]) -> Balances:
    return Balances(
        cash=Decimal(data["cash"]),
        banks={name: Decimal(amount) for name, amount in data.get("banks", {}).items()},
    )


def _expense_to_json(expense: DailyExpense) -> dict[str, Any]:
    return {
        "expense_id": expense.expense_id,
        "description": expense.description,
        "amount": str(expense.amount),
        "payment_method": expense.payment_method.value,
        "property_id": expense.property_id,
        "bank_name": expense.bank_name,
        "cash_amount": _dec(expense.cash_amount),
        "bank_amount": _dec(expense.bank_amount),
        "is_pending": expense.is_pending,
    }


def _expense_from_json(data: dict[str, Any]) -> DailyExpense:
    return DailyExpense(
        expense_id=data["expense_id"],
        description=data["description"],
        amount=Decimal(data["amount"]),
        payment_method=ExpensePaymentMethod(data["payment_method"]),
        property_id=data.get("property_id"),
        bank_name=data.get("bank_name"),
        cash_amount=_to_dec(data.get("cash_amount")),
        bank_amount=_to_dec(data.get("bank_amount")),
        is_pending=bool(data.get("is_pending", False)),
    )


def daily_log_to_json(log: DailyLog) -> str:
    """daily_log.payload_json 값"""
    return json.dumps({
        "opening_balances": _balances_to_json(log.opening_balances),
        "closing_balances": _balances_to_json(log.closing_balances),
        "expenses": [_expense_to_json(e) for e in log.expenses],
        "total_daily_expenses": str(log.total_daily_expenses),
        "bank_usage": {name: str(amount) for name, amount in log.bank_usage.items()},
        "reopen_history": [
            {"reopened_at": r.reopened_at.isoformat(), "reason": r.reason}
            for r in log.reopen_history
        ],
    })


def daily_log_from_row(
    log_id: str, log_date: str, payload_json: str, is_locked: int, version: int
) -> DailyLog:
    payload = json.loads(payload_json)
    return DailyLog(
        log_id=log_id,
        log_date=date.fromisoformat(log_date),
        opening_balances=_balances_from_json(payload["opening_balances"]),
        expenses=tuple(_expense_from_json(e) for e in payload.get("expenses", [])),
        closing_balances=_balances_from_json(payload["closing_balances"]),
        total_daily_expenses=Decimal(payload.get("total_daily_expenses", "0")),
        bank_usage={
            name: Decimal(amount) for name, amount in payload.get("bank_usage", {}).items()
        },
        is_locked=bool(is_locked),
        reopen_history=tuple(
            ReopenRecord(datetime.fromisoformat(r["reopened_at"]), r["reason"])
            for r in payload.get("reopen_history", [])
        ),
        version=version,
    )


def _rental_to_json(rental: RentalDetails | None) -> str | None:
    if rental is None:
        return None
    data = asdict(rental)
    data["monthly_rent_amount"] = str(rental.monthly_rent_amount)
    data["security_advance_amount"] = _dec(rental.security_advance_amount)
    return json.dumps(data)


def _rental_from_json(raw: str | None) -> RentalDetails | None:
    if raw is None:
        return None
    data = json.loads(raw)
    return RentalDetails(
        tenant_name=data["tenant_name"],
        monthly_rent_amount=Decimal(data["monthly_rent_amount"]),
        rent_due_date=int(data["rent_due_date"]),
        tenant_phone=data.get("tenant_phone"),
        security_advance_amount=_to_dec(data.get("security_advance_amount")),
    )


# =============================================================================
# StateStore
# =============================================================================


class StateStore:
    """Workspace 저장소

    Args:
        db: 연결되고 스키마가 초기화된 SQLiteAdapter

    사용 예시:
    ```python
    async with SQLiteAdapter(db_path) as db:
        await init_schema(db)
        store = StateStore(db)
        workspace = await store.load_workspace(config)
        ...
        await store.save_workspace(workspace)
    ```
    """

    def __init__(self, db: SQLiteAdapter):
        self.db = db

    async def save_workspace(self, workspace: Workspace) -> None:
        """전체 상태 저장 (한 트랜잭션)"""
        properties = workspace.properties.list()
        entry_count = 0

        async with self.db.transaction() as conn:
            await conn.execute("DELETE FROM ledger_entry")
            await conn.execute("DELETE FROM property")
            await conn.execute("DELETE FROM daily_log")
            await conn.execute("DELETE FROM bank")

            await conn.executemany(
                """
                INSERT INTO property (
                    property_id, position, name, property_type, purchase_date, rental_json
                ) VALUES (?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        prop.property_id,
                        position,
                        prop.name,
                        prop.property_type.value,
                        prop.purchase_date.isoformat(),
                        _rental_to_json(prop.rental_details),
                    )
                    for position, prop in enumerate(properties)
                ],
            )

            for prop in properties:
                if not workspace.ledger.has_ledger(prop.property_id):
                    continue
                entries = workspace.ledger.list_by_property(prop.property_id)
                entry_count += len(entries)
                await conn.executemany(
                    """
                    INSERT INTO ledger_entry (
                        entry_id, property_id, position,
                        entry_date, description, entry_type, amount,
                        category, payment_method, counterparty,
                        linked_document_id, linked_image_id, attachment_json, notes,
                        is_opening_balance, is_locked, version
                    ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                    """,
                    [
                        (
                            e.entry_id,
                            prop.property_id,
                            position,
                            e.entry_date.isoformat(),
                            e.description,
                            e.entry_type.value,
                            str(e.amount),
                            e.category,
                            e.payment_method.value if e.payment_method else None,
                            e.counterparty,
                            e.linked_document_id,
                            e.linked_image_id,
                            json.dumps(asdict(e.attachment)) if e.attachment else None,
                            e.notes,
                            int(e.is_opening_balance),
                            int(e.is_locked),
                            e.version,
                        )
                        for position, e in enumerate(entries)
                    ],
                )

            await conn.executemany(
                """
                INSERT INTO daily_log (log_id, log_date, payload_json, is_locked, version)
                VALUES (?, ?, ?, ?, ?)
                """,
                [
                    (
                        log.log_id,
                        log.log_date.isoformat(),
                        daily_log_to_json(log),
                        int(log.is_locked),
                        log.version,
                    )
                    for log in workspace.daily_logs.list_logs()
                ],
            )

            await conn.executemany(
                """
                INSERT INTO bank (
                    bank_id, position, name, account_number, branch_name,
                    account_type, balance, notes
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?)
                """,
                [
                    (
                        b.bank_id,
                        position,
                        b.name,
                        b.account_number,
                        b.branch_name,
                        b.account_type,
                        _dec(b.balance),
                        b.notes,
                    )
                    for position, b in enumerate(workspace.banks.list())
                ],
            )

            await conn.execute(
                "INSERT OR REPLACE INTO workspace_meta (key, value) VALUES (?, ?)",
                (SAVED_AT_KEY, now_utc().isoformat()),
            )

        logger.debug(
            f"Workspace saved: {len(properties)} properties, {entry_count} entries"
        )

    async def load_workspace(self, config: AppConfig | None = None) -> Workspace:
        """저장된 상태로 Workspace 생성

        저장된 적이 없는 DB(saved_at 표시와 행이 모두 없음)면 기본 은행만 있는
        새 Workspace. 한 번이라도 저장했다면 은행 목록이 비어 있어도 그대로 복원한다.
        """
        workspace = Workspace.create(config)

        property_rows = await self.db.fetchall(
            """
            SELECT property_id, name, property_type, purchase_date, rental_json
            FROM property ORDER BY position
            """
        )
        bank_rows = await self.db.fetchall(
            """
            SELECT bank_id, name, account_number, branch_name, account_type, balance, notes
            FROM bank ORDER BY position
            """
        )
        log_rows = await self.db.fetchall(
            "SELECT log_id, log_date, payload_json, is_locked, version FROM daily_log"
        )

        saved_marker = await self.db.fetchone(
            "SELECT value FROM workspace_meta WHERE key = ?", (SAVED_AT_KEY,)
        )
        if saved_marker is None and not property_rows and not bank_rows and not log_rows:
            logger.info("No saved workspace, starting with defaults")
            return workspace

        workspace.banks.restore(
            Bank(
                bank_id=row[0],
                name=row[1],
                account_number=row[2],
                branch_name=row[3],
                account_type=row[4],
                balance=_to_dec(row[5]),
                notes=row[6],
            )
            for row in bank_rows
        )

        properties = [
            Property(
                property_id=row[0],
                name=row[1],
                property_type=PropertyType(row[2]),
                purchase_date=date.fromisoformat(row[3]),
                rental_details=_rental_from_json(row[4]),
            )
            for row in property_rows
        ]
        workspace.properties.restore(properties)

        for prop in properties:
            entry_rows = await self.db.fetchall(
                """
                SELECT entry_id, entry_date, description, entry_type, amount,
                       category, payment_method, counterparty,
                       linked_document_id, linked_image_id, attachment_json, notes,
                       is_opening_balance, is_locked, version
                FROM ledger_entry
                WHERE property_id = ?
                ORDER BY position
                """,
                (prop.property_id,),
            )
            workspace.ledger.restore(
                prop.property_id,
                [self._entry_from_row(row) for row in entry_rows],
            )

        workspace.daily_logs.restore(daily_log_from_row(*row) for row in log_rows)

        logger.info(
            f"Workspace loaded: {len(properties)} properties, "
            f"{len(log_rows)} daily logs, {len(bank_rows)} banks"
        )
        return workspace

    @staticmethod
    def _entry_from_row(row: tuple[Any, ...]) -> LedgerEntry:
        attachment = json.loads(row[10]) if row[10] else None
        return LedgerEntry(
            entry_id=row[0],
            entry_date=date.fromisoformat(row[1]),
            description=row[2],
            entry_type=EntryType(row[3]),
            amount=Decimal(row[4]),
            category=row[5],
            payment_method=PaymentMethod(row[6]) if row[6] else None,
            counterparty=row[7],
            linked_document_id=row[8],
            linked_image_id=row[9],
            attachment=Attachment(**attachment) if attachment else None,
            notes=row[11],
            is_opening_balance=bool(row[12]),
            is_locked=bool(row[13]),
            version=row[14],
        )
