"""
은행 계좌 레지스트리

일일 로그와 결제 수단 선택에서 참조하는 이름 있는 계좌 목록.
이름은 대소문자 무시 기준으로 유일하다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from decimal import Decimal
from typing import Any, Callable, Iterable
from uuid import uuid4

from core.errors import BankInUseError, DuplicateError, NotFoundError, ValidationError
from core.utils.money import to_decimal

logger = logging.getLogger(__name__)

# 은행 이름 → 사용 여부 (DailyLogStore.bank_in_use)
UsageChecker = Callable[[str], bool]


@dataclass(frozen=True)
class Bank:
    bank_id: str
    name: str
    account_number: str | None = None
    branch_name: str | None = None
    account_type: str | None = None
    balance: Decimal | None = None
    notes: str | None = None


BANK_EDITABLE_FIELDS = frozenset(f.name for f in fields(Bank)) - {"bank_id"}


class BankRegistry:
    """Bank 레지스트리

    삭제 시 usage_checker로 사용 여부를 확인한다 (Workspace가 연결).
    """

    def __init__(self, usage_checker: UsageChecker | None = None) -> None:
        self._banks: dict[str, Bank] = {}
        self._usage_checker = usage_checker

    @classmethod
    def with_defaults(cls, names: Iterable[str]) -> BankRegistry:
        """기본 은행 목록으로 초기화 (bank-1, bank-2, ... / 잔액 0)"""
        registry = cls()
        for i, name in enumerate(names, start=1):
            registry._banks[f"bank-{i}"] = Bank(
                bank_id=f"bank-{i}", name=name, balance=Decimal("0")
            )
        return registry

    def set_usage_checker(self, checker: UsageChecker) -> None:
        self._usage_checker = checker

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    def get(self, bank_id: str) -> Bank:
        bank = self._banks.get(bank_id)
        if bank is None:
            raise NotFoundError(f"Bank not found: {bank_id}")
        return bank

    def list(self) -> list[Bank]:
        return list(self._banks.values())

    def names(self) -> list[str]:
        return [bank.name for bank in self._banks.values()]

    def find_by_name(self, name: str) -> Bank | None:
        key = name.strip().lower()
        for bank in self._banks.values():
            if bank.name.lower() == key:
                return bank
        return None

    # -------------------------------------------------------------------------
    # 변경
    # -------------------------------------------------------------------------

    def _validated_name(self, name: Any, exclude_id: str | None = None) -> str:
        if not isinstance(name, str) or not name.strip():
            raise ValidationError("Bank name is required")
        name = name.strip()
        existing = self.find_by_name(name)
        if existing is not None and existing.bank_id != exclude_id:
            raise DuplicateError(f"Bank '{name}' already exists")
        return name

    def add(
        self,
        name: str,
        account_number: str | None = None,
        branch_name: str | None = None,
        account_type: str | None = None,
        balance: Decimal | int | str | None = None,
        notes: str | None = None,
    ) -> Bank:
        """은행 추가

        Raises:
            ValidationError: 이름 없음, 잔액 형식 오류
            DuplicateError: 같은 이름(대소문자 무시)이 이미 있음
        """
        bank = Bank(
            bank_id=str(uuid4()),
            name=self._validated_name(name),
            account_number=account_number or None,
            branch_name=branch_name or None,
            account_type=account_type or None,
            balance=to_decimal(balance, "balance") if balance is not None else None,
            notes=notes or None,
        )
        self._banks[bank.bank_id] = bank
        logger.info(f"Bank added: {bank.name} ({bank.bank_id})")
        return bank

    def update(self, bank_id: str, patch: dict[str, Any]) -> Bank:
        """은행 정보 수정

        일일 지출에서 사용 중인 은행은 이름을 바꿀 수 없다 (대소문자만 다른 변경은 허용).

        Raises:
            NotFoundError: 은행 없음
            ValidationError: 수정 불가 필드, 이름 중복 등
            BankInUseError: 사용 중인 은행의 이름 변경
        """
        bank = self.get(bank_id)
        unknown = set(patch) - BANK_EDITABLE_FIELDS
        if unknown:
            raise ValidationError(f"Fields cannot be edited: {sorted(unknown)}")

        changes = dict(patch)
        if "name" in changes:
            changes["name"] = self._validated_name(changes["name"], exclude_id=bank_id)
            renamed = changes["name"].lower() != bank.name.lower()
            if renamed and self._usage_checker is not None and self._usage_checker(bank.name):
                logger.warning(f"Rejected rename of bank in use: {bank.name}")
                raise BankInUseError(bank.name, action="renamed")
        if changes.get("balance") is not None:
            changes["balance"] = to_decimal(changes["balance"], "balance")

        updated = replace(bank, **changes)
        self._banks[bank_id] = updated
        logger.info(f"Bank updated: {updated.name} ({bank_id})")
        return updated

    def delete(self, bank_id: str) -> None:
        """은행 삭제

        Raises:
            NotFoundError: 은행 없음
            BankInUseError: 일일 지출에서 사용 중
        """
        bank = self.get(bank_id)
        if self._usage_checker is not None and self._usage_checker(bank.name):
            logger.warning(f"Rejected delete of bank in use: {bank.name}")
            raise BankInUseError(bank.name)
        del self._banks[bank_id]
        logger.info(f"Bank deleted: {bank.name} ({bank_id})")

    def restore(self, banks: Iterable[Bank]) -> None:
        """저장된 은행 목록으로 교체"""
        self._banks = {bank.bank_id: bank for bank in banks}
