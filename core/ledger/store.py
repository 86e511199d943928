"""
Ledger 저장소

부동산별 장부 항목 저장 및 조회 (메모리, 단일 writer).
잠금(is_locked)은 동시성 제어가 아니라 업무 불변식이다.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable
from uuid import uuid4

from core.errors import EntryLockedError, NotFoundError, VersionConflictError
from core.ledger.entry import LedgerEntry, LedgerEntryDraft, apply_patch, normalize_draft

logger = logging.getLogger(__name__)


class LedgerStore:
    """Ledger 저장소

    부동산 하나가 자신의 장부 항목을 독점 소유한다 (1:N, 공유 없음).
    합계는 캐시하지 않는다. 항상 compute_totals로 파생.

    사용 예시:
    ```python
    store = LedgerStore()
    store.open_ledger("prop-1")

    entry_id = store.add("prop-1", draft)
    store.lock("prop-1", entry_id)
    store.update("prop-1", entry_id, {"notes": "x"})  # EntryLockedError
    ```
    """

    def __init__(self) -> None:
        # property_id -> {entry_id -> LedgerEntry} (삽입 순서 유지)
        self._ledgers: dict[str, dict[str, LedgerEntry]] = {}

    # -------------------------------------------------------------------------
    # 장부 단위
    # -------------------------------------------------------------------------

    def open_ledger(self, property_id: str) -> None:
        """빈 장부 생성 (이미 있으면 무시)"""
        self._ledgers.setdefault(property_id, {})

    def has_ledger(self, property_id: str) -> bool:
        return property_id in self._ledgers

    def property_ids(self) -> list[str]:
        return list(self._ledgers)

    def _ledger(self, property_id: str) -> dict[str, LedgerEntry]:
        ledger = self._ledgers.get(property_id)
        if ledger is None:
            raise NotFoundError(f"Ledger not found for property: {property_id}")
        return ledger

    def _entry(self, property_id: str, entry_id: str) -> LedgerEntry:
        entry = self._ledger(property_id).get(entry_id)
        if entry is None:
            raise NotFoundError(f"Entry not found: {entry_id} (property {property_id})")
        return entry

    @staticmethod
    def _check_version(entry: LedgerEntry, expected_version: int | None) -> None:
        if expected_version is not None and expected_version != entry.version:
            raise VersionConflictError(entry.entry_id, expected_version, entry.version)

    # -------------------------------------------------------------------------
    # 조회
    # -------------------------------------------------------------------------

    def get(self, property_id: str, entry_id: str) -> LedgerEntry:
        """항목 조회

        Raises:
            NotFoundError: 장부 또는 항목이 없는 경우
        """
        return self._entry(property_id, entry_id)

    def list_by_property(self, property_id: str) -> list[LedgerEntry]:
        """부동산의 전체 항목 (입력 순서)"""
        return list(self._ledger(property_id).values())

    def is_ledger_locked(self, property_id: str) -> bool:
        """하나라도 잠긴 항목이 있으면 True"""
        return any(e.is_locked for e in self._ledger(property_id).values())

    # -------------------------------------------------------------------------
    # 변경
    # -------------------------------------------------------------------------

    def add(self, property_id: str, draft: LedgerEntryDraft) -> str:
        """항목 추가

        새 ID를 부여해 뒤에 붙인다. 기존 항목은 건드리지 않는다.

        Returns:
            새 entry_id

        Raises:
            NotFoundError: 장부가 없는 경우
            ValidationError: 금액 0 이하 등 잘못된 항목
        """
        ledger = self._ledger(property_id)
        normalized = normalize_draft(draft)

        entry_id = str(uuid4())
        ledger[entry_id] = LedgerEntry.from_draft(entry_id, normalized)

        logger.info(
            f"Ledger entry added: {entry_id} "
            f"({normalized.entry_type.value} {normalized.amount}, property {property_id})"
        )
        return entry_id

    def update(
        self,
        property_id: str,
        entry_id: str,
        patch: dict[str, Any],
        expected_version: int | None = None,
    ) -> LedgerEntry:
        """항목 수정

        Args:
            patch: 변경할 필드 (EDITABLE_FIELDS만 허용)
            expected_version: 지정 시 버전 불일치면 거부 (etag)

        Returns:
            수정된 항목

        Raises:
            EntryLockedError: 잠긴 항목
            VersionConflictError: 버전 불일치
        """
        entry = self._entry(property_id, entry_id)
        if entry.is_locked:
            logger.warning(f"Update refused, entry locked: {entry_id}")
            raise EntryLockedError(entry_id)
        self._check_version(entry, expected_version)

        updated = apply_patch(entry, patch)
        self._ledgers[property_id][entry_id] = updated

        logger.info(f"Ledger entry updated: {entry_id} (v{updated.version})")
        return updated

    def delete(
        self,
        property_id: str,
        entry_id: str,
        expected_version: int | None = None,
    ) -> None:
        """항목 삭제

        Raises:
            EntryLockedError: 잠긴 항목
            VersionConflictError: 버전 불일치
        """
        entry = self._entry(property_id, entry_id)
        if entry.is_locked:
            logger.warning(f"Delete refused, entry locked: {entry_id}")
            raise EntryLockedError(entry_id)
        self._check_version(entry, expected_version)

        del self._ledgers[property_id][entry_id]
        logger.info(f"Ledger entry deleted: {entry_id} (property {property_id})")

    def _set_locked(self, property_id: str, entry_id: str, locked: bool) -> LedgerEntry:
        entry = self._entry(property_id, entry_id)
        if entry.is_locked == locked:
            return entry

        flipped = replace(entry, is_locked=locked, version=entry.version + 1)
        self._ledgers[property_id][entry_id] = flipped
        logger.info(f"Ledger entry {'locked' if locked else 'unlocked'}: {entry_id}")
        return flipped

    def lock(self, property_id: str, entry_id: str) -> LedgerEntry:
        """항목 잠금 (멱등, 다른 필드 변경 없음)"""
        return self._set_locked(property_id, entry_id, True)

    def unlock(self, property_id: str, entry_id: str) -> LedgerEntry:
        """항목 잠금 해제 (멱등)"""
        return self._set_locked(property_id, entry_id, False)

    def lock_all(self, property_id: str) -> list[LedgerEntry]:
        """부동산 전체 항목 잠금 (단일 lock의 일괄 호출)"""
        return [self.lock(property_id, entry_id) for entry_id in list(self._ledger(property_id))]

    def unlock_all(self, property_id: str) -> list[LedgerEntry]:
        """부동산 전체 항목 잠금 해제"""
        return [self.unlock(property_id, entry_id) for entry_id in list(self._ledger(property_id))]

    # -------------------------------------------------------------------------
    # 영속화 지원
    # -------------------------------------------------------------------------

    def restore(self, property_id: str, entries: Iterable[LedgerEntry]) -> None:
        """저장된 항목으로 장부 복원 (ID/잠금/버전 그대로)"""
        self._ledgers[property_id] = {e.entry_id: e for e in entries}
