"""
Ledger 서비스

부동산 장부 조회/변경과 하위 장부(기초 잔액, 세금, 매각, 임대료) 연결.
"""

import logging
from datetime import date
from typing import Any

from core.ledger import (
    Attachment,
    LedgerEntry,
    LedgerEntryDraft,
    LedgerStore,
    LedgerTotals,
    RentRecord,
    add_opening_balance,
    available_tax_types,
    build_opening_balance_entry,
    build_rental_expense,
    build_sale_entry,
    build_tax_entry,
    compute_totals,
    mark_rent_received,
    property_rent_schedule,
    recent_sale_entries,
    summarize_rent_schedule,
    summarize_sales,
)
from core.utils.timezone import make_local_tz, today_local
from core.workspace import Workspace
from web.models.requests import (
    LedgerEntryCreateRequest,
    LedgerEntryUpdateRequest,
    OpeningBalanceRequest,
    RentalExpenseRequest,
    SaleEntryRequest,
    TaxEntryRequest,
)
from web.models.responses import (
    AttachmentResponse,
    LedgerEntryResponse,
    LedgerResponse,
    LedgerTotalsResponse,
    RentReceiptResponse,
    RentRecordResponse,
    RentScheduleResponse,
    SaleSummaryResponse,
    TaxTypesResponse,
)

logger = logging.getLogger(__name__)


def entry_to_response(entry: LedgerEntry) -> LedgerEntryResponse:
    return LedgerEntryResponse(
        entry_id=entry.entry_id,
        entry_date=entry.entry_date,
        description=entry.description,
        entry_type=entry.entry_type.value,
        amount=str(entry.amount),
        category=entry.category,
        payment_method=entry.payment_method.value if entry.payment_method else None,
        counterparty=entry.counterparty,
        linked_document_id=entry.linked_document_id,
        linked_image_id=entry.linked_image_id,
        attachment=(
            AttachmentResponse(url=entry.attachment.url, file_name=entry.attachment.file_name)
            if entry.attachment
            else None
        ),
        notes=entry.notes,
        is_opening_balance=entry.is_opening_balance,
        is_locked=entry.is_locked,
        version=entry.version,
    )


def totals_to_response(totals: LedgerTotals, currency: str) -> LedgerTotalsResponse:
    return LedgerTotalsResponse(
        total_debit=str(totals.total_debit),
        total_credit=str(totals.total_credit),
        balance=str(totals.balance),
        display_side=totals.display_side,
        display_balance=totals.format_balance(currency),
    )


def rent_record_to_response(record: RentRecord) -> RentRecordResponse:
    return RentRecordResponse(
        year=record.year,
        month=record.month,
        month_label=record.month_label,
        due_date=record.due_date,
        amount=str(record.amount),
        is_received=record.is_received,
        received_date=record.received_date,
        source_entry_id=record.source_entry_id,
    )


class LedgerService:
    """Ledger 서비스

    Args:
        workspace: 작업 공간
    """

    def __init__(self, workspace: Workspace):
        self.workspace = workspace
        self.config = workspace.config

    @property
    def store(self) -> LedgerStore:
        return self.workspace.ledger

    def _today(self) -> date:
        return today_local(make_local_tz(self.config.timezone_offset_hours))

    def _entry(self, property_id: str, entry_id: str) -> LedgerEntryResponse:
        return entry_to_response(self.store.get(property_id, entry_id))

    # -------------------------------------------------------------------------
    # 장부
    # -------------------------------------------------------------------------

    def get_ledger(self, property_id: str) -> LedgerResponse:
        """장부 전체 + 합계"""
        self.workspace.properties.get(property_id)
        entries = self.store.list_by_property(property_id)
        return LedgerResponse(
            property_id=property_id,
            is_locked=self.store.is_ledger_locked(property_id),
            entries=[entry_to_response(e) for e in entries],
            totals=totals_to_response(compute_totals(entries), self.config.currency),
        )

    def get_totals(self, property_id: str) -> LedgerTotalsResponse:
        entries = self.store.list_by_property(property_id)
        return totals_to_response(compute_totals(entries), self.config.currency)

    def get_entry(self, property_id: str, entry_id: str) -> LedgerEntryResponse:
        return self._entry(property_id, entry_id)

    def add_entry(self, property_id: str, request: LedgerEntryCreateRequest) -> LedgerEntryResponse:
        data = request.model_dump()
        attachment = data.pop("attachment")
        draft = LedgerEntryDraft(
            **data,
            attachment=Attachment(**attachment) if attachment else None,
        )
        entry_id = self.store.add(property_id, draft)
        return self._entry(property_id, entry_id)

    def update_entry(
        self,
        property_id: str,
        entry_id: str,
        request: LedgerEntryUpdateRequest,
    ) -> LedgerEntryResponse:
        """보낸 필드만 수정 (expected_version이 있으면 버전 확인)"""
        patch: dict[str, Any] = request.model_dump(exclude_unset=True)
        expected_version = patch.pop("expected_version", None)
        if patch.get("attachment") is not None:
            patch["attachment"] = Attachment(**patch["attachment"])

        updated = self.store.update(property_id, entry_id, patch, expected_version=expected_version)
        return entry_to_response(updated)

    def delete_entry(
        self, property_id: str, entry_id: str, expected_version: int | None = None
    ) -> None:
        self.store.delete(property_id, entry_id, expected_version=expected_version)

    def lock_entry(self, property_id: str, entry_id: str) -> LedgerEntryResponse:
        return entry_to_response(self.store.lock(property_id, entry_id))

    def unlock_entry(self, property_id: str, entry_id: str) -> LedgerEntryResponse:
        return entry_to_response(self.store.unlock(property_id, entry_id))

    def lock_all(self, property_id: str) -> LedgerResponse:
        self.store.lock_all(property_id)
        return self.get_ledger(property_id)

    def unlock_all(self, property_id: str) -> LedgerResponse:
        self.store.unlock_all(property_id)
        return self.get_ledger(property_id)

    # -------------------------------------------------------------------------
    # 하위 장부
    # -------------------------------------------------------------------------

    def add_opening_balance(
        self, property_id: str, request: OpeningBalanceRequest
    ) -> LedgerEntryResponse:
        """기초 잔액 (날짜 미지정이면 매입일)"""
        prop = self.workspace.properties.get(property_id)
        draft = build_opening_balance_entry(
            amount=request.amount,
            entry_date=request.entry_date or prop.purchase_date,
            entry_type=request.entry_type,
            **({"notes": request.notes} if request.notes is not None else {}),
        )
        entry_id = add_opening_balance(self.store, property_id, draft)
        return self._entry(property_id, entry_id)

    def tax_types(self, property_id: str) -> TaxTypesResponse:
        prop = self.workspace.properties.get(property_id)
        return TaxTypesResponse(
            property_type=prop.property_type.value,
            tax_types=[t.value for t in available_tax_types(prop.property_type)],
        )

    def record_tax(self, property_id: str, request: TaxEntryRequest) -> LedgerEntryResponse:
        prop = self.workspace.properties.get(property_id)
        draft = build_tax_entry(
            property_type=prop.property_type,
            tax_type=request.tax_type,
            amount=request.amount,
            entry_date=request.entry_date,
            description=request.description,
            tax_rate=request.tax_rate,
            challan_number=request.challan_number,
            payment_method=request.payment_method,
            paid_to=request.paid_to,
            notes=request.notes,
        )
        entry_id = self.store.add(property_id, draft)
        return self._entry(property_id, entry_id)

    def record_sale(self, property_id: str, request: SaleEntryRequest) -> LedgerEntryResponse:
        self.workspace.properties.get(property_id)
        draft = build_sale_entry(
            stage=request.stage,
            amount=request.amount,
            entry_date=request.entry_date,
            payment_method=request.payment_method,
            received_from=request.received_from,
            notes=request.notes,
        )
        entry_id = self.store.add(property_id, draft)
        return self._entry(property_id, entry_id)

    def sale_summary(self, property_id: str) -> SaleSummaryResponse:
        entries = self.store.list_by_property(property_id)
        summary = summarize_sales(entries)
        return SaleSummaryResponse(
            total=str(summary.total),
            by_category={k: str(v) for k, v in summary.by_category.items()},
            recent_entries=[entry_to_response(e) for e in recent_sale_entries(entries)],
        )

    def rent_schedule(self, property_id: str, as_of: date | None = None) -> RentScheduleResponse:
        prop = self.workspace.properties.get(property_id)
        records = property_rent_schedule(
            self.store,
            prop,
            as_of=as_of or self._today(),
            lookahead_months=self.config.rent_lookahead_months,
        )
        summary = summarize_rent_schedule(records)
        return RentScheduleResponse(
            property_id=property_id,
            records=[rent_record_to_response(r) for r in records],
            total_pending=str(summary.total_pending),
            pending_count=summary.pending_count,
            received_count=summary.received_count,
        )

    def receive_rent(
        self,
        property_id: str,
        year: int,
        month: int,
        received_on: date | None = None,
    ) -> RentReceiptResponse:
        prop = self.workspace.properties.get(property_id)
        receipt = mark_rent_received(
            self.store,
            prop,
            year,
            month,
            today=received_on or self._today(),
            lookahead_months=self.config.rent_lookahead_months,
        )
        return RentReceiptResponse(
            record=rent_record_to_response(receipt.record),
            entry_id=receipt.entry_id,
            already_recorded=receipt.already_recorded,
            notice=str(receipt.notice) if receipt.notice else None,
        )

    def record_rental_expense(
        self, property_id: str, request: RentalExpenseRequest
    ) -> LedgerEntryResponse:
        self.workspace.properties.get(property_id)
        draft = build_rental_expense(
            entry_date=request.entry_date,
            description=request.description,
            amount=request.amount,
            payment_method=request.payment_method,
            paid_to=request.paid_to,
            notes=request.notes,
        )
        entry_id = self.store.add(property_id, draft)
        return self._entry(property_id, entry_id)
