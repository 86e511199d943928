"""
부동산 장부 (Ledger)

부동산별 Debit/Credit 기록, 잠금, 월세 등록부, 매각/세금 하위 장부.

사용 예시:
```python
from core.ledger import LedgerStore, compute_totals, build_tax_entry

store = LedgerStore()
store.open_ledger("prop-1")

entry_id = store.add("prop-1", build_tax_entry(
    PropertyType.SALE, TaxType.PROPERTY_SALE_TAX, "1200", date(2024, 5, 1),
    tax_rate="5.5", challan_number="CH-100",
))

totals = compute_totals(store.list_by_property("prop-1"))
print(totals.format_balance())  # "1200 (Debit)"
```
"""

from core.ledger.balance import LedgerTotals, compute_totals
from core.ledger.entry import (
    EDITABLE_FIELDS,
    Attachment,
    LedgerEntry,
    LedgerEntryDraft,
)
from core.ledger.opening_balance import add_opening_balance, build_opening_balance_entry
from core.ledger.rent_register import (
    RentReceipt,
    RentRecord,
    RentRegisterSummary,
    build_rental_expense,
    generate_rent_schedule,
    mark_rent_received,
    property_rent_schedule,
    summarize_rent_schedule,
)
from core.ledger.sale import (
    SALE_CATEGORIES,
    SALE_STAGE_DESCRIPTIONS,
    SaleSummary,
    build_sale_entry,
    recent_sale_entries,
    sale_entries,
    summarize_sales,
)
from core.ledger.store import LedgerStore
from core.ledger.tax import available_tax_types, build_tax_entry, compose_tax_description

__all__ = [
    # 저장소 / 모델
    "LedgerStore",
    "LedgerEntry",
    "LedgerEntryDraft",
    "Attachment",
    "EDITABLE_FIELDS",
    # 합계
    "LedgerTotals",
    "compute_totals",
    # 기초 잔액
    "build_opening_balance_entry",
    "add_opening_balance",
    # 월세 등록부
    "RentRecord",
    "RentReceipt",
    "RentRegisterSummary",
    "generate_rent_schedule",
    "property_rent_schedule",
    "summarize_rent_schedule",
    "mark_rent_received",
    "build_rental_expense",
    # 매각
    "SALE_CATEGORIES",
    "SALE_STAGE_DESCRIPTIONS",
    "SaleSummary",
    "sale_entries",
    "recent_sale_entries",
    "summarize_sales",
    "build_sale_entry",
    # 세금
    "available_tax_types",
    "compose_tax_description",
    "build_tax_entry",
]
