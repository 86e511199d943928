"""
core/types.py 테스트

모든 Enum이 문자열 직렬화 가능한지 확인
"""

import pytest

from core.types import (
    DailyLogStatus,
    EntryCategory,
    EntryType,
    ExpensePaymentMethod,
    PaymentMethod,
    PropertyType,
    SaleStage,
    TaxType,
)


class TestEntryType:
    def test_values(self) -> None:
        assert EntryType.DEBIT.value == "Debit"
        assert EntryType.CREDIT.value == "Credit"

    def test_from_string(self) -> None:
        """문자열에서 생성"""
        assert EntryType("Credit") is EntryType.CREDIT

    def test_invalid_value(self) -> None:
        with pytest.raises(ValueError):
            EntryType("credit")


class TestPaymentMethods:
    """결제 수단 테스트"""

    def test_ledger_methods(self) -> None:
        assert [m.value for m in PaymentMethod] == ["Cash", "Bank", "Cheque"]

    def test_expense_methods(self) -> None:
        assert [m.value for m in ExpensePaymentMethod] == ["Cash", "Bank", "Split"]


class TestCategories:
    def test_sale_stages_are_categories(self) -> None:
        """매각 단계는 모두 장부 카테고리 값"""
        category_values = {c.value for c in EntryCategory}

        assert {s.value for s in SaleStage} <= category_values

    def test_str_comparison(self) -> None:
        """str 상속으로 문자열 비교 가능"""
        assert EntryCategory.RENT == "Rent"
        assert PropertyType.SALE == "Sale"


class TestTaxType:
    def test_values(self) -> None:
        assert TaxType.PROPERTY_SALE_TAX.value == "Property Sale Tax"
        assert TaxType.RENTAL_INCOME_TAX.value == "Rental Income Tax"
        assert TaxType.ADVANCE_WITHHOLDING_TAX.value == "Advance / Withholding Tax"


class TestDailyLogStatus:
    def test_values(self) -> None:
        assert DailyLogStatus.OPEN.value == "OPEN"
        assert DailyLogStatus.CONSOLIDATED.value == "CONSOLIDATED"
