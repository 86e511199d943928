"""
core/ledger/tax.py 테스트

세금 유형 제한, 설명 합성 규칙
"""

from datetime import date
from decimal import Decimal

import pytest

from core.errors import ValidationError
from core.ledger import available_tax_types, build_tax_entry, compose_tax_description
from core.types import EntryType, PropertyType, TaxType


class TestAvailableTaxTypes:
    def test_sale_property(self) -> None:
        assert available_tax_types(PropertyType.SALE) == [
            TaxType.PROPERTY_SALE_TAX,
            TaxType.ADVANCE_WITHHOLDING_TAX,
        ]

    def test_rent_property(self) -> None:
        assert available_tax_types(PropertyType.RENT) == [
            TaxType.RENTAL_INCOME_TAX,
            TaxType.ADVANCE_WITHHOLDING_TAX,
        ]


class TestComposeTaxDescription:
    """설명 합성: "<설명> (<세율>%) - Challan: <번호>" """

    def test_rate_and_challan(self) -> None:
        assert (
            compose_tax_description(
                TaxType.PROPERTY_SALE_TAX,
                description="Property Sale Tax",
                tax_rate="5.5",
                challan_number="CH-100",
            )
            == "Property Sale Tax (5.5%) - Challan: CH-100"
        )

    def test_rate_only(self) -> None:
        assert compose_tax_description("Rental Income Tax", tax_rate="10") == "Rental Income Tax (10%)"

    def test_challan_only(self) -> None:
        assert (
            compose_tax_description("Rental Income Tax", challan_number="CH-7")
            == "Rental Income Tax - Challan: CH-7"
        )

    def test_neither(self) -> None:
        assert compose_tax_description(TaxType.ADVANCE_WITHHOLDING_TAX) == "Advance / Withholding Tax"

    def test_custom_description_wins(self) -> None:
        assert (
            compose_tax_description(TaxType.RENTAL_INCOME_TAX, description="Q1 tax", tax_rate="15")
            == "Q1 tax (15%)"
        )

    def test_blank_clauses_omitted(self) -> None:
        assert compose_tax_description("Rental Income Tax", "  ", "", "  ") == "Rental Income Tax"

    def test_invalid_rate(self) -> None:
        with pytest.raises(ValidationError):
            compose_tax_description("Rental Income Tax", tax_rate="abc")


class TestBuildTaxEntry:
    def test_debit_tax_entry(self) -> None:
        draft = build_tax_entry(
            PropertyType.SALE,
            "Property Sale Tax",
            "12000",
            date(2024, 6, 1),
            tax_rate="5.5",
            challan_number="CH-100",
        )

        assert draft.entry_type == EntryType.DEBIT
        assert draft.category == "Tax"
        assert draft.amount == Decimal("12000")
        assert draft.description == "Property Sale Tax (5.5%) - Challan: CH-100"

    def test_tax_type_not_allowed_for_property(self) -> None:
        """임대 부동산에 매각세 불가"""
        with pytest.raises(ValidationError):
            build_tax_entry(PropertyType.RENT, TaxType.PROPERTY_SALE_TAX, "100", date(2024, 6, 1))

    def test_unknown_tax_type(self) -> None:
        with pytest.raises(ValidationError):
            build_tax_entry(PropertyType.RENT, "Luxury Tax", "100", date(2024, 6, 1))
