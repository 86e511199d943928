"""
세금 항목 하위 장부

세금 납부는 항상 Debit/"Tax" 항목이다. 선택 가능한 세금 유형은
부동산 유형에 따라 달라지고, 설명은 세율과 납부서(Challan) 번호를
붙여 합성한다.
"""

from datetime import date
from decimal import Decimal

from core.errors import ValidationError
from core.ledger.entry import LedgerEntryDraft
from core.types import EntryCategory, EntryType, PaymentMethod, PropertyType, TaxType
from core.utils.money import to_decimal, to_positive_decimal


def available_tax_types(property_type: PropertyType) -> list[TaxType]:
    """부동산 유형별 선택 가능한 세금 유형

    Sale → Property Sale Tax, Rent → Rental Income Tax,
    원천징수(Advance / Withholding Tax)는 항상 포함.
    """
    types: list[TaxType] = []
    if property_type == PropertyType.SALE:
        types.append(TaxType.PROPERTY_SALE_TAX)
    if property_type == PropertyType.RENT:
        types.append(TaxType.RENTAL_INCOME_TAX)
    types.append(TaxType.ADVANCE_WITHHOLDING_TAX)
    return types


def compose_tax_description(
    tax_type: TaxType | str,
    description: str | None = None,
    tax_rate: Decimal | float | str | None = None,
    challan_number: str | None = None,
) -> str:
    """세금 항목 설명 합성

    "<설명> (<세율>%) - Challan: <번호>" 형식. 설명이 비면 세금 유형 이름을
    쓰고, 세율/번호 절은 각각 독립적으로 생략된다.

    Example:
        >>> compose_tax_description("Property Sale Tax", tax_rate="5.5", challan_number="CH-100")
        'Property Sale Tax (5.5%) - Challan: CH-100'
        >>> compose_tax_description("Rental Income Tax", challan_number="CH-7")
        'Rental Income Tax - Challan: CH-7'
    """
    if description and description.strip():
        base = description.strip()
    else:
        base = tax_type.value if isinstance(tax_type, TaxType) else str(tax_type)

    rate_text = str(tax_rate).strip() if tax_rate is not None else ""
    if rate_text:
        to_decimal(rate_text, "tax_rate")
        base += f" ({rate_text}%)"

    challan = challan_number.strip() if challan_number else ""
    if challan:
        base += f" - Challan: {challan}"

    return base


def build_tax_entry(
    property_type: PropertyType,
    tax_type: TaxType | str,
    amount: Decimal | int | str,
    entry_date: date,
    description: str | None = None,
    tax_rate: Decimal | float | str | None = None,
    challan_number: str | None = None,
    payment_method: PaymentMethod | None = None,
    paid_to: str | None = None,
    notes: str | None = None,
) -> LedgerEntryDraft:
    """세금 납부 항목 생성 (Debit/"Tax")

    Raises:
        ValidationError: 부동산 유형에 맞지 않는 세금 유형, 금액 0 이하
    """
    try:
        tax_type = TaxType(tax_type)
    except ValueError as e:
        raise ValidationError(f"Unknown tax type {tax_type!r}") from e

    allowed = available_tax_types(property_type)
    if tax_type not in allowed:
        raise ValidationError(
            f"Tax type '{tax_type.value}' is not available for "
            f"{property_type.value} properties"
        )

    return LedgerEntryDraft(
        entry_date=entry_date,
        description=compose_tax_description(tax_type, description, tax_rate, challan_number),
        entry_type=EntryType.DEBIT,
        amount=to_positive_decimal(amount),
        category=EntryCategory.TAX.value,
        payment_method=payment_method,
        counterparty=paid_to or None,
        notes=notes or None,
    )
