"""
타입 정의 모듈

장부/일일 정산에서 사용하는 Enum 정의
모든 Enum은 str을 상속하여 문자열 직렬화 가능
"""

from enum import Enum


class EntryType(str, Enum):
    """장부 항목 방향

    Credit은 잔액에 더하고 Debit은 뺀다.
    """

    DEBIT = "Debit"
    CREDIT = "Credit"


class PaymentMethod(str, Enum):
    """장부 항목 결제 수단"""

    CASH = "Cash"
    BANK = "Bank"
    CHEQUE = "Cheque"


class ExpensePaymentMethod(str, Enum):
    """일일 지출 결제 수단 (Split = 현금 + 은행 분할)"""

    CASH = "Cash"
    BANK = "Bank"
    SPLIT = "Split"


class PropertyType(str, Enum):
    """부동산 운용 유형"""

    SALE = "Sale"
    RENT = "Rent"


class EntryCategory(str, Enum):
    """장부 항목 카테고리

    카테고리는 자유 입력 문자열이지만 하위 장부(임대료/매각/세금)가
    아래 값으로 필터링한다.
    """

    RENT = "Rent"
    MAINTENANCE = "Maintenance"
    TAX = "Tax"
    SALE = "Sale"
    ADVANCE = "Advance"
    PARTIAL_PAYMENT = "Partial Payment"
    FINAL_SETTLEMENT = "Final Settlement"


class SaleStage(str, Enum):
    """매각 대금 수령 단계 (입력 가능한 단계만)"""

    ADVANCE = "Advance"
    PARTIAL_PAYMENT = "Partial Payment"
    FINAL_SETTLEMENT = "Final Settlement"


class TaxType(str, Enum):
    """세금 유형"""

    PROPERTY_SALE_TAX = "Property Sale Tax"
    RENTAL_INCOME_TAX = "Rental Income Tax"
    ADVANCE_WITHHOLDING_TAX = "Advance / Withholding Tax"


class DailyLogStatus(str, Enum):
    """일일 로그 상태 (OPEN → CONSOLIDATED)"""

    OPEN = "OPEN"
    CONSOLIDATED = "CONSOLIDATED"
