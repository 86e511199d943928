"""
부동산 (외부 협력자 인터페이스)

부동산 CRUD 자체는 이 시스템 범위 밖이다. 장부가 필요로 하는 최소 정보
(유형, 매입일, 임대 조건)만 모델링하고 등록/조회만 제공한다.
"""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable, Iterable

from core.errors import DuplicateError, NotFoundError, ValidationError
from core.types import PropertyType
from core.utils.money import to_decimal, to_positive_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RentalDetails:
    """임대 조건

    rent_due_date는 매월 납부일 (1~31).
    """

    tenant_name: str
    monthly_rent_amount: Decimal
    rent_due_date: int
    tenant_phone: str | None = None
    security_advance_amount: Decimal | None = None

    def validate(self) -> None:
        """임대 조건 검증

        Raises:
            ValidationError: 납부일이 1~31 밖이거나 월세가 0 이하인 경우
        """
        if isinstance(self.rent_due_date, bool) or not isinstance(self.rent_due_date, int):
            raise ValidationError(f"rent_due_date must be an integer, got {self.rent_due_date!r}")
        if not 1 <= self.rent_due_date <= 31:
            raise ValidationError(f"rent_due_date must be between 1 and 31, got {self.rent_due_date}")
        to_positive_decimal(self.monthly_rent_amount, "monthly_rent_amount")

    @classmethod
    def create(
        cls,
        tenant_name: str,
        monthly_rent_amount: Decimal | int | str,
        rent_due_date: int,
        tenant_phone: str | None = None,
        security_advance_amount: Decimal | int | str | None = None,
    ) -> "RentalDetails":
        """검증된 RentalDetails 생성"""
        details = cls(
            tenant_name=tenant_name,
            monthly_rent_amount=to_positive_decimal(monthly_rent_amount, "monthly_rent_amount"),
            rent_due_date=rent_due_date,
            tenant_phone=tenant_phone,
            security_advance_amount=(
                to_decimal(security_advance_amount, "security_advance_amount")
                if security_advance_amount is not None
                else None
            ),
        )
        details.validate()
        return details


@dataclass(frozen=True)
class Property:
    """부동산 (장부 소유자)"""

    property_id: str
    name: str
    property_type: PropertyType
    purchase_date: date
    rental_details: RentalDetails | None = None


class PropertyRegistry:
    """부동산 등록부

    실제 CRUD/저장은 외부 협력자 몫이며, 여기서는 장부 연산에 필요한
    조회만 제공한다. 등록 시 listener(LedgerStore.open_ledger 등)를 호출.
    """

    def __init__(self) -> None:
        self._properties: dict[str, Property] = {}
        self._listeners: list[Callable[[str], None]] = []

    def on_register(self, callback: Callable[[str], None]) -> None:
        """등록 시 호출될 콜백 추가 (property_id 전달)"""
        self._listeners.append(callback)

    def register(self, prop: Property) -> Property:
        """부동산 등록

        Raises:
            DuplicateError: 같은 ID가 이미 있는 경우
            ValidationError: 임대 조건이 잘못된 경우
        """
        if not prop.property_id:
            raise ValidationError("property_id is required")
        if prop.property_id in self._properties:
            raise DuplicateError(f"Property already registered: {prop.property_id}")
        if prop.rental_details is not None:
            prop.rental_details.validate()

        self._properties[prop.property_id] = prop
        for callback in self._listeners:
            callback(prop.property_id)

        logger.info(f"Property registered: {prop.property_id} ({prop.property_type.value})")
        return prop

    def get(self, property_id: str) -> Property:
        """부동산 조회

        Raises:
            NotFoundError: 등록되지 않은 경우
        """
        prop = self._properties.get(property_id)
        if prop is None:
            raise NotFoundError(f"Property not found: {property_id}")
        return prop

    def list(self) -> list[Property]:
        """등록 순서대로 전체 목록"""
        return list(self._properties.values())

    def __contains__(self, property_id: object) -> bool:
        return property_id in self._properties

    def restore(self, properties: Iterable[Property]) -> None:
        """저장된 목록으로 교체 (listener 호출 없음)"""
        self._properties = {prop.property_id: prop for prop in properties}
