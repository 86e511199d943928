"""
Property 서비스

부동산 등록/조회. 등록 시 빈 장부가 함께 열린다.
"""

import logging

from core.property import Property, RentalDetails
from core.workspace import Workspace
from web.models.requests import PropertyCreateRequest
from web.models.responses import PropertyResponse, RentalDetailsResponse

logger = logging.getLogger(__name__)


def property_to_response(prop: Property) -> PropertyResponse:
    rental = prop.rental_details
    return PropertyResponse(
        property_id=prop.property_id,
        name=prop.name,
        property_type=prop.property_type.value,
        purchase_date=prop.purchase_date,
        rental_details=RentalDetailsResponse(
            tenant_name=rental.tenant_name,
            monthly_rent_amount=str(rental.monthly_rent_amount),
            rent_due_date=rental.rent_due_date,
            tenant_phone=rental.tenant_phone,
            security_advance_amount=(
                str(rental.security_advance_amount)
                if rental.security_advance_amount is not None
                else None
            ),
        ) if rental else None,
    )


class PropertyService:
    """Property 서비스

    Args:
        workspace: 작업 공간
    """

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    def list_properties(self) -> list[PropertyResponse]:
        return [property_to_response(p) for p in self.workspace.properties.list()]

    def get_property(self, property_id: str) -> PropertyResponse:
        return property_to_response(self.workspace.properties.get(property_id))

    def register(self, request: PropertyCreateRequest) -> PropertyResponse:
        """부동산 등록

        Raises:
            DuplicateError: 같은 ID
            ValidationError: 임대 조건 오류
        """
        rental = None
        if request.rental_details is not None:
            details = request.rental_details
            rental = RentalDetails.create(
                tenant_name=details.tenant_name,
                monthly_rent_amount=details.monthly_rent_amount,
                rent_due_date=details.rent_due_date,
                tenant_phone=details.tenant_phone,
                security_advance_amount=details.security_advance_amount,
            )

        prop = self.workspace.properties.register(
            Property(
                property_id=request.property_id,
                name=request.name,
                property_type=request.property_type,
                purchase_date=request.purchase_date,
                rental_details=rental,
            )
        )
        return property_to_response(prop)
