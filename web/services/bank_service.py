"""
Bank 서비스

은행 레지스트리 CRUD
"""

import logging

from core.banks import Bank, BankRegistry
from core.workspace import Workspace
from web.models.requests import BankCreateRequest, BankUpdateRequest
from web.models.responses import BankResponse

logger = logging.getLogger(__name__)


def bank_to_response(bank: Bank) -> BankResponse:
    return BankResponse(
        bank_id=bank.bank_id,
        name=bank.name,
        account_number=bank.account_number,
        branch_name=bank.branch_name,
        account_type=bank.account_type,
        balance=str(bank.balance) if bank.balance is not None else None,
        notes=bank.notes,
    )


class BankService:
    """Bank 서비스

    Args:
        workspace: 작업 공간
    """

    def __init__(self, workspace: Workspace):
        self.workspace = workspace

    @property
    def banks(self) -> BankRegistry:
        return self.workspace.banks

    def list_banks(self) -> list[BankResponse]:
        return [bank_to_response(b) for b in self.banks.list()]

    def get_bank(self, bank_id: str) -> BankResponse:
        return bank_to_response(self.banks.get(bank_id))

    def add_bank(self, request: BankCreateRequest) -> BankResponse:
        return bank_to_response(self.banks.add(**request.model_dump()))

    def update_bank(self, bank_id: str, request: BankUpdateRequest) -> BankResponse:
        patch = request.model_dump(exclude_unset=True)
        return bank_to_response(self.banks.update(bank_id, patch))

    def delete_bank(self, bank_id: str) -> None:
        self.banks.delete(bank_id)
