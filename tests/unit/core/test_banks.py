"""
core/banks.py 테스트

은행 추가/수정/삭제, 이름 중복, 사용 중 삭제 거부
"""

from decimal import Decimal

import pytest

from core.banks import BankRegistry
from core.errors import BankInUseError, DuplicateError, NotFoundError, ValidationError


class TestWithDefaults:
    def test_default_banks(self) -> None:
        registry = BankRegistry.with_defaults(["Bank A", "Bank B"])

        assert registry.names() == ["Bank A", "Bank B"]
        assert registry.get("bank-1").balance == Decimal("0")


class TestAdd:
    """은행 추가 테스트"""

    def test_add(self) -> None:
        registry = BankRegistry()

        bank = registry.add("Meezan", account_number="0123", balance="5000")

        assert bank.name == "Meezan"
        assert bank.balance == Decimal("5000")
        assert registry.get(bank.bank_id) == bank

    def test_duplicate_name_case_insensitive(self) -> None:
        registry = BankRegistry()
        registry.add("Meezan")

        with pytest.raises(DuplicateError):
            registry.add(" meezan ")

    def test_name_required(self) -> None:
        with pytest.raises(ValidationError):
            BankRegistry().add("   ")


class TestUpdate:
    """은행 수정 테스트"""

    def test_rename(self) -> None:
        registry = BankRegistry.with_defaults(["Bank A"])

        updated = registry.update("bank-1", {"name": "HBL", "notes": "Main"})

        assert updated.name == "HBL"
        assert updated.notes == "Main"
        assert registry.find_by_name("hbl") == updated

    def test_keep_own_name(self) -> None:
        """자기 이름으로 수정은 중복 아님"""
        registry = BankRegistry.with_defaults(["Bank A"])

        assert registry.update("bank-1", {"name": "Bank A"}).name == "Bank A"

    def test_rename_to_existing(self) -> None:
        registry = BankRegistry.with_defaults(["Bank A", "Bank B"])

        with pytest.raises(DuplicateError):
            registry.update("bank-1", {"name": "BANK B"})

    def test_bank_id_not_editable(self) -> None:
        registry = BankRegistry.with_defaults(["Bank A"])

        with pytest.raises(ValidationError):
            registry.update("bank-1", {"bank_id": "other"})

    def test_unknown_bank(self) -> None:
        with pytest.raises(NotFoundError):
            BankRegistry().update("nope", {"notes": "x"})


class TestDelete:
    """은행 삭제 테스트"""

    def test_delete_unused(self) -> None:
        registry = BankRegistry.with_defaults(["Bank A"])
        registry.set_usage_checker(lambda name: False)

        registry.delete("bank-1")

        assert registry.list() == []

    def test_delete_in_use_refused(self) -> None:
        registry = BankRegistry.with_defaults(["Bank A"])
        registry.set_usage_checker(lambda name: name == "Bank A")

        with pytest.raises(BankInUseError) as exc_info:
            registry.delete("bank-1")

        assert exc_info.value.bank_name == "Bank A"
        assert registry.names() == ["Bank A"]

    def test_rename_in_use_refused(self) -> None:
        """사용 중인 은행은 이름을 바꿔서 삭제 검사를 피할 수 없음"""
        registry = BankRegistry.with_defaults(["Bank A"])
        registry.set_usage_checker(lambda name: name.lower() == "bank a")

        with pytest.raises(BankInUseError) as exc_info:
            registry.update("bank-1", {"name": "Bank Renamed"})

        assert "cannot be renamed" in str(exc_info.value)
        assert registry.names() == ["Bank A"]
        with pytest.raises(BankInUseError):
            registry.delete("bank-1")

    def test_in_use_allows_other_fields_and_case_change(self) -> None:
        registry = BankRegistry.with_defaults(["Bank A"])
        registry.set_usage_checker(lambda name: name.lower() == "bank a")

        updated = registry.update("bank-1", {"name": "BANK A", "notes": "Main"})

        assert updated.name == "BANK A"
        assert updated.notes == "Main"
