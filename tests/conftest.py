"""
pytest 공통 fixture 정의

장부 / 일일 로그 / 설정 테스트용 fixture
"""

import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from core.config.loader import AppConfig, Settings
from core.ledger import LedgerEntryDraft, LedgerStore
from core.property import Property, RentalDetails
from core.types import EntryType, PropertyType
from core.workspace import Workspace


@pytest.fixture
def temp_dir() -> Path:
    """OS 독립적인 임시 디렉토리 생성"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture(autouse=True)
def reset_settings():
    """Settings 싱글턴 초기화"""
    Settings.reset()
    yield
    Settings.reset()


@pytest.fixture
def temp_settings_file(temp_dir: Path) -> Path:
    """테스트용 settings.yaml 파일 생성"""
    content = """# 테스트용 settings.yaml
currency: PKR
timezone_offset_hours: 5
rent_lookahead_months: 2
log_level: debug
db_file: data/test.db

default_banks:
  - Meezan
  - HBL

web:
  host: 0.0.0.0
  port: 9000
"""
    path = temp_dir / "settings.yaml"
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def app_config(temp_dir: Path) -> AppConfig:
    """임시 DB를 쓰는 설정"""
    return AppConfig(db_path=temp_dir / "propledger.db")


@pytest.fixture
def ledger() -> LedgerStore:
    """빈 장부 하나("prop-1")가 열린 저장소"""
    store = LedgerStore()
    store.open_ledger("prop-1")
    return store


@pytest.fixture
def rental_details() -> RentalDetails:
    """월세 10,000 / 매월 5일"""
    return RentalDetails(
        tenant_name="Ali Raza",
        monthly_rent_amount=Decimal("10000"),
        rent_due_date=5,
    )


@pytest.fixture
def rent_property(rental_details: RentalDetails) -> Property:
    """2024-01-15 매입한 임대 부동산"""
    return Property(
        property_id="prop-1",
        name="Gulberg Flat",
        property_type=PropertyType.RENT,
        purchase_date=date(2024, 1, 15),
        rental_details=rental_details,
    )


@pytest.fixture
def sale_property() -> Property:
    return Property(
        property_id="prop-2",
        name="DHA Plot",
        property_type=PropertyType.SALE,
        purchase_date=date(2023, 6, 1),
    )


@pytest.fixture
def workspace(app_config: AppConfig) -> Workspace:
    """기본 은행(Bank A/B/C)이 있는 작업 공간"""
    return Workspace.create(app_config)


@pytest.fixture
def make_draft():
    """테스트용 LedgerEntryDraft 팩토리"""

    def _make(
        amount: str | Decimal = "100",
        entry_type: EntryType = EntryType.CREDIT,
        entry_date: date = date(2024, 3, 1),
        description: str = "Test entry",
        **kwargs,
    ) -> LedgerEntryDraft:
        return LedgerEntryDraft(
            entry_date=entry_date,
            description=description,
            entry_type=entry_type,
            amount=Decimal(amount),
            **kwargs,
        )

    return _make
