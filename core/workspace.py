"""
Workspace

부동산 등록부 / 장부 / 일일 로그 / 은행 레지스트리를 하나로 묶는 조립 지점.
모듈 전역 상태 대신 이 객체를 호출 경로로 전달한다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from core.banks import BankRegistry
from core.config.loader import AppConfig
from core.daily.store import DailyLogStore
from core.ledger.store import LedgerStore
from core.property import PropertyRegistry

logger = logging.getLogger(__name__)


@dataclass
class Workspace:
    """장부 작업 공간

    직접 생성할 때는 wire()로 협력자 연결을 마쳐야 한다. create()는 자동.
    """

    properties: PropertyRegistry
    ledger: LedgerStore
    daily_logs: DailyLogStore
    banks: BankRegistry
    config: AppConfig

    def wire(self) -> Workspace:
        """부동산 등록 → 빈 장부 생성, 은행 삭제 → 사용 여부 확인"""
        self.properties.on_register(self.ledger.open_ledger)
        self.banks.set_usage_checker(self.daily_logs.bank_in_use)
        return self

    @classmethod
    def create(cls, config: AppConfig | None = None) -> Workspace:
        """기본 은행이 채워진 빈 작업 공간"""
        config = config or AppConfig()
        banks = BankRegistry.with_defaults(config.default_banks)
        workspace = cls(
            properties=PropertyRegistry(),
            ledger=LedgerStore(),
            daily_logs=DailyLogStore(bank_registry=banks),
            banks=banks,
            config=config,
        ).wire()

        logger.debug(f"Workspace created with {len(config.default_banks)} default banks")
        return workspace
