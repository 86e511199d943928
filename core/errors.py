"""
도메인 예외

호출자(UI/API)가 "왜 거부되었는지" 알 수 있도록 예외 종류를 구분한다.
"""


class LedgerError(Exception):
    """장부 도메인 예외 기본 클래스"""

    pass


class ValidationError(LedgerError):
    """입력 검증 실패 (0 이하 금액, 잘못된 납부일, Split 필수 필드 누락 등)"""

    pass


class DuplicateError(ValidationError):
    """중복 생성 시도 (같은 날짜의 일일 로그, 같은 이름의 은행 등)"""

    pass


class MissingBankBalanceError(ValidationError):
    """지출이 기초 잔액에 없는 은행을 참조"""

    def __init__(self, bank_name: str):
        self.bank_name = bank_name
        super().__init__(
            f"Bank '{bank_name}' has no opening balance for this day"
        )


class BankInUseError(ValidationError):
    """일일 지출에서 사용 중인 은행 삭제 또는 이름 변경 시도"""

    def __init__(self, bank_name: str, action: str = "deleted"):
        self.bank_name = bank_name
        super().__init__(
            f"Bank '{bank_name}' is used in expense entries and cannot be {action}"
        )


class EntryLockedError(LedgerError):
    """잠긴 항목 수정/삭제 시도"""

    def __init__(self, entity_id: str, message: str | None = None):
        self.entity_id = entity_id
        super().__init__(
            message or f"Entry {entity_id} is locked and cannot be modified"
        )


class DailyLogLockedError(EntryLockedError):
    """정산 완료(잠김)된 일일 로그 수정 시도"""

    def __init__(self, log_id: str, log_date: str):
        self.log_date = log_date
        super().__init__(
            log_id,
            f"Daily log for {log_date} is locked and cannot be modified",
        )


class NotFoundError(LedgerError):
    """존재하지 않는 항목/부동산/은행/로그"""

    pass


class AlreadyRecordedError(LedgerError):
    """이미 수령 처리된 임대월 (소프트 오류: no-op 결과로 보고)"""

    def __init__(self, year: int, month: int, entry_id: str | None = None):
        self.year = year
        self.month = month
        self.entry_id = entry_id
        super().__init__(f"Rent for {year}-{month:02d} has already been recorded")


class VersionConflictError(LedgerError):
    """낙관적 락 버전 불일치"""

    def __init__(self, entity_id: str, expected: int, actual: int):
        self.entity_id = entity_id
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Version conflict on {entity_id}: expected {expected}, actual {actual}"
        )
