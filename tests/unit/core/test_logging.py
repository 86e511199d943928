"""
core/logging.py 테스트
"""

import logging
from pathlib import Path

import pytest

from core.logging import NOISY_LOGGERS, resolve_level, setup_logging


@pytest.fixture
def restore_root_logger():
    """테스트 후 루트 로거 핸들러 원복"""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestResolveLevel:
    def test_names(self) -> None:
        assert resolve_level("info") == logging.INFO
        assert resolve_level(" WARNING ") == logging.WARNING

    def test_number_passthrough(self) -> None:
        assert resolve_level(logging.DEBUG) == logging.DEBUG

    def test_unknown(self) -> None:
        with pytest.raises(ValueError):
            resolve_level("LOUD")


class TestSetupLogging:
    """setup_logging 테스트"""

    def test_writes_process_log_file(self, temp_dir: Path, restore_root_logger) -> None:
        setup_logging("scripts", "INFO", log_dir=temp_dir)
        logging.getLogger("core.ledger.store").info("Ledger entry added: e-1")

        for handler in logging.getLogger().handlers:
            handler.flush()

        content = (temp_dir / "scripts.log").read_text(encoding="utf-8")
        assert "Ledger entry added: e-1" in content
        assert "| INFO     | core.ledger.store |" in content

    def test_repeated_setup_replaces_handlers(self, temp_dir: Path, restore_root_logger) -> None:
        """두 번 호출해도 핸들러는 2개 (콘솔 + 파일)"""
        setup_logging("web", log_dir=temp_dir)
        setup_logging("web", "WARNING", log_dir=temp_dir)

        handlers = logging.getLogger().handlers
        assert len(handlers) == 2
        assert all(h.level == logging.WARNING for h in handlers)

    def test_noisy_loggers_quieted(self, temp_dir: Path, restore_root_logger) -> None:
        setup_logging("web", "DEBUG", log_dir=temp_dir)

        for name in NOISY_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
