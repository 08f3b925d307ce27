"""Unit tests for utility modules."""

import logging
import subprocess
import sys

import pytest
from prdtree.utils.id_generator import generate_uuid, IDGenerator
from prdtree.utils.logger import setup_logging, get_logger, LogContext


class TestGenerateUUID:
    """Tests for generate_uuid function."""

    def test_generates_valid_uuid(self):
        uuid = generate_uuid()
        assert len(uuid) == 36
        assert uuid.count("-") == 4

    def test_generates_unique_uuids(self):
        uuids = [generate_uuid() for _ in range(100)]
        assert len(set(uuids)) == 100


class TestIDGenerator:
    """Tests for IDGenerator class."""

    def test_section_ids_unique(self):
        generator = IDGenerator()
        ids = [generator.section_id() for _ in range(100)]

        assert len(set(ids)) == 100

    def test_section_id_is_uuid(self):
        assert len(IDGenerator().section_id()) == 36


class TestLogger:
    """Tests for logging helpers."""

    def test_get_logger_is_namespaced(self):
        assert get_logger("parser.stats").name == "prdtree.parser.stats"

    def test_get_logger_keeps_package_names(self):
        assert get_logger("prdtree.cli").name == "prdtree.cli"

    def test_get_logger_does_not_match_prefix_only(self):
        assert get_logger("prdtreeish").name == "prdtree.prdtreeish"

    def test_package_logger_has_null_handler(self):
        handlers = logging.getLogger("prdtree").handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_library_use_writes_nothing_to_stderr(self):
        code = (
            "from prdtree import process\n"
            "process('# A\\nuser and system')\n"
            "process('')\n"
        )
        result = subprocess.run(
            [sys.executable, "-c", code],
            capture_output=True,
            text=True,
            check=True,
        )

        assert result.stderr == ""
        assert result.stdout == ""

    def test_setup_logging_sets_level(self, restore_package_logger):
        setup_logging(level="DEBUG", console=False)
        assert restore_package_logger.level == logging.DEBUG

    def test_setup_logging_console_uses_stderr(self, restore_package_logger):
        setup_logging(level="INFO")

        stream_handlers = [
            h for h in restore_package_logger.handlers if isinstance(h, logging.StreamHandler)
        ]
        assert len(stream_handlers) == 1
        assert stream_handlers[0].stream is sys.stderr

    def test_setup_logging_writes_file(self, tmp_path, restore_package_logger):
        log_file = tmp_path / "logs" / "run.log"
        setup_logging(level="INFO", log_file=log_file, console=False)

        get_logger("test").info("hello file")
        for handler in restore_package_logger.handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

    def test_log_context_reports_failure(self, caplog):
        logger = get_logger("test.context")
        with caplog.at_level(logging.INFO, logger="prdtree"):
            with pytest.raises(ValueError):
                with LogContext(logger, "Failing op", item=1):
                    raise ValueError("boom")

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Starting: Failing op (item=1)") for m in messages)
        assert any(m.startswith("Failed: Failing op") and "boom" in m for m in messages)
