"""Tests for logging configuration utilities."""

from __future__ import annotations

import json
import logging
from pathlib import Path
import sys

import pytest

from phimotion.core.utils.logging import StructuredJSONFormatter, configure_logging, get_logger


def _record(msg: str = "step %d", args: tuple = (3,), **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("phimotion.test", logging.INFO, __file__, 10, msg, args, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestStructuredJSONFormatter:
    def test_basic_fields(self) -> None:
        entry = json.loads(StructuredJSONFormatter().format(_record()))
        assert entry["level"] == "INFO"
        assert entry["message"] == "step 3"
        assert entry["context"]["logger_name"] == "phimotion.test"
        assert "timestamp" in entry

    def test_extra_fields_in_context(self) -> None:
        entry = json.loads(StructuredJSONFormatter().format(_record(sequence_id="hero")))
        assert entry["context"]["sequence_id"] == "hero"

    def test_exception_info(self) -> None:
        try:
            raise ValueError("bad curve")
        except ValueError:
            record = logging.LogRecord(
                "phimotion.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
            )
        entry = json.loads(StructuredJSONFormatter().format(record))
        assert entry["context"]["error_type"] == "ValueError"
        assert entry["context"]["error_message"] == "bad curve"


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_sets_level(self) -> None:
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("asyncio").level == logging.ERROR

    def test_structured_file_output(self, tmp_path: Path) -> None:
        log_file = tmp_path / "motion.jsonl"
        configure_logging(level="INFO", filename=str(log_file), structured=True)

        logging.getLogger("phimotion.test").info("scheduled %d steps", 5)
        for handler in logging.getLogger().handlers:
            handler.flush()

        entry = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert entry["message"] == "scheduled 5 steps"

    def test_custom_format(self, tmp_path: Path) -> None:
        log_file = tmp_path / "motion.log"
        configure_logging(
            level="INFO", filename=str(log_file), format_string="%(levelname)s|%(message)s"
        )

        logging.getLogger("phimotion.test").warning("late step")
        for handler in logging.getLogger().handlers:
            handler.flush()

        assert log_file.read_text(encoding="utf-8").strip() == "WARNING|late step"


class TestGetLogger:
    def test_plain_logger(self) -> None:
        assert isinstance(get_logger("phimotion.x"), logging.Logger)

    def test_adapter_with_context(self) -> None:
        adapter = get_logger("phimotion.x", sequence_id="hero")
        assert isinstance(adapter, logging.LoggerAdapter)
        assert adapter.extra == {"sequence_id": "hero"}
