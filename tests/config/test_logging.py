"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from jobteardown.config.logging import configure_logging
from jobteardown.domain.models import PipelineJob
from jobteardown.infrastructure.memory import InMemoryHost
from jobteardown.plugins.builtins.teardown import TeardownPlugin


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("jobteardown")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("jobteardown").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("jobteardown").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        log = structlog.get_logger("jobteardown.test")
        log.warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "jobteardown.test"
        assert "timestamp" in parsed

    def test_stdlib_module_logger_is_structured(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("jobteardown.services.teardown").debug("Job Class: %s", "PipelineJob")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Job Class: PipelineJob"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "jobteardown.services.teardown"

    def test_debug_hidden_when_not_verbose(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=False, log_json=True)
        logging.getLogger("jobteardown.services.remote").debug("SCM URL: x")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        assert len(logging.getLogger().handlers) == 1

    def test_teardown_event_binds_item(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        plugin = TeardownPlugin(InMemoryHost().services)

        plugin.item_updated(PipelineJob(full_name="app/feature"))
        logging.getLogger("jobteardown.test").warning("after event")

        lines = [json.loads(line) for line in capfd.readouterr().err.splitlines()]
        during, after = lines[:-1], lines[-1]
        assert during
        assert all(line["item"] == "app/feature" for line in during)
        assert "item" not in after
