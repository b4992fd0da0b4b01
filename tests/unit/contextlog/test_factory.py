"""Unit tests for create_logger / get_logger."""
from __future__ import annotations

import contextvars
import uuid

import pytest

from contextlog import LogConfig, Logger, create_logger, get_logger
from contextlog.errors import LoggerNotBoundError
from contextlog.scope import LoggerContext, LoggerScope
from contextlog.testing import CapturingWriter


@pytest.fixture
def scope() -> LoggerScope:
    return LoggerScope(f"test-{uuid.uuid4().hex}")


class TestCreateLogger:
    def test_returns_logger_and_scope_lookup(self, scope: LoggerScope) -> None:
        handle = create_logger(LogConfig(name="svc"), scope, environment="test", writer=CapturingWriter())

        assert isinstance(handle.logger, Logger)
        assert handle.logger.name == "svc"
        with pytest.raises(LoggerNotBoundError):
            handle.get_logger()
        assert scope.run(LoggerContext(handle.logger), handle.get_logger) is handle.logger

    def test_handle_unpacks(self, scope: LoggerScope) -> None:
        logger, lookup = create_logger(LogConfig(name="svc"), scope, environment="test", writer=CapturingWriter())
        assert lookup == scope.get_logger
        assert logger.environment == "test"


class TestGetLogger:
    def test_returns_bound_logger(self, scope: LoggerScope) -> None:
        bound = Logger(LogConfig(name="svc"), environment="test", writer=CapturingWriter())
        assert scope.run(LoggerContext(bound), get_logger, scope) is bound

    def test_creates_and_binds_when_missing(self, scope: LoggerScope) -> None:
        ctx = contextvars.copy_context()
        config = LogConfig(name="svc")

        created = ctx.run(get_logger, scope, config, environment="test", writer=CapturingWriter())

        assert created.name == "svc"
        assert ctx.run(get_logger, scope) is created
        assert ctx.run(scope.get_logger) is created
        assert scope.get_current() is None

    def test_default_config_from_environment(self, scope: LoggerScope, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_ENV", "staging")
        monkeypatch.setenv("LOG_NAME", "billing")
        monkeypatch.delenv("LOG_SLACK_API_TOKEN", raising=False)

        created = contextvars.copy_context().run(get_logger, scope, writer=CapturingWriter())

        assert created.name == "billing"
        assert created.environment == "staging"
        assert created.notifier is None

    def test_environment_argument_wins_over_env_var(
        self, scope: LoggerScope, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_ENV", "staging")
        created = contextvars.copy_context().run(
            get_logger, scope, LogConfig(name="svc"), environment="local", writer=CapturingWriter()
        )
        assert created.environment == "local"
