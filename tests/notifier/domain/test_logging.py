import structlog
from notifier.utils.logging import bind_event_context, clear_event_context, get_log_level


class TestLogLevel:
    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "ERROR")
        assert get_log_level() == "ERROR"

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.delenv("ENV", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)
        monkeypatch.setenv("PROTEAN_ENV", "production")
        assert get_log_level() == "INFO"


class TestEventContext:
    def test_bind_and_clear(self):
        clear_event_context()
        bind_event_context(event_id="e0", resource_id="v0")
        assert structlog.contextvars.get_contextvars() == {"event_id": "e0", "resource_id": "v0"}
        clear_event_context()
        assert structlog.contextvars.get_contextvars() == {}


class TestStdlibLogging:
    def test_writes_rotating_log_file(self, tmp_path):
        import logging

        from notifier.utils.logging import setup_stdlib_logging

        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers, root.level
        try:
            setup_stdlib_logging(str(tmp_path / "logs"))
            assert (tmp_path / "logs").is_dir()
            assert len(root.handlers) == 2
            assert logging.getLogger("protean").level == logging.WARNING
        finally:
            for handler in root.handlers:
                handler.close()
            root.handlers, root.level = saved_handlers, saved_level
