import logging

from songsmith import config


class TestEnvironmentSettings:
    def test_defaults(self, monkeypatch):
        for name in ("HOST", "PORT", "SONGSMITH_LOG_LEVEL", "SONGSMITH_CORS_ORIGINS"):
            monkeypatch.delenv(name, raising=False)
        assert config.get_host() == "0.0.0.0"
        assert config.get_port() == 8000
        assert config.get_log_level() == "INFO"
        assert config.get_cors_origins() == ["*"]

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "9001")
        monkeypatch.setenv("SONGSMITH_LOG_LEVEL", "debug")
        monkeypatch.setenv("SONGSMITH_CORS_ORIGINS", "https://a.example, https://b.example,")
        assert config.get_host() == "127.0.0.1"
        assert config.get_port() == 9001
        assert config.get_log_level() == "DEBUG"
        assert config.get_cors_origins() == ["https://a.example", "https://b.example"]

    def test_blank_cors_falls_back_to_wildcard(self, monkeypatch):
        monkeypatch.setenv("SONGSMITH_CORS_ORIGINS", " , ")
        assert config.get_cors_origins() == ["*"]


def test_add_root_handler_uses_shared_format():
    root = logging.getLogger()
    handler = config.add_root_handler(logging.NullHandler(), "DEBUG")
    try:
        assert handler in root.handlers
        assert handler.level == logging.DEBUG
        assert handler.formatter._fmt == config.LOG_FORMAT
    finally:
        root.removeHandler(handler)
