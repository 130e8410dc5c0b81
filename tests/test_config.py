# tests/test_config.py
import importlib
import logging

from rich.logging import RichHandler
from productapi.config import Settings, configure_logging


def test_defaults(monkeypatch):
    for var in ("API_KEY", "API_KEY_HEADER", "HOST", "PORT", "LOG_LEVEL", "CORS_ORIGINS"):
        monkeypatch.delenv(var, raising=False)
    s = Settings(_env_file=None)
    assert s.port == 3000
    assert s.api_key is None
    assert s.api_key_header == "x-api-key"
    assert s.cors_origins == []


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("PORT", "8085")
    monkeypatch.setenv("API_KEY", "s3cret")
    monkeypatch.setenv("CORS_ORIGINS", '["http://localhost:5173"]')
    s = Settings(_env_file=None)
    assert s.port == 8085
    assert s.api_key == "s3cret"
    assert s.cors_origins == ["http://localhost:5173"]


def test_reads_dotenv_file(tmp_path, monkeypatch):
    monkeypatch.delenv("API_KEY", raising=False)
    monkeypatch.delenv("PORT", raising=False)
    env = tmp_path / ".env"
    env.write_text("API_KEY=from-file\nPORT=4000\n")
    s = Settings(_env_file=env)
    assert s.api_key == "from-file"
    assert s.port == 4000


def test_module_app_logs_requests_without_extra_setup(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    # start from an unconfigured package logger, as under a bare `uvicorn productapi.main:app`
    monkeypatch.setattr(logging.getLogger("productapi"), "level", logging.NOTSET)
    monkeypatch.setattr(logging.getLogger("productapi"), "handlers", [])
    import productapi.main

    importlib.reload(productapi.main)
    assert logging.getLogger("productapi.middleware").isEnabledFor(logging.INFO)
    assert any(isinstance(h, RichHandler) for h in logging.getLogger("productapi").handlers)


def test_configure_logging_adds_one_handler():
    configure_logging("DEBUG", name="productapi.scratch")
    configure_logging("INFO", name="productapi.scratch")
    scratch = logging.getLogger("productapi.scratch")
    assert scratch.level == logging.INFO
    assert len([h for h in scratch.handlers if isinstance(h, RichHandler)]) == 1
