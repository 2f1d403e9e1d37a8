# tests/test_config.py
import logging

import pytest

import config
import main
import server
from config import ConfigurationError, Settings, load_settings
from logger import init_logging
from server import parse_args

ENV_KEYS = ("DATABASE_URL", "DB_TIMEOUT", "LOG_LEVEL", "LOG_TIME_FORMAT", "HOST", "PORT")


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    assert load_settings() == Settings()


def test_values_from_environment(clean_env):
    clean_env.setenv("DATABASE_URL", "mysql+pymysql://user:pw@db/products")
    clean_env.setenv("DB_TIMEOUT", "2.5")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("PORT", "9090")
    settings = load_settings()
    assert settings.database_url == "mysql+pymysql://user:pw@db/products"
    assert settings.db_timeout == 2.5
    assert settings.log_level == "DEBUG"
    assert settings.port == 9090


@pytest.mark.parametrize("key, value", [
    ("PORT", "eighty"),
    ("PORT", "70000"),
    ("DB_TIMEOUT", "soon"),
    ("LOG_LEVEL", "loud"),
])
def test_invalid_values_fail_fast(clean_env, key, value):
    clean_env.setenv(key, value)
    with pytest.raises(ConfigurationError):
        load_settings()


def test_server_flags_default_to_settings():
    settings = Settings(database_url="sqlite:///other.db", port=9000)
    args = parse_args([], settings=settings)
    assert args.db_url == "sqlite:///other.db"
    assert args.port == 9000
    assert args.log_level == "INFO"

    args = parse_args(["--port", "7000", "--log-level", "debug"], settings=settings)
    assert args.port == 7000
    assert args.log_level == "DEBUG"


def test_server_reports_bad_environment(clean_env):
    clean_env.setattr(config, "_settings", None)
    clean_env.setenv("PORT", "eighty")
    with pytest.raises(SystemExit) as exc:
        server.main(["--help"])
    assert str(exc.value).startswith("configuration error: ")
    assert "PORT" in str(exc.value)


def test_importing_main_builds_no_app():
    assert not hasattr(main, "app")
    assert callable(main.create_app)


def test_init_logging_installs_one_handler():
    root = logging.getLogger()
    before = len(root.handlers)
    init_logging("WARNING")
    init_logging("DEBUG")
    assert len(root.handlers) <= before + 1
    assert root.level == logging.DEBUG
    root.setLevel(logging.WARNING)
