"""
Config loading unit tests
"""

import pydantic
import pytest

from recruitment.config import AppConfig, load_config


def test_defaults(monkeypatch):
    for var in ("RECRUITMENT_DB_URL", "RECRUITMENT_LOG_LEVEL", "RECRUITMENT_LOG_FILE", "RECRUITMENT_CONFIG"):
        monkeypatch.delenv(var, raising=False)
    cfg = load_config()
    assert cfg.database.url is None
    assert cfg.database.auto_create_schema is True
    assert cfg.logging.level == "INFO"
    assert cfg.security.password_hash_iterations > 0


def test_from_yaml(tmp_path, monkeypatch):
    monkeypatch.delenv("RECRUITMENT_DB_URL", raising=False)
    monkeypatch.delenv("RECRUITMENT_LOG_LEVEL", raising=False)
    path = tmp_path / "recruitment.yaml"
    path.write_text(
        "database:\n  url: sqlite:///from_yaml.db\n  echo: true\nlogging:\n  level: DEBUG\n",
        encoding="utf-8",
    )
    cfg = load_config(path)
    assert cfg.database.url == "sqlite:///from_yaml.db"
    assert cfg.database.echo is True
    assert cfg.logging.level == "DEBUG"
    assert cfg.raw["logging"] == {"level": "DEBUG"}


def test_environment_overrides_file(tmp_path, monkeypatch):
    path = tmp_path / "recruitment.yaml"
    path.write_text("database:\n  url: sqlite:///from_yaml.db\n", encoding="utf-8")
    monkeypatch.setenv("RECRUITMENT_DB_URL", "sqlite:///from_env.db")
    monkeypatch.setenv("RECRUITMENT_LOG_LEVEL", "warning")
    cfg = load_config(path)
    assert cfg.database.url == "sqlite:///from_env.db"
    assert cfg.logging.level == "WARNING"


def test_defaults_are_not_shared():
    first = AppConfig()
    first.database.url = "sqlite:///one.db"
    assert AppConfig().database.url is None


def test_unknown_log_level_from_environment_is_rejected(monkeypatch):
    monkeypatch.delenv("RECRUITMENT_CONFIG", raising=False)
    monkeypatch.setenv("RECRUITMENT_LOG_LEVEL", "verbose")
    with pytest.raises(pydantic.ValidationError):
        load_config()
