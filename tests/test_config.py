"""Tests for settings loaded from the environment."""

import pytest

from aoiro.cli.main import cli
from aoiro.config import DEFAULT_LOG_LEVEL, Settings, load_settings


def test_defaults():
    settings = load_settings({})

    assert settings == Settings()
    assert settings.database_path is None
    assert settings.sales_account_code == 4100
    assert settings.purchases_account_code == 5100
    assert settings.log_level == DEFAULT_LOG_LEVEL


def test_reads_environment():
    settings = load_settings(
        {
            "AOIRO_DB_PATH": "/tmp/books.db",
            "AOIRO_SALES_CODE": "4150",
            "AOIRO_PURCHASES_CODE": " 5150 ",
            "AOIRO_LOG_LEVEL": "debug",
        }
    )

    assert settings.database_path == "/tmp/books.db"
    assert settings.sales_account_code == 4150
    assert settings.purchases_account_code == 5150
    assert settings.log_level == "DEBUG"


def test_blank_values_use_defaults():
    settings = load_settings({"AOIRO_DB_PATH": "", "AOIRO_SALES_CODE": " "})

    assert settings.database_path is None
    assert settings.sales_account_code == 4100


def test_malformed_code():
    with pytest.raises(ValueError, match="AOIRO_SALES_CODE"):
        load_settings({"AOIRO_SALES_CODE": "sales"})


def test_reads_os_environ(monkeypatch):
    monkeypatch.setenv("AOIRO_PURCHASES_CODE", "5200")

    assert load_settings().purchases_account_code == 5200


def test_cli_reports_malformed_setting(cli_runner, temp_db, monkeypatch):
    monkeypatch.setenv("AOIRO_SALES_CODE", "sales")

    result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, "account", "list"])

    assert result.exit_code == 1
    assert "Error: AOIRO_SALES_CODE must be an integer" in result.output


def test_cli_db_path_from_environment(cli_runner, temp_db, monkeypatch):
    monkeypatch.setenv("AOIRO_DB_PATH", temp_db.database_path)

    result = cli_runner.invoke(cli, ["account", "create", "1111", "現金", "asset"])

    assert result.exit_code == 0
    assert temp_db.get_account_by_code(1111) is not None


def test_unknown_log_level():
    with pytest.raises(ValueError, match="AOIRO_LOG_LEVEL"):
        load_settings({"AOIRO_LOG_LEVEL": "verbose"})
