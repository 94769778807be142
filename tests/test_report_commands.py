"""Tests for report commands."""

import pytest

from aoiro.cli.main import cli


def _invoke(cli_runner, temp_db, *args):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])


def test_trial_balance(cli_runner, temp_db, add_entry):
    add_entry("2024-05-10", 1112, 4100, 50000)

    result = _invoke(cli_runner, temp_db, "report", "trial-balance", "--year", "2024")

    assert result.exit_code == 0
    assert "試算表 2024" in result.output
    assert "普通預金" in result.output
    assert "売上高" in result.output
    assert "Warning" not in result.output


def test_trial_balance_month(cli_runner, temp_db, add_entry):
    add_entry("2024-05-10", 1112, 4100, 50000)
    add_entry("2024-06-10", 5300, 1112, 80000)

    result = _invoke(cli_runner, temp_db, "report", "trial-balance", "--year", "2024", "--month", "6")

    assert result.exit_code == 0
    assert "試算表 2024-06" in result.output
    assert "地代家賃" in result.output
    assert "売上高" not in result.output


def test_profit_loss(cli_runner, temp_db, add_entry):
    add_entry("2024-05-10", 1112, 4100, 50000)
    add_entry("2024-05-31", 5300, 1112, 20000)

    result = _invoke(cli_runner, temp_db, "report", "profit-loss", "--year", "2024")

    assert result.exit_code == 0
    assert "¥50,000" in result.output
    assert "¥20,000" in result.output
    assert "¥30,000" in result.output


def test_balance_sheet(cli_runner, temp_db, add_entry):
    add_entry("2024-05-10", 1112, 4100, 50000)

    result = _invoke(cli_runner, temp_db, "report", "balance-sheet", "--year", "2024")

    assert result.exit_code == 0
    assert "貸借対照表 2024-12-31" in result.output
    assert "¥50,000" in result.output
    assert "off by" not in result.output


def test_balance_sheet_reports_imbalance(cli_runner, temp_db, add_entry):
    add_entry("2023-05-10", 1112, 4100, 50000)

    result = _invoke(cli_runner, temp_db, "report", "balance-sheet", "--year", "2024")

    assert result.exit_code == 0
    assert "Warning: balance sheet is off by ¥50,000" in result.output


def test_final_statement(cli_runner, temp_db, add_entry, depreciation_service, rent_service):
    add_entry("2024-01-10", 1112, 4100, 500000)
    add_entry("2024-02-20", 5100, 1112, 120000)
    depreciation_service.add_fixed_asset(
        name="ノートPC", acquisition_date="2024-07-01", acquisition_cost=1_200_000, useful_life=5, depreciation_rate=2000
    )
    rent_service.add_rent_detail(payee_name="山田不動産", monthly_rent=100000, business_ratio=60)

    result = _invoke(cli_runner, temp_db, "report", "final-statement", "--year", "2024")

    assert result.exit_code == 0
    assert "青色申告決算書 2024" in result.output
    assert "ノートPC" in result.output
    assert "¥120,000" in result.output
    assert "山田不動産" in result.output
    assert "¥720,000" in result.output
    assert "¥380,000" in result.output  # 差引金額


def test_report_requires_year(cli_runner, temp_db):
    result = _invoke(cli_runner, temp_db, "report", "profit-loss")

    assert result.exit_code != 0
    assert "--year" in result.output


@pytest.mark.parametrize("report", ["trial-balance", "profit-loss", "balance-sheet", "final-statement"])
@pytest.mark.parametrize("year", ["0", "10000"])
def test_report_year_out_of_range(cli_runner, temp_db, report, year):
    result = _invoke(cli_runner, temp_db, "report", report, "--year", year)

    assert result.exit_code == 1
    assert "Error: Invalid period" in result.output
    assert "Traceback" not in result.output
