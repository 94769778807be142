"""Tests for the blue-form final statement."""

from aoiro.domain.final_statement import FinalStatementService
from aoiro.domain.journal import JournalService


def _record_year(add_entry, depreciation_service, rent_service, loss_service):
    add_entry("2023-01-01", 1112, 3100, 1_000_000)
    add_entry("2024-01-10", 1112, 4100, 500000)
    add_entry("2024-02-10", 1131, 4100, 300000)
    add_entry("2024-02-20", 5100, 1112, 120000)
    add_entry("2024-03-25", 5300, 1112, 100000)
    depreciation_service.add_fixed_asset(
        name="ノートPC", acquisition_date="2024-07-01", acquisition_cost=1_200_000, useful_life=5, depreciation_rate=2000
    )
    rent_service.add_rent_detail(payee_name="山田不動産", monthly_rent=100000, business_ratio=60)
    loss_service.add_loss_carryforward(loss_year=2022, loss_amount=300000)


def test_compose(final_statement_service, add_entry, depreciation_service, rent_service, loss_service):
    _record_year(add_entry, depreciation_service, rent_service, loss_service)

    fs = final_statement_service.compose(2024)

    assert fs.year == 2024
    assert fs.profit_loss.total_revenue == 800000
    assert fs.profit_loss.total_expense == 220000
    assert fs.profit_loss.net_income == 580000
    assert fs.purchases_amount == 120000
    assert fs.gross_profit == 680000

    assert len(fs.monthly) == 12
    assert (fs.monthly[0].sales, fs.monthly[1].sales, fs.monthly[1].purchases) == (500000, 300000, 120000)
    assert fs.annual_sales_total == 800000
    assert fs.annual_purchases_total == 120000

    assert fs.depreciation_total == 120000
    assert fs.rent_total == 720000

    assert fs.balance_sheet.total_assets == 1_580_000
    assert fs.balance_sheet.is_balanced

    assert fs.loss_carryforward.total_applied == 300000
    assert fs.loss_carryforward.income_after == 280000


def test_compose_empty_year(final_statement_service, sample_accounts):
    fs = final_statement_service.compose(2024)

    assert fs.profit_loss.net_income == 0
    assert fs.gross_profit == 0
    assert fs.annual_sales_total == 0
    assert fs.depreciation.rows == ()
    assert fs.rent.rows == ()
    assert fs.loss_carryforward.rows == ()
    assert fs.balance_sheet.is_balanced


def test_compose_with_other_designated_accounts(temp_db, add_entry, account_service):
    account_service.create_account(code=4150, name="加工収入", classification="revenue")
    account_service.create_account(code=5150, name="外注仕入", classification="expense")
    sales = account_service.get_account_by_code(4150)
    purchases = account_service.get_account_by_code(5150)
    bank = account_service.get_account_by_code(1112)

    add_entry("2024-01-10", 1112, 4100, 500000)
    journal = JournalService(temp_db)
    journal.create_entry("2024-04-01", bank.id, 70000, sales.id, 70000)
    journal.create_entry("2024-04-02", purchases.id, 20000, bank.id, 20000)

    service = FinalStatementService(temp_db, sales_account_code=4150, purchases_account_code=5150)
    fs = service.compose(2024)

    assert fs.monthly[3].sales == 70000
    assert fs.monthly[3].purchases == 20000
    assert fs.annual_sales_total == 70000
    assert fs.purchases_amount == 20000
    assert fs.gross_profit == 570000 - 20000
