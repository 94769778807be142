"""Trial balance, profit and loss, and balance sheet generators."""

import logging
from typing import Optional

from aoiro.config import DEFAULT_PURCHASES_CODE, DEFAULT_SALES_CODE
from aoiro.database.base import Database
from aoiro.domain.aggregation import PeriodAggregator, signed_balance
from aoiro.domain.entities import (
    Account,
    AccountTotals,
    BalanceSheet,
    BalanceSheetRow,
    Classification,
    MonthlySalesPurchase,
    ProfitLoss,
    ProfitLossRow,
    TrialBalance,
    TrialBalanceRow,
)
from aoiro.domain.journal import period_bounds

logger = logging.getLogger(__name__)


class ReportService:
    """Service deriving the standard statements from the journal.

    Each statement is computed inside one database snapshot.
    """

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db
        self.aggregator = PeriodAggregator(db)

    def _active_accounts(self, totals: dict[int, AccountTotals]) -> list[tuple[Account, AccountTotals]]:
        """Accounts with any activity, ordered by code."""
        result = []
        for account in self.db.list_accounts():
            account_totals = totals.get(account.id)
            if account_totals is None:
                continue
            if account_totals.debit_total == 0 and account_totals.credit_total == 0:
                continue
            result.append((account, account_totals))
        return result

    def trial_balance(self, year: int, month: Optional[int] = None) -> TrialBalance:
        """Trial balance (試算表) for a year or one month of it."""
        with self.db.snapshot():
            totals = self.aggregator.aggregate(year, month)
            rows = tuple(
                TrialBalanceRow(
                    account_id=account.id,
                    account_code=account.code,
                    account_name=account.name,
                    classification=account.classification,
                    debit_total=t.debit_total,
                    credit_total=t.credit_total,
                    balance=signed_balance(account.classification, t.debit_total, t.credit_total),
                )
                for account, t in self._active_accounts(totals)
            )

        trial_balance = TrialBalance(
            year=year,
            month=month,
            rows=rows,
            debit_grand_total=sum(row.debit_total for row in rows),
            credit_grand_total=sum(row.credit_total for row in rows),
        )
        if not trial_balance.is_balanced:
            logger.warning(
                "Trial balance for %s/%s does not match: debit %s, credit %s",
                year,
                month,
                trial_balance.debit_grand_total,
                trial_balance.credit_grand_total,
            )
        return trial_balance

    def profit_loss(self, year: int) -> ProfitLoss:
        """Profit and loss statement (損益計算書) for a whole year."""
        with self.db.snapshot():
            totals = self.aggregator.aggregate(year)
            active = self._active_accounts(totals)

        revenue_rows = []
        expense_rows = []
        for account, t in active:
            row = ProfitLossRow(
                account_id=account.id,
                account_code=account.code,
                account_name=account.name,
                amount=signed_balance(account.classification, t.debit_total, t.credit_total),
            )
            match account.classification:
                case Classification.REVENUE:
                    revenue_rows.append(row)
                case Classification.EXPENSE:
                    expense_rows.append(row)
                case Classification.ASSET | Classification.LIABILITY | Classification.EQUITY:
                    pass
                case _:
                    raise ValueError(f"Unknown classification: {account.classification!r}")

        total_revenue = sum(row.amount for row in revenue_rows)
        total_expense = sum(row.amount for row in expense_rows)
        return ProfitLoss(
            year=year,
            revenue_rows=tuple(revenue_rows),
            expense_rows=tuple(expense_rows),
            total_revenue=total_revenue,
            total_expense=total_expense,
            net_income=total_revenue - total_expense,
        )

    def balance_sheet(self, year: int) -> BalanceSheet:
        """Balance sheet (貸借対照表) as of December 31 of the year.

        Asset, liability and equity balances are cumulative from the first
        recorded entry; the year's net income is carried as pending equity.
        """
        with self.db.snapshot():
            _, year_end = period_bounds(year)
            totals = self.aggregator.aggregate_through(year_end)
            active = self._active_accounts(totals)
            net_income = self.profit_loss(year).net_income

        asset_rows = []
        liability_rows = []
        equity_rows = []
        for account, t in active:
            row = BalanceSheetRow(
                account_id=account.id,
                account_code=account.code,
                account_name=account.name,
                amount=signed_balance(account.classification, t.debit_total, t.credit_total),
            )
            match account.classification:
                case Classification.ASSET:
                    asset_rows.append(row)
                case Classification.LIABILITY:
                    liability_rows.append(row)
                case Classification.EQUITY:
                    equity_rows.append(row)
                case Classification.REVENUE | Classification.EXPENSE:
                    pass
                case _:
                    raise ValueError(f"Unknown classification: {account.classification!r}")

        balance_sheet = BalanceSheet(
            year=year,
            asset_rows=tuple(asset_rows),
            liability_rows=tuple(liability_rows),
            equity_rows=tuple(equity_rows),
            total_assets=sum(row.amount for row in asset_rows),
            total_liabilities=sum(row.amount for row in liability_rows),
            total_equity=sum(row.amount for row in equity_rows),
            net_income=net_income,
        )
        if not balance_sheet.is_balanced:
            logger.warning("Balance sheet for %s is off by %s", year, balance_sheet.imbalance)
        return balance_sheet

    def monthly_sales_purchases(
        self,
        year: int,
        sales_account_code: int = DEFAULT_SALES_CODE,
        purchases_account_code: int = DEFAULT_PURCHASES_CODE,
    ) -> list[MonthlySalesPurchase]:
        """Sales and purchases per month (月別売上・仕入), always 12 rows.

        Sales is the normal-side balance of the sales account and purchases
        that of the purchases account; a missing account counts as zero.
        Net balances are used rather than credit-only sales and debit-only
        purchases, so a sales return lowers the month it is booked in and
        can make it negative.
        """
        with self.db.snapshot():
            sales_account = self.db.get_account_by_code(sales_account_code)
            purchases_account = self.db.get_account_by_code(purchases_account_code)

            result = []
            for month in range(1, 13):
                totals = self.aggregator.aggregate(year, month)
                result.append(
                    MonthlySalesPurchase(
                        month=month,
                        sales=_account_balance(sales_account, totals),
                        purchases=_account_balance(purchases_account, totals),
                    )
                )
        return result


def _account_balance(account: Optional[Account], totals: dict[int, AccountTotals]) -> int:
    if account is None:
        return 0
    t = totals.get(account.id)
    if t is None:
        return 0
    return signed_balance(account.classification, t.debit_total, t.credit_total)
