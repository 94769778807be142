"""Period aggregation of journal entries into per-account totals."""

from collections import defaultdict
from datetime import date
from typing import Iterable, Optional

from aoiro.database.base import Database
from aoiro.domain.entities import AccountTotals, Classification, JournalEntry
from aoiro.domain.journal import JournalService


def signed_balance(classification: Classification, debit_total: int, credit_total: int) -> int:
    """Balance on the account's normal side.

    Debit-normal accounts (assets, expenses) report debits minus credits;
    credit-normal accounts (liabilities, equity, revenue) report credits
    minus debits.
    """
    if classification.is_debit_normal:
        return debit_total - credit_total
    return credit_total - debit_total


def fold_entries(entries: Iterable[JournalEntry]) -> dict[int, AccountTotals]:
    """Sum each account's debit side and credit side over the given entries."""
    debits: dict[int, int] = defaultdict(int)
    credits: dict[int, int] = defaultdict(int)

    for entry in entries:
        debits[entry.debit_account_id] += entry.debit_amount
        credits[entry.credit_account_id] += entry.credit_amount

    return {
        account_id: AccountTotals(debit_total=debits.get(account_id, 0), credit_total=credits.get(account_id, 0))
        for account_id in sorted(set(debits) | set(credits))
    }


class PeriodAggregator:
    """Builds per-account totals from the journal listing."""

    def __init__(self, db: Database):
        """Initialize aggregator.

        Args:
            db: Database instance
        """
        self.db = db
        self.journal = JournalService(db)

    def aggregate(self, year: int, month: Optional[int] = None) -> dict[int, AccountTotals]:
        """Totals per account for a year, or one month of it.

        Accounts without activity in the period are absent from the result.
        """
        return fold_entries(self.journal.list_entries(year, month))

    def aggregate_through(self, end_date: date) -> dict[int, AccountTotals]:
        """Cumulative totals per account from the first entry through end_date."""
        return fold_entries(self.journal.entries_through(end_date))
