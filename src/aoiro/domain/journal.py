"""Journal ledger domain service."""

from datetime import date, datetime
from typing import Iterator, Optional

from dateutil.relativedelta import relativedelta

from aoiro.database.base import Database
from aoiro.domain import errors
from aoiro.domain.entities import JournalEntry as JournalEntryEntity
from aoiro.utils.amount_parser import is_whole_number
from aoiro.utils.date_parser import parse_date


def period_bounds(year: int, month: Optional[int] = None) -> tuple[date, date]:
    """Return the inclusive first and last day of a year or of one month.

    Raises:
        ValidationError: If month is outside 1..12 or year is out of range
    """
    if month is not None and not 1 <= month <= 12:
        raise errors.ValidationError(f"Month must be between 1 and 12, got {month}")
    try:
        if month is None:
            return date(year, 1, 1), date(year, 12, 31)
        start = date(year, month, 1)
    except (TypeError, ValueError) as e:
        raise errors.ValidationError(f"Invalid period {year}/{month}: {e}")
    return start, start + relativedelta(day=31)


class EntryListing:
    """Restartable view over journal entries in a date range.

    Nothing is read until iteration starts; every new iteration queries the
    store again, so the listing always reflects the ledger at that moment.
    """

    def __init__(self, db: Database, start_date: Optional[date], end_date: Optional[date]):
        self.db = db
        self.start_date = start_date
        self.end_date = end_date

    def __iter__(self) -> Iterator[JournalEntryEntity]:
        return self.db.iter_entries(start_date=self.start_date, end_date=self.end_date)


class JournalService:
    """Service for recording and reading journal entries."""

    def __init__(self, db: Database):
        """Initialize journal service.

        Args:
            db: Database instance
        """
        self.db = db

    def _coerce_date(self, value: date | str | None) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if value is None:
            raise errors.InvalidDateError("Entry date is required")
        try:
            return parse_date(value)
        except ValueError as e:
            raise errors.InvalidDateError(str(e))

    def _validate(
        self,
        entry_date: date | str | None,
        debit_account_id: int,
        debit_amount: int,
        credit_account_id: int,
        credit_amount: int,
    ) -> date:
        """Check one debit/credit pair and return its parsed date.

        Checks run in a fixed order so the first problem is reported: date,
        account existence, distinct accounts, integer amounts, balance,
        positive amount.
        """
        parsed_date = self._coerce_date(entry_date)

        for account_id in (debit_account_id, credit_account_id):
            if self.db.get_account(account_id) is None:
                raise errors.MissingAccountError(errors.account_not_found(account_id))

        if debit_account_id == credit_account_id:
            raise errors.SameAccountError("Debit and credit accounts must differ")

        for amount in (debit_amount, credit_amount):
            if not is_whole_number(amount):
                raise errors.InvalidAmountError(f"Amount must be a whole number of yen, got {amount!r}")

        if debit_amount != credit_amount:
            raise errors.UnbalancedAmountError(errors.unbalanced_amount(debit_amount, credit_amount))

        if debit_amount <= 0:
            raise errors.NonPositiveAmountError(f"Amount must be at least 1 yen, got {debit_amount}")

        return parsed_date

    def create_entry(
        self,
        date: date | str | None,
        debit_account_id: int,
        debit_amount: int,
        credit_account_id: int,
        credit_amount: int,
        description: str = "",
    ) -> int:
        """Record a journal entry.

        Args:
            date: Entry date, as a date or a parseable string
            debit_account_id: Account debited
            debit_amount: Amount debited in yen
            credit_account_id: Account credited
            credit_amount: Amount credited in yen
            description: Free text (摘要)

        Returns:
            Entry ID

        Raises:
            InvalidDateError, MissingAccountError, SameAccountError,
            UnbalancedAmountError, NonPositiveAmountError
        """
        entry_date = self._validate(date, debit_account_id, debit_amount, credit_account_id, credit_amount)
        return self.db.create_entry(
            date=entry_date,
            debit_account_id=debit_account_id,
            debit_amount=debit_amount,
            credit_account_id=credit_account_id,
            credit_amount=credit_amount,
            description=description or "",
        )

    def get_entry(self, entry_id: int) -> Optional[JournalEntryEntity]:
        """Get journal entry by ID."""
        return self.db.get_entry(entry_id)

    def update_entry(
        self,
        entry_id: int,
        date: date | str | None,
        debit_account_id: int,
        debit_amount: int,
        credit_account_id: int,
        credit_amount: int,
        description: str = "",
    ) -> None:
        """Replace every field of an existing entry.

        Raises:
            EntryNotFoundError: If the entry doesn't exist
            Any error create_entry raises for the new values
        """
        if self.db.get_entry(entry_id) is None:
            raise errors.EntryNotFoundError(errors.entry_not_found(entry_id))

        entry_date = self._validate(date, debit_account_id, debit_amount, credit_account_id, credit_amount)
        self.db.update_entry(
            entry_id=entry_id,
            date=entry_date,
            debit_account_id=debit_account_id,
            debit_amount=debit_amount,
            credit_account_id=credit_account_id,
            credit_amount=credit_amount,
            description=description or "",
        )

    def delete_entry(self, entry_id: int) -> None:
        """Delete a journal entry.

        Raises:
            EntryNotFoundError: If the entry doesn't exist
        """
        if self.db.get_entry(entry_id) is None:
            raise errors.EntryNotFoundError(errors.entry_not_found(entry_id))

        self.db.delete_entry(entry_id)

    def list_entries(self, year: int, month: Optional[int] = None) -> EntryListing:
        """Entries dated in a year, or in one month of it.

        Returns:
            Restartable listing ordered by date, then insertion order
        """
        start, end = period_bounds(year, month)
        return EntryListing(self.db, start, end)

    def entries_through(self, end_date: date) -> EntryListing:
        """Entries from the earliest recorded date through end_date."""
        return EntryListing(self.db, None, end_date)
