"""Tests for the journal ledger."""

import pytest
from datetime import date

from aoiro.domain import errors
from aoiro.domain.journal import period_bounds


def test_create_entry(journal_service, sample_accounts, add_entry):
    entry_id = add_entry("2024-05-10", 1112, 4100, 50000, "5月分売上")

    entry = journal_service.get_entry(entry_id)
    assert entry.date == date(2024, 5, 10)
    assert entry.debit_account_id == sample_accounts[1112].id
    assert entry.credit_account_id == sample_accounts[4100].id
    assert entry.debit_amount == entry.credit_amount == 50000
    assert entry.description == "5月分売上"
    assert entry.debit_account_name == "普通預金"
    assert entry.credit_account_name == "売上高"


def test_create_entry_accepts_date_object(journal_service, add_entry):
    entry_id = add_entry(date(2024, 1, 31), 5300, 1112, 80000)

    assert journal_service.get_entry(entry_id).date == date(2024, 1, 31)


class TestEntryValidation:
    """Validation runs before anything is stored."""

    def _create(self, journal_service, sample_accounts, **overrides):
        values = dict(
            date="2024-03-01",
            debit_account_id=sample_accounts[1111].id,
            debit_amount=1000,
            credit_account_id=sample_accounts[4100].id,
            credit_amount=1000,
        )
        values.update(overrides)
        return journal_service.create_entry(**values)

    def test_unbalanced(self, journal_service, sample_accounts, temp_db):
        with pytest.raises(errors.UnbalancedAmountError, match="does not match"):
            self._create(journal_service, sample_accounts, credit_amount=999)
        assert list(temp_db.iter_entries()) == []

    def test_same_account(self, journal_service, sample_accounts):
        with pytest.raises(errors.SameAccountError):
            self._create(journal_service, sample_accounts, credit_account_id=sample_accounts[1111].id)

    @pytest.mark.parametrize("amount", [100.5, "100", True, None])
    def test_non_integer_amount(self, journal_service, sample_accounts, temp_db, amount):
        with pytest.raises(errors.InvalidAmountError, match="whole number of yen"):
            self._create(journal_service, sample_accounts, debit_amount=amount, credit_amount=amount)
        assert list(temp_db.iter_entries()) == []

    @pytest.mark.parametrize("amount", [0, -500])
    def test_non_positive_amount(self, journal_service, sample_accounts, amount):
        with pytest.raises(errors.NonPositiveAmountError):
            self._create(journal_service, sample_accounts, debit_amount=amount, credit_amount=amount)

    def test_missing_account(self, journal_service, sample_accounts):
        with pytest.raises(errors.MissingAccountError):
            self._create(journal_service, sample_accounts, debit_account_id=9999)

    @pytest.mark.parametrize("bad_date", [None, "", "not a date"])
    def test_invalid_date(self, journal_service, sample_accounts, bad_date):
        with pytest.raises(errors.InvalidDateError):
            self._create(journal_service, sample_accounts, date=bad_date)

    def test_date_checked_first(self, journal_service, sample_accounts):
        with pytest.raises(errors.InvalidDateError):
            self._create(journal_service, sample_accounts, date=None, credit_amount=1)


def test_update_entry_replaces_fields(journal_service, sample_accounts, add_entry):
    entry_id = add_entry("2024-05-10", 1112, 4100, 50000)

    journal_service.update_entry(
        entry_id=entry_id,
        date="2024-05-11",
        debit_account_id=sample_accounts[1131].id,
        debit_amount=55000,
        credit_account_id=sample_accounts[4100].id,
        credit_amount=55000,
        description="請求書 #12",
    )

    entry = journal_service.get_entry(entry_id)
    assert entry.date == date(2024, 5, 11)
    assert entry.debit_account_id == sample_accounts[1131].id
    assert entry.debit_amount == 55000
    assert entry.description == "請求書 #12"


def test_update_entry_validation_keeps_old_values(journal_service, sample_accounts, add_entry):
    entry_id = add_entry("2024-05-10", 1112, 4100, 50000)

    with pytest.raises(errors.UnbalancedAmountError):
        journal_service.update_entry(
            entry_id=entry_id,
            date="2024-05-10",
            debit_account_id=sample_accounts[1112].id,
            debit_amount=50000,
            credit_account_id=sample_accounts[4100].id,
            credit_amount=40000,
        )

    assert journal_service.get_entry(entry_id).credit_amount == 50000


def test_update_missing_entry(journal_service, sample_accounts):
    with pytest.raises(errors.EntryNotFoundError):
        journal_service.update_entry(
            entry_id=42,
            date="2024-05-10",
            debit_account_id=sample_accounts[1112].id,
            debit_amount=1,
            credit_account_id=sample_accounts[4100].id,
            credit_amount=1,
        )


def test_delete_entry(journal_service, add_entry):
    entry_id = add_entry("2024-05-10", 1112, 4100, 50000)

    journal_service.delete_entry(entry_id)

    assert journal_service.get_entry(entry_id) is None
    with pytest.raises(errors.EntryNotFoundError):
        journal_service.delete_entry(entry_id)


def test_list_entries_by_year_and_month(journal_service, add_entry):
    add_entry("2023-12-31", 1111, 4100, 100)
    second = add_entry("2024-02-01", 1111, 4100, 200)
    first = add_entry("2024-01-15", 1111, 4100, 300)
    third = add_entry("2024-02-01", 1111, 4100, 400)
    add_entry("2025-01-01", 1111, 4100, 500)

    assert [e.id for e in journal_service.list_entries(2024)] == [first, second, third]
    assert [e.id for e in journal_service.list_entries(2024, 2)] == [second, third]
    assert list(journal_service.list_entries(2024, 3)) == []


def test_listing_reflects_later_changes(journal_service, add_entry):
    listing = journal_service.list_entries(2024)
    assert list(listing) == []

    add_entry("2024-06-01", 1111, 4100, 100)

    assert len(list(listing)) == 1


def test_entries_through(journal_service, add_entry):
    add_entry("2022-04-01", 1111, 4100, 100)
    add_entry("2024-12-31", 1111, 4100, 200)
    add_entry("2025-01-01", 1111, 4100, 300)

    amounts = [e.debit_amount for e in journal_service.entries_through(date(2024, 12, 31))]
    assert amounts == [100, 200]


class TestPeriodBounds:
    def test_year(self):
        assert period_bounds(2024) == (date(2024, 1, 1), date(2024, 12, 31))

    def test_leap_february(self):
        assert period_bounds(2024, 2) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_december(self):
        assert period_bounds(2023, 12) == (date(2023, 12, 1), date(2023, 12, 31))

    @pytest.mark.parametrize("month", [0, 13])
    def test_invalid_month(self, month):
        with pytest.raises(errors.ValidationError):
            period_bounds(2024, month)

    def test_last_representable_month(self):
        assert period_bounds(9999, 12) == (date(9999, 12, 1), date(9999, 12, 31))

    @pytest.mark.parametrize("year", [0, 10000])
    def test_year_out_of_range(self, year):
        with pytest.raises(errors.ValidationError, match="Invalid period"):
            period_bounds(year)
